"""Workflow graph traversal."""

from crest.workflow.parser import next_jobs, PR_TRIGGER
from crest.workflow.reachability import reachable, CycleError, GraphDepthError

__all__ = ["next_jobs", "reachable", "CycleError", "GraphDepthError", "PR_TRIGGER"]
