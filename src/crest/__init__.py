"""Crest — CI status reporting: step metrics and pipeline badges."""

__version__ = "0.1.0"

from crest.badges.status import BadgeStatus, aggregate
from crest.workflow.reachability import reachable

__all__ = ["BadgeStatus", "aggregate", "reachable", "__version__"]
