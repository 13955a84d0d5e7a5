"""Tests for the workflow parser."""

import pytest

from crest.workflow.parser import WorkflowError, next_jobs, pr_job_name
from tests.conftest import LINEAR_GRAPH, PR_GRAPH


class TestNextJobs:
    def test_commit_trigger(self):
        assert next_jobs(LINEAR_GRAPH, "~commit") == ["main"]

    def test_job_trigger(self):
        assert next_jobs(LINEAR_GRAPH, "main") == ["publish"]

    def test_leaf_has_no_successors(self):
        assert next_jobs(LINEAR_GRAPH, "deploy") == []

    def test_unknown_trigger(self):
        assert next_jobs(LINEAR_GRAPH, "nope") == []

    def test_empty_graph(self):
        assert next_jobs({}, "~commit") == []
        assert next_jobs(None, "~commit") == []

    def test_pr_trigger_scopes_jobs(self):
        assert next_jobs(PR_GRAPH, "~pr", pr_num=42) == ["PR-42:main"]

    def test_pr_trigger_requires_number(self):
        with pytest.raises(WorkflowError):
            next_jobs(PR_GRAPH, "~pr")

    def test_missing_trigger(self):
        with pytest.raises(WorkflowError):
            next_jobs(PR_GRAPH, "")

    def test_duplicate_edges_collapse(self):
        graph = {"edges": [
            {"src": "a", "dest": "b"},
            {"src": "a", "dest": "c"},
            {"src": "a", "dest": "b"},
        ]}
        assert next_jobs(graph, "a") == ["b", "c"]

    def test_pr_job_name(self):
        assert pr_job_name(7, "test") == "PR-7:test"
