"""Workflow parser — first-level successors of a trigger in a workflow graph.

A workflow graph is plain JSON::

    {
        "nodes": [{"name": "~pr"}, {"name": "~commit"}, {"name": "main"}],
        "edges": [{"src": "~pr", "dest": "main"}, {"src": "~commit", "dest": "main"}],
    }

Nodes starting with ``~`` are pseudo-triggers (``~pr``, ``~commit``) rather
than jobs.
"""

from __future__ import annotations

from crest.core.errors import CrestError

PR_TRIGGER = "~pr"


class WorkflowError(CrestError):
    """Raised when a successor query is malformed."""

    status_code = 400


def pr_job_name(pr_num: int | str, job: str) -> str:
    """Name of a job as it runs inside a pull request."""
    return f"PR-{pr_num}:{job}"


def next_jobs(graph: dict | None, trigger: str, pr_num: int | None = None) -> list[str]:
    """Return the jobs directly triggered by ``trigger``, in edge order.

    A ``~pr`` trigger needs ``pr_num`` and yields PR-scoped job names.
    """
    if not trigger:
        raise WorkflowError("Must provide a trigger")
    if trigger == PR_TRIGGER and pr_num is None:
        raise WorkflowError(f'Must provide a PR number with "{PR_TRIGGER}" trigger')

    jobs: list[str] = []
    for edge in (graph or {}).get("edges", []):
        if edge.get("src") != trigger:
            continue
        dest = pr_job_name(pr_num, edge["dest"]) if trigger == PR_TRIGGER else edge["dest"]
        if dest not in jobs:
            jobs.append(dest)
    return jobs
