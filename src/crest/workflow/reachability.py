"""Workflow reachability — the jobs an event is expected to build.

Depth-first expansion from an event's start trigger. Each job is expanded
once; a job met again while it is still on the expansion path is a cycle.
"""

from __future__ import annotations

import logging
from typing import Callable

from crest.core.errors import CrestError
from crest.workflow.parser import PR_TRIGGER, next_jobs as parser_next_jobs

logger = logging.getLogger("crest.workflow")

DEFAULT_MAX_DEPTH = 256

# (graph, trigger, pr_num=None) -> immediate successors
NextJobs = Callable[..., list[str]]


class ReachabilityError(CrestError):
    """Raised when a workflow graph cannot be fully traversed."""


class CycleError(ReachabilityError):
    """Raised when expansion returns to a job already on the current path."""
    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Workflow cycle detected: {' → '.join(cycle)}")


class GraphDepthError(ReachabilityError):
    """Raised when expansion goes deeper than the configured bound."""
    def __init__(self, max_depth: int, path: list[str]):
        self.max_depth = max_depth
        self.path = list(path)
        super().__init__(f"Workflow deeper than {max_depth} levels below '{path[0]}'")


def reachable(
    graph: dict | None,
    start: str | None,
    pr_num: int | None = None,
    *,
    next_jobs: NextJobs = parser_next_jobs,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> set[str]:
    """Return every job reachable from ``start``, excluding ``start`` itself.

    Only the root query carries ``pr_num``, and only when ``start`` is the
    ``~pr`` pseudo-trigger. Deeper queries are by trigger name alone, even
    for PR-scoped jobs.

    Iterative, so the depth bound holds regardless of the interpreter
    recursion limit. Raises CycleError or GraphDepthError.
    """
    if not graph or not start:
        return set()

    visited: set[str] = set()
    # path[i] is expanded by pending[i]; both grow and shrink together
    path: list[str] = [start]
    on_path: set[str] = {start}
    if start == PR_TRIGGER:
        pending = [iter(next_jobs(graph, start, pr_num=pr_num))]
    else:
        pending = [iter(next_jobs(graph, start))]

    while pending:
        job = next(pending[-1], None)
        if job is None:
            pending.pop()
            on_path.discard(path.pop())
            continue
        if job in on_path:
            raise CycleError(path[path.index(job):] + [job])
        if job in visited:
            continue
        visited.add(job)
        path.append(job)
        on_path.add(job)
        if len(path) - 1 > max_depth:
            raise GraphDepthError(max_depth, path)
        pending.append(iter(next_jobs(graph, job)))

    logger.debug(f"{len(visited)} jobs reachable from {start}")
    return visited
