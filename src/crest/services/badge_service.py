"""Badge service — status badge for the latest event of a pipeline.

Fail-soft: badges are embedded in third-party pages, so every failure ends
in the default badge rather than an error.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from crest.badges.badge import Badge
from crest.badges.status import aggregate
from crest.repositories.build_repo import BuildRepository
from crest.repositories.event_repo import EventRepository
from crest.repositories.pipeline_repo import PipelineRepository
from crest.workflow.parser import next_jobs as parser_next_jobs
from crest.workflow.reachability import DEFAULT_MAX_DEPTH, NextJobs, reachable

logger = logging.getLogger("crest.badges")


class BadgeService:
    def __init__(
        self,
        session: AsyncSession,
        max_graph_depth: int = DEFAULT_MAX_DEPTH,
        next_jobs: NextJobs = parser_next_jobs,
    ):
        self.pipelines = PipelineRepository(session)
        self.events = EventRepository(session)
        self.builds = BuildRepository(session)
        self.max_graph_depth = max_graph_depth
        self.next_jobs = next_jobs

    async def get_badge(self, pipeline_id: str) -> Badge:
        try:
            return await self._compute(pipeline_id)
        except Exception as e:
            return self._degraded(pipeline_id, f"{type(e).__name__}: {e}")

    async def _compute(self, pipeline_id: str) -> Badge:
        pipeline = await self.pipelines.get_by_id(pipeline_id)
        if not pipeline:
            return self._degraded(pipeline_id, "pipeline not found")

        events = await self.events.list_by_pipeline(pipeline.id, ascending=True)
        if not events:
            return self._degraded(pipeline_id, "no events")
        event = events[-1]

        builds = await self.builds.list_by_event(event.id)
        if not builds:
            return self._degraded(pipeline_id, f"no builds for event {event.id}")

        # Repository returns newest first; restore trigger order
        statuses = [build.status.lower() for build in reversed(builds)]

        expected = 0
        if event.workflow_graph:
            expected = len(reachable(
                event.workflow_graph,
                event.start_from,
                event.pr_num,
                next_jobs=self.next_jobs,
                max_depth=self.max_graph_depth,
            ))

        return Badge.computed(aggregate(statuses, expected))

    @staticmethod
    def _degraded(pipeline_id: str, reason: str) -> Badge:
        logger.warning(f"Default badge for pipeline {pipeline_id}: {reason}")
        return Badge.default(reason)
