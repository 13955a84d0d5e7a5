"""Metrics service — per-step execution metrics for a job."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from crest.core.errors import InvalidTimeWindowError, NotFoundError
from crest.models.build import Build, Step
from crest.repositories.pipeline_repo import JobRepository
from crest.repositories.step_repo import StepRepository

logger = logging.getLogger("crest.metrics")


@dataclass
class StepMetric:
    build_id: str
    step_name: str
    code: int | None
    start_time: datetime | None
    end_time: datetime | None
    duration: float | None  # seconds; None while the step is running

    @classmethod
    def from_step(cls, step: Step, build: Build) -> "StepMetric":
        duration = None
        if step.start_time and step.end_time:
            duration = (step.end_time - step.start_time).total_seconds()
        return cls(
            build_id=build.id,
            step_name=step.name,
            code=step.code,
            start_time=step.start_time,
            end_time=step.end_time,
            duration=duration,
        )


def _to_naive_utc(value: datetime | None) -> datetime | None:
    """Stored timestamps are naive UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class MetricsService:
    def __init__(self, session: AsyncSession):
        self.jobs = JobRepository(session)
        self.steps = StepRepository(session)

    async def get_step_metrics(
        self,
        job_id: str,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
        step_name: str | None = None,
    ) -> list[StepMetric]:
        """Step metrics of a job's builds, optionally windowed and filtered.

        Omitting ``step_name`` returns every step.
        """
        job = await self.jobs.get_by_id(job_id)
        if not job:
            raise NotFoundError("Job does not exist")

        start_time = _to_naive_utc(start_time)
        end_time = _to_naive_utc(end_time)
        if start_time and end_time and start_time > end_time:
            raise InvalidTimeWindowError("startTime must not be after endTime")

        rows = await self.steps.list_for_job(
            job.id,
            start_time=start_time,
            end_time=end_time,
            step_name=step_name,
        )
        logger.debug(f"{len(rows)} step metrics for job {job.id}")
        return [StepMetric.from_step(step, build) for step, build in rows]
