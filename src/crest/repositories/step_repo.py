"""Step repository — read path for per-job step metrics."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from crest.models.build import Build, Step


class StepRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **kwargs) -> Step:
        step = Step(**kwargs)
        self.session.add(step)
        await self.session.commit()
        await self.session.refresh(step)
        return step

    async def list_for_job(
        self,
        job_id: str,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
        step_name: str | None = None,
    ) -> list[tuple[Step, Build]]:
        """Steps of every build of a job, bounded by build creation time.

        Bounds are inclusive and expected as naive UTC.
        """
        query = (
            select(Step, Build)
            .join(Build, Step.build_id == Build.id)
            .where(Build.job_id == job_id)
        )
        if start_time is not None:
            query = query.where(Build.created_at >= start_time)
        if end_time is not None:
            query = query.where(Build.created_at <= end_time)
        if step_name is not None:
            query = query.where(Step.name == step_name)

        result = await self.session.execute(query.order_by(Build.created_at, Step.id))
        return [(step, build) for step, build in result.all()]
