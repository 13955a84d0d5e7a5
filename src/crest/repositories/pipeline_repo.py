"""Pipeline and job repositories — data access layer."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from crest.models.pipeline import Pipeline, Job


class PipelineRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **kwargs) -> Pipeline:
        pipeline = Pipeline(**kwargs)
        self.session.add(pipeline)
        await self.session.commit()
        await self.session.refresh(pipeline)
        return pipeline

    async def get_by_id(self, id: str) -> Pipeline | None:
        result = await self.session.execute(select(Pipeline).where(Pipeline.id == id))
        return result.scalar_one_or_none()


class JobRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **kwargs) -> Job:
        job = Job(**kwargs)
        self.session.add(job)
        await self.session.commit()
        await self.session.refresh(job)
        return job

    async def get_by_id(self, id: str) -> Job | None:
        result = await self.session.execute(select(Job).where(Job.id == id))
        return result.scalar_one_or_none()
