"""Build repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from crest.models.build import Build


class BuildRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **kwargs) -> Build:
        build = Build(**kwargs)
        self.session.add(build)
        await self.session.commit()
        await self.session.refresh(build)
        return build

    async def list_by_event(self, event_id: str) -> list[Build]:
        """Builds of an event, newest first."""
        result = await self.session.execute(
            select(Build)
            .where(Build.event_id == event_id)
            .order_by(Build.created_at.desc())
        )
        return list(result.scalars().all())
