"""Event repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from crest.models.event import Event


class EventRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, **kwargs) -> Event:
        event = Event(**kwargs)
        self.session.add(event)
        await self.session.commit()
        await self.session.refresh(event)
        return event

    async def list_by_pipeline(self, pipeline_id: str, ascending: bool = True) -> list[Event]:
        # id breaks ties between events created in the same instant
        if ascending:
            order = (Event.created_at.asc(), Event.id.asc())
        else:
            order = (Event.created_at.desc(), Event.id.desc())
        result = await self.session.execute(
            select(Event)
            .where(Event.pipeline_id == pipeline_id)
            .order_by(*order)
        )
        return list(result.scalars().all())
