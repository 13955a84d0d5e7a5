"""Async database engine and session management."""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

engine = None
async_session_factory = None


class Base(DeclarativeBase):
    pass


def init_engine(database_url: str):
    global engine, async_session_factory
    kwargs = {}
    if "sqlite" in database_url:
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory SQLite lives on a single connection
        if make_url(database_url).database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    engine = create_async_engine(database_url, echo=False, **kwargs)
    async_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_session() -> AsyncSession:
    async with async_session_factory() as session:
        yield session


async def create_tables():
    # Register every mapped table on Base.metadata
    import crest.models.pipeline  # noqa: F401
    import crest.models.event  # noqa: F401
    import crest.models.build  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
