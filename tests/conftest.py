"""Shared test fixtures for Crest tests."""

import os
from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from crest.core import database
from crest.core.database import init_engine, create_tables, Base
from crest.daemon.main import create_app
from crest.repositories.build_repo import BuildRepository
from crest.repositories.event_repo import EventRepository
from crest.repositories.pipeline_repo import PipelineRepository, JobRepository
from crest.repositories.step_repo import StepRepository

TEST_BADGE_TEMPLATE = "https://badges.test/build-{{status}}-{{color}}.svg"
DEFAULT_BADGE_URL = "https://badges.test/build--lightgrey.svg"

BASE_TIME = datetime(2024, 3, 1, 12, 0, 0)


@pytest_asyncio.fixture(scope="function")
async def app():
    """Create a fresh app with in-memory SQLite for each test."""
    os.environ["CREST_DATABASE_URL"] = "sqlite+aiosqlite://"
    os.environ["CREST_API_KEY"] = "test_key"
    os.environ["CREST_BADGE_TEMPLATE"] = TEST_BADGE_TEMPLATE

    init_engine("sqlite+aiosqlite://")
    await create_tables()

    _app = create_app()

    yield _app

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await database.engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(app):
    """Async HTTP client pointed at the test app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"Authorization": "Bearer test_key"},
    ) as c:
        yield c


@pytest_asyncio.fixture(scope="function")
async def unauthed_client(app):
    """Async HTTP client without auth."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture(scope="function")
async def db_session(app) -> AsyncSession:
    """Get a database session for direct DB operations in tests."""
    async with database.async_session_factory() as session:
        yield session


class Seeder:
    """Creates pipelines, jobs, events, builds and steps through the repositories."""

    def __init__(self, session: AsyncSession):
        self.pipelines = PipelineRepository(session)
        self.jobs = JobRepository(session)
        self.events = EventRepository(session)
        self.builds = BuildRepository(session)
        self.steps = StepRepository(session)
        self._tick = 0

    def _next_time(self) -> datetime:
        self._tick += 1
        return BASE_TIME + timedelta(minutes=self._tick)

    async def pipeline(self, name: str = "screwdriver/main"):
        return await self.pipelines.create(name=name)

    async def job(self, pipeline, name: str = "main"):
        return await self.jobs.create(pipeline_id=pipeline.id, name=name)

    async def event(self, pipeline, graph: dict | None = None, start_from: str = "~commit",
                    pr_num: int | None = None, created_at: datetime | None = None):
        return await self.events.create(
            pipeline_id=pipeline.id,
            workflow_graph=graph,
            start_from=start_from,
            pr_num=pr_num,
            created_at=created_at or self._next_time(),
        )

    async def build(self, event, job, status: str = "SUCCESS", created_at: datetime | None = None):
        return await self.builds.create(
            event_id=event.id,
            job_id=job.id,
            status=status,
            created_at=created_at or self._next_time(),
        )

    async def step(self, build, name: str, code: int | None = 0,
                   start_time: datetime | None = None, seconds: float | None = 10):
        start_time = start_time or build.created_at
        end_time = start_time + timedelta(seconds=seconds) if seconds is not None else None
        return await self.steps.create(
            build_id=build.id,
            name=name,
            code=code,
            start_time=start_time,
            end_time=end_time,
        )


@pytest_asyncio.fixture(scope="function")
async def seed(db_session) -> Seeder:
    return Seeder(db_session)


# ─── Sample workflow graphs ───

LINEAR_GRAPH = {
    "nodes": [{"name": "~commit"}, {"name": "main"}, {"name": "publish"}, {"name": "deploy"}],
    "edges": [
        {"src": "~commit", "dest": "main"},
        {"src": "main", "dest": "publish"},
        {"src": "publish", "dest": "deploy"},
    ],
}

DIAMOND_GRAPH = {
    "nodes": [{"name": "~commit"}, {"name": "a"}, {"name": "b"}, {"name": "c"}, {"name": "d"}],
    "edges": [
        {"src": "~commit", "dest": "a"},
        {"src": "a", "dest": "b"},
        {"src": "a", "dest": "c"},
        {"src": "b", "dest": "d"},
        {"src": "c", "dest": "d"},
    ],
}

PR_GRAPH = {
    "nodes": [{"name": "~pr"}, {"name": "~commit"}, {"name": "main"}, {"name": "publish"}],
    "edges": [
        {"src": "~pr", "dest": "main"},
        {"src": "~commit", "dest": "main"},
        {"src": "main", "dest": "publish"},
    ],
}

CYCLIC_GRAPH = {
    "nodes": [{"name": "~commit"}, {"name": "a"}, {"name": "b"}],
    "edges": [
        {"src": "~commit", "dest": "a"},
        {"src": "a", "dest": "b"},
        {"src": "b", "dest": "a"},
    ],
}
