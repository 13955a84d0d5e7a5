"""Demo data — one pipeline with a branching workflow and a half-finished event.

Demonstrates:
- A workflow graph with a fan-out after ``main``
- Jobs without a build yet showing up as ``unknown`` on the badge
- Step metrics for the finished builds

Run against the daemon's database, then start ``crestd`` and open
http://localhost:8410/api/v1/pipelines/<pipeline id>/badge
"""

import asyncio
from datetime import datetime, timedelta

from crest.core.config import get_settings
from crest.core.database import init_engine, create_tables
from crest.core import database
from crest.repositories.build_repo import BuildRepository
from crest.repositories.event_repo import EventRepository
from crest.repositories.pipeline_repo import PipelineRepository, JobRepository
from crest.repositories.step_repo import StepRepository

WORKFLOW = {
    "nodes": [
        {"name": "~pr"}, {"name": "~commit"},
        {"name": "main"}, {"name": "lint"}, {"name": "publish"}, {"name": "deploy"},
    ],
    "edges": [
        {"src": "~pr", "dest": "main"},
        {"src": "~commit", "dest": "main"},
        {"src": "main", "dest": "lint"},
        {"src": "main", "dest": "publish"},
        {"src": "publish", "dest": "deploy"},
    ],
}


async def seed():
    settings = get_settings()
    init_engine(settings.database_url)
    await create_tables()

    async with database.async_session_factory() as session:
        pipeline = await PipelineRepository(session).create(name="demo/app")
        jobs = {
            name: await JobRepository(session).create(pipeline_id=pipeline.id, name=name)
            for name in ("main", "lint", "publish", "deploy")
        }
        event = await EventRepository(session).create(
            pipeline_id=pipeline.id,
            workflow_graph=WORKFLOW,
            start_from="~commit",
        )

        now = datetime.utcnow()
        builds = BuildRepository(session)
        steps = StepRepository(session)
        for offset, (job, status) in enumerate([("main", "SUCCESS"), ("lint", "FAILURE")]):
            build = await builds.create(
                event_id=event.id,
                job_id=jobs[job].id,
                status=status,
                created_at=now + timedelta(minutes=offset),
            )
            start = build.created_at
            for name, seconds, code in [("install", 42, 0), ("test", 95, 0 if status == "SUCCESS" else 1)]:
                await steps.create(
                    build_id=build.id,
                    name=name,
                    code=code,
                    start_time=start,
                    end_time=start + timedelta(seconds=seconds),
                )
                start += timedelta(seconds=seconds)

        print(f"Pipeline: {pipeline.id}")
        print(f"Job main: {jobs['main'].id}")
        # Expected badge: 1 success, 2 unknown, 1 failure (red)


if __name__ == "__main__":
    asyncio.run(seed())
