"""Main API router."""

from fastapi import APIRouter
from crest.api.jobs import router as jobs_router
from crest.api.pipelines import router as pipelines_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(jobs_router)
api_router.include_router(pipelines_router)
