"""Job API endpoints — step metrics."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from crest.core.auth import verify_api_key
from crest.core.database import get_session
from crest.schemas.metrics import StepMetricResponse
from crest.services.metrics_service import MetricsService

router = APIRouter(prefix="/jobs", tags=["jobs", "metrics"])


@router.get("/{job_id}/metrics/steps", response_model=list[StepMetricResponse])
async def get_step_metrics(
    job_id: str,
    start_time: datetime | None = Query(None, alias="startTime"),
    end_time: datetime | None = Query(None, alias="endTime"),
    step_name: str | None = Query(None, alias="stepName"),  # all steps when omitted
    session: AsyncSession = Depends(get_session),
    _: str = Depends(verify_api_key),
):
    """Get step metrics for this job."""
    service = MetricsService(session)
    return await service.get_step_metrics(
        job_id,
        start_time=start_time,
        end_time=end_time,
        step_name=step_name,
    )
