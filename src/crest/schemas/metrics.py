"""Pydantic schemas for step metrics."""

from datetime import datetime
from pydantic import BaseModel


class StepMetricResponse(BaseModel):
    build_id: str
    step_name: str
    code: int | None
    start_time: datetime | None
    end_time: datetime | None
    duration: float | None

    model_config = {"from_attributes": True}
