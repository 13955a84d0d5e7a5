"""Build and step models — per-job execution records within an event."""

import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column
from crest.core.database import Base
import enum


class BuildStatus(str, enum.Enum):
    SUCCESS = "SUCCESS"
    QUEUED = "QUEUED"
    RUNNING = "RUNNING"
    FAILURE = "FAILURE"
    ABORTED = "ABORTED"


class Build(Base):
    __tablename__ = "builds"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_id: Mapped[str] = mapped_column(String(36), ForeignKey("events.id"), nullable=False, index=True)
    job_id: Mapped[str] = mapped_column(String(36), ForeignKey("jobs.id"), nullable=False, index=True)
    # Not constrained to BuildStatus; executors may report other literals
    status: Mapped[str] = mapped_column(String(20), default=BuildStatus.QUEUED.value)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)


class Step(Base):
    """One step of a build, e.g. install or test."""
    __tablename__ = "steps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    build_id: Mapped[str] = mapped_column(String(36), ForeignKey("builds.id"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[int | None] = mapped_column(Integer, nullable=True)  # exit code
    start_time: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    end_time: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
