"""Event model — one execution instance of a pipeline's workflow graph."""

import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, Integer, JSON
from sqlalchemy.orm import Mapped, mapped_column
from crest.core.database import Base


class Event(Base):
    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    pipeline_id: Mapped[str] = mapped_column(String(36), ForeignKey("pipelines.id"), nullable=False, index=True)
    # {"nodes": [{"name": ...}], "edges": [{"src": ..., "dest": ...}]}, fixed at creation
    workflow_graph: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    start_from: Mapped[str] = mapped_column(String(255), nullable=False)  # job name or ~pr, ~commit
    pr_num: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)
