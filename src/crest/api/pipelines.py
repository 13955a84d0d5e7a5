"""Pipeline API endpoints — status badge."""

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from crest.core.config import CrestSettings, get_settings
from crest.core.database import get_session
from crest.services.badge_service import BadgeService

router = APIRouter(prefix="/pipelines", tags=["pipelines", "badge"])


@router.get("/{pipeline_id}/badge", response_class=RedirectResponse, status_code=302)
async def get_badge(
    pipeline_id: str,
    session: AsyncSession = Depends(get_session),
    settings: CrestSettings = Depends(get_settings),
):
    """Redirect to the badge service; degraded badges redirect the same way."""
    service = BadgeService(session, max_graph_depth=settings.max_graph_depth)
    badge = await service.get_badge(pipeline_id)
    return RedirectResponse(badge.url(settings.badge_template), status_code=302)
