"""Statistics endpoint."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from restaurant_tracker.api.dependencies import get_container, require_user_id
from restaurant_tracker.api.schemas import StatsOut

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=StatsOut)
async def get_stats(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> StatsOut:
    """Return statistics for the current user, computed on every request."""
    stats = get_container(request).stats_service.get_stats(user_id)
    return StatsOut.model_validate(stats)
