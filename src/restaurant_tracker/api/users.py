"""Endpoints for the signed-in user's profile."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from restaurant_tracker.api.dependencies import get_container, require_user_id
from restaurant_tracker.api.schemas import UserOut, UserProfileIn

router = APIRouter(prefix="/api/auth", tags=["users"])


@router.get("/user", response_model=UserOut)
async def get_current_user(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> UserOut:
    """Return the current user's profile."""
    user = get_container(request).user_service.get_user(user_id)
    if user is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserOut.model_validate(user)


@router.put("/user", response_model=UserOut)
async def upsert_current_user(
    profile: UserProfileIn,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> UserOut:
    """Create or refresh the current user's profile."""
    user = get_container(request).user_service.upsert_user(
        user_id, profile.model_dump(exclude_unset=True)
    )
    return UserOut.model_validate(user)
