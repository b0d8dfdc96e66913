"""Restaurant and check-in endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from restaurant_tracker.api.dependencies import get_container, require_user_id
from restaurant_tracker.api.schemas import (
    CheckInCreate,
    CheckInOut,
    RestaurantCreate,
    RestaurantOut,
    RestaurantUpdate,
)

if TYPE_CHECKING:
    from restaurant_tracker.containers import AppContainer
    from restaurant_tracker.domain.restaurants import Restaurant

router = APIRouter(prefix="/api", tags=["restaurants"])


def owned_restaurant(
    container: AppContainer, restaurant_id: UUID, user_id: UUID
) -> Restaurant:
    """Return the user's restaurant or raise a 404."""
    restaurant = container.restaurant_service.get_restaurant(restaurant_id)
    if restaurant is None or restaurant.user_id != user_id:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Restaurant not found")
    return restaurant


@router.get("/restaurants", response_model=list[RestaurantOut])
async def list_restaurants(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> list[RestaurantOut]:
    """Return the current user's restaurants."""
    restaurants = get_container(request).restaurant_service.list_restaurants(user_id)
    return [RestaurantOut.model_validate(item) for item in restaurants]


@router.post(
    "/restaurants",
    response_model=RestaurantOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_restaurant(
    payload: RestaurantCreate,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> RestaurantOut:
    """Add a restaurant for the current user."""
    restaurant = get_container(request).restaurant_service.create_restaurant(
        user_id, payload.model_dump()
    )
    return RestaurantOut.model_validate(restaurant)


@router.get("/restaurants/{restaurant_id}", response_model=RestaurantOut)
async def get_restaurant(
    restaurant_id: UUID, request: Request, user_id: UUID = Depends(require_user_id)
) -> RestaurantOut:
    """Return one of the current user's restaurants."""
    restaurant = owned_restaurant(get_container(request), restaurant_id, user_id)
    return RestaurantOut.model_validate(restaurant)


@router.patch("/restaurants/{restaurant_id}", response_model=RestaurantOut)
async def update_restaurant(
    restaurant_id: UUID,
    payload: RestaurantUpdate,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> RestaurantOut:
    """Update fields of a restaurant."""
    container = get_container(request)
    owned_restaurant(container, restaurant_id, user_id)
    updated = container.restaurant_service.update_restaurant(
        restaurant_id, payload.changes()
    )
    if updated is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Restaurant not found")
    return RestaurantOut.model_validate(updated)


@router.delete("/restaurants/{restaurant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_restaurant(
    restaurant_id: UUID, request: Request, user_id: UUID = Depends(require_user_id)
) -> Response:
    """Delete a restaurant with its list memberships and check-ins."""
    container = get_container(request)
    owned_restaurant(container, restaurant_id, user_id)
    if not container.restaurant_service.delete_restaurant(restaurant_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Restaurant not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/restaurants/{restaurant_id}/checkins", response_model=list[CheckInOut])
async def list_check_ins(
    restaurant_id: UUID, request: Request, user_id: UUID = Depends(require_user_id)
) -> list[CheckInOut]:
    """Return the visits recorded for a restaurant."""
    container = get_container(request)
    owned_restaurant(container, restaurant_id, user_id)
    check_ins = container.check_in_service.get_check_ins(restaurant_id)
    return [CheckInOut.model_validate(item) for item in check_ins]


@router.post(
    "/checkins", response_model=CheckInOut, status_code=status.HTTP_201_CREATED
)
async def create_check_in(
    payload: CheckInCreate,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> CheckInOut:
    """Record a visit to one of the current user's restaurants."""
    container = get_container(request)
    owned_restaurant(container, payload.restaurant_id, user_id)
    check_in = container.check_in_service.create_check_in(
        user_id, payload.model_dump()
    )
    return CheckInOut.model_validate(check_in)
