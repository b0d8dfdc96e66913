"""List and list membership endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from restaurant_tracker.api.dependencies import get_container, require_user_id
from restaurant_tracker.api.restaurants import owned_restaurant
from restaurant_tracker.api.schemas import (
    ListCreate,
    ListOut,
    ListUpdate,
    MembershipCreate,
    MembershipOut,
    RestaurantOut,
)

if TYPE_CHECKING:
    from restaurant_tracker.containers import AppContainer
    from restaurant_tracker.domain.lists import RestaurantList

router = APIRouter(prefix="/api", tags=["lists"])


def _owned_list(
    container: AppContainer, list_id: UUID, user_id: UUID
) -> RestaurantList:
    restaurant_list = container.list_service.get_list(list_id)
    if restaurant_list is None or restaurant_list.user_id != user_id:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="List not found")
    return restaurant_list


@router.get("/lists", response_model=list[ListOut])
async def list_lists(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> list[ListOut]:
    """Return the current user's lists."""
    lists = get_container(request).list_service.list_lists(user_id)
    return [ListOut.model_validate(item) for item in lists]


@router.post("/lists", response_model=ListOut, status_code=status.HTTP_201_CREATED)
async def create_list(
    payload: ListCreate, request: Request, user_id: UUID = Depends(require_user_id)
) -> ListOut:
    """Create a list for the current user."""
    created = get_container(request).list_service.create_list(
        user_id, payload.model_dump()
    )
    return ListOut.model_validate(created)


@router.get("/lists/{list_id}", response_model=ListOut)
async def get_list(
    list_id: UUID, request: Request, user_id: UUID = Depends(require_user_id)
) -> ListOut:
    """Return one of the current user's lists."""
    return ListOut.model_validate(_owned_list(get_container(request), list_id, user_id))


@router.patch("/lists/{list_id}", response_model=ListOut)
async def update_list(
    list_id: UUID,
    payload: ListUpdate,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> ListOut:
    """Rename a list or change its description."""
    container = get_container(request)
    _owned_list(container, list_id, user_id)
    updated = container.list_service.update_list(list_id, payload.changes())
    if updated is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="List not found")
    return ListOut.model_validate(updated)


@router.delete("/lists/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_list(
    list_id: UUID, request: Request, user_id: UUID = Depends(require_user_id)
) -> Response:
    """Delete a list; the restaurants in it are kept."""
    container = get_container(request)
    _owned_list(container, list_id, user_id)
    if not container.list_service.delete_list(list_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="List not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/lists/{list_id}/restaurants", response_model=list[RestaurantOut])
async def list_restaurants_in_list(
    list_id: UUID, request: Request, user_id: UUID = Depends(require_user_id)
) -> list[RestaurantOut]:
    """Return the restaurants in a list."""
    container = get_container(request)
    _owned_list(container, list_id, user_id)
    restaurants = container.list_service.get_list_restaurants(list_id)
    return [RestaurantOut.model_validate(item) for item in restaurants]


@router.post(
    "/lists/{list_id}/restaurants",
    response_model=MembershipOut,
    status_code=status.HTTP_201_CREATED,
)
async def add_restaurant_to_list(
    list_id: UUID,
    payload: MembershipCreate,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> MembershipOut:
    """Add one of the user's restaurants to one of their lists."""
    container = get_container(request)
    _owned_list(container, list_id, user_id)
    owned_restaurant(container, payload.restaurant_id, user_id)
    membership = container.list_service.add_restaurant_to_list(
        list_id, payload.restaurant_id
    )
    if membership is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="List not found")
    return MembershipOut.model_validate(membership)


@router.delete(
    "/lists/{list_id}/restaurants/{restaurant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_restaurant_from_list(
    list_id: UUID,
    restaurant_id: UUID,
    request: Request,
    user_id: UUID = Depends(require_user_id),
) -> Response:
    """Remove a restaurant from a list."""
    container = get_container(request)
    _owned_list(container, list_id, user_id)
    if not container.list_service.remove_restaurant_from_list(list_id, restaurant_id):
        raise HTTPException(
            status.HTTP_404_NOT_FOUND, detail="Restaurant not found in list"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/list-restaurants", response_model=list[MembershipOut])
async def list_memberships(
    request: Request, user_id: UUID = Depends(require_user_id)
) -> list[MembershipOut]:
    """Return memberships across all of the user's lists."""
    memberships = get_container(request).list_service.list_memberships(user_id)
    return [MembershipOut.model_validate(item) for item in memberships]
