"""In-memory entity store for local runs and tests."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, fields, replace
from datetime import UTC, datetime
from functools import wraps
from typing import TYPE_CHECKING, TypeVar
from uuid import UUID, uuid4

from restaurant_tracker.domain.check_ins import CheckIn
from restaurant_tracker.domain.lists import (
    DEFAULT_LIST_COLOR,
    DEFAULT_LIST_ICON,
    ListRestaurant,
    RestaurantList,
)
from restaurant_tracker.domain.models import UserRecord
from restaurant_tracker.domain.restaurants import Restaurant

if TYPE_CHECKING:
    from collections.abc import Callable

R = TypeVar("R")
T = TypeVar("T", Restaurant, RestaurantList)

_USER_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


def _locked(method: Callable[..., R]) -> Callable[..., R]:
    @wraps(method)
    def wrapper(self: InMemoryStore, *args: object, **kwargs: object) -> R:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


@dataclass
class InMemoryStore:
    """Single source of truth for all entities when no database is configured.

    Implements every repository protocol. Each public method holds a
    re-entrant lock for its whole duration, so counters and cascades are
    applied without interleaving.
    """

    users: dict[UUID, UserRecord] = field(default_factory=dict)
    restaurants: dict[UUID, Restaurant] = field(default_factory=dict)
    lists: dict[UUID, RestaurantList] = field(default_factory=dict)
    memberships: dict[UUID, ListRestaurant] = field(default_factory=dict)
    check_ins: dict[UUID, CheckIn] = field(default_factory=dict)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    # Users

    @_locked
    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    @_locked
    def upsert_user(
        self, user_id: UUID | None, payload: dict[str, object]
    ) -> UserRecord:
        now = _now()
        existing = self.users.get(user_id) if user_id else None
        if existing:
            updates = {key: payload[key] for key in _USER_FIELDS if key in payload}
            user = replace(existing, **updates, updated_at=now)
        else:
            user = UserRecord(
                id=user_id or uuid4(),
                email=payload.get("email"),
                first_name=payload.get("first_name"),
                last_name=payload.get("last_name"),
                profile_image_url=payload.get("profile_image_url"),
                created_at=now,
                updated_at=now,
            )
        self.users[user.id] = user
        return user

    # Restaurants

    @_locked
    def create_restaurant(
        self, user_id: UUID, payload: dict[str, object]
    ) -> Restaurant:
        restaurant = Restaurant(
            id=uuid4(),
            user_id=user_id,
            name=str(payload["name"]),
            cuisine=str(payload["cuisine"]),
            price_range=str(payload["price_range"]),
            address=payload.get("address"),
            latitude=payload.get("latitude"),
            longitude=payload.get("longitude"),
            rating=int(payload.get("rating") or 0),
            notes=payload.get("notes"),
            is_visited=bool(payload.get("is_visited", False)),
            check_in_count=0,
            place_id=payload.get("place_id"),
            photo_url=payload.get("photo_url"),
            phone_number=payload.get("phone_number"),
            website=payload.get("website"),
            created_at=_now(),
        )
        self.restaurants[restaurant.id] = restaurant
        return restaurant

    @_locked
    def get_restaurant(self, restaurant_id: UUID) -> Restaurant | None:
        return self.restaurants.get(restaurant_id)

    @_locked
    def list_restaurants(self, user_id: UUID | None) -> list[Restaurant]:
        return [
            restaurant
            for restaurant in self.restaurants.values()
            if user_id is None or restaurant.user_id == user_id
        ]

    @_locked
    def list_restaurants_by_ids(self, restaurant_ids: list[UUID]) -> list[Restaurant]:
        return [
            self.restaurants[restaurant_id]
            for restaurant_id in restaurant_ids
            if restaurant_id in self.restaurants
        ]

    @_locked
    def update_restaurant(
        self, restaurant_id: UUID, payload: dict[str, object]
    ) -> Restaurant | None:
        current = self.restaurants.get(restaurant_id)
        if current is None:
            return None
        updated = _merge(current, payload)
        self.restaurants[restaurant_id] = updated
        return updated

    @_locked
    def delete_restaurant(self, restaurant_id: UUID) -> bool:
        if self.restaurants.pop(restaurant_id, None) is None:
            return False
        self.memberships = {
            key: row
            for key, row in self.memberships.items()
            if row.restaurant_id != restaurant_id
        }
        self.check_ins = {
            key: row
            for key, row in self.check_ins.items()
            if row.restaurant_id != restaurant_id
        }
        return True

    @_locked
    def record_check_in(self, restaurant_id: UUID) -> Restaurant | None:
        current = self.restaurants.get(restaurant_id)
        if current is None:
            return None
        updated = replace(
            current, check_in_count=current.check_in_count + 1, is_visited=True
        )
        self.restaurants[restaurant_id] = updated
        return updated

    # Lists

    @_locked
    def create_list(self, user_id: UUID, payload: dict[str, object]) -> RestaurantList:
        restaurant_list = RestaurantList(
            id=uuid4(),
            user_id=user_id,
            name=str(payload["name"]),
            description=payload.get("description"),
            icon=str(payload.get("icon") or DEFAULT_LIST_ICON),
            color=str(payload.get("color") or DEFAULT_LIST_COLOR),
            created_at=_now(),
        )
        self.lists[restaurant_list.id] = restaurant_list
        return restaurant_list

    @_locked
    def get_list(self, list_id: UUID) -> RestaurantList | None:
        return self.lists.get(list_id)

    @_locked
    def list_lists(self, user_id: UUID) -> list[RestaurantList]:
        return [item for item in self.lists.values() if item.user_id == user_id]

    @_locked
    def update_list(
        self, list_id: UUID, payload: dict[str, object]
    ) -> RestaurantList | None:
        current = self.lists.get(list_id)
        if current is None:
            return None
        updated = _merge(current, payload)
        self.lists[list_id] = updated
        return updated

    @_locked
    def delete_list(self, list_id: UUID) -> bool:
        if self.lists.pop(list_id, None) is None:
            return False
        self.memberships = {
            key: row for key, row in self.memberships.items() if row.list_id != list_id
        }
        return True

    # Memberships

    @_locked
    def add_membership(self, list_id: UUID, restaurant_id: UUID) -> ListRestaurant:
        existing = self._find_membership(list_id, restaurant_id)
        if existing:
            return existing
        membership = ListRestaurant(
            id=uuid4(),
            list_id=list_id,
            restaurant_id=restaurant_id,
            added_at=_now(),
        )
        self.memberships[membership.id] = membership
        return membership

    @_locked
    def list_memberships(self, list_ids: list[UUID]) -> list[ListRestaurant]:
        wanted = set(list_ids)
        return [row for row in self.memberships.values() if row.list_id in wanted]

    @_locked
    def remove_membership(self, list_id: UUID, restaurant_id: UUID) -> bool:
        existing = self._find_membership(list_id, restaurant_id)
        if existing is None:
            return False
        del self.memberships[existing.id]
        return True

    def _find_membership(
        self, list_id: UUID, restaurant_id: UUID
    ) -> ListRestaurant | None:
        for row in self.memberships.values():
            if row.list_id == list_id and row.restaurant_id == restaurant_id:
                return row
        return None

    # Check-ins

    @_locked
    def create_check_in(self, user_id: UUID, payload: dict[str, object]) -> CheckIn:
        check_in = CheckIn(
            id=uuid4(),
            user_id=user_id,
            restaurant_id=payload["restaurant_id"],
            rating=payload.get("rating"),
            notes=payload.get("notes"),
            visit_date=_now(),
        )
        self.check_ins[check_in.id] = check_in
        return check_in

    @_locked
    def list_check_ins(self, restaurant_id: UUID) -> list[CheckIn]:
        return [
            row for row in self.check_ins.values() if row.restaurant_id == restaurant_id
        ]

    @_locked
    def list_check_ins_for_restaurants(
        self, restaurant_ids: list[UUID]
    ) -> list[CheckIn]:
        wanted = set(restaurant_ids)
        return [row for row in self.check_ins.values() if row.restaurant_id in wanted]

    @_locked
    def delete_check_in(self, check_in_id: UUID) -> bool:
        return self.check_ins.pop(check_in_id, None) is not None


def _now() -> datetime:
    return datetime.now(tz=UTC)


def _merge(current: T, payload: dict[str, object]) -> T:
    """Shallow-merge payload keys that name fields of the entity."""
    known = {item.name for item in fields(current)}
    return replace(current, **{k: v for k, v in payload.items() if k in known})
