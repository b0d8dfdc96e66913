"""Services for managing a user's restaurants."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from restaurant_tracker.domain.restaurants import Restaurant

logger = logging.getLogger(__name__)

# Maintained only through check-ins.
READ_ONLY_FIELDS = frozenset({"id", "user_id", "check_in_count", "created_at"})


class RestaurantRepository(Protocol):
    """Persistence interface for restaurants."""

    def create_restaurant(
        self, user_id: UUID, payload: dict[str, object]
    ) -> Restaurant:
        """Create a restaurant and return it."""

    def get_restaurant(self, restaurant_id: UUID) -> Restaurant | None:
        """Return a restaurant by id, if present."""

    def list_restaurants(self, user_id: UUID | None) -> list[Restaurant]:
        """Return restaurants owned by a user, or all when user_id is None."""

    def list_restaurants_by_ids(self, restaurant_ids: list[UUID]) -> list[Restaurant]:
        """Return the restaurants that exist among the given ids, in that order."""

    def update_restaurant(
        self, restaurant_id: UUID, payload: dict[str, object]
    ) -> Restaurant | None:
        """Shallow-merge fields into a restaurant and return it."""

    def delete_restaurant(self, restaurant_id: UUID) -> bool:
        """Delete a restaurant together with its memberships and check-ins."""

    def record_check_in(self, restaurant_id: UUID) -> Restaurant | None:
        """Atomically bump the check-in counter and mark the restaurant visited."""


@dataclass
class RestaurantService:
    """Application service for restaurant CRUD."""

    repository: RestaurantRepository

    def create_restaurant(
        self, user_id: UUID, payload: dict[str, object]
    ) -> Restaurant:
        """Create a restaurant for a user."""
        restaurant = self.repository.create_restaurant(
            user_id, _writable(payload)
        )
        logger.info(
            "Created restaurant",
            extra={"restaurant_id": str(restaurant.id), "user_id": str(user_id)},
        )
        return restaurant

    def get_restaurant(self, restaurant_id: UUID) -> Restaurant | None:
        """Return a restaurant by id, if present."""
        return self.repository.get_restaurant(restaurant_id)

    def list_restaurants(self, user_id: UUID) -> list[Restaurant]:
        """Return all restaurants owned by a user."""
        return self.repository.list_restaurants(user_id)

    def update_restaurant(
        self, restaurant_id: UUID, payload: dict[str, object]
    ) -> Restaurant | None:
        """Update a restaurant; visited restaurants stay visited."""
        updates = _writable(payload)
        if updates.get("is_visited") is False:
            current = self.repository.get_restaurant(restaurant_id)
            if current and current.is_visited:
                updates.pop("is_visited")
        return self.repository.update_restaurant(restaurant_id, updates)

    def delete_restaurant(self, restaurant_id: UUID) -> bool:
        """Delete a restaurant and everything that references it."""
        deleted = self.repository.delete_restaurant(restaurant_id)
        if deleted:
            logger.info(
                "Deleted restaurant", extra={"restaurant_id": str(restaurant_id)}
            )
        return deleted


def _writable(payload: dict[str, object]) -> dict[str, object]:
    return {
        key: value for key, value in payload.items() if key not in READ_ONLY_FIELDS
    }
