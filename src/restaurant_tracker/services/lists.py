"""Services for user lists and list membership."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from restaurant_tracker.domain.lists import ListRestaurant, RestaurantList
from restaurant_tracker.domain.restaurants import Restaurant
from restaurant_tracker.services.restaurants import RestaurantRepository

logger = logging.getLogger(__name__)


class ListRepository(Protocol):
    """Persistence interface for lists and their memberships."""

    def create_list(self, user_id: UUID, payload: dict[str, object]) -> RestaurantList:
        """Create a list and return it."""

    def get_list(self, list_id: UUID) -> RestaurantList | None:
        """Return a list by id, if present."""

    def list_lists(self, user_id: UUID) -> list[RestaurantList]:
        """Return lists owned by a user."""

    def update_list(
        self, list_id: UUID, payload: dict[str, object]
    ) -> RestaurantList | None:
        """Shallow-merge fields into a list and return it."""

    def delete_list(self, list_id: UUID) -> bool:
        """Delete a list together with its memberships."""

    def add_membership(self, list_id: UUID, restaurant_id: UUID) -> ListRestaurant:
        """Insert a membership, returning the existing row for a known pair."""

    def list_memberships(self, list_ids: list[UUID]) -> list[ListRestaurant]:
        """Return memberships of the given lists in insertion order."""

    def remove_membership(self, list_id: UUID, restaurant_id: UUID) -> bool:
        """Delete the membership for a pair."""


@dataclass
class ListService:
    """Application service for lists and the restaurants they group."""

    repository: ListRepository
    restaurant_repository: RestaurantRepository

    def create_list(self, user_id: UUID, payload: dict[str, object]) -> RestaurantList:
        """Create a list for a user."""
        created = self.repository.create_list(user_id, payload)
        logger.info(
            "Created list",
            extra={"list_id": str(created.id), "user_id": str(user_id)},
        )
        return created

    def get_list(self, list_id: UUID) -> RestaurantList | None:
        """Return a list by id, if present."""
        return self.repository.get_list(list_id)

    def list_lists(self, user_id: UUID) -> list[RestaurantList]:
        """Return all lists owned by a user."""
        return self.repository.list_lists(user_id)

    def update_list(
        self, list_id: UUID, payload: dict[str, object]
    ) -> RestaurantList | None:
        """Update a list's name or description."""
        updates = {
            key: value
            for key, value in payload.items()
            if key in {"name", "description"}
        }
        return self.repository.update_list(list_id, updates)

    def delete_list(self, list_id: UUID) -> bool:
        """Delete a list; its restaurants are kept."""
        deleted = self.repository.delete_list(list_id)
        if deleted:
            logger.info("Deleted list", extra={"list_id": str(list_id)})
        return deleted

    def add_restaurant_to_list(
        self, list_id: UUID, restaurant_id: UUID
    ) -> ListRestaurant | None:
        """Add a restaurant to a list; None when either side does not exist."""
        if self.repository.get_list(list_id) is None:
            return None
        if self.restaurant_repository.get_restaurant(restaurant_id) is None:
            return None
        return self.repository.add_membership(list_id, restaurant_id)

    def get_list_restaurants(self, list_id: UUID) -> list[Restaurant]:
        """Return the restaurants in a list, skipping ones that no longer exist."""
        memberships = self.repository.list_memberships([list_id])
        return self.restaurant_repository.list_restaurants_by_ids(
            [membership.restaurant_id for membership in memberships]
        )

    def remove_restaurant_from_list(self, list_id: UUID, restaurant_id: UUID) -> bool:
        """Remove a restaurant from a list."""
        return self.repository.remove_membership(list_id, restaurant_id)

    def list_memberships(self, user_id: UUID) -> list[ListRestaurant]:
        """Return memberships across all of a user's lists."""
        list_ids = [item.id for item in self.repository.list_lists(user_id)]
        if not list_ids:
            return []
        return self.repository.list_memberships(list_ids)
