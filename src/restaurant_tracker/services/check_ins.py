"""Check-in recording and its effect on restaurants."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from restaurant_tracker.domain.check_ins import CheckIn
from restaurant_tracker.services.restaurants import RestaurantRepository

logger = logging.getLogger(__name__)


class CheckInRepository(Protocol):
    """Persistence interface for check-ins."""

    def create_check_in(self, user_id: UUID, payload: dict[str, object]) -> CheckIn:
        """Create a check-in and return it."""

    def list_check_ins(self, restaurant_id: UUID) -> list[CheckIn]:
        """Return check-ins for a restaurant."""

    def list_check_ins_for_restaurants(
        self, restaurant_ids: list[UUID]
    ) -> list[CheckIn]:
        """Return check-ins belonging to any of the given restaurants."""

    def delete_check_in(self, check_in_id: UUID) -> bool:
        """Delete a check-in by id."""


@dataclass
class CheckInService:
    """Service for recording restaurant visits."""

    repository: CheckInRepository
    restaurant_repository: RestaurantRepository

    def create_check_in(self, user_id: UUID, payload: dict[str, object]) -> CheckIn:
        """Record a visit and mark its restaurant as visited.

        The check-in is kept even when the restaurant is gone; in that case
        there is nothing to update.
        """
        check_in = self.repository.create_check_in(user_id, payload)
        try:
            restaurant = self.restaurant_repository.record_check_in(
                check_in.restaurant_id
            )
        except RuntimeError:
            # Keep check_in_count equal to the number of stored check-ins.
            self.repository.delete_check_in(check_in.id)
            raise
        if restaurant is None:
            logger.warning(
                "Check-in recorded for unknown restaurant",
                extra={"restaurant_id": str(check_in.restaurant_id)},
            )
        return check_in

    def get_check_ins(self, restaurant_id: UUID) -> list[CheckIn]:
        """Return the visits recorded for a restaurant."""
        return self.repository.list_check_ins(restaurant_id)
