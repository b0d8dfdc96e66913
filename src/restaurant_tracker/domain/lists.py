"""Domain models for user restaurant lists."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

LIST_ICONS = ("heart", "clock", "utensils", "coffee")
DEFAULT_LIST_ICON = "utensils"
DEFAULT_LIST_COLOR = "primary"


@dataclass(frozen=True)
class RestaurantList:
    """Named collection of restaurants owned by a user."""

    id: UUID
    user_id: UUID
    name: str
    description: str | None
    icon: str
    color: str
    created_at: datetime


@dataclass(frozen=True)
class ListRestaurant:
    """Membership of a restaurant in a list."""

    id: UUID
    list_id: UUID
    restaurant_id: UUID
    added_at: datetime
