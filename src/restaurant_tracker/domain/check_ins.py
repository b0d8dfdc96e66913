"""Domain models for restaurant visits."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CheckIn:
    """A recorded visit to a restaurant."""

    id: UUID
    user_id: UUID
    restaurant_id: UUID
    rating: int | None
    notes: str | None
    visit_date: datetime
