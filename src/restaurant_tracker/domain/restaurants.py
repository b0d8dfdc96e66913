"""Domain models for restaurants."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

PRICE_RANGES = ("$", "$$", "$$$", "$$$$")


@dataclass(frozen=True)
class Restaurant:
    """A place a user has been to or wants to try."""

    id: UUID
    user_id: UUID
    name: str
    cuisine: str
    price_range: str
    address: str | None
    latitude: Decimal | None
    longitude: Decimal | None
    rating: int
    notes: str | None
    is_visited: bool
    check_in_count: int
    place_id: str | None
    photo_url: str | None
    phone_number: str | None
    website: str | None
    created_at: datetime
