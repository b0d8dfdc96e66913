"""Pydantic request and response models for the REST API."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, ClassVar, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

PriceRange = Literal["$", "$$", "$$$", "$$$$"]
ListIcon = Literal["heart", "clock", "utensils", "coffee"]
RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ApiModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialUpdate(ApiModel):
    """Base for PATCH bodies; nulls are ignored for required columns."""

    required_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, object]:
        """Return the fields the client actually set."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key not in self.required_fields
        }


class UserProfileIn(ApiModel):
    """Profile fields sent when a user signs in."""

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None


class UserOut(ApiModel):
    """User returned by the API."""

    id: UUID
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    created_at: datetime
    updated_at: datetime


class RestaurantCreate(ApiModel):
    """Payload for adding a restaurant."""

    name: RequiredText
    cuisine: RequiredText
    price_range: PriceRange
    address: str | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None
    rating: int = Field(default=0, ge=0, le=5)
    notes: str | None = None
    is_visited: bool = False
    place_id: str | None = None
    photo_url: str | None = None
    phone_number: str | None = None
    website: str | None = None


class RestaurantUpdate(PartialUpdate):
    """Partial update for a restaurant; visits are recorded via check-ins."""

    required_fields: ClassVar[frozenset[str]] = frozenset(
        {"name", "cuisine", "price_range", "rating"}
    )

    name: RequiredText | None = None
    cuisine: RequiredText | None = None
    price_range: PriceRange | None = None
    address: str | None = None
    latitude: Decimal | None = None
    longitude: Decimal | None = None
    rating: int | None = Field(default=None, ge=0, le=5)
    notes: str | None = None
    place_id: str | None = None
    photo_url: str | None = None
    phone_number: str | None = None
    website: str | None = None


class RestaurantOut(ApiModel):
    """Restaurant returned by the API."""

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


class ListCreate(ApiModel):
    """Payload for creating a list."""

    name: RequiredText
    description: str | None = None
    icon: ListIcon = "utensils"
    color: str = "primary"


class ListUpdate(PartialUpdate):
    """Partial update for a list."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"name"})

    name: RequiredText | None = None
    description: str | None = None


class ListOut(ApiModel):
    """List returned by the API."""

    id: UUID
    user_id: UUID
    name: str
    description: str | None
    icon: str
    color: str
    created_at: datetime


class MembershipCreate(ApiModel):
    """Payload for adding a restaurant to a list."""

    restaurant_id: UUID


class MembershipOut(ApiModel):
    """List membership returned by the API."""

    id: UUID
    list_id: UUID
    restaurant_id: UUID
    added_at: datetime


class CheckInCreate(ApiModel):
    """Payload for recording a visit."""

    restaurant_id: UUID
    rating: int | None = Field(default=None, ge=1, le=5)
    notes: str | None = None


class CheckInOut(ApiModel):
    """Check-in returned by the API."""

    id: UUID
    user_id: UUID
    restaurant_id: UUID
    rating: int | None
    notes: str | None
    visit_date: datetime


class CuisineCountOut(ApiModel):
    """Cuisine with its restaurant count."""

    cuisine: str
    count: int


class StatsOut(ApiModel):
    """Aggregate statistics for the current user."""

    total_restaurants: int
    visited_count: int
    wishlist_count: int
    total_check_ins: int
    average_rating: float
    top_cuisines: list[CuisineCountOut]
