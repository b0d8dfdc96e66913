"""Domain models for statistics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CuisineCount:
    """Number of restaurants sharing a cuisine."""

    cuisine: str
    count: int


@dataclass(frozen=True)
class RestaurantStats:
    """Aggregate view over a user's restaurants and check-ins."""

    total_restaurants: int
    visited_count: int
    wishlist_count: int
    total_check_ins: int
    average_rating: float
    top_cuisines: list[CuisineCount]
