"""Statistics over a user's restaurants and check-ins."""

import math
from collections import Counter
from dataclasses import dataclass
from uuid import UUID

from restaurant_tracker.domain.check_ins import CheckIn
from restaurant_tracker.domain.restaurants import Restaurant
from restaurant_tracker.domain.stats import CuisineCount, RestaurantStats
from restaurant_tracker.services.check_ins import CheckInRepository
from restaurant_tracker.services.restaurants import RestaurantRepository

TOP_CUISINES_LIMIT = 5


@dataclass
class StatsService:
    """Service computing read-time aggregates; nothing is cached."""

    restaurant_repository: RestaurantRepository
    check_in_repository: CheckInRepository

    def get_stats(self, user_id: UUID | None = None) -> RestaurantStats:
        """Return stats for a user, or across all users when user_id is None."""
        restaurants = self.restaurant_repository.list_restaurants(user_id)
        check_ins = self.check_in_repository.list_check_ins_for_restaurants(
            [restaurant.id for restaurant in restaurants]
        )
        visited = sum(1 for restaurant in restaurants if restaurant.is_visited)
        return RestaurantStats(
            total_restaurants=len(restaurants),
            visited_count=visited,
            wishlist_count=len(restaurants) - visited,
            total_check_ins=len(check_ins),
            average_rating=_average_rating(check_ins),
            top_cuisines=_top_cuisines(restaurants, TOP_CUISINES_LIMIT),
        )


def _average_rating(check_ins: list[CheckIn]) -> float:
    ratings = [item.rating for item in check_ins if item.rating is not None]
    if not ratings:
        return 0.0
    average = sum(ratings) / len(ratings)
    return math.floor(average * 10 + 0.5) / 10


def _top_cuisines(restaurants: list[Restaurant], limit: int) -> list[CuisineCount]:
    counts = Counter(restaurant.cuisine for restaurant in restaurants)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))[:limit]
    return [CuisineCount(cuisine=cuisine, count=count) for cuisine, count in ranked]
