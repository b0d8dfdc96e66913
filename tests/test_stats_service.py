"""Tests for stats service."""

from uuid import uuid4

from restaurant_tracker.adapters.memory_store import InMemoryStore
from restaurant_tracker.domain.stats import CuisineCount
from restaurant_tracker.services.check_ins import CheckInService
from restaurant_tracker.services.stats import StatsService
from tests.conftest import add_restaurant


def _services(store: InMemoryStore) -> tuple[StatsService, CheckInService]:
    stats = StatsService(restaurant_repository=store, check_in_repository=store)
    check_ins = CheckInService(repository=store, restaurant_repository=store)
    return stats, check_ins


def test_stats_for_empty_user() -> None:
    stats_service, _ = _services(InMemoryStore())

    stats = stats_service.get_stats(uuid4())

    assert stats.total_restaurants == 0
    assert stats.visited_count == 0
    assert stats.wishlist_count == 0
    assert stats.total_check_ins == 0
    assert stats.average_rating == 0
    assert stats.top_cuisines == []


def test_visited_and_wishlist_add_up_to_total() -> None:
    store = InMemoryStore()
    stats_service, check_in_service = _services(store)
    user_id = uuid4()
    visited = add_restaurant(store, user_id, name="Visited")
    add_restaurant(store, user_id, name="Wish 1")
    add_restaurant(store, user_id, name="Wish 2", is_visited=False)
    check_in_service.create_check_in(user_id, {"restaurant_id": visited.id})

    stats = stats_service.get_stats(user_id)

    assert stats.visited_count == 1
    assert stats.wishlist_count == 2
    assert stats.visited_count + stats.wishlist_count == stats.total_restaurants


def test_average_rating_uses_rated_check_ins_only() -> None:
    store = InMemoryStore()
    stats_service, check_in_service = _services(store)
    user_id = uuid4()
    restaurant = add_restaurant(store, user_id, rating=1)
    for rating in (4, 5, None):
        check_in_service.create_check_in(
            user_id, {"restaurant_id": restaurant.id, "rating": rating}
        )

    stats = stats_service.get_stats(user_id)

    assert stats.total_check_ins == 3
    assert stats.average_rating == 4.5


def test_average_rating_rounds_half_up() -> None:
    store = InMemoryStore()
    stats_service, check_in_service = _services(store)
    user_id = uuid4()
    restaurant = add_restaurant(store, user_id)
    for rating in (4, 4, 4, 5):
        check_in_service.create_check_in(
            user_id, {"restaurant_id": restaurant.id, "rating": rating}
        )

    assert stats_service.get_stats(user_id).average_rating == 4.3


def test_scenario_single_five_star_check_in() -> None:
    store = InMemoryStore()
    stats_service, check_in_service = _services(store)
    user_id = uuid4()
    restaurant = add_restaurant(store, user_id)

    check_in_service.create_check_in(
        user_id, {"restaurant_id": restaurant.id, "rating": 5}
    )

    assert stats_service.get_stats(user_id).average_rating == 5


def test_top_cuisines_sorted_by_count() -> None:
    store = InMemoryStore()
    stats_service, _ = _services(store)
    user_id = uuid4()
    for cuisine in ("Italian", "Thai", "Italian"):
        add_restaurant(store, user_id, cuisine=cuisine)

    stats = stats_service.get_stats(user_id)

    assert stats.top_cuisines == [
        CuisineCount(cuisine="Italian", count=2),
        CuisineCount(cuisine="Thai", count=1),
    ]


def test_top_cuisines_limited_to_five_with_alphabetical_ties() -> None:
    store = InMemoryStore()
    stats_service, _ = _services(store)
    user_id = uuid4()
    for cuisine in ("Thai", "Greek", "Mexican", "Indian", "French", "Ramen", "Thai"):
        add_restaurant(store, user_id, cuisine=cuisine)

    stats = stats_service.get_stats(user_id)

    assert [item.cuisine for item in stats.top_cuisines] == [
        "Thai",
        "French",
        "Greek",
        "Indian",
        "Mexican",
    ]


def test_cuisine_grouping_is_case_sensitive() -> None:
    store = InMemoryStore()
    stats_service, _ = _services(store)
    user_id = uuid4()
    add_restaurant(store, user_id, cuisine="thai")
    add_restaurant(store, user_id, cuisine="Thai")

    stats = stats_service.get_stats(user_id)

    assert len(stats.top_cuisines) == 2


def test_stats_are_scoped_to_user() -> None:
    store = InMemoryStore()
    stats_service, check_in_service = _services(store)
    user_id = uuid4()
    other_id = uuid4()
    mine = add_restaurant(store, user_id)
    theirs = add_restaurant(store, other_id, cuisine="Thai")
    check_in_service.create_check_in(user_id, {"restaurant_id": mine.id, "rating": 2})
    check_in_service.create_check_in(
        other_id, {"restaurant_id": theirs.id, "rating": 5}
    )

    stats = stats_service.get_stats(user_id)
    overall = stats_service.get_stats(None)

    assert stats.total_restaurants == 1
    assert stats.total_check_ins == 1
    assert stats.average_rating == 2
    assert overall.total_restaurants == 2
    assert overall.total_check_ins == 2
    assert overall.average_rating == 3.5


def test_deleted_restaurant_drops_out_of_stats() -> None:
    store = InMemoryStore()
    stats_service, check_in_service = _services(store)
    user_id = uuid4()
    restaurant = add_restaurant(store, user_id)
    check_in_service.create_check_in(
        user_id, {"restaurant_id": restaurant.id, "rating": 3}
    )

    store.delete_restaurant(restaurant.id)

    stats = stats_service.get_stats(user_id)
    assert stats.total_check_ins == 0
    assert stats.average_rating == 0
