"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from restaurant_tracker.adapters.memory_store import InMemoryStore
from restaurant_tracker.adapters.supabase_check_in_repository import (
    SupabaseCheckInRepository,
)
from restaurant_tracker.adapters.supabase_list_repository import (
    SupabaseListRepository,
)
from restaurant_tracker.adapters.supabase_restaurant_repository import (
    SupabaseRestaurantRepository,
)
from restaurant_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from restaurant_tracker.config import Settings
from restaurant_tracker.services.check_ins import CheckInRepository, CheckInService
from restaurant_tracker.services.lists import ListRepository, ListService
from restaurant_tracker.services.restaurants import (
    RestaurantRepository,
    RestaurantService,
)
from restaurant_tracker.services.stats import StatsService
from restaurant_tracker.services.users import UserRepository, UserService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    restaurant_service: RestaurantService
    list_service: ListService
    check_in_service: CheckInService
    stats_service: StatsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    user_repository: UserRepository
    restaurant_repository: RestaurantRepository
    list_repository: ListRepository
    check_in_repository: CheckInRepository
    if resolved_settings.storage_backend == "supabase":
        if not (
            resolved_settings.supabase_url and resolved_settings.supabase_service_key
        ):
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "for the supabase storage backend"
            )
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        user_repository = SupabaseUserRepository(supabase_client)
        restaurant_repository = SupabaseRestaurantRepository(supabase_client)
        list_repository = SupabaseListRepository(supabase_client)
        check_in_repository = SupabaseCheckInRepository(supabase_client)
    else:
        store = InMemoryStore()
        user_repository = store
        restaurant_repository = store
        list_repository = store
        check_in_repository = store
    logger.info("Using %s storage backend", resolved_settings.storage_backend)
    return build_services(
        resolved_settings,
        user_repository=user_repository,
        restaurant_repository=restaurant_repository,
        list_repository=list_repository,
        check_in_repository=check_in_repository,
    )


def build_services(
    settings: Settings,
    *,
    user_repository: UserRepository,
    restaurant_repository: RestaurantRepository,
    list_repository: ListRepository,
    check_in_repository: CheckInRepository,
) -> AppContainer:
    """Wire services on top of the given repositories."""

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        restaurant_service=RestaurantService(restaurant_repository),
        list_service=ListService(
            repository=list_repository,
            restaurant_repository=restaurant_repository,
        ),
        check_in_service=CheckInService(
            repository=check_in_repository,
            restaurant_repository=restaurant_repository,
        ),
        stats_service=StatsService(
            restaurant_repository=restaurant_repository,
            check_in_repository=check_in_repository,
        ),
        close_resources=close_resources,
    )
