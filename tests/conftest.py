"""Shared test fixtures."""

from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from restaurant_tracker.adapters.memory_store import InMemoryStore
from restaurant_tracker.api.app import create_app
from restaurant_tracker.config import Settings
from restaurant_tracker.containers import AppContainer, build_services
from restaurant_tracker.domain.restaurants import Restaurant


def make_restaurant_payload(**overrides: object) -> dict[str, object]:
    """Return a valid restaurant payload with optional overrides."""
    payload: dict[str, object] = {
        "name": "Luigi's",
        "cuisine": "Italian",
        "price_range": "$$",
    }
    payload.update(overrides)
    return payload


def add_restaurant(
    store: InMemoryStore, user_id: UUID, **overrides: object
) -> Restaurant:
    """Create a restaurant directly in the store."""
    return store.create_restaurant(user_id, make_restaurant_payload(**overrides))


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory", cors_allowed_origins=None)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def container(settings: Settings, store: InMemoryStore) -> AppContainer:
    return build_services(
        settings,
        user_repository=store,
        restaurant_repository=store,
        list_repository=store,
        check_in_repository=store,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def headers(user_id: UUID) -> dict[str, str]:
    return {"X-User-Id": str(user_id)}
