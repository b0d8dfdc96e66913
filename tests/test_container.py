"""Tests for container wiring."""

import asyncio

import pytest

from restaurant_tracker.adapters.memory_store import InMemoryStore
from restaurant_tracker.adapters.supabase_restaurant_repository import (
    SupabaseRestaurantRepository,
)
from restaurant_tracker.config import Settings
from restaurant_tracker.containers import build_container


def test_build_container_uses_single_memory_store(settings) -> None:
    container = build_container(settings)

    store = container.restaurant_service.repository
    assert isinstance(store, InMemoryStore)
    assert container.list_service.repository is store
    assert container.check_in_service.repository is store
    assert container.stats_service.check_in_repository is store
    asyncio.run(container.close_resources())


def test_build_container_requires_supabase_credentials() -> None:
    with pytest.raises(ValueError, match="SUPABASE_URL"):
        build_container(Settings(storage_backend="supabase"))


def test_build_container_wires_supabase_repositories(monkeypatch) -> None:
    created: list[tuple[str, str]] = []

    def fake_create_client(url: str, key: str) -> object:
        created.append((url, key))
        return object()

    monkeypatch.setattr(
        "restaurant_tracker.containers.create_client", fake_create_client
    )
    container = build_container(
        Settings(
            storage_backend="supabase",
            supabase_url="https://example.supabase.co",
            supabase_service_key="service-key",
        )
    )

    assert created == [("https://example.supabase.co", "service-key")]
    assert isinstance(
        container.restaurant_service.repository, SupabaseRestaurantRepository
    )
