"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from restaurant_tracker.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""

    def upsert_user(
        self, user_id: UUID | None, payload: dict[str, object]
    ) -> UserRecord:
        """Create or merge-update a user and return it."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""
        return self.repository.get_user(user_id)

    def upsert_user(
        self, user_id: UUID | None, payload: dict[str, object]
    ) -> UserRecord:
        """Create the user on first sight, otherwise refresh its profile."""
        return self.repository.upsert_user(user_id, payload)

    def ensure_user(self, user_id: UUID) -> UserRecord:
        """Return the user for an authenticated id, creating it if needed."""
        existing = self.repository.get_user(user_id)
        if existing:
            return existing
        return self.repository.upsert_user(user_id, {})
