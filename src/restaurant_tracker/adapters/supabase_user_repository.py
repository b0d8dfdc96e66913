"""Supabase-backed user repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from restaurant_tracker.adapters.supabase_rows import parse_timestamp
from restaurant_tracker.domain.models import UserRecord
from restaurant_tracker.services.users import UserRepository

_PROFILE_FIELDS = ("email", "first_name", "last_name", "profile_image_url")


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select("*")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def upsert_user(
        self, user_id: UUID | None, payload: dict[str, object]
    ) -> UserRecord:
        """Insert or merge a user row; created_at is left to the database."""
        row: dict[str, object] = {
            key: payload[key] for key in _PROFILE_FIELDS if key in payload
        }
        row["updated_at"] = datetime.now(tz=UTC).isoformat()
        if user_id is not None:
            row["id"] = str(user_id)
        response = self.client.table("users").upsert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to upsert user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        email=row.get("email"),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        profile_image_url=row.get("profile_image_url"),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
