"""Supabase implementation for check-ins."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from restaurant_tracker.adapters.supabase_rows import parse_timestamp, to_row
from restaurant_tracker.domain.check_ins import CheckIn
from restaurant_tracker.services.check_ins import CheckInRepository


@dataclass
class SupabaseCheckInRepository(CheckInRepository):
    """Supabase-backed repository for check-ins."""

    client: Client

    def create_check_in(self, user_id: UUID, payload: dict[str, object]) -> CheckIn:
        """Create a check-in; visit_date defaults to now() in the database."""
        response = (
            self.client.table("check_ins")
            .insert({"user_id": str(user_id), **to_row(payload)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create check-in")
        return _parse_check_in(response.data[0])

    def list_check_ins(self, restaurant_id: UUID) -> list[CheckIn]:
        """Return check-ins for a restaurant, oldest first."""
        response = (
            self.client.table("check_ins")
            .select("*")
            .eq("restaurant_id", str(restaurant_id))
            .order("visit_date", desc=False)
            .execute()
        )
        return [_parse_check_in(row) for row in response.data or []]

    def list_check_ins_for_restaurants(
        self, restaurant_ids: list[UUID]
    ) -> list[CheckIn]:
        """Return check-ins for any of the given restaurants."""
        if not restaurant_ids:
            return []
        response = (
            self.client.table("check_ins")
            .select("*")
            .in_("restaurant_id", [str(item) for item in restaurant_ids])
            .execute()
        )
        return [_parse_check_in(row) for row in response.data or []]

    def delete_check_in(self, check_in_id: UUID) -> bool:
        """Delete a check-in by id."""
        response = (
            self.client.table("check_ins")
            .delete()
            .eq("id", str(check_in_id))
            .execute()
        )
        return bool(response.data)


def _parse_check_in(row: dict[str, object]) -> CheckIn:
    rating = row.get("rating")
    return CheckIn(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        restaurant_id=UUID(str(row["restaurant_id"])),
        rating=int(rating) if rating is not None else None,
        notes=row.get("notes"),
        visit_date=parse_timestamp(row.get("visit_date")),
    )
