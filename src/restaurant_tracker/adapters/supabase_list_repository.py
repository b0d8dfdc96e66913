"""Supabase implementation for lists and list membership."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from restaurant_tracker.adapters.supabase_rows import parse_timestamp, to_row
from restaurant_tracker.domain.lists import (
    DEFAULT_LIST_COLOR,
    DEFAULT_LIST_ICON,
    ListRestaurant,
    RestaurantList,
)
from restaurant_tracker.services.lists import ListRepository


@dataclass
class SupabaseListRepository(ListRepository):
    """Supabase-backed repository for restaurant lists."""

    client: Client

    def create_list(self, user_id: UUID, payload: dict[str, object]) -> RestaurantList:
        """Create a list and return it."""
        response = (
            self.client.table("restaurant_lists")
            .insert({"user_id": str(user_id), **to_row(payload)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create list")
        return _parse_list(response.data[0])

    def get_list(self, list_id: UUID) -> RestaurantList | None:
        """Return a list by id, if present."""
        response = (
            self.client.table("restaurant_lists")
            .select("*")
            .eq("id", str(list_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_list(response.data[0])

    def list_lists(self, user_id: UUID) -> list[RestaurantList]:
        """Return lists owned by a user."""
        response = (
            self.client.table("restaurant_lists")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_list(row) for row in response.data or []]

    def update_list(
        self, list_id: UUID, payload: dict[str, object]
    ) -> RestaurantList | None:
        """Update a list and return it."""
        if not payload:
            return self.get_list(list_id)
        response = (
            self.client.table("restaurant_lists")
            .update(to_row(payload))
            .eq("id", str(list_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_list(response.data[0])

    def delete_list(self, list_id: UUID) -> bool:
        """Delete a list with its memberships."""
        self.client.table("list_restaurants").delete().eq(
            "list_id", str(list_id)
        ).execute()
        response = (
            self.client.table("restaurant_lists")
            .delete()
            .eq("id", str(list_id))
            .execute()
        )
        return bool(response.data)

    def add_membership(self, list_id: UUID, restaurant_id: UUID) -> ListRestaurant:
        """Insert a membership, returning the stored row when the pair exists."""
        response = (
            self.client.table("list_restaurants")
            .upsert(
                {"list_id": str(list_id), "restaurant_id": str(restaurant_id)},
                on_conflict="list_id,restaurant_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to add restaurant to list")
        return _parse_membership(response.data[0])

    def list_memberships(self, list_ids: list[UUID]) -> list[ListRestaurant]:
        """Return memberships of the given lists."""
        if not list_ids:
            return []
        response = (
            self.client.table("list_restaurants")
            .select("*")
            .in_("list_id", [str(list_id) for list_id in list_ids])
            .order("added_at", desc=False)
            .execute()
        )
        return [_parse_membership(row) for row in response.data or []]

    def remove_membership(self, list_id: UUID, restaurant_id: UUID) -> bool:
        """Delete the membership for a pair."""
        response = (
            self.client.table("list_restaurants")
            .delete()
            .eq("list_id", str(list_id))
            .eq("restaurant_id", str(restaurant_id))
            .execute()
        )
        return bool(response.data)


def _parse_list(row: dict[str, object]) -> RestaurantList:
    return RestaurantList(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        description=row.get("description"),
        icon=str(row.get("icon") or DEFAULT_LIST_ICON),
        color=str(row.get("color") or DEFAULT_LIST_COLOR),
        created_at=parse_timestamp(row.get("created_at")),
    )


def _parse_membership(row: dict[str, object]) -> ListRestaurant:
    return ListRestaurant(
        id=UUID(str(row["id"])),
        list_id=UUID(str(row["list_id"])),
        restaurant_id=UUID(str(row["restaurant_id"])),
        added_at=parse_timestamp(row.get("added_at")),
    )
