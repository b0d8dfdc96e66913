"""Supabase implementation for restaurants."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from restaurant_tracker.adapters.supabase_rows import (
    parse_decimal,
    parse_timestamp,
    to_row,
)
from restaurant_tracker.domain.restaurants import Restaurant
from restaurant_tracker.services.restaurants import RestaurantRepository

CHECK_IN_UPDATE_ATTEMPTS = 5


@dataclass
class SupabaseRestaurantRepository(RestaurantRepository):
    """Supabase-backed repository for restaurants."""

    client: Client

    def create_restaurant(
        self, user_id: UUID, payload: dict[str, object]
    ) -> Restaurant:
        """Create a restaurant and return it."""
        response = (
            self.client.table("restaurants")
            .insert({"user_id": str(user_id), **to_row(payload)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create restaurant")
        return _parse_restaurant(response.data[0])

    def get_restaurant(self, restaurant_id: UUID) -> Restaurant | None:
        """Return a restaurant by id, if present."""
        response = (
            self.client.table("restaurants")
            .select("*")
            .eq("id", str(restaurant_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_restaurant(response.data[0])

    def list_restaurants(self, user_id: UUID | None) -> list[Restaurant]:
        """Return restaurants for a user, or every restaurant."""
        query = self.client.table("restaurants").select("*")
        if user_id is not None:
            query = query.eq("user_id", str(user_id))
        response = query.order("created_at", desc=False).execute()
        return [_parse_restaurant(row) for row in response.data or []]

    def list_restaurants_by_ids(self, restaurant_ids: list[UUID]) -> list[Restaurant]:
        """Return existing restaurants in the order of the given ids."""
        if not restaurant_ids:
            return []
        response = (
            self.client.table("restaurants")
            .select("*")
            .in_("id", [str(restaurant_id) for restaurant_id in restaurant_ids])
            .execute()
        )
        by_id = {
            restaurant.id: restaurant
            for restaurant in (_parse_restaurant(row) for row in response.data or [])
        }
        return [by_id[item] for item in restaurant_ids if item in by_id]

    def update_restaurant(
        self, restaurant_id: UUID, payload: dict[str, object]
    ) -> Restaurant | None:
        """Update a restaurant and return it."""
        if not payload:
            return self.get_restaurant(restaurant_id)
        response = (
            self.client.table("restaurants")
            .update(to_row(payload))
            .eq("id", str(restaurant_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_restaurant(response.data[0])

    def delete_restaurant(self, restaurant_id: UUID) -> bool:
        """Delete a restaurant with its memberships and check-ins."""
        self.client.table("list_restaurants").delete().eq(
            "restaurant_id", str(restaurant_id)
        ).execute()
        self.client.table("check_ins").delete().eq(
            "restaurant_id", str(restaurant_id)
        ).execute()
        response = (
            self.client.table("restaurants")
            .delete()
            .eq("id", str(restaurant_id))
            .execute()
        )
        return bool(response.data)

    def record_check_in(self, restaurant_id: UUID) -> Restaurant | None:
        """Increment the check-in counter and mark the restaurant visited.

        The update only applies while the stored counter still holds the value
        that was read, so concurrent check-ins retry instead of overwriting
        each other.
        """
        for _ in range(CHECK_IN_UPDATE_ATTEMPTS):
            response = (
                self.client.table("restaurants")
                .select("check_in_count")
                .eq("id", str(restaurant_id))
                .limit(1)
                .execute()
            )
            if not response.data:
                return None
            current = int(response.data[0].get("check_in_count") or 0)
            updated = (
                self.client.table("restaurants")
                .update({"check_in_count": current + 1, "is_visited": True})
                .eq("id", str(restaurant_id))
                .eq("check_in_count", current)
                .execute()
            )
            if updated.data:
                return _parse_restaurant(updated.data[0])
        raise RuntimeError("Failed to record check-in on restaurant")


def _parse_restaurant(row: dict[str, object]) -> Restaurant:
    """Parse a restaurant row into a domain model."""
    return Restaurant(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        cuisine=str(row.get("cuisine", "")),
        price_range=str(row.get("price_range", "")),
        address=row.get("address"),
        latitude=parse_decimal(row.get("latitude")),
        longitude=parse_decimal(row.get("longitude")),
        rating=int(row.get("rating") or 0),
        notes=row.get("notes"),
        is_visited=bool(row.get("is_visited", False)),
        check_in_count=int(row.get("check_in_count") or 0),
        place_id=row.get("place_id"),
        photo_url=row.get("photo_url"),
        phone_number=row.get("phone_number"),
        website=row.get("website"),
        created_at=parse_timestamp(row.get("created_at")),
    )
