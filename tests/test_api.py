"""Tests for the REST API."""

from uuid import uuid4

from fastapi.testclient import TestClient

from restaurant_tracker.adapters.memory_store import InMemoryStore

LUIGIS = {"name": "Luigi's", "cuisine": "Italian", "priceRange": "$$"}


def _create_restaurant(
    client: TestClient, headers: dict[str, str], **overrides: object
) -> dict:
    response = client.post(
        "/api/restaurants", json={**LUIGIS, **overrides}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_requests_without_user_are_rejected(client: TestClient) -> None:
    assert client.get("/api/restaurants").status_code == 401
    response = client.get("/api/restaurants", headers={"X-User-Id": "not-a-uuid"})
    assert response.status_code == 401


def test_first_request_creates_user(
    client: TestClient, headers: dict[str, str], store: InMemoryStore, user_id
) -> None:
    response = client.get("/api/auth/user", headers=headers)

    assert response.status_code == 200
    assert response.json()["id"] == str(user_id)
    assert user_id in store.users


def test_upsert_profile(client: TestClient, headers: dict[str, str]) -> None:
    response = client.put(
        "/api/auth/user",
        json={"email": "u1@example.com", "firstName": "Uma"},
        headers=headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "u1@example.com"
    assert body["firstName"] == "Uma"
    assert body["lastName"] is None


def test_create_restaurant_returns_defaults(
    client: TestClient, headers: dict[str, str], user_id
) -> None:
    body = _create_restaurant(client, headers)

    assert body["name"] == "Luigi's"
    assert body["userId"] == str(user_id)
    assert body["isVisited"] is False
    assert body["checkInCount"] == 0
    assert body["rating"] == 0


def test_create_restaurant_validates_input(
    client: TestClient, headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/restaurants",
        json={"name": "Nowhere", "priceRange": "$$$$$"},
        headers=headers,
    )

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request data"
    fields = {error["loc"][-1] for error in body["errors"]}
    assert {"cuisine", "priceRange"} <= fields


def test_get_update_and_delete_restaurant(
    client: TestClient, headers: dict[str, str]
) -> None:
    created = _create_restaurant(client, headers)
    path = f"/api/restaurants/{created['id']}"

    assert client.get(path, headers=headers).json()["id"] == created["id"]

    patched = client.patch(path, json={"notes": "Try the gnocchi"}, headers=headers)
    assert patched.status_code == 200
    assert patched.json()["notes"] == "Try the gnocchi"
    assert patched.json()["cuisine"] == "Italian"

    assert client.delete(path, headers=headers).status_code == 204
    assert client.get(path, headers=headers).status_code == 404
    assert client.delete(path, headers=headers).status_code == 404


def test_restaurants_of_other_users_are_hidden(
    client: TestClient, headers: dict[str, str]
) -> None:
    created = _create_restaurant(client, headers)
    stranger = {"X-User-Id": str(uuid4())}

    response = client.get(f"/api/restaurants/{created['id']}", headers=stranger)

    assert response.status_code == 404
    assert response.json() == {"detail": "Restaurant not found"}
    assert client.get("/api/restaurants", headers=stranger).json() == []


def test_check_in_updates_restaurant_and_stats(
    client: TestClient, headers: dict[str, str]
) -> None:
    restaurant = _create_restaurant(client, headers)

    response = client.post(
        "/api/checkins",
        json={"restaurantId": restaurant["id"], "rating": 5},
        headers=headers,
    )

    assert response.status_code == 201
    assert response.json()["rating"] == 5
    updated = client.get(
        f"/api/restaurants/{restaurant['id']}", headers=headers
    ).json()
    assert updated["isVisited"] is True
    assert updated["checkInCount"] == 1
    check_ins = client.get(
        f"/api/restaurants/{restaurant['id']}/checkins", headers=headers
    ).json()
    assert len(check_ins) == 1
    stats = client.get("/api/stats", headers=headers).json()
    assert stats["averageRating"] == 5
    assert stats["visitedCount"] == 1
    assert stats["totalCheckIns"] == 1


def test_check_in_rejects_bad_rating_and_unknown_restaurant(
    client: TestClient, headers: dict[str, str]
) -> None:
    restaurant = _create_restaurant(client, headers)

    bad_rating = client.post(
        "/api/checkins",
        json={"restaurantId": restaurant["id"], "rating": 9},
        headers=headers,
    )
    unknown = client.post(
        "/api/checkins", json={"restaurantId": str(uuid4())}, headers=headers
    )

    assert bad_rating.status_code == 400
    assert unknown.status_code == 404


def test_list_flow(client: TestClient, headers: dict[str, str]) -> None:
    restaurant = _create_restaurant(client, headers)
    created = client.post("/api/lists", json={"name": "Date Night"}, headers=headers)
    assert created.status_code == 201
    restaurant_list = created.json()
    assert restaurant_list["icon"] == "utensils"
    assert restaurant_list["color"] == "primary"
    members_path = f"/api/lists/{restaurant_list['id']}/restaurants"

    added = client.post(
        members_path, json={"restaurantId": restaurant["id"]}, headers=headers
    )
    assert added.status_code == 201
    assert added.json()["restaurantId"] == restaurant["id"]

    members = client.get(members_path, headers=headers).json()
    assert [item["name"] for item in members] == ["Luigi's"]
    memberships = client.get("/api/list-restaurants", headers=headers).json()
    assert [item["listId"] for item in memberships] == [restaurant_list["id"]]

    client.delete(f"/api/restaurants/{restaurant['id']}", headers=headers)
    response = client.get(members_path, headers=headers)
    assert response.status_code == 200
    assert response.json() == []


def test_remove_restaurant_from_list(
    client: TestClient, headers: dict[str, str]
) -> None:
    restaurant = _create_restaurant(client, headers)
    restaurant_list = client.post(
        "/api/lists", json={"name": "Later"}, headers=headers
    ).json()
    members_path = f"/api/lists/{restaurant_list['id']}/restaurants"
    client.post(members_path, json={"restaurantId": restaurant["id"]}, headers=headers)

    removed = client.delete(f"{members_path}/{restaurant['id']}", headers=headers)
    missing = client.delete(f"{members_path}/{restaurant['id']}", headers=headers)

    assert removed.status_code == 204
    assert missing.status_code == 404
    assert missing.json() == {"detail": "Restaurant not found in list"}


def test_list_name_must_not_be_blank(
    client: TestClient, headers: dict[str, str]
) -> None:
    response = client.post("/api/lists", json={"name": "   "}, headers=headers)

    assert response.status_code == 400


def test_update_and_delete_list(client: TestClient, headers: dict[str, str]) -> None:
    restaurant_list = client.post(
        "/api/lists",
        json={"name": "Coffee", "icon": "coffee"},
        headers=headers,
    ).json()
    path = f"/api/lists/{restaurant_list['id']}"

    patched = client.patch(
        path,
        json={"name": " Coffee spots ", "description": "Mornings"},
        headers=headers,
    )
    assert patched.json()["name"] == "Coffee spots"
    assert patched.json()["icon"] == "coffee"

    assert client.delete(path, headers=headers).status_code == 204
    assert client.get(path, headers=headers).status_code == 404
    assert client.get("/api/lists", headers=headers).json() == []


def test_stats_top_cuisines(client: TestClient, headers: dict[str, str]) -> None:
    for cuisine in ("Italian", "Italian", "Thai"):
        _create_restaurant(client, headers, cuisine=cuisine)

    stats = client.get("/api/stats", headers=headers).json()

    assert stats["totalRestaurants"] == 3
    assert stats["wishlistCount"] == 3
    assert stats["averageRating"] == 0
    assert stats["topCuisines"] == [
        {"cuisine": "Italian", "count": 2},
        {"cuisine": "Thai", "count": 1},
    ]
