"""Motorcycle endpoints: listings, loves, comments and maintenance."""

import pytest
from httpx import AsyncClient

MONSTER = {
    "make": "Ducati",
    "model": "Monster",
    "year": 2021,
    "price": 9500,
    "type": "Naked",
    "engine_capacity": "937cc",
    "status": "Available",
}


async def _create_motorcycle(client: AsyncClient, user: dict, **overrides: object) -> dict:
    response = await client.post("/api/motorcycles", json={**MONSTER, **overrides}, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_with_optional_fields(client: AsyncClient, alice: dict) -> None:
    bike = await _create_motorcycle(
        client,
        alice,
        mileage=12000,
        color="Red",
        accessories=["Top box", "Heated grips"],
        insurance={"provider": "MotoCover", "policy_number": "P-1", "valid_from": "2024-01-01"},
        social={"instagram": "https://instagram.com/redmonster", "x": ""},
    )
    assert bike["user"] == alice["id"]
    assert bike["year"] == 2021
    assert bike["price"] == 9500
    assert bike["color"] == "Red"
    assert bike["accessories"] == ["Top box", "Heated grips"]
    assert bike["insurance"]["provider"] == "MotoCover"
    assert bike["insurance"]["valid_from"] == "2024-01-01"
    assert bike["social"] == {"instagram": "https://instagram.com/redmonster"}
    assert bike["loves"] == []
    assert bike["maintenance_history"] == []


@pytest.mark.asyncio
async def test_create_missing_required_field(client: AsyncClient, alice: dict) -> None:
    body = {k: v for k, v in MONSTER.items() if k != "make"}
    response = await client.post("/api/motorcycles", json=body, headers=alice["headers"])
    assert response.status_code == 400
    assert any(e["param"] == "make" for e in response.json()["errors"])


@pytest.mark.asyncio
async def test_list_newest_first(client: AsyncClient, alice: dict) -> None:
    older = await _create_motorcycle(client, alice, model="Scrambler")
    newer = await _create_motorcycle(client, alice, model="Panigale")
    response = await client.get("/api/motorcycles", headers=alice["headers"])
    assert [m["id"] for m in response.json()] == [newer["id"], older["id"]]


@pytest.mark.asyncio
async def test_love_unlove_delete_lifecycle(client: AsyncClient, alice: dict, bob: dict) -> None:
    bike = await _create_motorcycle(client, alice)

    loved = await client.put(f"/api/motorcycles/love/{bike['id']}", headers=bob["headers"])
    assert loved.status_code == 200
    assert [r["user"] for r in loved.json()] == [bob["id"]]

    unloved = await client.put(f"/api/motorcycles/unlove/{bike['id']}", headers=bob["headers"])
    assert unloved.status_code == 200
    assert unloved.json() == []

    deleted = await client.delete(f"/api/motorcycles/{bike['id']}", headers=alice["headers"])
    assert deleted.status_code == 200
    assert deleted.json() == {"detail": "Motorcycle deleted successfully"}

    gone = await client.get(f"/api/motorcycles/{bike['id']}", headers=alice["headers"])
    assert gone.status_code == 404
    assert gone.json()["detail"] == "Motorcycle not found"


@pytest.mark.asyncio
async def test_double_love_rejected(client: AsyncClient, alice: dict, bob: dict) -> None:
    bike = await _create_motorcycle(client, alice)
    await client.put(f"/api/motorcycles/love/{bike['id']}", headers=bob["headers"])
    again = await client.put(f"/api/motorcycles/love/{bike['id']}", headers=bob["headers"])
    assert again.status_code == 400
    assert again.json()["detail"] == "User already loved this motorcycle"

    fetched = await client.get(f"/api/motorcycles/{bike['id']}", headers=bob["headers"])
    assert len(fetched.json()["loves"]) == 1


@pytest.mark.asyncio
async def test_unlove_without_love(client: AsyncClient, alice: dict) -> None:
    bike = await _create_motorcycle(client, alice)
    response = await client.put(f"/api/motorcycles/unlove/{bike['id']}", headers=alice["headers"])
    assert response.status_code == 400
    assert response.json()["detail"] == "User has not loved motorcycle yet"


@pytest.mark.asyncio
async def test_delete_by_non_owner(client: AsyncClient, alice: dict, bob: dict) -> None:
    bike = await _create_motorcycle(client, alice)
    response = await client.delete(f"/api/motorcycles/{bike['id']}", headers=bob["headers"])
    assert response.status_code == 401
    assert response.json()["detail"] == "User not authorized to delete this motorcycle posting"

    still_there = await client.get(f"/api/motorcycles/{bike['id']}", headers=bob["headers"])
    assert still_there.status_code == 200


@pytest.mark.asyncio
async def test_maintenance_records(client: AsyncClient, alice: dict, bob: dict) -> None:
    bike = await _create_motorcycle(client, alice)
    url = f"/api/motorcycles/maintenance/{bike['id']}"

    await client.put(url, json={"service_type": "Oil change", "date": "2024-03-01"}, headers=alice["headers"])
    response = await client.put(
        url,
        json={"service_type": "Chain and sprockets", "date": "2024-06-15", "description": "DID 520"},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    history = response.json()["maintenance_history"]
    assert [r["service_type"] for r in history] == ["Chain and sprockets", "Oil change"]
    assert history[0]["date"] == "2024-06-15"
    assert history[0]["description"] == "DID 520"

    forbidden = await client.put(url, json={"service_type": "Tyres", "date": "2024-07-01"}, headers=bob["headers"])
    assert forbidden.status_code == 401


@pytest.mark.asyncio
async def test_comments(client: AsyncClient, alice: dict, bob: dict) -> None:
    bike = await _create_motorcycle(client, alice)
    url = f"/api/motorcycles/comment/{bike['id']}"

    response = await client.post(url, json={"text": "Is it still available?"}, headers=bob["headers"])
    assert response.status_code == 200
    comment = response.json()[0]
    assert comment["user"] == bob["id"]
    assert comment["name"] == "Bob Biker"

    forbidden = await client.delete(f"{url}/{comment['id']}", headers=alice["headers"])
    assert forbidden.status_code == 401

    response = await client.delete(f"{url}/{comment['id']}", headers=bob["headers"])
    assert response.status_code == 200
    assert response.json() == []
