"""
Derived item views - conflicts, to-review, love and per-user preference filters.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_family_conflict_scenario(client: AsyncClient, photo):
    marie = (await client.post("/api/users", json={"name": "Marie", "role": "parent"})).json()
    assert marie["id"] == 1
    item = (await client.post("/api/items", headers={"X-User-Id": "1"}, json={"photo": photo})).json()
    assert item["number"] == 1
    assert len(item["photos"]) == 1

    await client.post(f"/api/items/{item['id']}/preferences", headers={"X-User-Id": "1"}, json={"level": "love"})
    comments = (await client.get(f"/api/items/{item['id']}/comments")).json()
    assert comments[-1]["text"] == "Marie a un coup de cœur !"

    jean = (await client.post("/api/users", json={"name": "Jean", "role": "parent"})).json()
    assert jean["id"] == 2
    await client.post(f"/api/items/{item['id']}/preferences", headers={"X-User-Id": "2"}, json={"level": "love"})

    conflicts = (await client.get("/api/items", params={"filter": "conflicts"})).json()
    assert len(conflicts) == 1
    assert conflicts[0]["id"] == item["id"]
    assert conflicts[0]["lovers"] == ["Jean", "Marie"]
    assert conflicts[0]["loveCount"] == 2


@pytest.mark.asyncio
async def test_conflicts_only_items_with_two_lovers(client: AsyncClient, marie, jean, sophie, make_item, set_level):
    single = await make_item(marie)
    pair = await make_item(marie)
    triple = await make_item(marie)
    mixed = await make_item(marie)

    await set_level(marie, single["id"], "love")
    for user in (marie, sophie):
        await set_level(user, pair["id"], "love")
    for user in (marie, jean, sophie):
        await set_level(user, triple["id"], "love")
    await set_level(marie, mixed["id"], "love")
    await set_level(jean, mixed["id"], "maybe")

    conflicts = (await client.get("/api/items", params={"filter": "conflicts"})).json()
    assert [c["id"] for c in conflicts] == [triple["id"], pair["id"]]
    assert conflicts[0]["lovers"] == ["Jean", "Marie", "sophie"]
    assert conflicts[0]["loveCount"] == 3
    assert conflicts[1]["lovers"] == ["Marie", "sophie"]


@pytest.mark.asyncio
async def test_conflict_disappears_when_a_lover_changes_mind(client: AsyncClient, marie, jean, make_item, set_level):
    item = await make_item(marie)
    await set_level(marie, item["id"], "love")
    await set_level(jean, item["id"], "love")
    await set_level(jean, item["id"], "maybe")

    assert (await client.get("/api/items", params={"filter": "conflicts"})).json() == []


@pytest.mark.asyncio
async def test_to_review_shrinks_to_empty(client: AsyncClient, marie, jean, headers, make_item, set_level):
    items = [await make_item(marie) for _ in range(3)]
    await set_level(jean, items[0]["id"], "love")

    def to_review():
        return client.get("/api/items", params={"filter": "to-review"}, headers=headers(marie))

    assert [i["number"] for i in (await to_review()).json()] == [1, 2, 3]

    await set_level(marie, items[1]["id"], "no")
    assert [i["number"] for i in (await to_review()).json()] == [1, 3]

    await set_level(marie, items[0]["id"], "maybe")
    await set_level(marie, items[2]["id"], "love")
    assert (await to_review()).json() == []


@pytest.mark.asyncio
async def test_caller_filters_require_identity(client: AsyncClient):
    for name in ("to-review", "my-love"):
        response = await client.get("/api/items", params={"filter": name})
        assert response.status_code == 401


@pytest.mark.asyncio
async def test_love_filters(client: AsyncClient, marie, jean, headers, make_item, set_level):
    a = await make_item(marie)
    b = await make_item(marie)
    await set_level(marie, a["id"], "love")
    await set_level(marie, b["id"], "maybe")
    await set_level(jean, b["id"], "love")

    mine = (await client.get("/api/items", params={"filter": "my-love"}, headers=headers(marie))).json()
    assert [i["id"] for i in mine] == [a["id"]]

    jeans = (await client.get("/api/items", params={"filter": "user-love", "userId": jean.id})).json()
    assert [i["id"] for i in jeans] == [b["id"]]


@pytest.mark.asyncio
async def test_user_preferences_filter(client: AsyncClient, marie, jean, make_item, set_level):
    a = await make_item(marie)
    b = await make_item(marie)
    await make_item(marie)
    await set_level(jean, a["id"], "no")
    await set_level(jean, b["id"], "love")

    data = (await client.get("/api/items", params={"filter": "user-preferences", "userId": jean.id})).json()
    assert [(i["number"], i["userPreference"]) for i in data] == [(1, "no"), (2, "love")]


@pytest.mark.asyncio
async def test_user_filters_validate_user(client: AsyncClient):
    assert (await client.get("/api/items", params={"filter": "user-love"})).status_code == 400
    assert (await client.get("/api/items", params={"filter": "user-love", "userId": 42})).status_code == 404


@pytest.mark.asyncio
async def test_filters_ignore_deleted_items(client: AsyncClient, marie, jean, headers, make_item, set_level):
    item = await make_item(marie)
    await set_level(marie, item["id"], "love")
    await set_level(jean, item["id"], "love")
    await client.delete(f"/api/items/{item['id']}", headers=headers(marie))

    assert (await client.get("/api/items", params={"filter": "conflicts"})).json() == []
    assert (await client.get("/api/items", params={"filter": "my-love"}, headers=headers(marie))).json() == []
    assert (await client.get("/api/items", params={"filter": "to-review"}, headers=headers(marie))).json() == []
