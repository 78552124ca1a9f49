"""
Repartition statistics tests.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_repartition_counts_and_values(client: AsyncClient, marie, jean, headers, make_item, set_level):
    clock = await make_item(marie, value=300)
    table = await make_item(marie, value=150.5)
    lamp = await make_item(marie)
    gone = await make_item(marie, value=1000)

    await set_level(marie, clock["id"], "love")
    await set_level(marie, lamp["id"], "love")
    await set_level(marie, table["id"], "maybe")
    await set_level(jean, clock["id"], "love")
    await set_level(jean, table["id"], "no")
    await set_level(jean, gone["id"], "love")
    await client.delete(f"/api/items/{gone['id']}", headers=headers(jean))

    stats = (await client.get("/api/stats/repartition")).json()
    # equal loved value: by name
    assert [s["userName"] for s in stats] == ["Jean", "Marie"]
    jean_stats, marie_stats = stats

    assert marie_stats["userRole"] == "parent"
    assert marie_stats["love"] == {"itemCount": 2, "itemsWithValue": 1, "totalValue": 300.0}
    assert marie_stats["maybe"] == {"itemCount": 1, "itemsWithValue": 1, "totalValue": 150.5}
    assert jean_stats["love"] == {"itemCount": 1, "itemsWithValue": 1, "totalValue": 300.0}
    assert jean_stats["maybe"] == {"itemCount": 0, "itemsWithValue": 0, "totalValue": 0.0}


@pytest.mark.asyncio
async def test_repartition_orders_by_loved_value(client: AsyncClient, marie, jean, sophie, make_item, set_level):
    piano = await make_item(marie, value=900)
    vase = await make_item(marie, value=10)
    stool = await make_item(marie, value=500)

    await set_level(jean, vase["id"], "love")
    await set_level(marie, piano["id"], "love")
    await set_level(sophie, stool["id"], "maybe")

    stats = (await client.get("/api/stats/repartition")).json()
    assert [(s["userName"], s["love"]["totalValue"]) for s in stats] == [
        ("Marie", 900.0),
        ("Jean", 10.0),
        ("sophie", 0.0),
    ]


@pytest.mark.asyncio
async def test_repartition_skips_users_without_claims(client: AsyncClient, marie, jean, make_item, set_level):
    item = await make_item(marie, value=40)
    assert (await client.get("/api/stats/repartition")).json() == []

    # "no" is not a claim
    await set_level(jean, item["id"], "no")
    assert (await client.get("/api/stats/repartition")).json() == []

    await set_level(marie, item["id"], "maybe")
    stats = (await client.get("/api/stats/repartition")).json()
    assert stats == [
        {
            "userId": marie.id,
            "userName": "Marie",
            "userRole": "parent",
            "love": {"itemCount": 0, "itemsWithValue": 0, "totalValue": 0.0},
            "maybe": {"itemCount": 1, "itemsWithValue": 1, "totalValue": 40.0},
        }
    ]
