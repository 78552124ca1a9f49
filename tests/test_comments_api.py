"""
Comment API tests - chronological thread, author-only deletion.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_and_list_comments(client: AsyncClient, marie, jean, headers, make_item):
    item = await make_item(marie)
    url = f"/api/items/{item['id']}/comments"

    first = await client.post(url, headers=headers(marie), json={"text": "  C'était à grand-mère  "})
    assert first.status_code == 201
    assert first.json()["text"] == "C'était à grand-mère"
    assert first.json()["user"] == {"id": marie.id, "name": "Marie", "role": "parent"}
    assert first.json()["isSystem"] is False

    await client.post(url, headers=headers(jean), json={"text": "Je m'en souviens"})

    comments = (await client.get(url)).json()
    assert [c["user"]["name"] for c in comments] == ["Marie", "Jean"]
    assert [c["userId"] for c in comments] == [marie.id, jean.id]


@pytest.mark.asyncio
async def test_comment_validation(client: AsyncClient, marie, headers, make_item):
    item = await make_item(marie)
    url = f"/api/items/{item['id']}/comments"
    assert (await client.post(url, headers=headers(marie), json={"text": "   "})).status_code == 400
    assert (await client.post(url, json={"text": "Bonjour"})).status_code == 401
    assert (await client.post("/api/items/999/comments", headers=headers(marie), json={"text": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_only_author_deletes_comment(client: AsyncClient, marie, jean, headers, make_item):
    item = await make_item(marie)
    url = f"/api/items/{item['id']}/comments"
    comment = (await client.post(url, headers=headers(marie), json={"text": "À garder"})).json()

    response = await client.delete(f"{url}/{comment['id']}", headers=headers(jean))
    assert response.status_code == 403

    response = await client.delete(f"{url}/{comment['id']}", headers=headers(marie))
    assert response.status_code == 204
    assert (await client.get(url)).json() == []

    response = await client.delete(f"{url}/{comment['id']}", headers=headers(marie))
    assert response.status_code == 404
