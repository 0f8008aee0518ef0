from __future__ import annotations

import uuid

from conftest import make_item


def test_create_item(client):
    res = client.post("/api/items", json={"name": "Test Item", "description": "Test Description"})

    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Test Item"
    assert body["description"] == "Test Description"
    uuid.UUID(body["id"])


def test_create_item_without_description(client):
    res = client.post("/api/items", json={"name": "Bare"})
    assert res.status_code == 200
    assert res.json()["description"] is None


def test_create_item_requires_name(client):
    assert client.post("/api/items", json={"description": "no name"}).status_code == 400
    assert client.post("/api/items", json={"name": "   "}).status_code == 400
    assert client.get("/api/items").json() == []


def test_get_item(client):
    item_id = make_item(client, "Fetch Item")
    res = client.get(f"/api/items/{item_id}")

    assert res.status_code == 200
    assert res.json()["id"] == item_id


def test_get_missing_item_is_not_found(client):
    for item_id in (uuid.uuid4(), "99999"):
        res = client.get(f"/api/items/{item_id}")
        assert res.status_code == 404
        assert res.json()["error"]["message"] == "Item not found"


def test_list_items_returns_every_item(client):
    make_item(client, "Widget A")
    make_item(client, "Gadget B")

    res = client.get("/api/items")
    assert res.status_code == 200
    assert sorted(i["name"] for i in res.json()) == ["Gadget B", "Widget A"]


def test_responses_carry_request_id(client):
    res = client.get(f"/api/items/{uuid.uuid4()}")
    assert res.headers["X-Request-Id"] == res.json()["error"]["request_id"]
