from __future__ import annotations

import os

# Settings are read at import time, so the test environment goes first.
os.environ["JWT_SECRET"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RESEED_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient

from review_api.db.base import Base
from review_api.db.session import engine
from review_api.main import app


@pytest.fixture(autouse=True)
def fresh_schema():
    """Every test starts against empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register(client, username: str, password: str = "password1") -> tuple[str, str]:
    res = client.post("/api/users", json={"username": username, "password": password})
    assert res.status_code == 200, res.text
    body = res.json()
    return body["user"]["id"], body["token"]


def make_item(client, name: str = "Widget A", description: str | None = "A widget") -> str:
    res = client.post("/api/items", json={"name": name, "description": description})
    assert res.status_code == 200, res.text
    return res.json()["id"]


def make_review(client, item_id: str, user_id: str, rating: int = 4, text: str = "Solid") -> dict:
    res = client.post(
        f"/api/items/{item_id}/reviews",
        json={"user_id": user_id, "rating": rating, "text": text},
    )
    assert res.status_code == 201, res.text
    return res.json()


def make_comment(client, token: str, item_id: str, review_id: str, user_id: str, text: str = "Agreed") -> dict:
    res = client.post(
        f"/api/items/{item_id}/reviews/{review_id}/comments",
        json={"user_id": user_id, "text": text},
        headers=auth(token),
    )
    assert res.status_code == 201, res.text
    return res.json()
