"""Store failures reach clients only as taxonomy errors."""
from __future__ import annotations

from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError, OperationalError

from review_api.db.session import get_db
from review_api.main import app


def _broken_db(exc):
    def _override():
        db = MagicMock()
        db.query.side_effect = exc
        db.get.side_effect = exc
        yield db
    return _override


def test_unexpected_store_failure_is_opaque_500(client):
    app.dependency_overrides[get_db] = _broken_db(
        OperationalError("SELECT * FROM items", {}, Exception("disk I/O error at /var/lib/db"))
    )

    res = client.get("/api/items")
    assert res.status_code == 500
    assert res.json()["error"]["message"] == "Server error"
    assert "disk" not in res.text


def test_integrity_failure_is_conflict(client):
    app.dependency_overrides[get_db] = _broken_db(
        IntegrityError("INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.username"))
    )

    res = client.post("/api/users", json={"username": "aaron", "password": "password1"})
    assert res.status_code == 409
    assert "UNIQUE" not in res.text


def test_validation_errors_are_400_with_details(client):
    res = client.post("/api/items", json={})
    body = res.json()["error"]

    assert res.status_code == 400
    assert body["message"] == "Validation error"
    assert body["details"][0]["loc"] == ["body", "name"]


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "OK"}
