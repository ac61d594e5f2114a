from __future__ import annotations

import os
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ.setdefault("DB_URL", "sqlite:///./test.db")
    os.environ["ENVIRONMENT"] = "test"
    os.environ["JWT_SECRET"] = "test-secret"

    # Keep matching deterministic regardless of a local .env.
    os.environ["MATCH_STRATEGY"] = "substring"
    os.environ["PLACEHOLDER_MODE"] = "fixed"
    os.environ["SKILL_EXTRACTION_FALLBACK"] = "false"


@pytest.fixture()
def client() -> Any:
    from jobnet.database import Base, engine
    from jobnet.main import create_app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def register(client) -> Callable[..., dict[str, Any]]:
    """Register a user and return ``{"id", "token", "headers", "user"}``."""

    def _register(email: str, name: str = "Test User", password: str = "SecretPass123") -> dict[str, Any]:
        response = client.post("/api/auth/register", json={"email": email, "password": password, "name": name})
        assert response.status_code == 201, response.text
        body = response.json()
        return {
            "id": body["user"]["id"],
            "token": body["access_token"],
            "headers": {"Authorization": f"Bearer {body['access_token']}"},
            "user": body["user"],
        }

    return _register


@pytest.fixture()
def post_job(client) -> Callable[..., dict[str, Any]]:
    def _post_job(headers: dict[str, str], **overrides: Any) -> dict[str, Any]:
        payload = {
            "title": "Backend Developer",
            "description": "Build APIs with a collaborative team.",
            "company": "Acme",
            "location": "Remote",
            "type": "full-time",
            "skills": ["Python", "SQL"],
            "budget": {"min": 50000, "max": 80000, "currency": "USD"},
            "payment_verified": True,
        }
        payload.update(overrides)
        response = client.post("/api/jobs", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["job"]

    return _post_job


@pytest.fixture()
def connect(client) -> Callable[[dict[str, Any], dict[str, Any]], int]:
    """Create an accepted connection between two registered users."""

    def _connect(requester: dict[str, Any], recipient: dict[str, Any]) -> int:
        response = client.post(
            "/api/connections/request",
            json={"recipient_id": recipient["id"], "message": "hi"},
            headers=requester["headers"],
        )
        assert response.status_code == 201, response.text
        connection_id = response.json()["connection"]["id"]
        accepted = client.put(f"/api/connections/{connection_id}/accept", headers=recipient["headers"])
        assert accepted.status_code == 200, accepted.text
        return connection_id

    return _connect
