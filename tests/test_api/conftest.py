"""Pytest configuration for API tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from transcompare.api.routes import router
from transcompare.services.session_store import session_store


@pytest.fixture
def test_app():
    """Create a test FastAPI app without lifespan dependencies."""
    app = FastAPI()
    app.include_router(router)
    return app


@pytest.fixture
def client(test_app):
    """Create a test client with an empty session store."""
    session_store.clear()
    with TestClient(test_app, raise_server_exceptions=False) as client:
        yield client
    session_store.clear()


@pytest.fixture
def session_id(client, locales_root):
    """Load the shared translation root and return the session id."""
    response = client.post("/sessions", json={"root": str(locales_root)})
    assert response.status_code == 200
    return response.json()["id"]
