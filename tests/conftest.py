"""
Todo Auth API - Test Configuration

Shared fixtures. Every test gets its own AppState and application instance.
"""

from datetime import datetime, timezone, timedelta

import pytest
from fastapi.testclient import TestClient

from todo_api.auth.hashing import PasswordHasher
from todo_api.main import create_app
from todo_api.state import AppState

# Minimum bcrypt work factor keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def app_state() -> AppState:
    """A fresh, isolated set of stores for one test."""
    return AppState(hasher=PasswordHasher(rounds=TEST_BCRYPT_ROUNDS))


@pytest.fixture
def app(app_state):
    return create_app(app_state)


@pytest.fixture
def client(app):
    """Create test client bound to the per-test application."""
    return TestClient(app)


@pytest.fixture
def registered_user(client):
    """Register a test user and return credentials."""
    credentials = {"username": "testuser", "password": "testpassword123"}
    client.post("/register", json=credentials)
    return credentials


@pytest.fixture
def auth_token(client, registered_user):
    """Get an auth token for the registered user."""
    response = client.post("/login", json=registered_user)
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


# Time control fixtures for deterministic token expiry testing
class FrozenClock:
    """A clock that returns a fixed time for deterministic testing."""

    def __init__(self, frozen_time: datetime):
        self._frozen_time = frozen_time

    def __call__(self) -> datetime:
        return self._frozen_time

    def advance(self, delta: timedelta) -> None:
        self._frozen_time += delta


@pytest.fixture
def frozen_now() -> datetime:
    """A fixed 'now' time for testing."""
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(frozen_now) -> FrozenClock:
    """A controllable clock for token validity testing."""
    return FrozenClock(frozen_now)
