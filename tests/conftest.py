# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.

Every test gets a fresh in-memory SQLite database. The app is built
around it with create_app(engine=...) so startup creates the tables.
"""

import itertools
from collections import namedtuple
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

from core import store
from core.rate_limiter import reset_rate_limits
from database import build_engine
from main import create_app
from models.enums import Role


PASSWORD = "hunter22"

Actor = namedtuple("Actor", ["id", "username", "role", "headers"])

_usernames = itertools.count(1)


@pytest.fixture(scope="function")
def engine():
    """One in-memory database shared by every connection in the test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def app(engine):
    """Create a test FastAPI application instance."""
    return create_app(engine=engine)


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(engine, client) -> Generator[Session, None, None]:
    """Direct store access; depends on client so the tables exist."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def make_user(db):
    """Insert a user straight through the store."""

    def _make_user(role: Role = Role.IT, username: str = None, is_active: bool = True, password: str = PASSWORD):
        username = username or f"{Role(role).value.lower()}_{next(_usernames)}"
        return store.users.create(db, {
            "username": username,
            "password": password,
            "role": Role(role).value,
            "department": Role(role).value,
            "is_active": is_active,
        })

    return _make_user


@pytest.fixture
def login(client):
    """Log in and return bearer headers."""

    def _login(username: str, password: str = PASSWORD) -> dict:
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['accessToken']}"}

    return _login


@pytest.fixture
def actor(make_user, login):
    """Factory: a logged-in user of the given role."""

    def _actor(role: Role = Role.IT) -> Actor:
        user = make_user(role)
        return Actor(user.id, user.username, Role(role), login(user.username))

    return _actor


@pytest.fixture
def citizen_payload():
    """Minimal valid citizen body (camelCase, as the web client sends it)."""
    return {
        "firstName": "Tony",
        "lastName": "Montana",
        "dateOfBirth": "1940-04-25",
        "phone": "305-555-0100",
        "email": "tony@example.com",
        "address": "Coconut Grove",
    }


@pytest.fixture
def create_citizen(client, actor, citizen_payload):
    """Create a citizen through the API as a DMV clerk and return its JSON."""
    clerk = actor(Role.DMV)

    def _create_citizen(**overrides) -> dict:
        response = client.post("/api/citizens", json={**citizen_payload, **overrides}, headers=clerk.headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create_citizen


@pytest.fixture(autouse=True)
def reset_limits():
    """Reset login throttling before each test."""
    reset_rate_limits()
    yield
    reset_rate_limits()
