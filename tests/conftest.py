import os

# Must be set before roomchat.config.settings is imported
os.environ.setdefault(
    "SERVICE_AUTH_SECRET", "test-secret-for-roomchat-tests-0123456789abcdef"
)
os.environ.setdefault("STORAGE_READ_RETRY_WAIT_SECONDS", "0")

import pytest
from dishka import make_async_container
from fastapi.testclient import TestClient

from roomchat.fastapi_app import create_fastapi_app
from roomchat.setup.ioc import AppProvider
from tests.fakes import (
    InMemoryMessageRepository,
    InMemoryRoomRepository,
    InMemoryStorageProvider,
    InMemoryStore,
)
from tests.jwt_generation import generate_jwt_token

# Seeded users
ALICE, BOB, CAROL, MALLORY = 7, 12, 31, 99


@pytest.fixture()
def store():
    store = InMemoryStore()
    store.add_user(ALICE, "Alice", "Martin", profile_image="https://cdn.example.com/alice.jpg")
    store.add_user(BOB, "Bob", "Haddad")
    store.add_user(CAROL, "Carol", "Ben Salah", role="advisor")
    store.add_user(MALLORY, "Mallory", "X", is_banned=True)
    return store


@pytest.fixture()
def room_repo(store):
    return InMemoryRoomRepository(store)


@pytest.fixture()
def message_repo(store):
    return InMemoryMessageRepository(store)


@pytest.fixture()
def app(store):
    """Create a FastAPI app backed by the in-memory store for each test."""
    container = make_async_container(AppProvider(), InMemoryStorageProvider(store))
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    """Authentication headers factory with a valid JWT token for a user."""

    def _headers(user_id: int = ALICE) -> dict:
        return {"Authorization": f"Bearer {generate_jwt_token(user_id)}"}

    return _headers
