"""Shared fixtures for the User Registry API tests."""

from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from user_registry_api.app.core.store import UserStore, seed_users
from user_registry_api.app.main import create_app


@pytest.fixture
def store() -> UserStore:
    """A fresh store holding the three demo users."""
    return UserStore(seed_users())


@pytest.fixture
def client(store: UserStore) -> Iterator[TestClient]:
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
