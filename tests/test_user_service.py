"""Tests for the user service layer."""

from __future__ import annotations

import itertools
import uuid

import pytest

from user_registry_api.app.core.exceptions import UserNotFoundError
from user_registry_api.app.core.store import UserStore
from user_registry_api.app.schemas.user import UserCreate, UserUpdate
from user_registry_api.app.services.user_service import UserService, generate_user_id


def test_generate_user_id_is_uuid4() -> None:
    value = generate_user_id()
    assert uuid.UUID(value).version == 4
    assert value != generate_user_id()


class TestUserService:
    """Test cases for UserService."""

    @pytest.fixture
    def service(self, store: UserStore) -> UserService:
        counter = itertools.count(100)
        return UserService(store, id_factory=lambda: f"id-{next(counter)}")

    def test_list_users(self, service: UserService) -> None:
        users = service.list_users()
        assert [u.name for u in users] == ["John Doe", "Jane Smith", "Sam Johnson"]

    def test_create_user_assigns_generated_id(self, service: UserService, store: UserStore) -> None:
        data = UserCreate.model_validate({"id": "client-id", "name": "X", "email": "x@x.com"})

        user = service.create_user(data)

        assert user.id == "id-100"
        assert store.get("id-100") == {"id": "id-100", "name": "X", "email": "x@x.com"}

    def test_create_user_without_fields(self, service: UserService) -> None:
        user = service.create_user(UserCreate())
        assert user.name is None
        assert user.email is None

    def test_update_only_applies_present_fields(self, service: UserService) -> None:
        user = service.update_user("1", UserUpdate(name="Johnny"))

        assert user.id == "1"
        assert user.name == "Johnny"
        assert user.email == "john.doe@example.com"

    def test_update_ignores_id_in_body(self, service: UserService) -> None:
        data = UserUpdate.model_validate({"id": "hijack", "email": "new@example.com"})

        user = service.update_user("2", data)

        assert user.id == "2"
        assert user.email == "new@example.com"

    def test_get_missing_user(self, service: UserService) -> None:
        with pytest.raises(UserNotFoundError):
            service.get_user("missing")

    def test_delete_user(self, service: UserService, store: UserStore) -> None:
        service.delete_user("3")
        assert len(store) == 2
