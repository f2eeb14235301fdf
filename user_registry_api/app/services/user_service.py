"""
Business logic for users.

``UserService`` sits between the HTTP handlers and the ``UserStore``.
It converts between API schemas and stored records, assigns ids to new
users and logs every mutation.
"""

import logging
import uuid
from typing import Callable, List

from ..core.store import UserStore
from ..schemas.user import UserCreate, UserRead, UserUpdate


logger = logging.getLogger(__name__)


def generate_user_id() -> str:
    """Return a fresh random UUID4 as a string."""
    return str(uuid.uuid4())


class UserService:
    """User operations on top of an in-memory store.

    The store and the id factory are injected so that tests can run
    against a fresh store and predictable ids.
    """

    def __init__(self, store: UserStore, id_factory: Callable[[], str] = generate_user_id) -> None:
        self.store = store
        self.id_factory = id_factory

    def list_users(self) -> List[UserRead]:
        return [UserRead(**record) for record in self.store.list()]

    def get_user(self, user_id: str) -> UserRead:
        """Return a single user; raises ``UserNotFoundError`` if absent."""
        return UserRead(**self.store.get(user_id))

    def create_user(self, data: UserCreate) -> UserRead:
        """Store a new user under a freshly generated id.

        Any ``id`` the client sent has already been dropped by the
        schema; the generated id is the only one the record ever has.
        """
        record = {**data.model_dump(), "id": self.id_factory()}
        created = self.store.insert(record)
        logger.info("Created user %s", created["id"])
        return UserRead(**created)

    def update_user(self, user_id: str, data: UserUpdate) -> UserRead:
        """Apply the fields present in ``data`` to an existing user."""
        changes = data.changes()
        updated = self.store.update(user_id, changes)
        logger.info("Updated user %s (fields: %s)", user_id, ", ".join(sorted(changes)) or "none")
        return UserRead(**updated)

    def delete_user(self, user_id: str) -> None:
        self.store.delete(user_id)
        logger.info("Deleted user %s", user_id)
