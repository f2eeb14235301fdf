"""
In‑memory user store.

``UserStore`` keeps user records as plain dictionaries in a list, in
insertion order.  Lookups are linear scans by ``id``.  There is no
persistence: the store lives and dies with the application instance
that owns it (see ``main.create_app``).

Every operation takes a single lock so concurrent requests served from
the thread pool observe each store call as atomic.  Records handed out
by the store are copies; callers cannot mutate stored state behind the
store's back.
"""

from __future__ import annotations

import threading
from typing import Any, Dict, Iterable, List, Optional

from .exceptions import UserNotFoundError


Record = Dict[str, Any]


def seed_users() -> List[Record]:
    """Return the demo users the service starts with."""
    return [
        {"id": "1", "name": "John Doe", "email": "john.doe@example.com"},
        {"id": "2", "name": "Jane Smith", "email": "jane.smith@example.com"},
        {"id": "3", "name": "Sam Johnson", "email": "sam.johnson@example.com"},
    ]


class UserStore:
    """Ordered, lock‑protected collection of user records."""

    def __init__(self, records: Optional[Iterable[Record]] = None) -> None:
        self._lock = threading.Lock()
        self._records: List[Record] = [dict(r) for r in records or ()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _index_of(self, user_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.get("id") == user_id:
                return index
        raise UserNotFoundError(user_id)

    def list(self) -> List[Record]:
        with self._lock:
            return [dict(r) for r in self._records]

    def get(self, user_id: str) -> Record:
        """Return the first record whose id equals ``user_id``.

        Raises ``UserNotFoundError`` when no such record exists.
        """
        with self._lock:
            return dict(self._records[self._index_of(user_id)])

    def insert(self, record: Record) -> Record:
        """Append ``record`` to the end of the store.

        No uniqueness check is performed; callers are responsible for
        assigning a fresh id.
        """
        with self._lock:
            self._records.append(dict(record))
            return dict(record)

    def update(self, user_id: str, fields: Record) -> Record:
        """Overlay ``fields`` on an existing record and return the result.

        The record keeps its position and its original ``id`` even if
        ``fields`` carries one.
        """
        with self._lock:
            index = self._index_of(user_id)
            current = self._records[index]
            updated = {**current, **fields, "id": current["id"]}
            self._records[index] = updated
            return dict(updated)

    def delete(self, user_id: str) -> None:
        with self._lock:
            del self._records[self._index_of(user_id)]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
