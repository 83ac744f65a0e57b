"""
In‑memory record store for users.

``UserStore`` owns the collection of ``UserRecord`` objects and the
CRUD mechanics over it.  Records are kept in insertion order and every
lookup is a linear scan, which is fine for a directory that lives in
process memory and disappears on restart.

Records are copied on the way in and on the way out, so callers can
never mutate stored state behind the store's back.  A single lock
serializes access because FastAPI may call into the store from its
worker thread pool.
"""

import logging
import secrets
import threading
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from ..core.config import settings
from ..core.errors import UserNotFoundError
from ..models.user import PATCHABLE_FIELDS, UserRecord


logger = logging.getLogger(__name__)


class UserStore:
    """Ordered in‑memory collection of user records keyed by a generated id."""

    def __init__(self, id_bytes: Optional[int] = None) -> None:
        self._users: List[UserRecord] = []
        self._issued_ids: set[str] = set()
        self._id_bytes = id_bytes or settings.user_id_bytes
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _new_id(self) -> str:
        # Ids of removed users are never handed out again.
        while True:
            user_id = secrets.token_urlsafe(self._id_bytes)
            if user_id not in self._issued_ids:
                self._issued_ids.add(user_id)
                return user_id

    def _index_of(self, user_id: str) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise UserNotFoundError(user_id)

    def add(self, record: UserRecord) -> str:
        """Store a copy of ``record`` under a freshly generated id.

        Any id already set on ``record`` is ignored.  Returns the new id.
        """
        with self._lock:
            user_id = self._new_id()
            self._users.append(replace(record, id=user_id))
        logger.debug("Stored user %s", user_id)
        return user_id

    def list(self) -> List[UserRecord]:
        with self._lock:
            return [replace(user) for user in self._users]

    def get_by_id(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            for user in self._users:
                if user.id == user_id:
                    return replace(user)
        return None

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        with self._lock:
            for user in self._users:
                if user.email is not None and user.email == email:
                    return replace(user)
        return None

    def replace_by_id(self, user_id: str, record: UserRecord) -> None:
        """Replace the whole record stored under ``user_id``.

        The stored record keeps its position and its id; every other
        field is taken from ``record``.  Raises ``UserNotFoundError``
        if no record has that id.
        """
        with self._lock:
            index = self._index_of(user_id)
            self._users[index] = replace(record, id=user_id)

    def patch_by_id(self, user_id: str, changes: Mapping[str, Any]) -> None:
        """Overwrite the patchable fields present in ``changes``.

        Keys outside ``PATCHABLE_FIELDS`` (including ``id`` and
        ``email``) are ignored.  Raises ``UserNotFoundError`` if no
        record has that id.
        """
        allowed: Dict[str, Any] = {
            key: value for key, value in changes.items() if key in PATCHABLE_FIELDS
        }
        ignored = set(changes) - set(allowed)
        if ignored:
            logger.debug("Ignoring non-patchable fields %s for user %s", sorted(ignored), user_id)
        with self._lock:
            index = self._index_of(user_id)
            self._users[index] = replace(self._users[index], **allowed)

    def remove_by_id(self, user_id: str) -> None:
        """Remove the record stored under ``user_id``.

        Raises ``UserNotFoundError`` if no record has that id.
        """
        with self._lock:
            index = self._index_of(user_id)
            del self._users[index]
        logger.debug("Removed user %s", user_id)
