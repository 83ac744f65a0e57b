"""
Business logic for users.

``UserService`` sits between the request handlers and the record
store.  It turns request schemas into ``UserRecord`` objects, hashes
passwords before they reach the store and logs every mutation.  Each
method performs exactly one store operation; the request validation
stage has already run by the time a handler calls in here.
"""

import logging
from typing import List, Optional

from ..core.security import hash_password
from ..models.user import UserRecord
from ..schemas.user import UserCreate, UserPatch, UserPut
from .user_store import UserStore


logger = logging.getLogger(__name__)


class UserService:
    """Service for working with users.

    A single instance is created per application together with its
    store and is handed to handlers and validators through FastAPI
    dependencies, which lets tests build an isolated service around a
    fresh store.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    async def list_users(self) -> List[UserRecord]:
        return self.store.list()

    async def create_user(self, data: UserCreate) -> str:
        """Hash the password, store the new user and return its id."""
        record = UserRecord(
            email=data.email,
            password=hash_password(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            permission_level=data.permission_level,
        )
        user_id = self.store.add(record)
        logger.info("Registered user %s (%s)", user_id, data.email)
        return user_id

    async def get_user_by_id(self, user_id: str) -> Optional[UserRecord]:
        return self.store.get_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        return self.store.get_by_email(email)

    async def put_user(self, user_id: str, data: UserPut) -> None:
        """Replace every field of a stored user with the request body.

        Raises ``UserNotFoundError`` if the user does not exist.
        """
        record = UserRecord(
            id=user_id,
            email=data.email,
            password=hash_password(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            permission_level=data.permission_level,
        )
        self.store.replace_by_id(user_id, record)
        logger.info("Replaced user %s", user_id)

    async def patch_user(self, user_id: str, data: UserPatch) -> None:
        """Apply the fields present in ``data`` to a stored user.

        A ``null`` password is ignored rather than clearing the stored
        hash.  Raises ``UserNotFoundError`` if the user does not exist.
        """
        changes = data.model_dump(exclude_unset=True)
        if "password" in changes:
            password = changes.pop("password")
            if password is not None:
                changes["password"] = hash_password(password)
        self.store.patch_by_id(user_id, changes)
        logger.info("Patched user %s (%s)", user_id, ", ".join(sorted(changes)) or "no fields")

    async def delete_user(self, user_id: str) -> None:
        """Remove a user.  Raises ``UserNotFoundError`` if absent."""
        self.store.remove_by_id(user_id)
        logger.info("Deleted user %s", user_id)
