"""
Business logic for user records.

``UserService`` maps each API operation to exactly one storage gateway
call.  Store failures are logged here with their cause and re-raised as
``ServiceError`` carrying a fixed message, so the caller never sees
store internals.  A missing record surfaces as ``RecordNotFound``.
"""

import logging
from typing import List

from ..core.exceptions import RecordNotFound, ServiceError, StoreError
from ..core.storage import UserTableGateway, new_record_id
from ..schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Create, read, update and delete users through a gateway."""

    def __init__(self, gateway: UserTableGateway):
        self.gateway = gateway

    def create_user(self, data: UserCreate) -> UserRead:
        """Store a new user under a freshly generated id."""
        record = {"id": new_record_id(), "name": data.name, "email": data.email}
        try:
            stored = self.gateway.put(record)
        except StoreError as exc:
            logger.error("Error creating user: %s", exc)
            raise ServiceError("Error creating user") from exc
        logger.info("Created user %s", stored["id"])
        return UserRead(**stored)

    def list_users(self) -> List[UserRead]:
        try:
            records = self.gateway.scan_all()
        except StoreError as exc:
            logger.error("Error fetching users: %s", exc)
            raise ServiceError("Error fetching users") from exc
        return [UserRead(**record) for record in records]

    def get_user(self, user_id: str) -> UserRead:
        """Return one user; raises ``RecordNotFound`` if absent."""
        try:
            record = self.gateway.get_by_id(user_id)
        except StoreError as exc:
            logger.error("Error fetching user %s: %s", user_id, exc)
            raise ServiceError("Error fetching user") from exc
        if record is None:
            raise RecordNotFound(user_id)
        return UserRead(**record)

    def update_user(self, user_id: str, data: UserUpdate) -> UserRead:
        """Replace name and email of an existing user.

        The id is left untouched.  Raises ``RecordNotFound`` when no
        user has that id; nothing is written in that case.
        """
        try:
            record = self.gateway.update_by_id(user_id, data.name, data.email)
        except StoreError as exc:
            logger.error("Error updating user %s: %s", user_id, exc)
            raise ServiceError("Error updating user") from exc
        logger.info("Updated user %s", user_id)
        return UserRead(**record)

    def delete_user(self, user_id: str) -> None:
        try:
            self.gateway.delete_by_id(user_id)
        except StoreError as exc:
            logger.error("Error deleting user %s: %s", user_id, exc)
            raise ServiceError("Error deleting user") from exc
        logger.info("Deleted user %s", user_id)
