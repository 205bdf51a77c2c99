# This file implements admin credential checks and password changes.
# Session bookkeeping lives in the router and `SessionStore`; this service only touches the admins table.
# Unknown usernames and wrong passwords produce the same error so account names are not revealed.

from __future__ import annotations

import logging
from typing import Any

from union_cms.api.db_access import DatabaseClient
from union_cms.api.error_handlers import InvalidInputError, UnauthorizedError
from union_cms.common.security import hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def authenticate(self, username: str | None, password: str | None) -> dict[str, Any]:
        if not username or not password:
            raise InvalidInputError("Username and password are required")

        admin = self.db.fetch_one(
            "SELECT id, username, password FROM admins WHERE username = :username",
            {"username": username},
        )
        if admin is None or not verify_password(password, admin["password"]):
            logger.warning("Failed login attempt for %r", username)
            raise UnauthorizedError("Invalid username or password")

        logger.info("Admin %r logged in", username)
        return {"id": int(admin["id"]), "username": admin["username"]}

    def change_password(
        self,
        admin_id: int,
        *,
        current_password: str | None,
        new_password: str | None,
    ) -> None:
        if not current_password or not new_password:
            raise InvalidInputError("Current password and new password are required")
        if len(new_password) < MIN_PASSWORD_LENGTH:
            raise InvalidInputError(
                f"New password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        admin = self.db.fetch_one(
            "SELECT id, password FROM admins WHERE id = :id", {"id": admin_id}
        )
        if admin is None:
            raise UnauthorizedError()
        if not verify_password(current_password, admin["password"]):
            raise UnauthorizedError("Current password is incorrect")

        self.db.execute(
            "UPDATE admins SET password = :password WHERE id = :id",
            {"password": hash_password(new_password), "id": admin_id},
        )
        logger.info("Admin %d changed password", admin_id)
