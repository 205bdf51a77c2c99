# This file implements contact form messages.
# Messages are created by visitors and afterwards only their read flag may change.

from __future__ import annotations

import logging
from typing import Any

from union_cms.api.db_access import DatabaseClient
from union_cms.api.error_handlers import NotFoundError
from union_cms.api.services.validation import normalize_flags, require_fields, require_valid_email

logger = logging.getLogger(__name__)

_MESSAGE_COLUMNS = "id, name, email, phone, subject, message, is_read, created_at"


def _message(row: dict[str, Any]) -> dict[str, Any]:
    return normalize_flags(row, "is_read")


class MessageService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def submit(
        self,
        *,
        name: str | None,
        email: str | None,
        subject: str | None,
        message: str | None,
        phone: str | None = None,
    ) -> int:
        require_fields(
            {"name": name, "email": email, "subject": subject, "message": message},
            ("name", "email", "subject", "message"),
            "Name, email, subject, and message are required",
        )
        require_valid_email(str(email))

        message_id = self.db.insert(
            """
            INSERT INTO messages (name, email, phone, subject, message)
            VALUES (:name, :email, :phone, :subject, :message)
            """,
            {
                "name": name,
                "email": email,
                "phone": phone or None,
                "subject": subject,
                "message": message,
            },
        )
        logger.info("Stored contact message %d", message_id)
        return message_id

    def list_all(self) -> list[dict[str, Any]]:
        rows = self.db.fetch_all(
            f"SELECT {_MESSAGE_COLUMNS} FROM messages ORDER BY created_at DESC, id DESC"
        )
        return [_message(row) for row in rows]

    def unread_count(self) -> int:
        count = self.db.fetch_scalar(
            "SELECT COUNT(*) FROM messages WHERE is_read = :is_read", {"is_read": False}
        )
        return int(count)

    def get_by_id(self, message_id: int) -> dict[str, Any]:
        row = self.db.fetch_one(
            f"SELECT {_MESSAGE_COLUMNS} FROM messages WHERE id = :id", {"id": message_id}
        )
        if row is None:
            raise NotFoundError("Message not found")
        return _message(row)

    def mark_read(self, message_id: int) -> None:
        self._set_read_flag(message_id, True)

    def mark_unread(self, message_id: int) -> None:
        self._set_read_flag(message_id, False)

    def delete(self, message_id: int) -> None:
        self.get_by_id(message_id)
        self.db.execute("DELETE FROM messages WHERE id = :id", {"id": message_id})
        logger.info("Deleted contact message %d", message_id)

    def _set_read_flag(self, message_id: int, is_read: bool) -> None:
        self.get_by_id(message_id)
        self.db.execute(
            "UPDATE messages SET is_read = :is_read WHERE id = :id",
            {"is_read": is_read, "id": message_id},
        )
