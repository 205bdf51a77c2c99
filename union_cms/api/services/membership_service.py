# This file implements membership applications and their review status.
# One application is allowed per email; the unique index on `memberships.email` enforces it
# atomically, and the resulting integrity error is reported as a conflict.

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError

from union_cms.api.db_access import DatabaseClient
from union_cms.api.error_handlers import ConflictError, InvalidInputError, NotFoundError
from union_cms.api.services.validation import require_fields, require_valid_email

logger = logging.getLogger(__name__)

MEMBERSHIP_STATUSES: tuple[str, ...] = ("pending", "approved", "rejected")

_REQUIRED_FIELDS: tuple[str, ...] = (
    "full_name",
    "email",
    "phone",
    "university",
    "major",
    "academic_level",
    "wilaya",
)

_MEMBERSHIP_COLUMNS = """
    id, full_name, email, phone, university, major, academic_level, wilaya, status, created_at
"""


class MembershipService:
    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def submit(self, **fields: str | None) -> int:
        require_fields(fields, _REQUIRED_FIELDS, "All fields are required")
        require_valid_email(str(fields["email"]))

        try:
            application_id = self.db.insert(
                """
                INSERT INTO memberships
                    (full_name, email, phone, university, major, academic_level, wilaya)
                VALUES
                    (:full_name, :email, :phone, :university, :major, :academic_level, :wilaya)
                """,
                {name: fields[name] for name in _REQUIRED_FIELDS},
            )
        except IntegrityError as exc:
            raise ConflictError("This email is already registered") from exc

        logger.info("Received membership application %d", application_id)
        return application_id

    def list_applications(self, *, status: str | None = None) -> list[dict[str, Any]]:
        params: dict[str, Any] = {}
        where_sql = ""
        if status:
            where_sql = "WHERE status = :status"
            params["status"] = status
        return self.db.fetch_all(
            f"""
            SELECT {_MEMBERSHIP_COLUMNS}
            FROM memberships
            {where_sql}
            ORDER BY created_at DESC, id DESC
            """,
            params,
        )

    def stats(self) -> dict[str, int]:
        rows = self.db.fetch_all(
            "SELECT status, COUNT(*) AS status_count FROM memberships GROUP BY status"
        )
        counts = {status: 0 for status in MEMBERSHIP_STATUSES}
        total = 0
        for row in rows:
            row_count = int(row["status_count"])
            total += row_count
            if row["status"] in counts:
                counts[row["status"]] = row_count
        return {"total": total, **counts}

    def get_by_id(self, application_id: int) -> dict[str, Any]:
        row = self.db.fetch_one(
            f"SELECT {_MEMBERSHIP_COLUMNS} FROM memberships WHERE id = :id",
            {"id": application_id},
        )
        if row is None:
            raise NotFoundError("Application not found")
        return row

    def update_status(self, application_id: int, status: str | None) -> dict[str, Any]:
        if status not in MEMBERSHIP_STATUSES:
            raise InvalidInputError("Invalid status")
        self.get_by_id(application_id)
        self.db.execute(
            "UPDATE memberships SET status = :status WHERE id = :id",
            {"status": status, "id": application_id},
        )
        logger.info("Membership application %d marked %s", application_id, status)
        return self.get_by_id(application_id)

    def delete(self, application_id: int) -> None:
        self.get_by_id(application_id)
        self.db.execute("DELETE FROM memberships WHERE id = :id", {"id": application_id})
        logger.info("Deleted membership application %d", application_id)
