# This file implements editable page content keyed by (page_name, section_id) pairs.
# It exists so copy on the static pages can be changed from the dashboard without code edits.
# Static markup marks editable nodes with `data-content="<section_id>"`; this service serves that mapping.
# Bulk edits for one page are applied inside a single transaction.

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from union_cms.api.db_access import DatabaseClient
from union_cms.api.error_handlers import ConflictError, InvalidInputError, NotFoundError
from union_cms.api.services.validation import is_blank, require_fields

logger = logging.getLogger(__name__)

CONTENT_TYPES: tuple[str, ...] = ("text", "html")

_SECTION_COLUMNS = """
    id, page_name, section_id, section_title, content, content_type, display_order, updated_at
"""


class PageContentService:
    """Reads and writes page sections."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def list_all_pages(self) -> dict[str, list[dict[str, Any]]]:
        rows = self.db.fetch_all(
            f"""
            SELECT {_SECTION_COLUMNS}
            FROM page_content
            ORDER BY page_name ASC, display_order ASC, id ASC
            """
        )
        pages: dict[str, list[dict[str, Any]]] = {}
        for row in rows:
            pages.setdefault(row["page_name"], []).append(row)
        return pages

    def get_page_sections(self, page_name: str) -> dict[str, dict[str, Any]]:
        rows = self.db.fetch_all(
            f"""
            SELECT {_SECTION_COLUMNS}
            FROM page_content
            WHERE page_name = :page_name
            ORDER BY display_order ASC, id ASC
            """,
            {"page_name": page_name},
        )
        return {
            row["section_id"]: {
                "id": row["id"],
                "title": row["section_title"],
                "content": row["content"],
                "type": row["content_type"],
            }
            for row in rows
        }

    def find_section(self, page_name: str, section_id: str) -> dict[str, Any] | None:
        return self.db.fetch_one(
            f"""
            SELECT {_SECTION_COLUMNS}
            FROM page_content
            WHERE page_name = :page_name AND section_id = :section_id
            """,
            {"page_name": page_name, "section_id": section_id},
        )

    def get_section(self, page_name: str, section_id: str) -> dict[str, Any]:
        section = self.find_section(page_name, section_id)
        if section is None:
            raise NotFoundError("Section not found")
        return section

    def create_section(
        self,
        page_name: str,
        *,
        section_id: str | None,
        content: str | None,
        section_title: str | None = None,
        content_type: str | None = None,
        display_order: int | None = None,
    ) -> dict[str, Any]:
        require_fields(
            {"section_id": section_id, "content": content},
            ("section_id", "content"),
            "section_id and content are required",
        )
        resolved_type = content_type or "text"
        if resolved_type not in CONTENT_TYPES:
            raise InvalidInputError("content_type must be 'text' or 'html'")

        params = {
            "page_name": page_name,
            "section_id": section_id,
            "section_title": section_title,
            "content": content,
            "content_type": resolved_type,
            "display_order": display_order,
        }
        if display_order is None:
            # Next slot is computed in the same statement as the insert.
            query = """
            INSERT INTO page_content
                (page_name, section_id, section_title, content, content_type, display_order)
            SELECT :page_name, :section_id, :section_title, :content, :content_type,
                   COALESCE(MAX(display_order), 0) + 1
            FROM page_content
            WHERE page_name = :page_name
            """
        else:
            query = """
            INSERT INTO page_content
                (page_name, section_id, section_title, content, content_type, display_order)
            VALUES
                (:page_name, :section_id, :section_title, :content, :content_type, :display_order)
            """

        try:
            self.db.execute(query, params)
        except IntegrityError as exc:
            raise ConflictError("Section already exists") from exc

        logger.info("Created section %s/%s", page_name, section_id)
        return self.get_section(page_name, str(section_id))

    def update_section(
        self,
        page_name: str,
        section_id: str,
        *,
        section_title: str | None = None,
        content: str | None = None,
        content_type: str | None = None,
        display_order: int | None = None,
    ) -> dict[str, Any]:
        if content_type is not None and content_type not in CONTENT_TYPES:
            raise InvalidInputError("content_type must be 'text' or 'html'")
        self.get_section(page_name, section_id)

        self.db.execute(
            """
            UPDATE page_content SET
                section_title = COALESCE(:section_title, section_title),
                content = COALESCE(:content, content),
                content_type = COALESCE(:content_type, content_type),
                display_order = COALESCE(:display_order, display_order),
                updated_at = CURRENT_TIMESTAMP
            WHERE page_name = :page_name AND section_id = :section_id
            """,
            {
                "section_title": section_title,
                "content": content,
                "content_type": content_type,
                "display_order": display_order,
                "page_name": page_name,
                "section_id": section_id,
            },
        )
        logger.info("Updated section %s/%s", page_name, section_id)
        return self.get_section(page_name, section_id)

    def bulk_update_sections(
        self, page_name: str, sections: Sequence[Mapping[str, Any]] | None
    ) -> dict[str, int]:
        """Apply content edits for many sections of one page atomically.

        Items naming a section that does not exist on the page match no rows and are not
        treated as errors. `processed` counts items in the request; `rows_affected` counts
        rows actually changed.
        """

        if sections is None or not isinstance(sections, Sequence) or isinstance(sections, str):
            raise InvalidInputError("sections array is required")
        for index, section in enumerate(sections):
            if is_blank(section.get("section_id")) or section.get("content") is None:
                raise InvalidInputError(
                    "Each section requires section_id and content",
                    details={"index": index},
                )

        with_title = text(
            """
            UPDATE page_content SET
                content = :content,
                section_title = :section_title,
                updated_at = CURRENT_TIMESTAMP
            WHERE page_name = :page_name AND section_id = :section_id
            """
        )
        without_title = text(
            """
            UPDATE page_content SET
                content = :content,
                updated_at = CURRENT_TIMESTAMP
            WHERE page_name = :page_name AND section_id = :section_id
            """
        )

        rows_affected = 0
        with self.db.transaction() as connection:
            for section in sections:
                params = {
                    "content": section["content"],
                    "page_name": page_name,
                    "section_id": section["section_id"],
                }
                if section.get("section_title") is not None:
                    params["section_title"] = section["section_title"]
                    result = connection.execute(with_title, params)
                else:
                    result = connection.execute(without_title, params)
                rows_affected += int(result.rowcount or 0)

        logger.info(
            "Bulk updated page %s: %d items, %d rows", page_name, len(sections), rows_affected
        )
        return {"processed": len(sections), "rows_affected": rows_affected}

    def delete_section(self, page_name: str, section_id: str) -> None:
        self.get_section(page_name, section_id)
        self.db.execute(
            "DELETE FROM page_content WHERE page_name = :page_name AND section_id = :section_id",
            {"page_name": page_name, "section_id": section_id},
        )
        logger.info("Deleted section %s/%s", page_name, section_id)
