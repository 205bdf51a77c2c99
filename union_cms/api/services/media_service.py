# This file implements hero carousel slides, program specialties, and image uploads.
# It exists so the home banner and the programs page can be curated from the dashboard.
# Public reads return only active records ordered by `display_order`, then id.
# Deleting a slide or specialty also removes its image file when that image is a local upload.

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from union_cms.api.db_access import DatabaseClient
from union_cms.api.error_handlers import InvalidInputError, NotFoundError
from union_cms.api.services.validation import (
    is_blank,
    normalize_flags,
    present_fields,
    require_fields,
)
from union_cms.api.upload_storage import StoredUpload, UploadStorage
from union_cms.api.video_links import VIDEO_TYPES, parse_video_url

logger = logging.getLogger(__name__)

DEFAULT_SPECIALTY_ICON = "📚"

_HERO_COLUMNS = """
    id, title, subtitle, image_url, link_url, link_text, display_order, is_active, created_at
"""
_HERO_UPDATABLE: tuple[str, ...] = (
    "title",
    "subtitle",
    "image_url",
    "link_url",
    "link_text",
    "display_order",
    "is_active",
)

_SPECIALTY_COLUMNS = """
    id, name, name_ar, icon, description, image_url, video_url, video_type, items,
    duration, display_order, is_active, created_at, updated_at
"""
_SPECIALTY_UPDATABLE: tuple[str, ...] = (
    "name",
    "name_ar",
    "icon",
    "description",
    "image_url",
    "video_url",
    "video_type",
    "items",
    "duration",
    "display_order",
    "is_active",
)


def _slide(row: dict[str, Any]) -> dict[str, Any]:
    return normalize_flags(row, "is_active")


def _encode_items(items: Any) -> str:
    if items is None:
        return "[]"
    if isinstance(items, str):
        items = [items]
    return json.dumps([str(item) for item in items], ensure_ascii=False)


def _decode_items(raw: str | None) -> list[str]:
    if not raw:
        return []
    decoded = json.loads(raw)
    if not isinstance(decoded, list):
        return [str(decoded)]
    return [str(item) for item in decoded]


def _specialty(row: dict[str, Any]) -> dict[str, Any]:
    row["items"] = _decode_items(row.get("items"))
    return normalize_flags(row, "is_active")


def _set_clause(fields: Mapping[str, Any]) -> str:
    return ", ".join(f"{name} = :{name}" for name in fields)


class MediaService:
    """Hero slide and specialty records plus the image files they own."""

    def __init__(self, *, db: DatabaseClient, uploads: UploadStorage) -> None:
        self.db = db
        self.uploads = uploads

    # Hero slides

    def list_active_slides(self) -> list[dict[str, Any]]:
        rows = self.db.fetch_all(
            f"""
            SELECT {_HERO_COLUMNS}
            FROM hero_slides
            WHERE is_active = :is_active
            ORDER BY display_order ASC, id ASC
            """,
            {"is_active": True},
        )
        return [_slide(row) for row in rows]

    def list_all_slides(self) -> list[dict[str, Any]]:
        rows = self.db.fetch_all(
            f"SELECT {_HERO_COLUMNS} FROM hero_slides ORDER BY display_order ASC, id ASC"
        )
        return [_slide(row) for row in rows]

    def get_slide(self, slide_id: int) -> dict[str, Any]:
        row = self.db.fetch_one(
            f"SELECT {_HERO_COLUMNS} FROM hero_slides WHERE id = :id", {"id": slide_id}
        )
        if row is None:
            raise NotFoundError("Slide not found")
        return _slide(row)

    def create_slide(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        require_fields(fields, ("image_url",), "Image URL is required")
        slide_id = self.db.insert(
            """
            INSERT INTO hero_slides
                (title, subtitle, image_url, link_url, link_text, display_order, is_active)
            VALUES
                (:title, :subtitle, :image_url, :link_url, :link_text, :display_order, :is_active)
            """,
            {
                "title": fields.get("title") or "",
                "subtitle": fields.get("subtitle") or "",
                "image_url": fields["image_url"],
                "link_url": fields.get("link_url") or "",
                "link_text": fields.get("link_text") or "",
                "display_order": fields.get("display_order") or 0,
                "is_active": True if fields.get("is_active") is None else bool(fields["is_active"]),
            },
        )
        logger.info("Created hero slide %d", slide_id)
        return self.get_slide(slide_id)

    def update_slide(self, slide_id: int, fields: Mapping[str, Any]) -> dict[str, Any]:
        self.get_slide(slide_id)
        changes = present_fields(fields, _HERO_UPDATABLE)
        if "image_url" in changes and is_blank(changes["image_url"]):
            raise InvalidInputError("Image URL is required")
        if changes:
            self.db.execute(
                f"UPDATE hero_slides SET {_set_clause(changes)} WHERE id = :id",
                {**changes, "id": slide_id},
            )
            logger.info("Updated hero slide %d", slide_id)
        return self.get_slide(slide_id)

    def delete_slide(self, slide_id: int) -> None:
        slide = self.get_slide(slide_id)
        self.db.execute("DELETE FROM hero_slides WHERE id = :id", {"id": slide_id})
        self.uploads.delete_if_managed(slide.get("image_url"))
        logger.info("Deleted hero slide %d", slide_id)

    # Specialties

    def list_active_specialties(self) -> list[dict[str, Any]]:
        rows = self.db.fetch_all(
            f"""
            SELECT {_SPECIALTY_COLUMNS}
            FROM specialties
            WHERE is_active = :is_active
            ORDER BY display_order ASC, id ASC
            """,
            {"is_active": True},
        )
        return [_specialty(row) for row in rows]

    def list_all_specialties(self) -> list[dict[str, Any]]:
        rows = self.db.fetch_all(
            f"SELECT {_SPECIALTY_COLUMNS} FROM specialties ORDER BY display_order ASC, id ASC"
        )
        return [_specialty(row) for row in rows]

    def get_specialty(self, specialty_id: int) -> dict[str, Any]:
        row = self.db.fetch_one(
            f"SELECT {_SPECIALTY_COLUMNS} FROM specialties WHERE id = :id", {"id": specialty_id}
        )
        if row is None:
            raise NotFoundError("Specialty not found")
        return _specialty(row)

    def create_specialty(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        require_fields(fields, ("name", "name_ar"), "Specialty name is required")
        video_type = fields.get("video_type") or "youtube"
        if video_type not in VIDEO_TYPES:
            raise InvalidInputError("Unsupported video type")

        specialty_id = self.db.insert(
            """
            INSERT INTO specialties
                (name, name_ar, icon, description, image_url, video_url, video_type,
                 items, duration, display_order, is_active)
            VALUES
                (:name, :name_ar, :icon, :description, :image_url, :video_url, :video_type,
                 :items, :duration, :display_order, :is_active)
            """,
            {
                "name": fields["name"],
                "name_ar": fields["name_ar"],
                "icon": fields.get("icon") or DEFAULT_SPECIALTY_ICON,
                "description": fields.get("description") or "",
                "image_url": fields.get("image_url") or "",
                "video_url": fields.get("video_url") or "",
                "video_type": video_type,
                "items": _encode_items(fields.get("items")),
                "duration": fields.get("duration") or "",
                "display_order": fields.get("display_order") or 0,
                "is_active": True if fields.get("is_active") is None else bool(fields["is_active"]),
            },
        )
        logger.info("Created specialty %d", specialty_id)
        return self.get_specialty(specialty_id)

    def update_specialty(self, specialty_id: int, fields: Mapping[str, Any]) -> dict[str, Any]:
        self.get_specialty(specialty_id)
        changes = present_fields(fields, _SPECIALTY_UPDATABLE)
        for required in ("name", "name_ar"):
            if required in changes and is_blank(changes[required]):
                raise InvalidInputError("Specialty name is required")
        if "video_type" in changes and changes["video_type"] not in VIDEO_TYPES:
            raise InvalidInputError("Unsupported video type")
        if "items" in changes:
            changes["items"] = _encode_items(changes["items"])

        if changes:
            self.db.execute(
                f"""
                UPDATE specialties
                SET {_set_clause(changes)}, updated_at = CURRENT_TIMESTAMP
                WHERE id = :id
                """,
                {**changes, "id": specialty_id},
            )
            logger.info("Updated specialty %d", specialty_id)
        return self.get_specialty(specialty_id)

    def delete_specialty(self, specialty_id: int) -> None:
        specialty = self.get_specialty(specialty_id)
        self.db.execute("DELETE FROM specialties WHERE id = :id", {"id": specialty_id})
        self.uploads.delete_if_managed(specialty.get("image_url"))
        logger.info("Deleted specialty %d", specialty_id)

    # Uploads and video links

    def upload_image(
        self,
        *,
        upload_type: str,
        filename: str | None,
        content_type: str | None,
        data: bytes,
    ) -> StoredUpload:
        return self.uploads.save_image(
            upload_type=upload_type,
            original_filename=filename,
            content_type=content_type,
            data=data,
        )

    def delete_upload(self, url: str | None) -> None:
        if is_blank(url):
            raise InvalidInputError("Invalid file URL")
        self.uploads.delete(str(url))

    @staticmethod
    def parse_video(url: str | None) -> dict[str, Any]:
        if is_blank(url):
            raise InvalidInputError("Video URL is required")
        info = parse_video_url(str(url))
        if info is None:
            raise InvalidInputError("Unsupported video URL")
        return info
