"""
Unit tests for hero slides, specialties, and the images they own.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from union_cms.api.error_handlers import InvalidInputError, NotFoundError
from union_cms.api.services.media_service import MediaService
from union_cms.api.upload_storage import UploadStorage


@pytest.fixture
def service(db, tmp_path: Path) -> MediaService:
    uploads = UploadStorage(
        root_dir=tmp_path / "uploads", url_prefix="/assets/uploads", max_bytes=1024
    )
    uploads.ensure_root()
    return MediaService(db=db, uploads=uploads)


def test_deleting_slide_removes_uploaded_image(service: MediaService, tmp_path: Path) -> None:
    stored = service.upload_image(
        upload_type="hero", filename="a.webp", content_type="image/webp", data=b"webp"
    )
    slide = service.create_slide({"image_url": stored.url})

    service.delete_slide(slide["id"])

    assert not (tmp_path / "uploads" / "hero" / stored.filename).exists()
    with pytest.raises(NotFoundError, match="Slide not found"):
        service.get_slide(slide["id"])


def test_update_slide_rejects_blank_image(service: MediaService) -> None:
    slide = service.create_slide({"image_url": "https://cdn.example.com/a.png"})
    with pytest.raises(InvalidInputError, match="Image URL is required"):
        service.update_slide(slide["id"], {"image_url": "  "})


def test_inactive_specialties_are_hidden_publicly(service: MediaService) -> None:
    service.create_specialty({"name": "A", "name_ar": "أ", "display_order": 2})
    service.create_specialty({"name": "B", "name_ar": "ب", "display_order": 1, "is_active": False})

    assert [item["name"] for item in service.list_active_specialties()] == ["A"]
    assert [item["name"] for item in service.list_all_specialties()] == ["B", "A"]


def test_specialty_update_can_deactivate(service: MediaService) -> None:
    specialty = service.create_specialty({"name": "A", "name_ar": "أ"})
    updated = service.update_specialty(specialty["id"], {"is_active": False})

    assert updated["is_active"] is False
    assert updated["name"] == "A"


def test_parse_video_requires_url() -> None:
    with pytest.raises(InvalidInputError, match="Video URL is required"):
        MediaService.parse_video("  ")


def test_file_removal_failure_does_not_fail_delete(
    service: MediaService, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    stored = service.upload_image(
        upload_type="specialties", filename="a.png", content_type="image/png", data=b"png"
    )
    specialty = service.create_specialty({"name": "A", "name_ar": "أ", "image_url": stored.url})

    def refuse_unlink(self, missing_ok: bool = False) -> None:
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(Path, "unlink", refuse_unlink)
    service.delete_specialty(specialty["id"])

    with pytest.raises(NotFoundError, match="Specialty not found"):
        service.get_specialty(specialty["id"])
    assert (tmp_path / "uploads" / "specialties" / stored.filename).exists()
