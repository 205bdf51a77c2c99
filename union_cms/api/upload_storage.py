# This file stores uploaded images on disk under a type-partitioned directory tree.
# It exists so media routes and record deletions share one place that owns upload files.
# Every public URL is `<url_prefix>/<type>/<generated name>`, mirrored under `root_dir`.
# Deletions resolve paths strictly inside `root_dir` to block path traversal.

from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from pathlib import Path

from union_cms.api.error_handlers import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS: frozenset[str] = frozenset({".jpeg", ".jpg", ".png", ".gif", ".webp"})
ALLOWED_IMAGE_MIME_TYPES: frozenset[str] = frozenset(
    {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
)
_UPLOAD_TYPE_RE = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class StoredUpload:
    url: str
    filename: str
    size: int


class UploadStorage:
    """Filesystem storage for admin image uploads."""

    def __init__(self, *, root_dir: str | Path, url_prefix: str, max_bytes: int) -> None:
        self.root_dir = Path(root_dir).resolve()
        self.url_prefix = url_prefix.rstrip("/")
        self.max_bytes = max_bytes

    def ensure_root(self) -> None:
        self.root_dir.mkdir(parents=True, exist_ok=True)

    def is_managed_url(self, url: str | None) -> bool:
        return bool(url) and str(url).startswith(f"{self.url_prefix}/")

    def save_image(
        self,
        *,
        upload_type: str,
        original_filename: str | None,
        content_type: str | None,
        data: bytes,
    ) -> StoredUpload:
        if not _UPLOAD_TYPE_RE.match(upload_type or ""):
            raise InvalidInputError("Invalid upload type")

        extension = Path(original_filename or "").suffix.lower()
        mime_type = (content_type or "").split(";")[0].strip().lower()
        if extension not in ALLOWED_IMAGE_EXTENSIONS or mime_type not in ALLOWED_IMAGE_MIME_TYPES:
            logger.warning("Rejected upload %r with type %r", original_filename, content_type)
            raise InvalidInputError("Only image files are allowed (jpeg, jpg, png, gif, webp)")

        if len(data) > self.max_bytes:
            limit_mb = self.max_bytes // (1024 * 1024)
            raise InvalidInputError(f"File is too large (maximum {limit_mb}MB)")
        if not data:
            raise InvalidInputError("No file uploaded")

        target_dir = self.root_dir / upload_type
        target_dir.mkdir(parents=True, exist_ok=True)
        filename = f"{uuid.uuid4().hex}{extension}"
        (target_dir / filename).write_bytes(data)

        logger.info("Stored upload %s/%s (%d bytes)", upload_type, filename, len(data))
        return StoredUpload(
            url=f"{self.url_prefix}/{upload_type}/{filename}",
            filename=filename,
            size=len(data),
        )

    def resolve_url(self, url: str) -> Path:
        """Map a managed public URL to its file path, refusing anything outside the root."""

        if not self.is_managed_url(url):
            raise InvalidInputError("Invalid file URL")
        relative = url[len(self.url_prefix) + 1 :]
        candidate = (self.root_dir / relative).resolve()
        if candidate == self.root_dir or self.root_dir not in candidate.parents:
            raise InvalidInputError("Invalid file URL")
        return candidate

    def delete(self, url: str) -> None:
        path = self.resolve_url(url)
        if not path.is_file():
            raise NotFoundError("File not found")
        path.unlink()
        logger.info("Deleted upload %s", url)

    def delete_if_managed(self, url: str | None) -> bool:
        """Remove the file behind a record's image URL when it is a local upload."""

        if not url or not self.is_managed_url(url):
            return False
        try:
            self.delete(url)
        except (InvalidInputError, NotFoundError):
            return False
        except OSError:
            logger.warning("Could not remove upload %s", url, exc_info=True)
            return False
        return True
