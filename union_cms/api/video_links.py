# This file recognizes hosted video links and derives their embeddable player URLs.
# It exists so specialty listings can accept ordinary share links from editors.
# YouTube, Vimeo, and Google Drive link shapes are supported; anything else is rejected.

from __future__ import annotations

import re
from typing import Any

_YOUTUBE_RE = re.compile(r"(?:youtube\.com/(?:watch\?v=|embed/)|youtu\.be/)([a-zA-Z0-9_-]{11})")
_VIMEO_RE = re.compile(r"vimeo\.com/(\d+)")
_DRIVE_RE = re.compile(r"drive\.google\.com/file/d/([a-zA-Z0-9_-]+)")

VIDEO_TYPES: tuple[str, ...] = ("youtube", "vimeo", "drive")


def parse_video_url(url: str) -> dict[str, Any] | None:
    """Return `{type, id, embedUrl}` for a supported video link, else None."""

    youtube_match = _YOUTUBE_RE.search(url)
    if youtube_match:
        video_id = youtube_match.group(1)
        return {
            "type": "youtube",
            "id": video_id,
            "embedUrl": f"https://www.youtube.com/embed/{video_id}",
        }

    vimeo_match = _VIMEO_RE.search(url)
    if vimeo_match:
        video_id = vimeo_match.group(1)
        return {
            "type": "vimeo",
            "id": video_id,
            "embedUrl": f"https://player.vimeo.com/video/{video_id}",
        }

    drive_match = _DRIVE_RE.search(url)
    if drive_match:
        video_id = drive_match.group(1)
        return {
            "type": "drive",
            "id": video_id,
            "embedUrl": f"https://drive.google.com/file/d/{video_id}/preview",
        }

    return None
