# This file builds response envelopes for API endpoints in a consistent format.
# It exists so clients always receive a `success` flag with optional `message` and `data` fields.
# The helpers return plain dictionaries that Pydantic response models validate at runtime.
# This keeps endpoint functions focused on calling services instead of repetitive envelope assembly.

from __future__ import annotations

from typing import Any


def build_object_envelope(*, data: Any, message: str | None = None) -> dict[str, Any]:
    """Build standard success envelope carrying a data payload."""

    payload: dict[str, Any] = {"success": True, "data": data}
    if message is not None:
        payload["message"] = message
    return payload


def build_message_envelope(*, message: str, **extra: Any) -> dict[str, Any]:
    """Build success envelope for operations that only report an outcome."""

    return {"success": True, "message": message, **extra}
