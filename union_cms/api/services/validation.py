# This file holds small validation helpers shared by the resource services.
# It exists so presence checks, email format, and row normalization behave the same everywhere.

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from union_cms.api.error_handlers import InvalidInputError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def require_fields(values: Mapping[str, Any], names: Iterable[str], message: str) -> None:
    """Raise InvalidInputError when any named field is missing or empty."""

    missing = [name for name in names if is_blank(values.get(name))]
    if missing:
        raise InvalidInputError(message, details={"missing_fields": missing})


def require_valid_email(email: str) -> None:
    if not EMAIL_RE.match(email):
        raise InvalidInputError("Invalid email format")


def normalize_flags(row: dict[str, Any], *names: str) -> dict[str, Any]:
    """Convert integer-backed boolean columns into real booleans."""

    for name in names:
        if name in row and row[name] is not None:
            row[name] = bool(row[name])
    return row


def present_fields(values: Mapping[str, Any], allowed: Iterable[str]) -> dict[str, Any]:
    """Keep only allowed keys whose value was supplied (not None)."""

    return {name: values[name] for name in allowed if values.get(name) is not None}
