# This file defines shared schema pieces reused by multiple API endpoints.
# It exists so envelope and error payloads stay consistent across resources.
# Shared models reduce duplication and keep contract changes easier to review.

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class EnvelopeFields(BaseModel):
    success: bool = True
    message: str | None = None


class MessageResponse(EnvelopeFields):
    pass


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error_code: str
    request_id: str
    details: Any | None = None


class CountV1(BaseModel):
    count: int


class CountResponseV1(EnvelopeFields):
    data: CountV1
