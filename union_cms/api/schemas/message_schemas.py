# This file defines contact message schemas.
# Messages are written by the public contact form and read only by admins.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from union_cms.api.schemas.common import EnvelopeFields


class MessageSubmitRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    subject: str | None = None
    message: str | None = None


class ContactMessageV1(BaseModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    subject: str
    message: str
    is_read: bool
    created_at: datetime | None = None


class ContactMessageResponseV1(EnvelopeFields):
    data: ContactMessageV1


class ContactMessageListResponseV1(EnvelopeFields):
    data: list[ContactMessageV1]
