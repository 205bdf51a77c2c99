# This file defines membership application schemas and the status statistics payload.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from union_cms.api.schemas.common import EnvelopeFields


class MembershipSubmitRequest(BaseModel):
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    university: str | None = None
    major: str | None = None
    academic_level: str | None = None
    wilaya: str | None = None


class MembershipStatusRequest(BaseModel):
    status: str | None = None


class MembershipApplicationV1(BaseModel):
    id: int
    full_name: str
    email: str
    phone: str
    university: str
    major: str
    academic_level: str
    wilaya: str
    status: str
    created_at: datetime | None = None


class MembershipApplicationResponseV1(EnvelopeFields):
    data: MembershipApplicationV1


class MembershipApplicationListResponseV1(EnvelopeFields):
    data: list[MembershipApplicationV1]


class MembershipStatsV1(BaseModel):
    total: int
    pending: int
    approved: int
    rejected: int


class MembershipStatsResponseV1(EnvelopeFields):
    data: MembershipStatsV1
