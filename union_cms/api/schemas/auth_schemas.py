# This file defines request and response models for admin authentication endpoints.
# Credential fields are optional at the schema level so missing values surface as clear messages.

from __future__ import annotations

from pydantic import BaseModel, Field

from union_cms.api.schemas.common import EnvelopeFields


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class ChangePasswordRequest(BaseModel):
    current_password: str | None = Field(default=None, alias="currentPassword")
    new_password: str | None = Field(default=None, alias="newPassword")


class AdminIdentityV1(BaseModel):
    id: int
    username: str


class LoginResponseV1(EnvelopeFields):
    admin: AdminIdentityV1


class SessionCheckResponseV1(EnvelopeFields):
    authenticated: bool
    admin: AdminIdentityV1 | None = None
