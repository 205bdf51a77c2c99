# This file defines admin login, logout, session check, and password change endpoints.
# It exists so the dashboard can establish a server-side session carried by an httponly cookie.
# Credential checks live in `AuthService`; this router owns cookie and session bookkeeping.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from union_cms.api.api_config import ApiConfig
from union_cms.api.dependencies import (
    AdminDep,
    get_auth_service,
    get_config,
    get_current_session,
    get_session_store,
)
from union_cms.api.error_handlers import InvalidInputError
from union_cms.api.response_envelope import build_message_envelope
from union_cms.api.schemas.auth_schemas import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResponseV1,
    SessionCheckResponseV1,
)
from union_cms.api.schemas.common import MessageResponse
from union_cms.api.services.auth_service import AuthService
from union_cms.api.session_store import AdminSession, SessionStore

router = APIRouter(prefix="/api/auth", tags=["auth"])
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]
CurrentSessionDep = Annotated[AdminSession | None, Depends(get_current_session)]


@router.post("/login", response_model=LoginResponseV1)
def login(
    body: LoginRequest,
    response: Response,
    service: AuthServiceDep,
    config: ConfigDep,
    sessions: SessionStoreDep,
    current: CurrentSessionDep,
) -> dict[str, object]:
    if current is not None:
        raise InvalidInputError("Already logged in.")

    admin = service.authenticate(body.username, body.password)
    session = sessions.create(admin_id=admin["id"], username=admin["username"])
    response.set_cookie(
        key=config.session_cookie_name,
        value=session.session_id,
        max_age=sessions.max_age_seconds,
        httponly=True,
        secure=config.is_production,
        samesite="strict" if config.is_production else "lax",
        path="/",
    )
    return build_message_envelope(message="Login successful", admin=admin)


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    session: AdminDep,
    config: ConfigDep,
    sessions: SessionStoreDep,
) -> dict[str, object]:
    sessions.destroy(session.session_id)
    response.delete_cookie(key=config.session_cookie_name, path="/")
    return build_message_envelope(message="Logged out successfully")


@router.get("/check", response_model=SessionCheckResponseV1)
def check(current: CurrentSessionDep) -> dict[str, object]:
    if current is None:
        return build_message_envelope(message="No active session", authenticated=False)
    return build_message_envelope(
        message="Session active",
        authenticated=True,
        admin={"id": current.admin_id, "username": current.username},
    )


@router.put("/change-password", response_model=MessageResponse)
def change_password(
    body: ChangePasswordRequest,
    session: AdminDep,
    service: AuthServiceDep,
) -> dict[str, object]:
    service.change_password(
        session.admin_id,
        current_password=body.current_password,
        new_password=body.new_password,
    )
    return build_message_envelope(message="Password changed successfully")
