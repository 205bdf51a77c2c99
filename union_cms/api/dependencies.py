# This file provides dependency factories for FastAPI routes and middleware.
# It exists so services are built from one explicit application context instead of globals.
# Each app instance owns its own config, database client, session store, and upload storage,
# which keeps tests isolated and makes endpoint dependencies easy to override.

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Path, Request

from union_cms.api.api_config import ApiConfig
from union_cms.api.db_access import DatabaseClient
from union_cms.api.error_handlers import UnauthorizedError
from union_cms.api.services.auth_service import AuthService
from union_cms.api.services.media_service import MediaService
from union_cms.api.services.membership_service import MembershipService
from union_cms.api.services.message_service import MessageService
from union_cms.api.services.news_service import NewsService
from union_cms.api.services.page_content_service import PageContentService
from union_cms.api.session_store import AdminSession, SessionStore
from union_cms.api.upload_storage import UploadStorage


# Largest value a signed 64-bit INTEGER column can hold.
MAX_RECORD_ID = 2**63 - 1

RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]


@dataclass
class AppContext:
    """Per-application collaborators shared by every request."""

    config: ApiConfig
    db: DatabaseClient
    sessions: SessionStore
    uploads: UploadStorage

    @classmethod
    def from_config(cls, config: ApiConfig) -> AppContext:
        return cls(
            config=config,
            db=DatabaseClient(database_url=config.database_url),
            sessions=SessionStore(max_age_seconds=config.session_max_age_seconds),
            uploads=UploadStorage(
                root_dir=config.upload_dir,
                url_prefix=config.upload_url_prefix,
                max_bytes=config.max_upload_bytes,
            ),
        )


def get_context(request: Request) -> AppContext:
    return request.app.state.context


ContextDep = Annotated[AppContext, Depends(get_context)]


def get_config(context: ContextDep) -> ApiConfig:
    return context.config


def get_database_client(context: ContextDep) -> DatabaseClient:
    return context.db


def get_session_store(context: ContextDep) -> SessionStore:
    return context.sessions


def get_auth_service(context: ContextDep) -> AuthService:
    return AuthService(db=context.db)


def get_news_service(context: ContextDep) -> NewsService:
    return NewsService(db=context.db)


def get_message_service(context: ContextDep) -> MessageService:
    return MessageService(db=context.db)


def get_membership_service(context: ContextDep) -> MembershipService:
    return MembershipService(db=context.db)


def get_page_content_service(context: ContextDep) -> PageContentService:
    return PageContentService(db=context.db)


def get_media_service(context: ContextDep) -> MediaService:
    return MediaService(db=context.db, uploads=context.uploads)


def get_current_session(
    request: Request,
    config: Annotated[ApiConfig, Depends(get_config)],
    sessions: Annotated[SessionStore, Depends(get_session_store)],
) -> AdminSession | None:
    return sessions.get(request.cookies.get(config.session_cookie_name))


def require_admin(
    session: Annotated[AdminSession | None, Depends(get_current_session)],
) -> AdminSession:
    """Gate for admin-only routes: a live session carrying an admin id."""

    if session is None or not session.admin_id:
        raise UnauthorizedError()
    return session


AdminDep = Annotated[AdminSession, Depends(require_admin)]
