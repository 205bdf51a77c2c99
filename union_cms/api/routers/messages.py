# This file defines contact message endpoints.
# Submitting is public; reading, flagging, and deleting require an admin session.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from union_cms.api.dependencies import AdminDep, RecordId, get_message_service
from union_cms.api.response_envelope import build_message_envelope, build_object_envelope
from union_cms.api.schemas.common import CountResponseV1, MessageResponse
from union_cms.api.schemas.message_schemas import (
    ContactMessageListResponseV1,
    ContactMessageResponseV1,
    MessageSubmitRequest,
)
from union_cms.api.services.message_service import MessageService

router = APIRouter(prefix="/api/messages", tags=["messages"])
MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]


@router.post("", status_code=201, response_model=MessageResponse)
def submit_message(body: MessageSubmitRequest, service: MessageServiceDep) -> dict[str, object]:
    service.submit(**body.model_dump())
    return build_message_envelope(message="Message sent successfully!")


@router.get("", response_model=ContactMessageListResponseV1)
def list_messages(service: MessageServiceDep, _: AdminDep) -> dict[str, object]:
    return build_object_envelope(data=service.list_all())


@router.get("/unread-count", response_model=CountResponseV1)
def unread_count(service: MessageServiceDep, _: AdminDep) -> dict[str, object]:
    return build_object_envelope(data={"count": service.unread_count()})


@router.get("/{message_id}", response_model=ContactMessageResponseV1)
def get_message(
    message_id: RecordId, service: MessageServiceDep, _: AdminDep
) -> dict[str, object]:
    return build_object_envelope(data=service.get_by_id(message_id))


@router.patch("/{message_id}/read", response_model=MessageResponse)
def mark_read(message_id: RecordId, service: MessageServiceDep, _: AdminDep) -> dict[str, object]:
    service.mark_read(message_id)
    return build_message_envelope(message="Message marked as read")


@router.patch("/{message_id}/unread", response_model=MessageResponse)
def mark_unread(
    message_id: RecordId, service: MessageServiceDep, _: AdminDep
) -> dict[str, object]:
    service.mark_unread(message_id)
    return build_message_envelope(message="Message marked as unread")


@router.delete("/{message_id}", response_model=MessageResponse)
def delete_message(
    message_id: RecordId, service: MessageServiceDep, _: AdminDep
) -> dict[str, object]:
    service.delete(message_id)
    return build_message_envelope(message="Message deleted successfully")
