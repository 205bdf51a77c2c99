# This file defines membership application endpoints.
# Applying is public; listing, statistics, review, and deletion require an admin session.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from union_cms.api.dependencies import AdminDep, RecordId, get_membership_service
from union_cms.api.response_envelope import build_message_envelope, build_object_envelope
from union_cms.api.schemas.common import MessageResponse
from union_cms.api.schemas.membership_schemas import (
    MembershipApplicationListResponseV1,
    MembershipApplicationResponseV1,
    MembershipStatsResponseV1,
    MembershipStatusRequest,
    MembershipSubmitRequest,
)
from union_cms.api.services.membership_service import MembershipService

router = APIRouter(prefix="/api/memberships", tags=["memberships"])
MembershipServiceDep = Annotated[MembershipService, Depends(get_membership_service)]


@router.post("", status_code=201, response_model=MessageResponse)
def submit_application(
    body: MembershipSubmitRequest, service: MembershipServiceDep
) -> dict[str, object]:
    service.submit(**body.model_dump())
    return build_message_envelope(message="Membership application submitted successfully!")


@router.get("", response_model=MembershipApplicationListResponseV1)
def list_applications(
    service: MembershipServiceDep,
    _: AdminDep,
    status: str | None = Query(default=None),
) -> dict[str, object]:
    return build_object_envelope(data=service.list_applications(status=status))


@router.get("/stats", response_model=MembershipStatsResponseV1)
def application_stats(service: MembershipServiceDep, _: AdminDep) -> dict[str, object]:
    return build_object_envelope(data=service.stats())


@router.get("/{application_id}", response_model=MembershipApplicationResponseV1)
def get_application(
    application_id: RecordId, service: MembershipServiceDep, _: AdminDep
) -> dict[str, object]:
    return build_object_envelope(data=service.get_by_id(application_id))


@router.patch("/{application_id}/status", response_model=MembershipApplicationResponseV1)
def update_status(
    application_id: RecordId,
    body: MembershipStatusRequest,
    service: MembershipServiceDep,
    _: AdminDep,
) -> dict[str, object]:
    application = service.update_status(application_id, body.status)
    return build_object_envelope(
        data=application, message=f"Membership {application['status']} successfully"
    )


@router.delete("/{application_id}", response_model=MessageResponse)
def delete_application(
    application_id: RecordId, service: MembershipServiceDep, _: AdminDep
) -> dict[str, object]:
    service.delete(application_id)
    return build_message_envelope(message="Application deleted successfully")
