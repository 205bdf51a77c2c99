# This file defines page content endpoints keyed by page name and section id.
# Reads are public so the static pages can fill `data-content` nodes; writes need an admin session.
# `PUT /{page_name}/bulk` is registered before `PUT /{page_name}/{section_id}` so it is not
# captured as a section named "bulk".

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from union_cms.api.dependencies import AdminDep, get_page_content_service
from union_cms.api.response_envelope import build_message_envelope, build_object_envelope
from union_cms.api.schemas.common import MessageResponse
from union_cms.api.schemas.page_schemas import (
    AllPagesResponseV1,
    BulkUpdateRequest,
    BulkUpdateResponseV1,
    PageContentResponseV1,
    PageSectionResponseV1,
    SectionCreateRequest,
    SectionUpdateRequest,
)
from union_cms.api.services.page_content_service import PageContentService

router = APIRouter(prefix="/api/pages", tags=["pages"])
PageContentServiceDep = Annotated[PageContentService, Depends(get_page_content_service)]


@router.get("", response_model=AllPagesResponseV1)
def list_pages(service: PageContentServiceDep) -> dict[str, object]:
    return build_object_envelope(data=service.list_all_pages())


@router.get("/{page_name}", response_model=PageContentResponseV1)
def get_page(page_name: str, service: PageContentServiceDep) -> dict[str, object]:
    payload = build_object_envelope(data=service.get_page_sections(page_name))
    payload["page"] = page_name
    return payload


@router.put("/{page_name}/bulk", response_model=BulkUpdateResponseV1)
def bulk_update(
    page_name: str,
    body: BulkUpdateRequest,
    service: PageContentServiceDep,
    _: AdminDep,
) -> dict[str, object]:
    sections = None if body.sections is None else [item.model_dump() for item in body.sections]
    result = service.bulk_update_sections(page_name, sections)
    return build_object_envelope(
        data=result, message=f"Updated {result['processed']} sections successfully"
    )


@router.get("/{page_name}/{section_id}", response_model=PageSectionResponseV1)
def get_section(
    page_name: str, section_id: str, service: PageContentServiceDep
) -> dict[str, object]:
    return build_object_envelope(data=service.get_section(page_name, section_id))


@router.put("/{page_name}/{section_id}", response_model=PageSectionResponseV1)
def update_section(
    page_name: str,
    section_id: str,
    body: SectionUpdateRequest,
    service: PageContentServiceDep,
    _: AdminDep,
) -> dict[str, object]:
    section = service.update_section(page_name, section_id, **body.model_dump())
    return build_object_envelope(data=section, message="Section updated successfully")


@router.post("/{page_name}", status_code=201, response_model=PageSectionResponseV1)
def create_section(
    page_name: str,
    body: SectionCreateRequest,
    service: PageContentServiceDep,
    _: AdminDep,
) -> dict[str, object]:
    section = service.create_section(page_name, **body.model_dump())
    return build_object_envelope(data=section, message="Section created successfully")


@router.delete("/{page_name}/{section_id}", response_model=MessageResponse)
def delete_section(
    page_name: str,
    section_id: str,
    service: PageContentServiceDep,
    _: AdminDep,
) -> dict[str, object]:
    service.delete_section(page_name, section_id)
    return build_message_envelope(message="Section deleted successfully")
