# This file defines page content schemas for section reads, writes, and bulk edits.
# Sections are addressed by the (page_name, section_id) pair taken from the URL.

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from union_cms.api.schemas.common import EnvelopeFields

ContentType = Literal["text", "html"]


class SectionCreateRequest(BaseModel):
    section_id: str | None = None
    section_title: str | None = None
    content: str | None = None
    content_type: ContentType | None = None
    display_order: int | None = None


class SectionUpdateRequest(BaseModel):
    section_title: str | None = None
    content: str | None = None
    content_type: ContentType | None = None
    display_order: int | None = None


class BulkSectionItem(BaseModel):
    section_id: str | None = None
    content: str | None = None
    section_title: str | None = None


class BulkUpdateRequest(BaseModel):
    sections: list[BulkSectionItem] | None = None


class PageSectionV1(BaseModel):
    id: int
    page_name: str
    section_id: str
    section_title: str | None = None
    content: str
    content_type: str
    display_order: int
    updated_at: datetime | None = None


class SectionSummaryV1(BaseModel):
    id: int
    title: str | None = None
    content: str
    type: str


class PageSectionResponseV1(EnvelopeFields):
    data: PageSectionV1


class AllPagesResponseV1(EnvelopeFields):
    data: dict[str, list[PageSectionV1]]


class PageContentResponseV1(EnvelopeFields):
    page: str
    data: dict[str, SectionSummaryV1]


class BulkUpdateResultV1(BaseModel):
    processed: int
    rows_affected: int


class BulkUpdateResponseV1(EnvelopeFields):
    data: BulkUpdateResultV1
