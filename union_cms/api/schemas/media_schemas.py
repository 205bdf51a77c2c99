# This file defines hero slide, specialty, upload, and video link schemas.
# Specialty `items` travel as a JSON list and are stored serialized.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from union_cms.api.schemas.common import EnvelopeFields


class HeroSlideCreateRequest(BaseModel):
    title: str | None = None
    subtitle: str | None = None
    image_url: str | None = None
    link_url: str | None = None
    link_text: str | None = None
    display_order: int | None = None
    is_active: bool | None = None


class HeroSlideUpdateRequest(HeroSlideCreateRequest):
    pass


class HeroSlideV1(BaseModel):
    id: int
    title: str | None = None
    subtitle: str | None = None
    image_url: str
    link_url: str | None = None
    link_text: str | None = None
    display_order: int
    is_active: bool
    created_at: datetime | None = None


class HeroSlideResponseV1(EnvelopeFields):
    data: HeroSlideV1


class HeroSlideListResponseV1(EnvelopeFields):
    data: list[HeroSlideV1]


class SpecialtyCreateRequest(BaseModel):
    name: str | None = None
    name_ar: str | None = None
    icon: str | None = None
    description: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    video_type: str | None = None
    items: list[str] | None = None
    duration: str | None = None
    display_order: int | None = None
    is_active: bool | None = None


class SpecialtyUpdateRequest(SpecialtyCreateRequest):
    pass


class SpecialtyV1(BaseModel):
    id: int
    name: str
    name_ar: str
    icon: str | None = None
    description: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    video_type: str
    items: list[str]
    duration: str | None = None
    display_order: int
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SpecialtyResponseV1(EnvelopeFields):
    data: SpecialtyV1


class SpecialtyListResponseV1(EnvelopeFields):
    data: list[SpecialtyV1]


class UploadResultV1(BaseModel):
    url: str
    filename: str
    size: int


class UploadResponseV1(EnvelopeFields):
    data: UploadResultV1


class DeleteUploadRequest(BaseModel):
    url: str | None = None


class ParseVideoRequest(BaseModel):
    url: str | None = None


class VideoInfoV1(BaseModel):
    type: str
    id: str
    embedUrl: str


class VideoInfoResponseV1(EnvelopeFields):
    data: VideoInfoV1
