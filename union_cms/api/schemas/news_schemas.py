# This file defines news article schemas for listing, creation, and partial updates.
# Update bodies treat every field as optional; omitted or null fields keep stored values.

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from union_cms.api.schemas.common import EnvelopeFields

NewsCategory = Literal["news", "event", "announcement"]


class NewsCreateRequest(BaseModel):
    title: str | None = None
    content: str | None = None
    category: NewsCategory | None = None
    image_url: str | None = None
    location: str | None = None
    published: bool | None = None


class NewsUpdateRequest(BaseModel):
    title: str | None = None
    content: str | None = None
    category: NewsCategory | None = None
    image_url: str | None = None
    location: str | None = None
    published: bool | None = None


class NewsArticleV1(BaseModel):
    id: int
    title: str
    content: str
    category: str
    image_url: str | None = None
    location: str | None = None
    published: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


class NewsArticleResponseV1(EnvelopeFields):
    data: NewsArticleV1


class NewsArticleListResponseV1(EnvelopeFields):
    data: list[NewsArticleV1]


class PublishStateV1(BaseModel):
    id: int
    published: bool


class PublishStateResponseV1(EnvelopeFields):
    data: PublishStateV1
