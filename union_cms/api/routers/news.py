# This file defines news article endpoints.
# It exists so visitors can read published articles and admins can manage the full list.
# Static paths such as `/all` are registered before `/{news_id}` so they match first.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from union_cms.api.dependencies import AdminDep, RecordId, get_news_service
from union_cms.api.response_envelope import build_message_envelope, build_object_envelope
from union_cms.api.schemas.common import MessageResponse
from union_cms.api.schemas.news_schemas import (
    NewsArticleListResponseV1,
    NewsArticleResponseV1,
    NewsCreateRequest,
    NewsUpdateRequest,
    PublishStateResponseV1,
)
from union_cms.api.services.news_service import NewsService

router = APIRouter(prefix="/api/news", tags=["news"])
NewsServiceDep = Annotated[NewsService, Depends(get_news_service)]


@router.get("", response_model=NewsArticleListResponseV1)
def list_news(
    service: NewsServiceDep,
    category: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=0),
    published: bool | None = Query(default=None),
) -> dict[str, object]:
    articles = service.list_published(category=category, limit=limit, published=published)
    return build_object_envelope(data=articles)


@router.get("/all", response_model=NewsArticleListResponseV1)
def list_all_news(service: NewsServiceDep, _: AdminDep) -> dict[str, object]:
    return build_object_envelope(data=service.list_all())


@router.get("/{news_id}", response_model=NewsArticleResponseV1)
def get_news(news_id: RecordId, service: NewsServiceDep) -> dict[str, object]:
    return build_object_envelope(data=service.get_by_id(news_id))


@router.post("", status_code=201, response_model=NewsArticleResponseV1)
def create_news(
    body: NewsCreateRequest,
    service: NewsServiceDep,
    _: AdminDep,
) -> dict[str, object]:
    article = service.create(**body.model_dump())
    return build_object_envelope(data=article, message="News created successfully")


@router.put("/{news_id}", response_model=NewsArticleResponseV1)
def update_news(
    news_id: RecordId,
    body: NewsUpdateRequest,
    service: NewsServiceDep,
    _: AdminDep,
) -> dict[str, object]:
    article = service.update(news_id, **body.model_dump())
    return build_object_envelope(data=article, message="News updated successfully")


@router.delete("/{news_id}", response_model=MessageResponse)
def delete_news(news_id: RecordId, service: NewsServiceDep, _: AdminDep) -> dict[str, object]:
    service.delete(news_id)
    return build_message_envelope(message="News deleted successfully")


@router.patch("/{news_id}/toggle-publish", response_model=PublishStateResponseV1)
def toggle_publish(news_id: RecordId, service: NewsServiceDep, _: AdminDep) -> dict[str, object]:
    state = service.toggle_publish(news_id)
    message = "News published" if state["published"] else "News unpublished"
    return build_object_envelope(data=state, message=message)
