"""
Unit tests for news and contact message services.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

from __future__ import annotations

import pytest

from union_cms.api.error_handlers import InvalidInputError, NotFoundError
from union_cms.api.services.message_service import MessageService
from union_cms.api.services.news_service import NewsService


def test_news_defaults(db) -> None:
    article = NewsService(db=db).create(title="T", content="C")

    assert article["category"] == "news"
    assert article["published"] is True
    assert article["image_url"] is None


def test_news_update_rejects_unknown_category(db) -> None:
    service = NewsService(db=db)
    article = service.create(title="T", content="C")

    with pytest.raises(InvalidInputError, match="Invalid category"):
        service.update(article["id"], category="sports")


def test_news_list_orders_newest_first(db) -> None:
    service = NewsService(db=db)
    older = service.create(title="Older", content="C")
    newer = service.create(title="Newer", content="C")

    ids = [item["id"] for item in service.list_published()]

    assert ids == [newer["id"], older["id"]]


def test_toggle_missing_article(db) -> None:
    with pytest.raises(NotFoundError, match="News not found"):
        NewsService(db=db).toggle_publish(12345)


def test_message_phone_is_optional(db) -> None:
    service = MessageService(db=db)
    message_id = service.submit(name="N", email="n@example.com", subject="S", message="M")

    stored = service.get_by_id(message_id)
    assert stored["phone"] is None
    assert stored["is_read"] is False


def test_mark_read_on_missing_message(db) -> None:
    with pytest.raises(NotFoundError, match="Message not found"):
        MessageService(db=db).mark_read(7)
