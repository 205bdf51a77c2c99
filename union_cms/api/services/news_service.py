# This file implements news article storage and publication state.
# It exists so routers can list, edit, and publish articles without embedding SQL.
# Lists are ordered newest first with the id as a stable tie-breaker.
# Updates keep stored values for any field the caller leaves out.

from __future__ import annotations

import logging
from typing import Any

from union_cms.api.db_access import DatabaseClient
from union_cms.api.error_handlers import InvalidInputError, NotFoundError
from union_cms.api.services.validation import normalize_flags, require_fields

logger = logging.getLogger(__name__)

NEWS_CATEGORIES: tuple[str, ...] = ("news", "event", "announcement")

_NEWS_COLUMNS = """
    id, title, content, category, image_url, location, published, created_at, updated_at
"""


def _article(row: dict[str, Any]) -> dict[str, Any]:
    return normalize_flags(row, "published")


class NewsService:
    """CRUD operations for news articles."""

    def __init__(self, *, db: DatabaseClient) -> None:
        self.db = db

    def list_published(
        self,
        *,
        category: str | None = None,
        limit: int | None = None,
        published: bool | None = None,
    ) -> list[dict[str, Any]]:
        where_clauses: list[str] = ["published = :published"]
        params: dict[str, Any] = {"published": True if published is None else published}

        if category and category != "all":
            where_clauses.append("category = :category")
            params["category"] = category

        query = f"""
        SELECT {_NEWS_COLUMNS}
        FROM news
        WHERE {" AND ".join(where_clauses)}
        ORDER BY created_at DESC, id DESC
        """
        # A limit of 0 means no limit.
        if limit:
            query += "\nLIMIT :limit"
            params["limit"] = limit

        return [_article(row) for row in self.db.fetch_all(query, params)]

    def list_all(self) -> list[dict[str, Any]]:
        rows = self.db.fetch_all(
            f"SELECT {_NEWS_COLUMNS} FROM news ORDER BY created_at DESC, id DESC"
        )
        return [_article(row) for row in rows]

    def get_by_id(self, news_id: int) -> dict[str, Any]:
        row = self.db.fetch_one(
            f"SELECT {_NEWS_COLUMNS} FROM news WHERE id = :id", {"id": news_id}
        )
        if row is None:
            raise NotFoundError("News not found")
        return _article(row)

    def create(
        self,
        *,
        title: str | None,
        content: str | None,
        category: str | None = None,
        image_url: str | None = None,
        location: str | None = None,
        published: bool | None = None,
    ) -> dict[str, Any]:
        require_fields(
            {"title": title, "content": content},
            ("title", "content"),
            "Title and content are required",
        )
        resolved_category = category or "news"
        if resolved_category not in NEWS_CATEGORIES:
            raise InvalidInputError("Invalid category")

        news_id = self.db.insert(
            """
            INSERT INTO news (title, content, category, image_url, location, published)
            VALUES (:title, :content, :category, :image_url, :location, :published)
            """,
            {
                "title": title,
                "content": content,
                "category": resolved_category,
                "image_url": image_url or None,
                "location": location or None,
                "published": True if published is None else published,
            },
        )
        logger.info("Created news article %d", news_id)
        return self.get_by_id(news_id)

    def update(
        self,
        news_id: int,
        *,
        title: str | None = None,
        content: str | None = None,
        category: str | None = None,
        image_url: str | None = None,
        location: str | None = None,
        published: bool | None = None,
    ) -> dict[str, Any]:
        if category is not None and category not in NEWS_CATEGORIES:
            raise InvalidInputError("Invalid category")
        self.get_by_id(news_id)

        self.db.execute(
            """
            UPDATE news SET
                title = COALESCE(:title, title),
                content = COALESCE(:content, content),
                category = COALESCE(:category, category),
                image_url = COALESCE(:image_url, image_url),
                location = COALESCE(:location, location),
                published = COALESCE(:published, published),
                updated_at = CURRENT_TIMESTAMP
            WHERE id = :id
            """,
            {
                "title": title,
                "content": content,
                "category": category,
                "image_url": image_url,
                "location": location,
                "published": published,
                "id": news_id,
            },
        )
        logger.info("Updated news article %d", news_id)
        return self.get_by_id(news_id)

    def delete(self, news_id: int) -> None:
        self.get_by_id(news_id)
        self.db.execute("DELETE FROM news WHERE id = :id", {"id": news_id})
        logger.info("Deleted news article %d", news_id)

    def toggle_publish(self, news_id: int) -> dict[str, Any]:
        existing = self.get_by_id(news_id)
        new_state = not existing["published"]
        self.db.execute(
            "UPDATE news SET published = :published, updated_at = CURRENT_TIMESTAMP WHERE id = :id",
            {"published": new_state, "id": news_id},
        )
        logger.info("News article %d published=%s", news_id, new_state)
        return {"id": news_id, "published": new_state}
