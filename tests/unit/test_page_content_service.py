"""
Unit tests for the page content service.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

from contextlib import contextmanager

import pytest
from sqlalchemy.exc import OperationalError

from union_cms.api.error_handlers import ConflictError, InvalidInputError, NotFoundError
from union_cms.api.services.page_content_service import PageContentService


def test_display_order_continues_from_page_maximum(db) -> None:
    service = PageContentService(db=db)
    service.create_section("guide", section_id="a", content="A", display_order=5)
    created = service.create_section("guide", section_id="b", content="B")
    other_page = service.create_section("faq", section_id="a", content="A")

    assert created["display_order"] == 6
    assert other_page["display_order"] == 1


def test_page_sections_are_keyed_by_section_id(db) -> None:
    service = PageContentService(db=db)
    service.create_section("guide", section_id="steps", content="<ol></ol>", content_type="html")

    sections = service.get_page_sections("guide")

    assert set(sections) == {"steps"}
    assert sections["steps"]["type"] == "html"
    assert sections["steps"]["content"] == "<ol></ol>"


def test_same_section_id_on_two_pages_is_allowed(db) -> None:
    service = PageContentService(db=db)
    service.create_section("home", section_id="title", content="Home")
    service.create_section("about", section_id="title", content="About")

    with pytest.raises(ConflictError, match="Section already exists"):
        service.create_section("home", section_id="title", content="Again")


def test_update_with_no_fields_keeps_values(db) -> None:
    service = PageContentService(db=db)
    service.create_section("home", section_id="title", content="Kept", section_title="Title")

    updated = service.update_section("home", "title")

    assert updated["content"] == "Kept"
    assert updated["section_title"] == "Title"


def test_invalid_content_type_is_rejected(db) -> None:
    service = PageContentService(db=db)
    with pytest.raises(InvalidInputError):
        service.create_section("home", section_id="x", content="y", content_type="markdown")


def test_bulk_update_is_all_or_nothing(db) -> None:
    service = PageContentService(db=db)
    service.create_section("home", section_id="title", content="Original")

    with pytest.raises(InvalidInputError, match="Each section requires section_id and content"):
        service.bulk_update_sections(
            "home",
            [{"section_id": "title", "content": "Changed"}, {"section_id": "", "content": "x"}],
        )

    assert service.get_section("home", "title")["content"] == "Original"


def test_bulk_update_requires_a_list(db) -> None:
    service = PageContentService(db=db)
    with pytest.raises(InvalidInputError, match="sections array is required"):
        service.bulk_update_sections("home", None)


def test_delete_missing_section_raises(db) -> None:
    service = PageContentService(db=db)
    with pytest.raises(NotFoundError):
        service.delete_section("home", "nope")


def test_list_all_pages_groups_by_page(db) -> None:
    service = PageContentService(db=db)
    service.create_section("home", section_id="one", content="1")
    service.create_section("home", section_id="two", content="2")
    service.create_section("contact", section_id="email", content="mail@example.com")

    pages = service.list_all_pages()

    assert [row["section_id"] for row in pages["home"]] == ["one", "two"]
    assert [row["section_id"] for row in pages["contact"]] == ["email"]


class _FailOnSecondStatement:
    """Connection wrapper that lets the first statement through and fails the next."""

    def __init__(self, connection) -> None:
        self._connection = connection
        self.calls = 0

    def execute(self, *args, **kwargs):
        self.calls += 1
        if self.calls == 2:
            raise OperationalError("UPDATE page_content", {}, RuntimeError("disk I/O error"))
        return self._connection.execute(*args, **kwargs)


def test_bulk_update_rolls_back_when_a_statement_fails(
    db, monkeypatch: pytest.MonkeyPatch
) -> None:
    service = PageContentService(db=db)
    service.create_section("home", section_id="title", content="Original title")
    service.create_section("home", section_id="subtitle", content="Original subtitle")
    real_transaction = db.transaction

    @contextmanager
    def failing_transaction():
        with real_transaction() as connection:
            yield _FailOnSecondStatement(connection)

    monkeypatch.setattr(db, "transaction", failing_transaction)
    with pytest.raises(OperationalError):
        service.bulk_update_sections(
            "home",
            [
                {"section_id": "title", "content": "New title"},
                {"section_id": "subtitle", "content": "New subtitle"},
            ],
        )

    assert service.get_section("home", "title")["content"] == "Original title"
    assert service.get_section("home", "subtitle")["content"] == "Original subtitle"
