# This file tests page content endpoints, including bulk edits and display ordering.

from __future__ import annotations

from pathlib import Path

from tests.api.support import api_test_client, build_test_config, login


def test_seeded_page_content_is_public(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        page = client.get("/api/pages/home")
        all_pages = client.get("/api/pages")

    assert page.status_code == 200
    payload = page.json()
    assert payload["page"] == "home"
    hero_title = payload["data"]["hero_title"]
    assert hero_title["type"] == "text"
    assert hero_title["content"]
    assert set(all_pages.json()["data"]) >= {"home", "about", "contact"}


def test_unknown_page_returns_empty_mapping(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        response = client.get("/api/pages/no-such-page")

    assert response.status_code == 200
    assert response.json()["data"] == {}


def test_create_section_assigns_next_display_order(tmp_path: Path) -> None:
    config = build_test_config(tmp_path, seed_default_content=False)
    with api_test_client(tmp_path, config=config) as client:
        login(client)
        first = client.post("/api/pages/events", json={"section_id": "intro", "content": "Hi"})
        second = client.post("/api/pages/events", json={"section_id": "body", "content": "More"})
        explicit = client.post(
            "/api/pages/events",
            json={"section_id": "footer", "content": "Bye", "display_order": 10},
        )

    assert first.status_code == 201
    assert first.json()["message"] == "Section created successfully"
    assert first.json()["data"]["display_order"] == 1
    assert second.json()["data"]["display_order"] == 2
    assert explicit.json()["data"]["display_order"] == 10


def test_create_duplicate_section_is_a_conflict(tmp_path: Path) -> None:
    config = build_test_config(tmp_path, seed_default_content=False)
    with api_test_client(tmp_path, config=config) as client:
        login(client)
        client.post("/api/pages/events", json={"section_id": "intro", "content": "Hi"})
        duplicate = client.post("/api/pages/events", json={"section_id": "intro", "content": "x"})
        missing = client.post("/api/pages/events", json={"section_id": "other"})

    assert duplicate.status_code == 400
    assert duplicate.json()["error_code"] == "CONFLICT"
    assert duplicate.json()["message"] == "Section already exists"
    assert missing.status_code == 400
    assert missing.json()["message"] == "section_id and content are required"


def test_update_and_read_single_section(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        login(client)
        updated = client.put(
            "/api/pages/home/hero_title", json={"content": "New headline", "content_type": "html"}
        )
        read = client.get("/api/pages/home/hero_title")
        missing = client.put("/api/pages/home/no_section", json={"content": "x"})

    assert updated.status_code == 200
    assert updated.json()["data"]["content"] == "New headline"
    assert updated.json()["data"]["section_title"] == "Hero Title"
    assert read.json()["data"]["content_type"] == "html"
    assert missing.status_code == 404
    assert missing.json()["message"] == "Section not found"


def test_bulk_update_counts_processed_and_affected(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        login(client)
        response = client.put(
            "/api/pages/home/bulk",
            json={"sections": [{"section_id": "missing_section", "content": "Z"}]},
        )

    assert response.status_code == 200
    payload = response.json()
    assert payload["message"] == "Updated 1 sections successfully"
    assert payload["data"] == {"processed": 1, "rows_affected": 0}


def test_bulk_update_applies_all_items(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        login(client)
        response = client.put(
            "/api/pages/home/bulk",
            json={
                "sections": [
                    {"section_id": "hero_title", "content": "A"},
                    {"section_id": "hero_subtitle", "content": "B", "section_title": "Sub"},
                ]
            },
        )
        page = client.get("/api/pages/home").json()["data"]

    assert response.json()["data"] == {"processed": 2, "rows_affected": 2}
    assert page["hero_title"]["content"] == "A"
    assert page["hero_subtitle"]["content"] == "B"
    assert page["hero_subtitle"]["title"] == "Sub"


def test_bulk_update_rejects_malformed_payloads(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        login(client)
        no_sections = client.put("/api/pages/home/bulk", json={})
        bad_item = client.put(
            "/api/pages/home/bulk",
            json={
                "sections": [
                    {"section_id": "hero_title", "content": "kept out"},
                    {"section_id": "hero_subtitle"},
                ]
            },
        )
        page = client.get("/api/pages/home").json()["data"]

    assert no_sections.status_code == 400
    assert no_sections.json()["message"] == "sections array is required"
    assert bad_item.status_code == 400
    assert bad_item.json()["message"] == "Each section requires section_id and content"
    assert page["hero_title"]["content"] != "kept out"


def test_page_writes_require_session(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        create = client.post("/api/pages/home", json={"section_id": "x", "content": "y"})
        bulk = client.put("/api/pages/home/bulk", json={"sections": []})
        delete = client.delete("/api/pages/home/hero_title")

    assert create.status_code == 401
    assert bulk.status_code == 401
    assert delete.status_code == 401


def test_delete_section(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        login(client)
        deleted = client.delete("/api/pages/home/hero_title")
        read = client.get("/api/pages/home/hero_title")

    assert deleted.status_code == 200
    assert read.status_code == 404


def test_content_only_update_keeps_title_and_type(tmp_path: Path) -> None:
    config = build_test_config(tmp_path, seed_default_content=False)
    with api_test_client(tmp_path, config=config) as client:
        login(client)
        client.post(
            "/api/pages/about",
            json={
                "section_id": "story",
                "section_title": "Our Story",
                "content": "<p>Old</p>",
                "content_type": "html",
                "display_order": 4,
            },
        )
        response = client.put("/api/pages/about/story", json={"content": "<p>New</p>"})

    assert response.status_code == 200
    section = response.json()["data"]
    assert section["content"] == "<p>New</p>"
    assert section["section_title"] == "Our Story"
    assert section["content_type"] == "html"
    assert section["display_order"] == 4
