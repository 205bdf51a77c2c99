# This file tests API health, readiness, version, and metrics endpoints.
# The tests confirm request IDs and timing headers are always returned.

from __future__ import annotations

from pathlib import Path

from tests.api.support import FakeDBClient, api_test_client, build_test_config


def test_health_endpoint_returns_expected_fields(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(tmp_path, config=config) as client:
        response = client.get("/health", headers={"x-request-id": "req-123"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["environment"] == "test"
    assert payload["service_name"] == config.api_name
    assert payload["request_id"] == "req-123"
    assert response.headers["x-request-id"] == "req-123"
    assert "x-response-time-ms" in response.headers


def test_ready_endpoint_reports_bootstrapped_database(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        response = client.get("/ready")

    assert response.status_code == 200
    payload = response.json()
    assert payload["db_connected"] is True
    assert payload["tables_ready"] is True
    assert payload["missing_tables"] == []
    assert payload["ready"] is True


def test_ready_endpoint_reports_missing_tables(tmp_path: Path) -> None:
    db_client = FakeDBClient(connected=True, existing_tables={"admins", "news"})
    with api_test_client(tmp_path, db_client=db_client) as client:
        response = client.get("/ready")

    payload = response.json()
    assert payload["ready"] is False
    assert "page_content" in payload["missing_tables"]
    assert "admins" not in payload["missing_tables"]


def test_ready_endpoint_reports_unreachable_database(tmp_path: Path) -> None:
    with api_test_client(tmp_path, db_client=FakeDBClient(connected=False)) as client:
        response = client.get("/ready")

    payload = response.json()
    assert payload["db_connected"] is False
    assert payload["database"] == "unreachable"
    assert payload["ready"] is False


def test_version_endpoint_returns_version_metadata(tmp_path: Path) -> None:
    config = build_test_config(tmp_path)
    with api_test_client(tmp_path, config=config) as client:
        response = client.get("/version")

    assert response.status_code == 200
    payload = response.json()
    assert payload["app_version"] == config.app_version
    assert payload["project"] == config.api_name
    assert payload["version"] == config.app_version


def test_metrics_endpoint_exposes_request_counters(tmp_path: Path) -> None:
    with api_test_client(tmp_path) as client:
        client.get("/health")
        response = client.get("/metrics")

    assert response.status_code == 200
    assert "api_http_requests_total" in response.text
