# This file provides shared helpers for API endpoint tests.
# Each client gets a fresh app bound to a temporary SQLite file and upload directory.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from fastapi.testclient import TestClient

from union_cms.api.api_config import ApiConfig
from union_cms.api.app import create_app
from union_cms.api.dependencies import get_database_client

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


def build_test_config(tmp_path: Path, **overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test Union API",
        "host": "0.0.0.0",
        "port": 3000,
        "environment": "test",
        "database_url": f"sqlite:///{tmp_path / 'api.db'}",
        "app_version": "0.1.0",
        "allowed_origins": [],
        "enable_request_logging": False,
        "session_cookie_name": "union_sid",
        "session_max_age_seconds": 3600,
        "upload_dir": str(tmp_path / "uploads"),
        "upload_url_prefix": "/assets/uploads",
        "max_upload_bytes": 5 * 1024 * 1024,
        "default_admin_username": ADMIN_USERNAME,
        "default_admin_password": ADMIN_PASSWORD,
        "seed_default_content": True,
    }
    values.update(overrides)
    return ApiConfig(**values)


class FakeDBClient:
    """Simple fake DB dependency for readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_tables: set[str] | None = None) -> None:
        self._connected = connected
        self._tables = existing_tables or set()

    def can_connect(self) -> bool:
        return self._connected

    def table_exists(self, table_name: str) -> bool:
        return self._connected and table_name in self._tables


@contextmanager
def api_test_client(
    tmp_path: Path,
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient for a freshly created app with optional dependency overrides."""

    app = create_app(config or build_test_config(tmp_path))
    if db_client is not None:
        app.dependency_overrides[get_database_client] = lambda: db_client

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


def login(
    client: TestClient,
    *,
    username: str = ADMIN_USERNAME,
    password: str = ADMIN_PASSWORD,
) -> dict[str, Any]:
    """Log in with the default admin; the session cookie stays on the client."""

    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()
