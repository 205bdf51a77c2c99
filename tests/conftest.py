"""
Shared test configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from union_cms.api.db_access import DatabaseClient  # noqa: E402
from union_cms.common.bootstrap import initialize_database  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    defaults = {
        "PROJECT_NAME": "union-cms-test",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
        "DATABASE_URL": "sqlite:///./union-test.db",
        "API_HOST": "0.0.0.0",
        "API_PORT": "3000",
    }

    for key, value in defaults.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)


@pytest.fixture
def db(tmp_path: Path) -> Iterator[DatabaseClient]:
    """Bootstrapped database client on a temporary SQLite file without seeded pages."""

    client = DatabaseClient(database_url=f"sqlite:///{tmp_path / 'unit.db'}")
    initialize_database(
        client.engine,
        default_admin_username="admin",
        default_admin_password="admin123",
        seed_default_content=False,
    )
    yield client
    client.dispose()
