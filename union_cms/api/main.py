"""ASGI entrypoint: `uvicorn union_cms.api.main:app`."""

from __future__ import annotations

from union_cms.api.app import create_app

app = create_app()
