# This file defines runtime settings for the API layer in one place.
# It exists so session, upload, and bootstrap behavior can be configured without code edits.
# The config loader reads environment variables and applies safe defaults for local development.
# It also validates the upload URL prefix so uploaded files always map to a public path.

from __future__ import annotations

import os
import re
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

_SLUG_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Student Union Website API"
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "development"
    database_url: str
    app_version: str = "0.1.0"
    allowed_origins: list[str] = Field(default_factory=list)
    enable_request_logging: bool = False
    session_cookie_name: str = "union_sid"
    session_max_age_seconds: int = 24 * 60 * 60
    upload_dir: str = "uploads"
    upload_url_prefix: str = "/assets/uploads"
    max_upload_bytes: int = 5 * 1024 * 1024
    default_admin_username: str = "admin"
    default_admin_password: str = "admin123"
    seed_default_content: bool = True

    @field_validator("upload_url_prefix")
    @classmethod
    def validate_upload_url_prefix(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("upload_url_prefix must start with '/'.")
        cleaned = value.rstrip("/")
        if not cleaned:
            raise ValueError("upload_url_prefix must not be the site root.")
        return cleaned

    @field_validator("session_cookie_name")
    @classmethod
    def validate_cookie_name(cls, value: str) -> str:
        if not _SLUG_RE.match(value):
            raise ValueError(f"Unsafe cookie name: {value!r}")
        return value

    @field_validator("port", "session_max_age_seconds", "max_upload_bytes")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Student Union Website API"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 3000),
        "environment": os.getenv("ENV", "development"),
        "database_url": os.getenv("DATABASE_URL", ""),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "enable_request_logging": _env_bool("API_ENABLE_REQUEST_LOGGING", False),
        "session_cookie_name": os.getenv("SESSION_COOKIE_NAME", "union_sid"),
        "session_max_age_seconds": _env_int("SESSION_MAX_AGE_SECONDS", 24 * 60 * 60),
        "upload_dir": os.getenv("UPLOAD_DIR", "uploads"),
        "upload_url_prefix": os.getenv("UPLOAD_URL_PREFIX", "/assets/uploads"),
        "max_upload_bytes": _env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024),
        "default_admin_username": os.getenv("DEFAULT_ADMIN_USERNAME", "admin"),
        "default_admin_password": os.getenv("DEFAULT_ADMIN_PASSWORD", "admin123"),
        "seed_default_content": _env_bool("SEED_DEFAULT_CONTENT", True),
    }
    if not config_values["database_url"]:
        raise RuntimeError("DATABASE_URL is required for API startup.")

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
