# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, Prometheus metrics, and optional request logging.
# Uploaded images are served from the configured public prefix by a static files mount.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from union_cms.api.api_config import ApiConfig, get_api_config
from union_cms.api.dependencies import AppContext
from union_cms.api.error_handlers import register_error_handlers
from union_cms.api.routers.auth import router as auth_router
from union_cms.api.routers.health import router as health_router
from union_cms.api.routers.media import router as media_router
from union_cms.api.routers.memberships import router as memberships_router
from union_cms.api.routers.messages import router as messages_router
from union_cms.api.routers.news import router as news_router
from union_cms.api.routers.pages import router as pages_router
from union_cms.api.schemas.common import ErrorResponse
from union_cms.common.bootstrap import initialize_database
from union_cms.common.logging import configure_logging

logger = logging.getLogger(__name__)

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method"],
)

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status_code: {"model": ErrorResponse} for status_code in (400, 401, 404, 500)
}


def _route_label(request: Request) -> str:
    # Route templates keep label cardinality bounded; unmatched paths share one label.
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    return path if isinstance(path, str) else "unmatched"


def create_app(config: ApiConfig | None = None) -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = config or get_api_config()
    context = AppContext.from_config(config)

    app = FastAPI(
        title=config.api_name,
        description=(
            "Content management API for the student union website: editable page sections, "
            "news, contact messages, membership applications, and home page media."
        ),
        version=config.app_version,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
            {"name": "auth", "description": "Admin login sessions and password changes."},
            {"name": "pages", "description": "Editable page sections keyed by page and section id."},
            {"name": "news", "description": "News articles with publish state."},
            {"name": "messages", "description": "Contact form messages."},
            {"name": "memberships", "description": "Membership applications and review status."},
            {"name": "media", "description": "Hero slides, specialties, uploads, and video links."},
        ],
    )
    app.state.context = context

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"

            if config.enable_request_logging:
                logger.info(
                    "%s %s -> %d in %.2fms [%s]",
                    request.method,
                    request.url.path,
                    status_code,
                    duration_ms,
                    request_id,
                )
            return response
        finally:
            duration_s = time.perf_counter() - started
            path_label = _route_label(request)
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def startup_bootstrap() -> None:
        initialize_database(
            context.db.engine,
            default_admin_username=config.default_admin_username,
            default_admin_password=config.default_admin_password,
            seed_default_content=config.seed_default_content,
        )
        logger.info("Database ready for %s (%s)", config.api_name, config.environment)

    @app.on_event("shutdown")
    def shutdown_cleanup() -> None:
        context.db.dispose()

    register_error_handlers(app, expose_internal_errors=not config.is_production)

    app.include_router(health_router)
    app.include_router(auth_router, responses=_ERROR_RESPONSES)
    app.include_router(pages_router, responses=_ERROR_RESPONSES)
    app.include_router(news_router, responses=_ERROR_RESPONSES)
    app.include_router(messages_router, responses=_ERROR_RESPONSES)
    app.include_router(memberships_router, responses=_ERROR_RESPONSES)
    app.include_router(media_router, responses=_ERROR_RESPONSES)

    # The directory must exist before StaticFiles is built.
    context.uploads.ensure_root()
    app.mount(
        config.upload_url_prefix,
        StaticFiles(directory=str(context.uploads.root_dir)),
        name="uploads",
    )

    return app
