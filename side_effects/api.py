"""FastAPI application demonstrating side effects behind a serverless bridge."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Annotated, Any

import structlog
from fastapi import Depends, FastAPI, HTTPException, Request, Response

from side_effects import metrics
from side_effects.generators import NumberSource
from side_effects.settings import Settings, get_settings

SettingsDep = Annotated[Settings, Depends(get_settings)]

LOGGER = structlog.get_logger(__name__)

ROUTES = (
    "/number",
    "/number/{upper}",
    "/number/{lower}/{upper}",
    "/unit",
)


def configure_logging(log_level: str) -> None:
    numeric_level = logging.getLevelName(log_level.upper())
    if isinstance(numeric_level, str):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def init(settings: Settings | None = None) -> FastAPI:
    """Build the application instance driven by the HTTP bridge."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="SideEffects API", version=settings.service_version)
    source = NumberSource(settings.random_seed)
    app.dependency_overrides[get_settings] = lambda: settings

    @app.middleware("http")
    async def record_latency(request: Request, call_next):
        start = perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        metrics.observe_request(
            route=getattr(route, "path", "unmatched"),
            latency_ms=(perf_counter() - start) * 1000,
        )
        return response

    @app.get("/")
    async def index() -> dict[str, Any]:
        return {
            "service": "side-effects",
            "version": settings.service_version,
            "routes": list(ROUTES),
        }

    @app.get("/healthz", response_class=Response)
    async def healthz() -> Response:
        return Response(content="ok\n", media_type="text/plain")

    @app.get("/number")
    async def number() -> int:
        return source.number(0, settings.number_upper_bound)

    @app.get("/number/{upper}")
    async def number_up_to(upper: int) -> int:
        return source.number(0, upper)

    @app.get("/number/{lower}/{upper}")
    async def number_between(lower: int, upper: int) -> int:
        return source.number(lower, upper)

    @app.get("/unit")
    async def unit() -> float:
        return source.unit()

    @app.get("/metrics")
    async def metrics_endpoint(settings: SettingsDep) -> Response:
        if not settings.metrics_enabled:
            raise HTTPException(status_code=404, detail="metrics disabled")
        payload, content_type = metrics.render_metrics()
        return Response(content=payload, media_type=content_type)

    LOGGER.info(
        "api.init",
        version=settings.service_version,
        seeded=settings.random_seed is not None,
    )
    return app
