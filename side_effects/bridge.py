"""HTTP bridge turning serverless platform events into ASGI calls."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from mangum import Mangum
from pydantic import BaseModel, ConfigDict, field_validator

from side_effects.settings import Settings, get_settings

LOGGER = structlog.get_logger(__name__)


class HttpApiConfig(BaseModel):
    """Bridge configuration; ``app`` is the only recognized option."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    app: Any

    @field_validator("app")
    @classmethod
    def app_must_be_callable(cls, value: Any) -> Any:
        if not callable(value):
            raise ValueError("app must be an ASGI callable")
        return value


def http_api(
    config: HttpApiConfig | Mapping[str, Any],
    *,
    settings: Settings | None = None,
) -> Mangum:
    """Return a Lambda handler driving ``config.app``.

    The handler is called as ``handler(event, context)`` and understands
    API Gateway (REST and HTTP), ALB and function URL events.
    """

    if not isinstance(config, HttpApiConfig):
        config = HttpApiConfig.model_validate(dict(config))
    settings = settings or get_settings()

    handler = Mangum(
        config.app,
        lifespan=settings.lambda_lifespan,
        api_gateway_base_path=settings.api_gateway_base_path,
    )
    LOGGER.info(
        "bridge.handler_created",
        app=type(config.app).__name__,
        lifespan=settings.lambda_lifespan,
        base_path=settings.api_gateway_base_path,
    )
    return handler
