"""Cross-origin response headers driven by CorsConfig."""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from athena.core.config import CorsConfig


def cors_headers(config: CorsConfig, origin: str | None) -> dict[str, str]:
    """Build the CORS headers for a response to ``origin``.

    A wildcard allow-list answers ``*``. Otherwise the request origin is
    echoed back only when it is on the allow-list.
    """
    headers = {
        "Access-Control-Allow-Methods": ", ".join(config.allow_methods),
        "Access-Control-Allow-Headers": ", ".join(config.allow_headers),
        "Access-Control-Max-Age": str(config.max_age),
    }
    if config.allows_any_origin:
        headers["Access-Control-Allow-Origin"] = "*"
    elif origin and origin in config.allow_origins:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    return headers


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that stamps CORS headers on every response."""

    def __init__(self, app: ASGIApp, config: CorsConfig) -> None:
        super().__init__(app)
        self._config = config

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        response.headers.update(cors_headers(self._config, request.headers.get("origin")))
        return response
