"""FastAPI application for the Athena boundary diagnostic.

Serves the diagnostic endpoint consumed by the static documentation site,
plus a health check. Run with::

    uvicorn athena.web.app:create_app --factory --port 8080
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from pydantic import BaseModel

from athena import __version__
from athena.classification.rules import ClassificationEngine
from athena.core.config import Settings
from athena.diagnostic.service import DiagnosticService
from athena.web.cors import CorsHeadersMiddleware
from athena.web.diagnostic_router import router as diagnostic_router


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = __version__


# --- Application factory ---


def create_app(
    settings: Settings | None = None,
    engine: ClassificationEngine | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with their own settings and catalog.

    Args:
        settings: Application settings. Defaults to Settings().
        engine: Optional pre-built ClassificationEngine.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("athena").setLevel(settings.log_level.upper())

    app = FastAPI(
        title="Athena Boundary Diagnostic",
        description="Keyword-based classification of institutional boundary behavior",
        version=__version__,
        debug=settings.debug,
    )

    app.add_middleware(CorsHeadersMiddleware, config=settings.cors)

    if engine is None:
        engine = ClassificationEngine(catalog_path=settings.classification.catalog_path)

    # Store on app state for access in route handlers
    app.state.settings = settings
    app.state.diagnostic_service = DiagnosticService(engine=engine)

    app.include_router(diagnostic_router)

    # --- Routes ---

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service="athena-diagnostic",
        )

    return app
