"""FastAPI router for the boundary diagnostic endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from athena.core.errors import DiagnosticError
from athena.diagnostic.models import DiagnosticInput, DiagnosticResponse
from athena.diagnostic.service import DiagnosticService

logger = logging.getLogger(__name__)

router = APIRouter()

DIAGNOSTIC_PATH = "/api/diagnostic"


def _get_diagnostic_service(request: Request) -> DiagnosticService:
    service = getattr(request.app.state, "diagnostic_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Diagnostic service not available")
    return service


@router.options(DIAGNOSTIC_PATH)
async def diagnostic_preflight() -> Response:
    """Answer CORS preflight requests with headers only."""
    return Response(status_code=200)


@router.api_route(DIAGNOSTIC_PATH, methods=["GET", "PUT", "PATCH", "DELETE"])
async def diagnostic_method_not_allowed() -> JSONResponse:
    return JSONResponse(
        status_code=405,
        content={"error": "Method not allowed. Please use POST."},
    )


@router.post(DIAGNOSTIC_PATH, response_model=DiagnosticResponse)
async def run_diagnostic(request: Request) -> DiagnosticResponse | JSONResponse:
    """Classify a form-encoded submission and return the HTML fragment."""
    service = _get_diagnostic_service(request)

    try:
        form = await request.form()
        data = DiagnosticInput.from_form(form)
        diagnostic = service.run(data)
    except DiagnosticError as exc:
        logger.info("Rejected diagnostic submission: %s", exc)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
    except Exception as exc:
        logger.exception("Diagnostic processing failed")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(exc)},
        )

    return DiagnosticResponse(diagnostic=diagnostic)
