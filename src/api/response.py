"""Standardized error response builder."""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.config.constants import MSG_INVALID_REQUEST
from src.orchestrator.errors import PipelineError

logger = logging.getLogger(__name__)


def build_error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    """Build an ``{error, details?}`` JSON response with Pydantic validation."""
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body)


async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    """Exception handler for every surfaced pipeline failure."""
    logger.warning(
        "%s %s -> %s %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        type(exc).__name__,
        exc.error,
    )
    return build_error_response(exc.status_code, exc.error, exc.details)


def _summarize_validation_errors(exc: RequestValidationError) -> str:
    """``field: message`` pairs, one per failed field, without the ``body`` prefix."""
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies answer 400 in the same ``{error, details}`` shape."""
    details = _summarize_validation_errors(exc)
    logger.warning("%s %s -> 400 invalid request: %s", request.method, request.url.path, details)
    return build_error_response(400, MSG_INVALID_REQUEST, details or None)
