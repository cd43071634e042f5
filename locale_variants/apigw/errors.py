"""Gestion standardisée des erreurs API avec enveloppes d'erreur.

Ce module fournit une gestion centralisée des erreurs: enveloppe JSON unique
`{code, message, trace_id, details?}`, correspondance des erreurs métier vers les statuts HTTP
et enregistrement des handlers sur l'application FastAPI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from locale_variants.core.http_constants import (
    HTTP_BAD_GATEWAY,
    HTTP_BAD_REQUEST,
    HTTP_CONFLICT,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_FOUND,
)
from locale_variants.core.logging import get_logger
from locale_variants.domain.errors import (
    Conflict,
    NotFound,
    TranslationError,
    ValidationError,
    VariantError,
)

log = get_logger(__name__, "apigw.errors")


@dataclass
class ErrorEnvelope:
    """Standard error envelope for API responses."""

    code: str
    message: str
    trace_id: str | None = None
    details: dict[str, Any] | None = None


class APIError(HTTPException):
    """Custom API error with standard envelope."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        trace_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize an API error with standardized envelope."""
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.message = message
        self.trace_id = trace_id
        self.details = details


# Common error codes
class ErrorCodes:
    """Standard error codes for the API."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    CONFLICT = "CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    TRANSLATION_FAILED = "TRANSLATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_GATEWAY = "BAD_GATEWAY"


HTTP_ERROR_CODES = {
    400: ErrorCodes.BAD_REQUEST,
    404: ErrorCodes.NOT_FOUND,
    405: ErrorCodes.METHOD_NOT_ALLOWED,
    409: ErrorCodes.CONFLICT,
    422: ErrorCodes.VALIDATION_ERROR,
    500: ErrorCodes.INTERNAL_ERROR,
    502: ErrorCodes.BAD_GATEWAY,
}

# Ordre significatif: sous-classes avant VariantError.
DOMAIN_STATUS: tuple[tuple[type[VariantError], int], ...] = (
    (ValidationError, HTTP_BAD_REQUEST),
    (NotFound, HTTP_NOT_FOUND),
    (Conflict, HTTP_CONFLICT),
    (TranslationError, HTTP_BAD_GATEWAY),
)


def status_for(exc: VariantError) -> int:
    """Statut HTTP d'une erreur métier (500 pour une erreur non répertoriée)."""
    for error_type, status in DOMAIN_STATUS:
        if isinstance(exc, error_type):
            return status
    return HTTP_INTERNAL_SERVER_ERROR


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    trace_id: str | None = None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    envelope = ErrorEnvelope(code=code, message=message, trace_id=trace_id, details=details)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {
                "code": envelope.code,
                "message": envelope.message,
                "trace_id": envelope.trace_id,
                **({"details": envelope.details} if envelope.details else {}),
            }
        ),
    )


def extract_trace_id(request: Request) -> str | None:
    """Trace ID from the X-Trace-ID header, else the request id set by middleware."""
    trace_id = request.headers.get("X-Trace-ID")
    if trace_id:
        return trace_id
    return getattr(request.state, "trace_id", None)


def handle_variant_error(request: Request, exc: VariantError) -> JSONResponse:
    """Erreurs métier -> 400/404/409/502 selon leur type."""
    trace_id = extract_trace_id(request)
    status = status_for(exc)
    log.warning(
        "domain_error",
        code=exc.code,
        error_message=exc.message,
        status_code=status,
        trace_id=trace_id,
        path=request.url.path,
    )
    return create_error_response(status, exc.code, exc.message, trace_id, exc.details)


def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Corps/paramètres invalides -> 400 VALIDATION_ERROR, avec le détail pydantic."""
    trace_id = extract_trace_id(request)
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    log.info(
        "request_validation_failed", trace_id=trace_id, path=request.url.path, errors=len(errors)
    )
    return create_error_response(
        HTTP_BAD_REQUEST,
        ErrorCodes.VALIDATION_ERROR,
        message,
        trace_id,
        {"errors": [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in errors]},
    )


def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions with standard envelope."""
    trace_id = extract_trace_id(request) or exc.trace_id
    log.error(
        "api_error",
        code=exc.code,
        error_message=exc.message,
        status_code=exc.status_code,
        trace_id=trace_id,
    )
    return create_error_response(exc.status_code, exc.code, exc.message, trace_id, exc.details)


def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle FastAPI HTTPException with standard envelope."""
    if isinstance(exc, APIError):
        return handle_api_error(request, exc)
    trace_id = extract_trace_id(request)
    code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    log.info(
        "http_exception",
        code=code,
        error_message=str(exc.detail),
        status_code=exc.status_code,
        trace_id=trace_id,
    )
    return create_error_response(exc.status_code, code, str(exc.detail), trace_id)


def handle_generic_exception(request: Request, exc: Exception) -> JSONResponse:
    """Handle generic exceptions with standard envelope."""
    trace_id = extract_trace_id(request)
    log.error(
        "unexpected_error",
        trace_id=trace_id,
        exception_type=type(exc).__name__,
        exception_message=str(exc),
        exc_info=True,
    )
    return create_error_response(
        HTTP_INTERNAL_SERVER_ERROR,
        ErrorCodes.INTERNAL_ERROR,
        "An unexpected error occurred",
        trace_id,
    )


def register_error_handlers(app: FastAPI) -> None:
    """Branche les handlers d'erreurs sur l'application."""
    app.add_exception_handler(VariantError, handle_variant_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_generic_exception)


def not_found(message: str, trace_id: str | None = None) -> APIError:
    """Create a 404 Not Found error."""
    return APIError(HTTP_NOT_FOUND, ErrorCodes.NOT_FOUND, message, trace_id)
