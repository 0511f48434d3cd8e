"""
Application errors and their HTTP mapping.
Challenge: Two recoverable error kinds (bad input, unknown id) plus one server fault.
Design: Services raise; handlers registered on the app turn errors into the response envelope.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""

    code = "INTERNAL_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None):
        self.message = message
        self.details = details or []
        super().__init__(message)


class ValidationError(AppError):
    """Malformed or out-of-range input. Carries one entry per offending field."""

    code = "VALIDATION_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST

    @classmethod
    def from_pydantic(cls, message: str, exc: PydanticValidationError) -> "ValidationError":
        return cls(message, field_errors(exc.errors()))


class NotFoundError(AppError):
    """Referenced identifier does not exist."""

    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND


class CapacityExceededError(AppError):
    """Repository is full. A server-side fault: the caller did nothing wrong."""

    code = "CAPACITY_EXCEEDED"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def field_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Reduce pydantic error dicts to JSON-safe field diagnostics."""
    return [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in errors
    ]


def error_body(code: str, message: str, details: list[dict[str, Any]] | None = None) -> dict:
    return {
        "success": False,
        "error": {"code": code, "message": message, "details": details or []},
    }


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("Server fault", code=exc.code, error=exc.message, path=request.url.path)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code, exc.message, exc.details),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are reported like any other validation failure (400, not 422)."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(ValidationError.code, "Validation failed", field_errors(list(exc.errors()))),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(AppError.code, "An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
