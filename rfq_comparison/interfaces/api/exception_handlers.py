"""
Exception handlers for the API layer.

This module provides centralized exception handling to ensure consistent
error responses across all API endpoints.
"""

import uuid
from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from rfq_comparison.shared.exceptions import (
    ComparisonNotFoundError,
    ComparisonServiceError,
    ComparisonValidationError,
    InvalidStateError,
    QuoteNotInComparisonError,
    QuoteScoreNotFoundError,
)

logger = structlog.get_logger(__name__)

_NOT_FOUND_ERRORS = (
    ComparisonNotFoundError,
    QuoteNotInComparisonError,
    QuoteScoreNotFoundError,
)


def create_error_response(
    error_code: str,
    message: str,
    status_code: int,
    request_id: str | None = None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        error_code: Machine-readable error code
        message: User-friendly error message
        status_code: HTTP status code
        request_id: Optional request ID for tracking
        details: Optional additional error details

    Returns:
        JSONResponse: Standardized error response
    """
    content: dict[str, Any] = {
        "error": {
            "code": error_code,
            "message": message,
        }
    }

    if request_id:
        content["error"]["request_id"] = request_id

    if details:
        content["error"]["details"] = details

    return JSONResponse(
        status_code=status_code,
        content=content,
    )


def status_code_for(exc: ComparisonServiceError) -> int:
    """Map a service exception to its HTTP status code."""
    if isinstance(exc, ComparisonValidationError):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, InvalidStateError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, _NOT_FOUND_ERRORS):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def validation_exception_handler(
    request: Request, exc: RequestValidationError | ValidationError
) -> JSONResponse:
    """
    Handle validation errors from Pydantic models.

    Args:
        request: The incoming request
        exc: The validation exception

    Returns:
        JSONResponse: Formatted validation error response
    """
    errors = exc.errors() if hasattr(exc, "errors") else []
    formatted_errors = []

    for error in errors:
        loc = " -> ".join(str(x) for x in error.get("loc", []))
        formatted_errors.append(
            {
                "field": loc,
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
            }
        )

    return create_error_response(
        error_code="REQUEST_VALIDATION_ERROR",
        message="Request validation failed",
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        request_id=str(uuid.uuid4()),
        details={"validation_errors": formatted_errors},
    )


async def comparison_service_exception_handler(
    request: Request, exc: ComparisonServiceError
) -> JSONResponse:
    """
    Handle domain exceptions raised by use cases.

    Args:
        request: The incoming request
        exc: The ComparisonServiceError

    Returns:
        JSONResponse: Formatted error response
    """
    status_code = status_code_for(exc)
    logger.warning(
        "comparison_request_rejected",
        path=request.url.path,
        error_code=exc.error_code,
        status_code=status_code,
    )
    return create_error_response(
        error_code=exc.error_code,
        message=exc.message,
        status_code=status_code,
        request_id=str(uuid.uuid4()),
        details=exc.details,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    The full exception is logged; the client only sees a generic message.

    Args:
        request: The incoming request
        exc: The unhandled exception

    Returns:
        JSONResponse: Generic error response
    """
    request_id = str(uuid.uuid4())
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        request_id=request_id,
        error=str(exc),
        exc_info=exc,
    )
    return create_error_response(
        error_code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        request_id=request_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(
        ComparisonServiceError, comparison_service_exception_handler
    )
    app.add_exception_handler(Exception, generic_exception_handler)
