"""Error Handlers: global exception handlers for the Restaurant API.

Invariants:
    - RestaurantApiError -> its http_status with its plain-text message
    - RequestValidationError (unparseable body, wrong types) -> 400 plain text
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (RestaurantApiError), validation (Pydantic), catch-all
    - Plain-text bodies: clients get status + message, no structured envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.exceptions import RequestValidationError

from restaurant_api.core.errors import (
    ErrorCategory, ErrorSeverity, RestaurantApiError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_restaurant_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_restaurant_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(RestaurantApiError)
    async def restaurant_error_handler(request: Request, exc: RestaurantApiError):
        """Handle all Restaurant API domain/infrastructure errors."""
        level = (
            logging.ERROR if exc.severity == ErrorSeverity.CRITICAL
            else logging.WARNING
        )
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return PlainTextResponse(exc.to_response(), status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle request parsing errors as incomplete payloads."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return PlainTextResponse(
            _build_validation_error_message(exc),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={
                "error_code": "INTERNAL_ERROR",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
                "path": request.url.path,
            },
        )
        return PlainTextResponse(
            "An unexpected error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def _build_validation_error_message(exc: RequestValidationError) -> str:
    """One line naming each offending field, e.g. 'Invalid request data: body.name'."""
    fields = [
        ".".join(str(loc) for loc in e["loc"])
        for e in exc.errors()
    ]
    return f"Invalid request data: {', '.join(fields)}"
