"""
Error Handler Middleware

Global exception handling for the API.

Provides consistent error responses across all endpoints by catching
exceptions and converting them to standardized JSON responses.

Error Response Format:
======================
    {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Validation failed",
            "details": {
                "errors": [
                    {"field": "username", "message": "Username must be at least 3 characters"}
                ]
            }
        }
    }

Exception Handling:
===================
1. ZeleneException subclasses → Their status_code and to_dict()
2. Request validation (body, query, path) → 400 with per-field messages
3. Pydantic ValidationError raised while building params → same as 2
4. IntegrityError escaping a repository → 409 CONFLICT
5. Other exceptions → 500 with generic message (details hidden)

Usage:
======
    from zelene.api.middleware.error_handler import setup_exception_handlers

    app = FastAPI()
    setup_exception_handlers(app)
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from zelene.shared.core.exceptions import ZeleneException
from zelene.shared.core.logging import logger
from zelene.shared.schemas.validation import field_errors


def _validation_response(errors: list[Any]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Validation failed",
                "details": {"errors": [error.to_dict() for error in field_errors(errors)]},
            }
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Set up global exception handlers.

    Should be called during application initialization to register
    exception handlers for all routes.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(ZeleneException)
    async def zelene_exception_handler(
        request: Request,
        exc: ZeleneException,
    ) -> JSONResponse:
        """
        Handle Zelene-specific exceptions.

        All custom exceptions inherit from ZeleneException and include:
        - status_code: HTTP status code
        - error_code: Machine-readable error code
        - message: Human-readable message
        - details: Additional context
        """
        logger.warning(
            "Application error",
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle body/query/path validation failures detected by FastAPI."""
        logger.info("Request validation failed", path=request.url.path, errors=len(exc.errors()))
        return _validation_response(list(exc.errors()))

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: ValidationError,
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors.

        These occur when parameter models are built inside dependencies.
        """
        logger.info("Validation error", path=request.url.path, errors=exc.error_count())
        return _validation_response(exc.errors())

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(
        request: Request,
        exc: IntegrityError,
    ) -> JSONResponse:
        """Unique or foreign key violation that escaped the repositories."""
        logger.warning("Integrity error", path=request.url.path, error=str(exc.orig))
        return JSONResponse(
            status_code=409,
            content={
                "error": {
                    "code": "CONFLICT",
                    "message": "Resource conflict",
                    "details": {},
                }
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Handle unexpected exceptions.

        Catches any unhandled exception and returns a generic error.
        Full error details are logged but not exposed to clients.
        """
        logger.error(
            "Unexpected error",
            error=str(exc),
            error_type=type(exc).__name__,
            path=request.url.path,
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )
