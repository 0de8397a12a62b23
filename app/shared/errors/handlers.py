"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
Every error response has the shape ``{"error": <code>}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.community.errors import (
    CommunityDomainError,
    DatastoreError,
    DatastoreNotConfiguredError,
    MissingFieldsError,
)
from app.domain.learning.errors import (
    ContentNotFoundError,
    InvalidMessageError,
    LearningDomainError,
    UnsupportedLocaleError,
)
from app.shared.errors.request_errors import InvalidJsonError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500
HTTP_503 = 503

INTERNAL_ERROR = "internal_error"
INVALID_REQUEST = "invalid_request"


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle path and query parameters that fail validation."""
        logger.warning(
            "Request validation failed: %s",
            [".".join(str(part) for part in error["loc"]) for error in exc.errors()],
        )
        return _error_response(HTTP_422, INVALID_REQUEST)

    @app.exception_handler(InvalidJsonError)
    async def handle_invalid_json(
        _request: Request, exc: InvalidJsonError
    ) -> JSONResponse:
        """Handle request bodies that are not JSON objects."""
        logger.warning("Invalid JSON body: %s", exc.reason)
        return _error_response(HTTP_400, exc.code)

    @app.exception_handler(InvalidMessageError)
    async def handle_invalid_message(
        _request: Request, exc: InvalidMessageError
    ) -> JSONResponse:
        """Handle empty or oversized chat messages."""
        logger.warning("Invalid chat message length: %d", exc.length)
        return _error_response(HTTP_400, exc.code)

    @app.exception_handler(MissingFieldsError)
    async def handle_missing_fields(
        _request: Request, exc: MissingFieldsError
    ) -> JSONResponse:
        """Handle question submissions with empty required fields."""
        logger.warning("Question rejected, missing fields: %s", exc.fields)
        return _error_response(HTTP_400, exc.code)

    @app.exception_handler(UnsupportedLocaleError)
    async def handle_unsupported_locale(
        _request: Request, exc: UnsupportedLocaleError
    ) -> JSONResponse:
        """Handle requests for locales the site does not serve."""
        logger.warning("Unsupported locale: %s", exc.locale)
        return _error_response(HTTP_404, exc.code)

    @app.exception_handler(ContentNotFoundError)
    async def handle_content_not_found(
        _request: Request, exc: ContentNotFoundError
    ) -> JSONResponse:
        """Handle documents missing in both the locale and English."""
        logger.info("Content not found: %s/%s", exc.content_type, exc.slug)
        return _error_response(HTTP_404, exc.code)

    @app.exception_handler(DatastoreNotConfiguredError)
    async def handle_datastore_not_configured(
        _request: Request, exc: DatastoreNotConfiguredError
    ) -> JSONResponse:
        """Handle writes while no questions datastore is configured."""
        logger.warning("Questions datastore not configured")
        return _error_response(HTTP_503, exc.code)

    @app.exception_handler(DatastoreError)
    async def handle_datastore_error(
        _request: Request, exc: DatastoreError
    ) -> JSONResponse:
        """Handle datastore failures."""
        logger.error("Questions datastore error: %s", exc.reason)
        return _error_response(HTTP_500, exc.code)

    @app.exception_handler(LearningDomainError)
    async def handle_learning_domain(
        _request: Request, exc: LearningDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled learning domain errors."""
        logger.error("Unhandled learning domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(CommunityDomainError)
    async def handle_community_domain(
        _request: Request, exc: CommunityDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled community domain errors."""
        logger.error("Unhandled community domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR)
