"""
Centralized error handlers for FastAPI.

Maps users domain errors and request validation failures to HTTP responses.
Every body carries a ``status`` string ("<code> <reason>") next to the
``error``/``errors`` field. No stack traces or internal details are
exposed to clients.
"""

import logging
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from restful_users.domain.users.errors import (
    ConstraintViolationError,
    UserNotFoundError,
    UserValidationError,
)

logger = logging.getLogger(__name__)

_LOCATIONS = ("body", "query", "path")


def full_status(status: HTTPStatus) -> str:
    """Render a status as "<code> <reason phrase>", e.g. "400 Bad Request"."""
    return f"{status.value} {status.phrase}"


def _error_response(
    status_code: HTTPStatus,
    error: Any,
    *,
    key: str = "error",
    reported_status: Optional[HTTPStatus] = None,
    message: Optional[str] = None,
) -> JSONResponse:
    """Build a consistent JSON error response.

    ``reported_status`` is the status written into the body when it
    differs from the response status line.
    """
    body: dict[str, Any] = {
        key: error,
        "status": full_status(reported_status or status_code),
    }
    if message:
        body["message"] = message
    return JSONResponse(status_code=status_code.value, content=body)


def _field_message(error: dict[str, Any]) -> str:
    """Format one pydantic error as "<field>: <message>"."""
    field = ".".join(
        str(part) for part in error.get("loc", ()) if part not in _LOCATIONS
    )
    return f"{field}: {error['msg']}" if field else error["msg"]


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed bodies, paths and query strings."""
        errors = [_field_message(e) for e in exc.errors()]
        logger.warning("Request validation failed: %s", errors)
        return _error_response(
            HTTPStatus.BAD_REQUEST,
            errors,
            key="errors",
            message="Validation failed",
        )

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle missing users. Reported as a bad request, not 404."""
        logger.warning("User not found: %s", exc.user_id)
        return _error_response(HTTPStatus.BAD_REQUEST, exc.message)

    @app.exception_handler(UserValidationError)
    async def handle_user_validation(
        _request: Request, exc: UserValidationError
    ) -> JSONResponse:
        """Handle business rule violations."""
        logger.warning("User validation failed: %s", exc.message)
        return _error_response(HTTPStatus.BAD_REQUEST, exc.message)

    @app.exception_handler(ConstraintViolationError)
    async def handle_constraint_violation(
        _request: Request, exc: ConstraintViolationError
    ) -> JSONResponse:
        """Handle storage integrity failures.

        The status line is 400 while the body reports "409 Conflict".
        """
        logger.warning("Data integrity violation: %s", exc.detail)
        return _error_response(
            HTTPStatus.BAD_REQUEST,
            exc.detail,
            reported_status=HTTPStatus.CONFLICT,
            message="Data integrity violation",
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(
            HTTPStatus.INTERNAL_SERVER_ERROR, "Internal server error"
        )
