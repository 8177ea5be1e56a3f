"""Central translation of domain errors into JSON error responses.

Every error body has the shape ``{"detail": "<message>"}`` so clients can
show one line next to the form or table that failed.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from construction_portal.application.error_messages import get_error_message
from construction_portal.domain.exceptions import (
    AuthenticationError,
    EntityNotFoundError,
    InvalidTableQueryError,
    PasswordConfirmationError,
    PermissionDeniedError,
    UpstreamApiError,
    UpstreamUnavailableError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, exc: BaseException) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": get_error_message(exc)})


def add_exception_handlers(app: FastAPI) -> None:
    """Register handlers for every domain exception on ``app``."""

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(InvalidTableQueryError)
    async def table_query_handler(request: Request, exc: InvalidTableQueryError) -> JSONResponse:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, exc)

    @app.exception_handler(ValidationFailedError)
    async def validation_handler(request: Request, exc: ValidationFailedError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(AuthenticationError)
    async def authentication_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
        logger.info("Unauthenticated %s %s: %s", request.method, request.url.path, exc.message)
        response = _error(status.HTTP_401_UNAUTHORIZED, exc)
        response.headers["WWW-Authenticate"] = "Bearer"
        return response

    @app.exception_handler(PermissionDeniedError)
    async def permission_handler(request: Request, exc: PermissionDeniedError) -> JSONResponse:
        logger.warning("Forbidden %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_403_FORBIDDEN, exc)

    @app.exception_handler(PasswordConfirmationError)
    async def password_handler(request: Request, exc: PasswordConfirmationError) -> JSONResponse:
        return _error(status.HTTP_403_FORBIDDEN, exc)

    @app.exception_handler(UpstreamApiError)
    async def upstream_handler(request: Request, exc: UpstreamApiError) -> JSONResponse:
        status_code = exc.status_code
        if status_code >= 500:
            logger.error(
                "Upstream error %d on %s %s: %s",
                status_code,
                request.method,
                request.url.path,
                exc.message,
            )
            status_code = status.HTTP_502_BAD_GATEWAY
        elif status_code < 400:
            status_code = status.HTTP_502_BAD_GATEWAY
        return _error(status_code, exc)

    @app.exception_handler(UpstreamUnavailableError)
    async def unavailable_handler(request: Request, exc: UpstreamUnavailableError) -> JSONResponse:
        logger.error("Upstream unreachable on %s %s", request.method, request.url.path)
        return _error(status.HTTP_503_SERVICE_UNAVAILABLE, exc)
