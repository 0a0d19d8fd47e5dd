"""Translate registry errors into HTTP responses.

Responses keep FastAPI's ``{"detail": ...}`` shape so clients handle them
the same way as ``HTTPException`` failures.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from app.core.errors import (
    InvalidRoleError,
    NotFoundError,
    RegistryError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: RegistryError) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": exc.detail})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(
        request: Request, exc: UnauthorizedError
    ) -> JSONResponse:
        logger.warning("Unauthorized %s %s", request.method, request.url.path)
        return _error_response(status.HTTP_403_FORBIDDEN, exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        logger.warning("Application %d not found", exc.application_number)
        return _error_response(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(InvalidRoleError)
    async def handle_invalid_role(
        request: Request, exc: InvalidRoleError
    ) -> JSONResponse:
        logger.warning("Rejected invalid role value %r", exc.value)
        return _error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, exc)

    @app.exception_handler(RegistryError)
    async def handle_registry_error(
        request: Request, exc: RegistryError
    ) -> JSONResponse:
        logger.error("Unhandled registry error: %s", exc.detail)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)
