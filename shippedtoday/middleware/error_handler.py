"""
Error handlers
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import LaunchError
from ..models.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, details=None, headers=None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


def setup_error_handlers(app: FastAPI) -> None:
    """Register the global exception handlers"""

    @app.exception_handler(LaunchError)
    async def launch_error_handler(request: Request, exc: LaunchError) -> JSONResponse:
        """Rejected or failed launch operation"""
        if exc.status_code >= 500:
            logger.error(
                f"{request.method} {request.url.path} failed: {exc.status_code}: {exc.message}")
        else:
            logger.warning(
                f"{request.method} {request.url.path} rejected: {exc.status_code}: {exc.message}")

        return error_response(exc.status_code, exc.message, exc.details)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """HTTP exceptions raised by routing or controllers"""
        logger.warning(f"HTTP exception: {exc.status_code}: {exc.detail}")
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Anything not handled elsewhere"""
        logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}", exc_info=True)
        return error_response(500, "Internal server error")
