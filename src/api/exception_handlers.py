"""Exception handlers for the FastAPI application.

Every failure is rendered as the same notification payload the screens
show in a modal: ``error_code``, ``title``, ``message`` and ``details``.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()

_TITLES: dict[str, str] = {
    ErrorCode.NO_CHANGES: "No changes",
    ErrorCode.NO_ACTIVE_SESSION: "Session required",
}


def notification(
    status_code: int, error_code: str, message: str, details: Any | None = None
) -> JSONResponse:
    """Build the notification response for a failed action."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "title": _TITLES.get(error_code, "Error"),
            "message": message,
            "details": details,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Typed failures from the session service and the screen forms."""
        logger.warning(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
        )
        return notification(exc.status_code, exc.error_code.value, exc.message, exc.details)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return notification(exc.status_code, "HTTP_ERROR", str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed request bodies (wrong JSON types, not form mistakes)."""
        logger.info("request_validation_error", errors=exc.errors())
        return notification(
            422,
            ErrorCode.VALIDATION_ERROR.value,
            "Request validation failed",
            [
                {
                    "field": ".".join(str(x) for x in error["loc"]),
                    "message": error["msg"],
                    "type": error["type"],
                }
                for error in exc.errors()
            ],
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=True,
        )
        message = str(exc) if not settings.is_production else "An unexpected error occurred"
        return notification(
            500, ErrorCode.INTERNAL_ERROR.value, message, {"request_id": request_id}
        )
