"""
Shared exception primitives and handlers for services.

Handlers render every error as ``{"error", "message", "details"}`` JSON.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Coroutine
    from logging import Logger
    from typing import Any

    from fastapi import FastAPI, Request
    from starlette.requests import Request as StarletteRequest

    ExceptionHandler = Callable[
        [StarletteRequest, Exception],
        Coroutine[Any, Any, JSONResponse],
    ]
    LoggerFactory = Callable[[], Logger]


class ServiceError(Exception):
    """
    Error that carries its own HTTP rendering.

    Attributes:
        error: Machine-readable error code
        message: Human-readable description
        status_code: HTTP status code
        details: Additional context
    """

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int,
        details: dict[str, object] | None,
    ) -> None:
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details: dict[str, object] = {} if details is None else details
        super().__init__(message)


def error_body(error: str, message: str, details: dict[str, object]) -> dict[str, object]:
    """Build the standard error response payload."""
    return {"error": error, "message": message, "details": details}


def register_exception_handlers(app: FastAPI, logger_factory: LoggerFactory) -> None:
    """
    Register ServiceError and fallback handlers on a FastAPI app.

    Args:
        app: FastAPI application instance
        logger_factory: Callable returning the service logger
    """

    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        logger_factory().warning(
            "Service error",
            extra={
                "error_code": exc.error,
                "error_message": exc.message,
                "status_code": exc.status_code,
                "details": exc.details,
                "path": str(request.url.path),
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.error, exc.message, exc.details),
        )

    async def unhandled_exception_handler(request: Request, _exc: Exception) -> JSONResponse:
        # Traceback goes to the log only.
        logger_factory().exception(
            "Unhandled exception",
            extra={
                "path": str(request.url.path),
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=500,
            content=error_body("internal_error", "An unexpected error occurred", {}),
        )

    app.add_exception_handler(ServiceError, cast("ExceptionHandler", service_error_handler))
    app.add_exception_handler(Exception, unhandled_exception_handler)
