"""Error Handlers — global exception handlers for the title proxy API.

Invariants:
    - TitleProxyError → its http_status with public_message as plain-text body
    - Exception (catch-all) → 500 "internal server error", never leaks internal details
    - Every handled error is logged; none terminates the process

Design Decisions:
    - Two-layer handler: domain (TitleProxyError), catch-all (Exception)
    - Plain text bodies: the HTTP surface is text, not a JSON envelope
    - The Exception handler runs inside Starlette's ServerErrorMiddleware, which
      re-raises after sending the 500; uvicorn then logs its own
      "Exception in ASGI application" traceback as well. Accepted: the second
      record is the server's, ours carries the path and stays structured
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from titleproxy.core.errors import (
    INTERNAL_SERVER_ERROR_MESSAGE,
    ErrorSeverity,
    TitleProxyError,
)
from titleproxy.infrastructure.tracing import current_trace_id

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.ERROR,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_title_proxy_error_handler(app)
    _register_generic_error_handler(app)


def _register_title_proxy_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TitleProxyError)
    async def title_proxy_error_handler(request: Request, exc: TitleProxyError):
        """Handle all domain/infrastructure errors."""
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{type(exc).__name__}: {exc.message}",
            extra={
                **exc.log_extra(),
                "path": request.url.path,
                "trace_id": current_trace_id(),
            },
        )
        return PlainTextResponse(exc.public_message, status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return PlainTextResponse(
            INTERNAL_SERVER_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
