"""
Global exception handlers mapping domain exceptions to HTTP responses.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from book_api.exceptions import BookNotFoundError, MalformedBookError

logger = structlog.get_logger(__name__)


def register_error_handlers(app: FastAPI, debug: bool = False) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(MalformedBookError)
    async def malformed_book_handler(request: Request, exc: MalformedBookError):
        """Echo the decode error back to the caller."""
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(BookNotFoundError)
    async def book_not_found_handler(request: Request, exc: BookNotFoundError):
        return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle routing-level HTTP exceptions."""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return Response(status_code=exc.status_code, headers=exc.headers)
        return PlainTextResponse(
            str(exc.detail),
            status_code=exc.status_code,
            headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger.error("Unhandled exception", error=str(exc), path=request.url.path)
        detail = f"Internal Server Error: {exc}" if debug else "Internal Server Error"
        return PlainTextResponse(detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
