"""
API key authentication for the FastAPI API.
"""

from typing import Optional, Protocol, Tuple

import structlog
from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from book_api.exceptions import AuthenticationError

logger = structlog.get_logger(__name__)

# Paths served by the collection and item handlers
PROTECTED_PATHS: Tuple[str, ...] = ("/books",)
PROTECTED_PREFIXES: Tuple[str, ...] = ("/book/",)


class CredentialChecker(Protocol):
    """Decides whether a presented credential grants access."""

    def verify(self, credential: Optional[str]) -> None:
        """Raise AuthenticationError if the credential is not accepted."""
        ...


class StaticKeyChecker:
    """
    Accepts exactly one shared secret.

    The comparison is a plain equality check and is not constant-time.
    """

    def __init__(self, api_key: str):
        self._api_key = api_key

    def verify(self, credential: Optional[str]) -> None:
        if credential != self._api_key:
            raise AuthenticationError("Unauthorized")


def is_protected_path(path: str) -> bool:
    """Check whether a request path is served behind the access gate."""
    return path in PROTECTED_PATHS or path.startswith(PROTECTED_PREFIXES)


class AccessGateMiddleware(BaseHTTPMiddleware):
    """
    Rejects requests to the book routes that lack a valid API key.

    Runs before routing, so unsupported methods on the book routes are
    answered with 401 rather than 405 when the key is wrong.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-API-Key"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not is_protected_path(request.url.path):
            return await call_next(request)

        checker: CredentialChecker = request.app.state.credential_checker
        api_key = request.headers.get(self.header_name)
        try:
            checker.verify(api_key)
        except AuthenticationError as e:
            logger.warning(
                "Invalid API key attempted",
                api_key=api_key[:10] + "..." if api_key else None,
                method=request.method,
                path=request.url.path
            )
            return PlainTextResponse(str(e), status_code=401)

        return await call_next(request)
