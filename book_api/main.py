"""
FastAPI main application for the Book Catalog API.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.responses import Response
from pydantic import ValidationError

from book_api.auth import AccessGateMiddleware, CredentialChecker, StaticKeyChecker
from book_api.config import APIConfig
from book_api.config import config as api_config
from book_api.error_handlers import register_error_handlers
from book_api.exceptions import MalformedBookError
from book_api.models import Book, HealthResponse
from book_api.store import BookStore

# Setup logging
logger = structlog.get_logger(__name__)

router = APIRouter()


def get_store(request: Request) -> BookStore:
    """Return the store owned by the running application."""
    return request.app.state.store


async def decode_book(request: Request) -> Book:
    """
    Decode the request body into a book.

    Raises:
        MalformedBookError: If the body is not a JSON object with string fields
    """
    body = await request.body()
    try:
        return Book.model_validate_json(body)
    except ValidationError as e:
        raise MalformedBookError(str(e)) from e


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info(
        "Starting Book Catalog API",
        book_count=app.state.store.count(),
        api_key_header=app.state.config.api_key_header
    )

    yield

    # Shutdown
    logger.info("Shutting down Book Catalog API", book_count=app.state.store.count())


# Health check endpoint (no authentication required)
@router.get("/health", response_model=HealthResponse, tags=["Health"])
def health_check(request: Request, store: BookStore = Depends(get_store)):
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=request.app.state.config.api_version,
        book_count=store.count()
    )


# Collection endpoints
@router.get("/books", response_model=List[Book], tags=["Books"])
def list_books(store: BookStore = Depends(get_store)):
    """Get every stored book, in no particular order."""
    return store.list()


@router.post("/books", status_code=status.HTTP_201_CREATED, response_class=Response, tags=["Books"])
def create_book(
    book: Book = Depends(decode_book),
    store: BookStore = Depends(get_store)
):
    """
    Store a book under its own ``id``.

    An existing book with the same id is replaced.
    """
    store.put(book.id, book)
    return Response(status_code=status.HTTP_201_CREATED)


# Item endpoints
@router.get("/book/{book_id:path}", response_model=Book, tags=["Books"])
def get_book(book_id: str, store: BookStore = Depends(get_store)):
    """
    Get a single book by ID.

    - **book_id**: everything after ``/book/``, taken verbatim
    """
    return store.get(book_id)


@router.put("/book/{book_id:path}", response_model=Book, tags=["Books"])
def update_book(
    book_id: str,
    book: Book = Depends(decode_book),
    store: BookStore = Depends(get_store)
):
    """
    Create or replace the book stored under ``book_id``.

    The body is stored as given, even when its ``id`` differs from the path.
    """
    store.put(book_id, book)
    return book


@router.delete("/book/{book_id:path}", status_code=status.HTTP_204_NO_CONTENT,
               response_class=Response, tags=["Books"])
def delete_book(book_id: str, store: BookStore = Depends(get_store)):
    """Delete a book. Deleting an unknown id also succeeds."""
    store.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def create_app(
    settings: Optional[APIConfig] = None,
    store: Optional[BookStore] = None,
    credential_checker: Optional[CredentialChecker] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration to use (defaults to the environment-derived config)
        store: Book store to serve (defaults to a new store, seeded per settings)
        credential_checker: Access check for the book routes
            (defaults to the configured static API key)

    Returns:
        Configured FastAPI application
    """
    settings = settings or api_config
    if store is None:
        store = BookStore.seeded() if settings.seed_default_books else BookStore()
    if credential_checker is None:
        credential_checker = StaticKeyChecker(settings.api_key)

    app = FastAPI(
        title=settings.api_title,
        description=f"""
    {settings.api_description}.

    ## Authentication

    Every `/books` and `/book/{{id}}` request must carry the API key header:

    ```
    {settings.api_key_header}: your_api_key_here
    ```
    """,
        version=settings.api_version,
        redirect_slashes=False,
        lifespan=lifespan
    )

    app.state.config = settings
    app.state.store = store
    app.state.credential_checker = credential_checker

    app.add_middleware(AccessGateMiddleware, header_name=settings.api_key_header)
    register_error_handlers(app, debug=settings.debug)
    app.include_router(router)

    return app


# Create FastAPI application
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "book_api.main:app",
        host=api_config.host,
        port=api_config.port,
        timeout_graceful_shutdown=api_config.shutdown_grace_period,
        log_level="info"
    )
