"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from book_api.config import APIConfig
from book_api.main import create_app
from book_api.models import Book
from book_api.store import BookStore


@pytest.fixture
def api_settings():
    """Create API configuration for testing."""
    return APIConfig(
        api_key="secret-key",
        api_key_header="X-API-Key",
        seed_default_books=True,
        log_format="console"
    )


@pytest.fixture
def book_store():
    """Create a store holding the default catalog."""
    return BookStore.seeded()


@pytest.fixture
def empty_store():
    """Create a store with no books."""
    return BookStore()


@pytest.fixture
def app(api_settings, book_store):
    """Create an application bound to the book_store fixture."""
    return create_app(settings=api_settings, store=book_store)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Headers carrying the valid API key."""
    return {"X-API-Key": "secret-key"}


@pytest.fixture
def sample_book():
    """Create a sample book for testing."""
    return Book(id="6", title="Dune")
