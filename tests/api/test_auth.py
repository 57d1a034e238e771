"""
Tests for API key authentication.
"""

import pytest
from fastapi.testclient import TestClient

from book_api.auth import StaticKeyChecker, is_protected_path
from book_api.config import APIConfig
from book_api.exceptions import AuthenticationError
from book_api.main import create_app
from book_api.store import BookStore


REQUESTS = [
    ("GET", "/books", None),
    ("POST", "/books", {"id": "6", "title": "Dune"}),
    ("PATCH", "/books", None),
    ("GET", "/book/1", None),
    ("PUT", "/book/1", {"id": "1", "title": "Changed"}),
    ("DELETE", "/book/1", None),
    ("POST", "/book/1", None),
]


class TestAccessGate:
    """Test cases for the access gate middleware."""

    @pytest.mark.parametrize("method,path,body", REQUESTS)
    def test_missing_key_is_rejected(self, client, book_store, method, path, body):
        """Test every book route answers 401 without an API key."""
        response = client.request(method, path, json=body)

        assert response.status_code == 401
        assert response.text == "Unauthorized"
        assert book_store.count() == 5
        assert book_store.get("1").title == "1984"

    @pytest.mark.parametrize("method,path,body", REQUESTS)
    def test_wrong_key_is_rejected(self, client, book_store, method, path, body):
        """Test every book route answers 401 with a wrong API key."""
        response = client.request(method, path, json=body, headers={"X-API-Key": "wrong-key"})

        assert response.status_code == 401
        assert response.text == "Unauthorized"
        assert book_store.count() == 5
        assert book_store.get("1").title == "1984"

    def test_key_is_case_sensitive(self, client):
        """Test the key must match exactly."""
        response = client.get("/books", headers={"X-API-Key": "SECRET-KEY"})
        assert response.status_code == 401

    def test_bearer_token_is_not_accepted(self, client):
        """Test the key is only read from the API key header."""
        response = client.get("/books", headers={"Authorization": "Bearer secret-key"})
        assert response.status_code == 401

    def test_valid_key_is_forwarded(self, client, auth_headers):
        """Test a valid key reaches the handler."""
        response = client.get("/books", headers=auth_headers)
        assert response.status_code == 200

    @pytest.mark.parametrize("path", ["/books/", "/book"])
    def test_slash_variants_are_not_redirected(self, client, path):
        """Test near-miss paths are plain 404s rather than redirects."""
        response = client.get(path, follow_redirects=False)

        assert response.status_code == 404

    def test_health_is_not_gated(self, client):
        """Test health check endpoint requires no authentication."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_configured_key_and_header(self, auth_headers):
        """Test the key and header name come from configuration."""
        settings = APIConfig(api_key="another-key", api_key_header="X-Books-Key")
        client = TestClient(create_app(settings=settings, store=BookStore.seeded()))

        assert client.get("/books", headers=auth_headers).status_code == 401
        assert client.get("/books", headers={"X-Books-Key": "another-key"}).status_code == 200

    def test_custom_credential_checker(self, api_settings):
        """Test the credential check can be swapped without touching handlers."""

        class AllowListChecker:
            def __init__(self, keys):
                self.keys = set(keys)

            def verify(self, credential):
                if credential not in self.keys:
                    raise AuthenticationError("Unauthorized")

        app = create_app(
            settings=api_settings,
            store=BookStore.seeded(),
            credential_checker=AllowListChecker(["alpha", "beta"])
        )
        client = TestClient(app)

        assert client.get("/books", headers={"X-API-Key": "alpha"}).status_code == 200
        assert client.get("/books", headers={"X-API-Key": "beta"}).status_code == 200
        assert client.get("/books", headers={"X-API-Key": "secret-key"}).status_code == 401


class TestStaticKeyChecker:
    """Test cases for StaticKeyChecker."""

    def test_accepts_matching_key(self):
        StaticKeyChecker("secret-key").verify("secret-key")

    @pytest.mark.parametrize("credential", [None, "", "secret", "secret-key "])
    def test_rejects_other_keys(self, credential):
        with pytest.raises(AuthenticationError):
            StaticKeyChecker("secret-key").verify(credential)


@pytest.mark.parametrize("path,expected", [
    ("/books", True),
    ("/book/1", True),
    ("/book/", True),
    ("/health", False),
    ("/books/", False),
    ("/book", False),
    ("/docs", False),
])
def test_is_protected_path(path, expected):
    """Test which paths sit behind the access gate."""
    assert is_protected_path(path) is expected
