"""
Exception hierarchy for the book catalog API.
"""


class BookAPIError(Exception):
    """Base class for all book catalog errors."""


class AuthenticationError(BookAPIError):
    """Raised when a request carries a missing or incorrect API key."""


class MalformedBookError(BookAPIError):
    """Raised when a request body cannot be decoded into a book."""


class BookNotFoundError(BookAPIError):
    """Raised when no book is stored under the requested identifier."""

    def __init__(self, book_id: str):
        super().__init__(book_id)
        self.book_id = book_id

    def __str__(self) -> str:
        return f"Book with ID '{self.book_id}' not found"
