"""
In-memory book store for the API.
"""

from typing import Dict, Iterable, List, Optional

import structlog

from book_api.exceptions import BookNotFoundError
from book_api.models import DEFAULT_BOOKS, Book
from book_api.rwlock import ReadWriteLock

logger = structlog.get_logger(__name__)


class BookStore:
    """
    Thread-safe mapping of book identifiers to books.

    Reads take the shared side of the lock and writes the exclusive side.
    The lock only covers access to the backing dict; callers serialize the
    returned books after the lock has been released.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._books: Dict[str, Book] = {}
        self._lock = ReadWriteLock()
        for book in books or ():
            self._books[book.id] = book

    @classmethod
    def seeded(cls) -> "BookStore":
        """Create a store holding the default catalog."""
        store = cls(DEFAULT_BOOKS)
        logger.info("Book store seeded", count=len(DEFAULT_BOOKS))
        return store

    def list(self) -> List[Book]:
        """
        Get a snapshot of all stored books.

        Returns:
            List of books in no particular order (empty if the store is empty)
        """
        with self._lock.read():
            return list(self._books.values())

    def get(self, book_id: str) -> Book:
        """
        Get a single book.

        Args:
            book_id: Identifier the book is stored under

        Returns:
            The stored book

        Raises:
            BookNotFoundError: If nothing is stored under book_id
        """
        with self._lock.read():
            book = self._books.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def put(self, book_id: str, book: Book) -> None:
        """
        Insert or replace the book stored under book_id.

        The key is not checked against ``book.id``; the two may differ.
        """
        with self._lock.write():
            replaced = book_id in self._books
            self._books[book_id] = book
        logger.debug("Book stored", book_id=book_id, replaced=replaced)

    def delete(self, book_id: str) -> None:
        """Remove the book stored under book_id. Unknown ids are ignored."""
        with self._lock.write():
            removed = self._books.pop(book_id, None) is not None
        logger.debug("Book deleted", book_id=book_id, existed=removed)

    def count(self) -> int:
        """Number of books currently stored."""
        with self._lock.read():
            return len(self._books)

    def __len__(self) -> int:
        return self.count()
