"""
Reader/writer lock used to guard the in-memory book store.
Any number of readers may hold the lock at once; a writer holds it alone.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """
    Shared/exclusive lock built on a single condition variable.

    Waiting writers take precedence: once a writer is queued, new readers
    wait until it has finished so a steady read load cannot starve writes.
    The lock is not reentrant.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._active_readers = 0
        self._waiting_writers = 0
        self._writer_active = False

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        with self._condition:
            while self._writer_active or self._waiting_writers:
                self._condition.wait()
            self._active_readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._active_readers -= 1
                if not self._active_readers:
                    self._condition.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        """Hold the lock in exclusive mode for the duration of the block."""
        with self._condition:
            self._waiting_writers += 1
            try:
                while self._writer_active or self._active_readers:
                    self._condition.wait()
            except BaseException:
                self._waiting_writers -= 1
                # Readers held back only by this writer must re-check
                if not self._waiting_writers:
                    self._condition.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer_active = True
        try:
            yield
        finally:
            with self._condition:
                self._writer_active = False
                self._condition.notify_all()

    @property
    def readers(self) -> int:
        """Number of threads currently holding the lock in shared mode."""
        with self._condition:
            return self._active_readers

    @property
    def writer_active(self) -> bool:
        """Whether a writer currently holds the lock."""
        with self._condition:
            return self._writer_active
