"""A readers-writer lock and a read lock that can be upgraded."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager


class RWLock:
    """A lock held by many readers or one writer; waiting writers go first."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        """Block until the lock can be held for reading."""
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        """Release one read hold."""
        with self._cond:
            if self._readers == 0:
                raise RuntimeError("release of an unlocked read lock")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        """Block until the lock can be held exclusively."""
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        """Release the exclusive hold."""
        with self._cond:
            if not self._writer:
                raise RuntimeError("release of an unlocked write lock")
            self._writer = False
            self._cond.notify_all()


@contextmanager
def lock_toggle(lock: RWLock) -> Iterator[Callable[[], None]]:
    """Hold the lock for reading; the yielded function switches to writing.

    The switch releases the read hold before taking the write hold, so other
    writers may run in between. On exit the hold currently owned is released.
    """
    writing = False
    lock.acquire_read()

    def toggle() -> None:
        nonlocal writing
        if writing:
            raise RuntimeError("lock already held for writing")
        writing = True
        lock.release_read()
        lock.acquire_write()

    try:
        yield toggle
    finally:
        if writing:
            lock.release_write()
        else:
            lock.release_read()