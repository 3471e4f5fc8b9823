"""Read-write lock for state that is read often and written rarely."""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional


class ReadWriteLock:
    """Many concurrent readers or a single exclusive writer.

    Writers are preferred: once a writer is waiting, new readers block until
    it has finished, so a steady stream of readers cannot starve it.

    The thread holding the write side may also take the read side. This lets
    callbacks invoked under the write lock read the guarded state.

    Attributes:
        _cond: Condition coordinating readers and writers.
        _readers: Number of readers currently holding the lock.
        _writers_waiting: Number of writers blocked in acquire_write().
        _writer: Ident of the thread holding the write side, if any.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writers_waiting = 0
        self._writer: Optional[int] = None

    def acquire_read(self) -> None:
        with self._cond:
            if self._writer == threading.get_ident():
                self._readers += 1
                return
            while self._writer is not None or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a read lock held")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        me = threading.get_ident()
        with self._cond:
            if self._writer == me:
                raise RuntimeError("write lock is not re-entrant")
            self._writers_waiting += 1
            try:
                while self._writer is not None or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = me

    def release_write(self) -> None:
        with self._cond:
            if self._writer != threading.get_ident():
                raise RuntimeError("release_write() called by a thread not holding it")
            self._writer = None
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the read side for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the write side for the duration of the block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
