"""
URL store - the single target URL shared by every request handler.
"""
from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional


class ReadWriteLock:
    """
    Async readers/writer lock.

    Any number of readers may hold the lock together; a writer holds it alone.
    No fairness between readers and writers is promised.
    """

    def __init__(self):
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writing = False

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writing(self) -> bool:
        return self._writing

    @asynccontextmanager
    async def read_locked(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writing)
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write_locked(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writing and self._readers == 0)
            self._writing = True
        try:
            yield
        finally:
            async with self._cond:
                self._writing = False
                self._cond.notify_all()


class UrlStore:
    """Holds the currently configured URL, or None when nothing is set yet."""

    def __init__(self, initial: Optional[str] = None):
        self._url = initial
        self._lock = ReadWriteLock()

    async def read(self) -> Optional[str]:
        """Return a snapshot of the current URL."""
        async with self._lock.read_locked():
            return self._url

    async def replace(self, new_url: str) -> None:
        """Overwrite the stored URL. Later reads observe the new value."""
        async with self._lock.write_locked():
            self._url = new_url
