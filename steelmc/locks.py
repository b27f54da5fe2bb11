"""An asyncio readers-writer lock that owns the value it protects."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Generic, TypeVar

T = TypeVar("T")


class WriteGuard(Generic[T]):
    """Exclusive access to a locked value; assigning ``value`` replaces it."""

    def __init__(self, value: T) -> None:
        self.value = value


class SteelRwLock(Generic[T]):
    """Many concurrent readers or one writer; waiting writers block new readers."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[T]:
        """Hold shared access; yields the protected value."""
        async with self._cond:
            while self._writer or self._waiting_writers:
                await self._cond.wait()
            self._readers += 1
        try:
            yield self._value
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[WriteGuard[T]]:
        """Hold exclusive access; yields a guard whose ``value`` may be replaced."""
        async with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    await self._cond.wait()
            finally:
                self._waiting_writers -= 1
                self._cond.notify_all()
            self._writer = True
        guard = WriteGuard(self._value)
        try:
            yield guard
        finally:
            self._value = guard.value
            async with self._cond:
                self._writer = False
                self._cond.notify_all()