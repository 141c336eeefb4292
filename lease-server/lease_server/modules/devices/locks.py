"""Per-device mutual exclusion for lease mutations."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class DeviceLockRegistry:
    """Hands out one ``asyncio.Lock`` per device id.

    Entries are dropped once nobody holds or waits for them, so the registry
    only grows with the number of devices mutating concurrently.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, device_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(device_id, asyncio.Lock())
        self._users[device_id] = self._users.get(device_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[device_id] -= 1
            if self._users[device_id] == 0:
                del self._users[device_id]
                self._locks.pop(device_id, None)

    def is_locked(self, device_id: str) -> bool:
        lock = self._locks.get(device_id)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
