"""Shared index queue drained by fetch workers."""

from __future__ import annotations

import asyncio
from collections import deque


class WorkQueue:
    """Ordered queue of remaining indices; each index is handed out once.

    Claims are taken under a lock so no two workers get the same index
    and none is skipped.
    """

    def __init__(self, size: int) -> None:
        self._pending: deque[int] = deque(range(size))
        self._lock = asyncio.Lock()
        self._claimed = 0

    async def claim(self) -> int | None:
        """Pop the lowest remaining index, or None when drained."""
        async with self._lock:
            if not self._pending:
                return None
            self._claimed += 1
            return self._pending.popleft()

    @property
    def remaining(self) -> int:
        return len(self._pending)

    @property
    def claimed(self) -> int:
        return self._claimed
