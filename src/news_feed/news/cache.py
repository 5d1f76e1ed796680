"""In-memory TTL cache for NewsAPI responses."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """A cached response payload and the clock reading it was stored at."""

    payload: dict[str, Any]
    stored_at: float

    def is_live(self, now: float, ttl_seconds: float) -> bool:
        """Check whether the entry is still inside the TTL window."""
        return now - self.stored_at < ttl_seconds


class ResponseCache:
    """Response cache keyed by endpoint and serialized query parameters.

    Expired entries are treated as absent and overwritten on the next store;
    nothing sweeps them in the background.
    """

    def __init__(
        self,
        ttl_seconds: float = 10 * 60,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._clock = clock or time.monotonic
        self._entries: dict[str, CacheEntry] = {}

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    @staticmethod
    def make_key(endpoint: str, params: dict[str, Any]) -> str:
        """Build a cache key that does not depend on parameter order."""
        return f"{endpoint}_{json.dumps(params, sort_keys=True, default=str)}"

    def get(self, key: str) -> dict[str, Any] | None:
        """Return the live payload for ``key``, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if not entry.is_live(self._clock(), self._ttl_seconds):
            logger.debug("Cache entry expired: %s", key)
            return None
        return entry.payload

    def set(self, key: str, payload: dict[str, Any]) -> None:
        """Store ``payload`` under ``key`` stamped with the current clock."""
        self._entries[key] = CacheEntry(payload=payload, stored_at=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
