# cache.py
import logging
import time
from typing import Any, Callable, Dict, Optional, Tuple

from agromarket.general.config import CACHE_DEFAULT_TTL, CACHE_MAX_SIZE

logger = logging.getLogger('TTLCache')


class TTLCache:
    """In-memory cache with per-entry TTL and a FIFO size cap.

    - entries expire `ttl` seconds after they were set; expired entries are
      dropped when looked up
    - once more than `max_size` keys are held, the oldest inserted key is evicted
    - re-setting a key refreshes its value and TTL but keeps its insertion slot
    """

    def __init__(
        self,
        ttl: float = CACHE_DEFAULT_TTL,
        max_size: int = CACHE_MAX_SIZE,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = float(ttl)
        self.max_size = max(1, int(max_size))
        self._clock = clock
        self._entries: Dict[str, Tuple[Any, float, float]] = {}  # key -> (value, stored_at, ttl)

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        self._entries[key] = (value, self._clock(), self.ttl if ttl is None else float(ttl))
        if len(self._entries) > self.max_size:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            logger.debug(f"Cache full ({self.max_size}); evicted {oldest}")

    def get(self, key: str) -> Optional[Any]:
        entry = self._live_entry(key)
        return entry[0] if entry else None

    def has(self, key: str) -> bool:
        return self._live_entry(key) is not None

    def remove(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def _live_entry(self, key: str) -> Optional[Tuple[Any, float, float]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        _, stored_at, ttl = entry
        if self._clock() - stored_at > ttl:
            del self._entries[key]
            logger.debug(f"Cache entry {key} expired")
            return None
        return entry

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key) -> bool:
        return self.has(key)
