from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple


class TTLCache:
    """
    Process-local cache for generated itineraries, keyed by ``derive_key``.

    Expired entries are swept on every write, so the map only holds live
    answers. Routes run in a threadpool; all access goes through one lock.
    """

    def __init__(
        self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.entries: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self.entries.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if self.clock() >= expires_at:
                self.entries.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            now = self.clock()
            self._purge(now)
            self.entries[key] = (now + self.ttl_seconds, value)

    def _purge(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self.entries.items() if now >= expires_at]
        for key in expired:
            self.entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)
