"""In-memory cache of normalized matches."""

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional

from dota_scout.models.match import Match

logger = logging.getLogger(__name__)


@dataclass
class _CacheEntry:
    match: Match
    stored_at: float


class MatchCache:
    """Normalized matches keyed by raw match id.

    Eviction is chosen by the caller: ``max_entries`` bounds the size with
    least-recently-used eviction, ``ttl_seconds`` expires entries by age.
    Either may be None to disable that policy. Access is thread-safe.
    """

    def __init__(
        self,
        max_entries: Optional[int] = None,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.time,
    ):
        if max_entries is not None and max_entries <= 0:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[int, _CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def _is_expired(self, entry: _CacheEntry, now: float) -> bool:
        return self.ttl_seconds is not None and (now - entry.stored_at) >= self.ttl_seconds

    def get(self, match_id: int) -> Optional[Match]:
        """Cached match, or None if absent or expired."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(match_id)
            if entry is None:
                return None
            if self._is_expired(entry, now):
                del self._entries[match_id]
                return None
            self._entries.move_to_end(match_id)
            logger.debug(f"Match cache hit: {match_id}")
            return entry.match

    def put(self, match: Match) -> None:
        """Store a match under its id, evicting as the policy requires."""
        now = self._clock()
        with self._lock:
            self._entries[match.id] = _CacheEntry(match=match, stored_at=now)
            self._entries.move_to_end(match.id)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    evicted_id, _ = self._entries.popitem(last=False)
                    logger.debug(f"Evicted match {evicted_id} from cache")

    def invalidate(self, match_id: Optional[int] = None) -> int:
        """Drop one match, or everything when no id is given.

        Returns:
            Number of entries removed
        """
        with self._lock:
            if match_id is None:
                removed = len(self._entries)
                self._entries.clear()
                return removed
            return 1 if self._entries.pop(match_id, None) is not None else 0

    def prune_expired(self) -> int:
        """Remove every expired entry; returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [mid for mid, entry in self._entries.items() if self._is_expired(entry, now)]
            for match_id in expired:
                del self._entries[match_id]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, match_id: int) -> bool:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(match_id)
            return entry is not None and not self._is_expired(entry, now)
