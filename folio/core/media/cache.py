# folio/core/media/cache.py
"""
Process-wide memo of probe outcomes, keyed by (subject id, gallery folder).

Entry lifecycle: absent → PENDING → ResolvedThumbnail | ATTEMPTED_EMPTY.
A PENDING entry whose probe was cancelled goes back to absent (`abandon`).
Entries are never evicted; the subject set is static for the process lifetime.
"""

from __future__ import annotations

import threading

from folio.schemas.models import CacheEntry, CacheKey, CacheState, ResolvedThumbnail


class ResolutionCache:
    def __init__(self) -> None:
        self._entries: dict[CacheKey, CacheEntry] = {}
        # begin_resolution is check-then-act; serialize for threaded hosts
        self._lock = threading.Lock()

    def get(self, key: CacheKey) -> CacheEntry | None:
        return self._entries.get(key)

    def resolved(self, key: CacheKey) -> ResolvedThumbnail | None:
        """The final thumbnail for `key`, or None while absent/pending/empty."""
        entry = self._entries.get(key)
        return entry if isinstance(entry, ResolvedThumbnail) else None

    def begin_resolution(self, key: CacheKey) -> bool:
        """Mark `key` PENDING. True only for the call that created the entry."""
        with self._lock:
            if key in self._entries:
                return False
            self._entries[key] = CacheState.PENDING
            return True

    def complete(self, key: CacheKey, result: ResolvedThumbnail | None) -> None:
        """Store the terminal state; None is recorded as ATTEMPTED_EMPTY. Last write wins."""
        with self._lock:
            self._entries[key] = result if result is not None else CacheState.ATTEMPTED_EMPTY

    def abandon(self, key: CacheKey) -> bool:
        """Drop a PENDING entry whose probe never finished, so the key can be claimed again."""
        with self._lock:
            if self._entries.get(key) is not CacheState.PENDING:
                return False
            del self._entries[key]
            return True

    def snapshot(self) -> dict[CacheKey, CacheEntry]:
        with self._lock:
            return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


_DEFAULT_CACHE: ResolutionCache | None = None
_DEFAULT_LOCK = threading.Lock()


def default_cache() -> ResolutionCache:
    """The single process-wide cache, created on first access."""
    global _DEFAULT_CACHE
    with _DEFAULT_LOCK:
        if _DEFAULT_CACHE is None:
            _DEFAULT_CACHE = ResolutionCache()
        return _DEFAULT_CACHE


__all__ = ["ResolutionCache", "default_cache"]
