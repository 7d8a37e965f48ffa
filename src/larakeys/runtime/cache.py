"""Thread-safe cache of parsed translation files.

Architecture:
    - Keyed by (locale, absolute file path)
    - Stale-until-invalidated: entries are never refreshed on their own
    - Coarse invalidation clears everything; per-file removal is available
    - Generation counter closes the window between a miss and its write

Generation Guard:
    A loader captures ``generation`` before reading a file. If an
    invalidation happens while the file is read, ``put()`` sees a newer
    generation and discards the write. The caller still uses the data it
    read, but that data never outlives the invalidation in the cache.

Thread Safety:
    All operations protected by RLock. Invalidations arrive from the
    watcher thread while lookups run on the host thread.

Python 3.13+.
"""

from __future__ import annotations

from typing import TypeAlias

import logging
from pathlib import Path
from threading import RLock

from larakeys.localization.types import LocaleCode
from larakeys.runtime.value_types import CacheEntry

__all__ = ["TranslationCache"]

logger = logging.getLogger(__name__)

_CacheKey: TypeAlias = tuple[LocaleCode, Path]


class TranslationCache:
    """Cache of CacheEntry objects keyed by (locale, file path).

    Transparent to caller - returns None on cache miss.

    Attributes:
        generation: Counter bumped by every invalidation
        hits: Number of cache hits (for metrics)
        misses: Number of cache misses (for metrics)
    """

    __slots__ = ("_cache", "_generation", "_hits", "_invalidations", "_lock", "_misses")

    def __init__(self) -> None:
        self._cache: dict[_CacheKey, CacheEntry] = {}
        self._lock = RLock()
        self._generation = 0
        self._hits = 0
        self._misses = 0
        self._invalidations = 0

    def get(self, locale: LocaleCode, file_path: Path) -> CacheEntry | None:
        """Get cached entry if present.

        Args:
            locale: Locale code
            file_path: Absolute translation file path

        Returns:
            Cached entry or None
        """
        with self._lock:
            entry = self._cache.get((locale, file_path))
            if entry is None:
                self._misses += 1
            else:
                self._hits += 1
            return entry

    def put(
        self,
        locale: LocaleCode,
        file_path: Path,
        entry: CacheEntry,
        generation: int,
    ) -> bool:
        """Store an entry unless the cache was invalidated since ``generation``.

        Args:
            locale: Locale code
            file_path: Absolute translation file path
            entry: Parsed file
            generation: Value of ``generation`` captured before reading the file

        Returns:
            True if stored, False if discarded as stale
        """
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarded stale cache write for %s (%s)", file_path, locale)
                return False
            self._cache[(locale, file_path)] = entry
            return True

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._cache.clear()
            self._generation += 1
            self._invalidations += 1

    def discard(self, file_path: Path) -> int:
        """Drop every entry for one file, across all locales.

        Paths are compared after resolving symlinks, so watcher paths match
        entries cached through a symlinked workspace.

        Args:
            file_path: Translation file path

        Returns:
            Number of entries removed
        """
        with self._lock:
            target = file_path.resolve()
            stale = [key for key in self._cache if key[1].resolve() == target]
            for key in stale:
                del self._cache[key]
            self._generation += 1
            self._invalidations += 1
            return len(stale)

    @property
    def generation(self) -> int:
        """Current invalidation generation.

        Thread-safe.
        """
        with self._lock:
            return self._generation

    @property
    def hits(self) -> int:
        """Number of cache hits.

        Thread-safe.
        """
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses.

        Thread-safe.
        """
        with self._lock:
            return self._misses

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
            - invalidations (int): Number of clear/discard calls
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._cache),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(hit_rate, 2),
                "invalidations": self._invalidations,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache
