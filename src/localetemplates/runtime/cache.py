"""Thread-safe cache of compiled templates.

Maps (name, language) keys to compiled templates and populates entries
lazily with double-checked locking:

    1. Debug mode: evict the key under the lock (forces a reparse)
    2. Lock, look up; a hit returns immediately
    3. Miss: run the loader outside the lock (file I/O and parsing)
    4. Lock, look up again; an entry committed by a concurrent caller wins
       and the fresh result is discarded; otherwise store it

Parses for the same key may race, but only one compiled instance is ever
observable afterwards. Loader errors propagate and nothing is cached, so a
broken file can be fixed without restarting.

Thread Safety:
    A single threading.Lock per cache, held only for dictionary access.
    Different template flavors use different TemplateCache instances and
    never contend with each other.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock
from typing import NamedTuple

from jinja2 import Template

from localetemplates.loading.types import LanguageTag, TemplateName

__all__ = ["CacheKey", "TemplateCache"]

logger = logging.getLogger(__name__)


class CacheKey(NamedTuple):
    """Cache key for one (name, language) pair.

    Hashing uses both fields, so ("a-b", "c") and ("a", "b-c") are distinct
    keys even though they render to the same string.
    """

    name: TemplateName
    lang: LanguageTag

    def __str__(self) -> str:
        return f"{self.name}-{self.lang}"


class TemplateCache:
    """Lazily populated (name, language) -> compiled template mapping.

    Entries are never mutated once stored; they are only read or evicted.

    Example:
        >>> cache = TemplateCache()
        >>> tmpl = cache.get_or_load(CacheKey("hello", "en"), load_hello)
        >>> cache.get_or_load(CacheKey("hello", "en"), load_hello) is tmpl
        True
    """

    __slots__ = (
        "_debug_evictions",
        "_entries",
        "_hits",
        "_loads",
        "_lock",
        "_misses",
        "_race_discards",
    )

    def __init__(self) -> None:
        """Initialize empty cache."""
        self._entries: dict[CacheKey, Template] = {}
        self._lock = Lock()
        self._hits = 0
        self._misses = 0
        self._loads = 0
        self._race_discards = 0
        self._debug_evictions = 0

    def get_or_load(
        self,
        key: CacheKey,
        loader: Callable[[], Template],
        *,
        debug: bool = False,
    ) -> Template:
        """Return the cached template for key, loading it on a miss.

        Args:
            key: Cache key
            loader: Callable that reads and compiles the template. Runs
                    without the lock held; may raise.
            debug: Evict key first so the template is always reloaded

        Returns:
            The single committed template for key

        Raises:
            Whatever loader raises (TemplateNotFoundError, parse errors).
            Failures are never cached.
        """
        if debug:
            with self._lock:
                if self._entries.pop(key, None) is not None:
                    self._debug_evictions += 1

        with self._lock:
            cached = self._entries.get(key)
            if cached is not None:
                self._hits += 1
                return cached
            self._misses += 1

        template = loader()

        with self._lock:
            self._loads += 1
            existing = self._entries.get(key)
            if existing is not None:
                self._race_discards += 1
                logger.debug("Discarded concurrent load of '%s'", key)
                return existing
            self._entries[key] = template

        logger.debug("Cached template '%s'", key)
        return template

    def get(self, key: CacheKey) -> Template | None:
        """Return the cached template for key without loading."""
        with self._lock:
            return self._entries.get(key)

    def evict(self, key: CacheKey) -> bool:
        """Remove one entry.

        Returns:
            True if an entry was removed
        """
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Remove all entries and reset metrics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._loads = 0
            self._race_discards = 0
            self._debug_evictions = 0

    def get_stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dict with keys:
            - size: Current number of cached entries
            - hits: Lookups served from the cache
            - misses: Lookups that ran the loader
            - loads: Loader calls that completed successfully
            - race_discards: Loads discarded because another caller committed first
            - debug_evictions: Entries evicted by debug mode
        """
        with self._lock:
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "loads": self._loads,
                "race_discards": self._race_discards,
                "debug_evictions": self._debug_evictions,
            }

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
