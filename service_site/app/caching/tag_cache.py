"""
Tag-based content cache for the site service.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, FrozenSet, Iterable, Optional, TYPE_CHECKING

from shared.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


DEFAULT_TTL = 3600


@dataclass
class CacheEntry:
    value: Any
    expires_at: float
    tags: FrozenSet[str] = field(default_factory=frozenset)
    paths: FrozenSet[str] = field(default_factory=frozenset)

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class TagCache:
    """In-process cache whose entries are labelled with tags and page paths.

    Entries are dropped in bulk by tag or by path when the CMS reports a
    content change, or individually once their TTL elapses.
    """

    def __init__(
        self,
        default_ttl: int = DEFAULT_TTL,
        *,
        metrics: Optional["MetricsCollector"] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.default_ttl = default_ttl
        self.metrics = metrics
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        # Bumped by every invalidation; loads that straddle one are not cached
        self._generation = 0
        self._hits = 0
        self._misses = 0
        self.logger = get_logger("site.tag_cache")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key, record=False) is not None

    def get(self, key: str, *, record: bool = True) -> Optional[Any]:
        """Return the cached value, or None on a miss or an expired entry."""
        entry = self._entries.get(key)
        if entry is not None and entry.is_expired(self._clock()):
            del self._entries[key]
            entry = None

        if record:
            self._record_access(hit=entry is not None)
        return entry.value if entry is not None else None

    def set(
        self,
        key: str,
        value: Any,
        tags: Iterable[str] = (),
        paths: Iterable[str] = (),
        ttl: Optional[int] = None,
    ) -> None:
        cache_ttl = self.default_ttl if ttl is None else ttl
        self._entries[key] = CacheEntry(
            value=value,
            expires_at=self._clock() + cache_ttl,
            tags=frozenset(tags),
            paths=frozenset(paths),
        )
        self.logger.debug("Cached value", key=key, ttl=cache_ttl)
        self._update_size()

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[Any]],
        tags: Iterable[str] = (),
        paths: Iterable[str] = (),
        ttl: Optional[int] = None,
    ) -> Any:
        """Cache-aside read. A None result from the loader is not cached.

        A result is also not cached when an invalidation ran while the
        loader was in flight, since it may predate the content change.
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        generation = self._generation
        value = await loader()
        if value is not None and generation == self._generation:
            self.set(key, value, tags=tags, paths=paths, ttl=ttl)
        return value

    def invalidate(
        self,
        tags: Optional[Iterable[str]] = None,
        paths: Optional[Iterable[str]] = None,
    ) -> int:
        """Drop entries carrying any of the tags or paths.

        With neither tags nor paths every entry is dropped. Returns the
        number of evicted entries.
        """
        self._generation += 1
        tag_set = frozenset(tags) if tags is not None else None
        path_set = frozenset(paths) if paths is not None else None

        if tag_set is None and path_set is None:
            evicted = len(self._entries)
            self._entries.clear()
        else:
            stale = [
                key for key, entry in self._entries.items()
                if entry.tags & (tag_set or frozenset()) or entry.paths & (path_set or frozenset())
            ]
            for key in stale:
                del self._entries[key]
            evicted = len(stale)

        self.logger.info(
            "Cache invalidated",
            tags=sorted(tag_set) if tag_set is not None else None,
            paths=sorted(path_set) if path_set is not None else None,
            evicted=evicted,
        )
        if self.metrics:
            self.metrics.increment_counter("cache_evictions_total", evicted)
        self._update_size()
        return evicted

    def stats(self) -> Dict[str, int]:
        return {"entries": len(self._entries), "hits": self._hits, "misses": self._misses}

    def _record_access(self, hit: bool) -> None:
        if hit:
            self._hits += 1
        else:
            self._misses += 1

        if self.metrics:
            metric_name = "cache_hits_total" if hit else "cache_misses_total"
            self.metrics.increment_counter(metric_name, cache_type="content")

    def _update_size(self) -> None:
        if self.metrics:
            self.metrics.set_gauge("cache_entries", len(self._entries))
