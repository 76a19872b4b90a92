"""
utils/cache.py — Solve Result Memoization

The engine is pure: a (framework, semantics) pair always yields the
same result. This cache sits outside the engine and keys results by the
framework's content fingerprint plus the semantics, so identical
frameworks submitted by different clients share one solve.

Capacity is bounded with least-recently-used eviction. Failed solves
(invalid framework, exhausted budget) are never stored.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass

from argviz.argumentation import (
    Framework,
    SemanticsEngine,
    SemanticsKind,
    SemanticsResult,
)

logger = logging.getLogger("argviz.cache")


@dataclass
class CacheEntry:
    result: SemanticsResult
    last_access: int
    hits: int = 0


class ResultCache:

    def __init__(self, max_entries: int = 256):
        self.max_entries = max_entries
        self._clock = itertools.count()
        self._entries: dict[tuple[str, str], CacheEntry] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key_for(framework: Framework, semantics: SemanticsKind) -> tuple[str, str]:
        return (framework.fingerprint, SemanticsKind(semantics).value)

    def get(self, framework: Framework, semantics: SemanticsKind) -> SemanticsResult | None:
        entry = self._entries.get(self.key_for(framework, semantics))
        if entry is None:
            self.misses += 1
            return None
        entry.last_access = next(self._clock)
        entry.hits += 1
        self.hits += 1
        return entry.result

    def put(
        self,
        framework: Framework,
        semantics: SemanticsKind,
        result: SemanticsResult,
    ) -> None:
        if self.max_entries <= 0:
            return
        key = self.key_for(framework, semantics)
        if key not in self._entries and len(self._entries) >= self.max_entries:
            self._evict_lru()
        self._entries[key] = CacheEntry(result=result, last_access=next(self._clock))

    def get_or_solve(
        self,
        engine: SemanticsEngine,
        framework: Framework,
        semantics: SemanticsKind,
    ) -> tuple[SemanticsResult, bool]:
        """
        Return (result, hit). The framework is validated before the lookup
        so an invalid framework never matches a cached entry. Errors from
        the engine propagate uncached.
        """
        framework.validate()
        cached = self.get(framework, semantics)
        if cached is not None:
            return cached, True
        result = engine.solve(framework, semantics)
        self.put(framework, semantics, result)
        return result, False

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def stats(self) -> dict:
        return {
            "entries": len(self._entries),
            "max_entries": self.max_entries,
            "hits": self.hits,
            "misses": self.misses,
        }

    def _evict_lru(self) -> None:
        """Evict the least recently used entry."""
        if not self._entries:
            return
        oldest = min(self._entries, key=lambda k: self._entries[k].last_access)
        del self._entries[oldest]
        logger.debug(f"Evicted cached result {oldest[0][:12]}/{oldest[1]}")
