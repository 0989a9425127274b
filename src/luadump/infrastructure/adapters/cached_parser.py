"""Cached syntax provider adapter.

Decorator pattern: wraps SyntaxProviderPort with content-hash based caching.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any

from luadump.domain.ports.syntax_provider import SyntaxProviderPort

logger = logging.getLogger(__name__)


@dataclass
class CachedSyntaxProvider(SyntaxProviderPort):
    """Provider with content-hash based caching.

    Decorator pattern: wraps another SyntaxProviderPort.
    Uses SHA-256 hash of source text as cache key.

    Cache is in-memory only - no persistence between runs.
    Oldest entry evicted first once max_size is reached.
    Syntax errors are never cached.

    Attributes:
        _inner: Wrapped provider implementation
        max_size: Max cached trees. None = unbounded, 0 = caching disabled.
        _cache: content_hash → tree mapping, insertion ordered
    """

    _inner: SyntaxProviderPort
    max_size: int | None = 128
    _cache: OrderedDict[str, Any] = field(default_factory=OrderedDict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self._inner is None:
            raise TypeError("_inner provider must not be None")
        if self.max_size is not None and self.max_size < 0:
            raise ValueError(f"max_size must be >= 0, got {self.max_size}")

    def parse(self, text: str) -> Any:
        """Parse with cache lookup.

        Cache hit: return cached tree for identical text.
        Cache miss: parse with inner provider, cache result.

        Raises:
            LuaSyntaxError: If text is not valid Lua
        """
        if self.max_size == 0:
            return self._inner.parse(text)

        content_hash = hashlib.sha256(text.encode("utf-8")).hexdigest()

        with self._lock:
            if content_hash in self._cache:
                self._cache.move_to_end(content_hash)
                logger.debug("parse cache hit %s", content_hash[:12])
                return self._cache[content_hash]

        # Cache miss - parse outside the lock, errors propagate uncached
        tree = self._inner.parse(text)

        with self._lock:
            self._cache[content_hash] = tree
            if self.max_size is not None:
                while len(self._cache) > self.max_size:
                    self._cache.popitem(last=False)

        return tree

    def clear(self) -> None:
        """Clear entire cache."""
        with self._lock:
            self._cache.clear()

    @property
    def cache_size(self) -> int:
        """Number of cached trees."""
        with self._lock:
            return len(self._cache)
