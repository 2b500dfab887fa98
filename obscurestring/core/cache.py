"""Bounded result cache for the masking engine."""

import hashlib
import json
import logging
import threading
from collections import OrderedDict
from typing import Any, Dict, Optional

from ..defaults import DEFAULT_CACHE_SIZE
from .options import MaskOptions

logger = logging.getLogger(__name__)


class MaskCache:
    """
    Memo of previously masked strings with first-in-first-out eviction.

    When a store would exceed ``max_size`` the single oldest-inserted entry
    is evicted, regardless of how recently it was read. Keys are SHA-256
    digests of the input and its options, so raw inputs are never retained
    as keys. All operations hold an internal lock, so one cache can be
    shared by engines on several threads.

    Examples:
        >>> cache = MaskCache(max_size=2)
        >>> key = MaskCache.make_key("secret", options)
        >>> cache.store(key, "sec***")
        >>> cache.lookup(key)
        'sec***'
    """

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE) -> None:
        if not isinstance(max_size, int) or max_size <= 0:
            raise ValueError("max_size must be a positive integer")
        self.max_size = max_size
        self._entries: "OrderedDict[str, str]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def make_key(text: str, options: MaskOptions) -> str:
        """Derive a deterministic key from the input content and its options."""
        fingerprint = json.dumps(options.fingerprint(), default=str)
        digest = hashlib.sha256()
        digest.update(text.encode("utf-8", "surrogatepass"))
        digest.update(b"\x00")
        digest.update(fingerprint.encode("utf-8"))
        return digest.hexdigest()

    def lookup(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def store(self, key: str, value: str) -> None:
        """Insert a result, evicting the oldest entry if the cache is full."""
        with self._lock:
            if key in self._entries:
                self._entries[key] = value
                return
            while len(self._entries) >= self.max_size:
                self._entries.popitem(last=False)
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Mask cache cleared")

    def stats(self) -> Dict[str, Any]:
        """Return the current size and capacity, plus hit/miss counters."""
        with self._lock:
            return {
                "size": len(self._entries),
                "max_size": self.max_size,
                "hits": self._hits,
                "misses": self._misses,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
