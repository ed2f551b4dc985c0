"""Thread-safe memoization of IPA transcriptions."""
from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, str]


class IpaCache:
    """Maps (locale, trimmed text) to an IPA string for the life of the process.

    There is no eviction; practice phrases form a small, bounded vocabulary.
    Values are computed outside the lock, so two threads missing on the same
    key may both compute it; the writes are identical.
    """

    def __init__(self) -> None:
        self._entries: Dict[CacheKey, str] = {}
        self._lock = threading.Lock()

    @staticmethod
    def make_key(locale: str, text: str) -> CacheKey:
        return locale, text.strip()

    def get(self, locale: str, text: str) -> Optional[str]:
        with self._lock:
            return self._entries.get(self.make_key(locale, text))

    def put(self, locale: str, text: str, ipa: str) -> None:
        with self._lock:
            self._entries[self.make_key(locale, text)] = ipa

    def get_or_compute(self, locale: str, text: str, compute: Callable[[str], str]) -> str:
        cached = self.get(locale, text)
        if cached is not None:
            logger.debug("IPA cache hit for %s:%r", locale, text.strip())
            return cached
        ipa = compute(text)
        self.put(locale, text, ipa)
        return ipa

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        with self._lock:
            return self.make_key(*key) in self._entries
