"""Locale dispatch for IPA transcription, with memoization."""
from __future__ import annotations

import logging
import re
from typing import Optional

from .. import config
from .cache import IpaCache
from .cmudict import PronunciationDict
from .english import EnglishG2P
from .italian import ItalianG2P

logger = logging.getLogger(__name__)


def locale_base(locale: Optional[str]) -> str:
    """Reduce a locale to its language subtag ("en-US" -> "en", "" -> default).

    Full tags are accepted here so callers can pass the learner's accent tag
    directly; a bare language-base lookup would give "" for "en-US".
    """
    base = (locale or config.DEFAULT_LOCALE).strip().lower() or config.DEFAULT_LOCALE
    return re.split(r"[-_]", base, maxsplit=1)[0]


class IpaEngine:
    """Owns the English and Italian converters and their shared cache.

    Build one per process (see pronunciation.default_engine) and share it;
    the dictionary and rule tables are read-only and the cache is locked.
    """

    def __init__(self, cache: Optional[IpaCache] = None, dictionary: Optional[PronunciationDict] = None):
        self.cache = cache if cache is not None else IpaCache()
        self.english = EnglishG2P(dictionary)
        self.italian = ItalianG2P()

    def to_ipa(self, text: str) -> str:
        """English transcription."""
        return self.to_ipa_for_locale(text, "en")

    def to_ipa_for_locale(self, text: str, locale: Optional[str]) -> str:
        """Transcribe text for a locale.

        Args:
            text: Phrase to transcribe
            locale: Locale or language base ("en", "it", "en-GB", ...)

        Returns:
            "/…/"-wrapped IPA for English and Italian, "/…/" for empty text,
            "" for any other locale
        """
        base = locale_base(locale)
        if base not in config.SUPPORTED_LOCALES:
            logger.debug("No IPA converter for locale %r", locale)
            return ""
        converter = self.english if base == "en" else self.italian

        if not text.strip():
            return config.IPA_PLACEHOLDER
        return self.cache.get_or_compute(base, text, converter.to_ipa)
