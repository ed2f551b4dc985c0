"""Pronunciation feedback: word-level diffs, accuracy and approximate IPA."""
from __future__ import annotations

from typing import Optional

from .alignment import diff_tokens, normalize_short_answer, tokenize
from .models import DiffStatus, DiffToken, Extra, Missing, Ok, Substituted, Token
from .phonetics import IPA_GUIDE_ROWS, IpaCache, IpaEngine, IpaGuideRow, extract_ipa_symbols
from .scorer import AccuracyResult, feedback_message, token_accuracy

_DEFAULT_ENGINE = IpaEngine()


def default_engine() -> IpaEngine:
    """Process-wide engine behind to_ipa() and to_ipa_for_locale()."""
    return _DEFAULT_ENGINE


def to_ipa(text: str) -> str:
    return _DEFAULT_ENGINE.to_ipa(text)


def to_ipa_for_locale(text: str, locale: Optional[str]) -> str:
    """IPA for "en" / "it" (full tags like "en-US" accepted), "" for other locales."""
    return _DEFAULT_ENGINE.to_ipa_for_locale(text, locale)


__all__ = [
    "diff_tokens",
    "tokenize",
    "normalize_short_answer",
    "token_accuracy",
    "feedback_message",
    "AccuracyResult",
    "to_ipa",
    "to_ipa_for_locale",
    "extract_ipa_symbols",
    "default_engine",
    "IpaEngine",
    "IpaCache",
    "IPA_GUIDE_ROWS",
    "IpaGuideRow",
    "Token",
    "DiffStatus",
    "DiffToken",
    "Ok",
    "Missing",
    "Extra",
    "Substituted",
]
