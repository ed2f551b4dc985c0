"""IPA guide inventory and symbol extraction for highlighting guide rows."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Set

from .. import config


@dataclass(frozen=True)
class IpaGuideRow:
    """One row of the learner-facing IPA chart.

    Attributes:
        key: IPA symbol as it appears in transcriptions (may be multi-character)
        display: Label shown in the chart
        approx_locale_hint: How the sound is approximated in the learner's language
        example: Example word containing the sound
    """
    key: str
    display: str
    approx_locale_hint: str
    example: str


# Hints are written for Spanish speakers learning English
IPA_GUIDE_ROWS: List[IpaGuideRow] = [
    IpaGuideRow("iː", "/iː/", "i larga", "see"),
    IpaGuideRow("ɪ", "/ɪ/", "i corta (entre i/e)", "sit"),
    IpaGuideRow("e", "/e/", "e (como 'e' de 'mesa')", "bed"),
    IpaGuideRow("æ", "/æ/", "a abierta (sonido de 'cat')", "cat"),
    IpaGuideRow("ʌ", "/ʌ/", "a/ə corta (como 'uh')", "cup"),
    IpaGuideRow("ɑː", "/ɑː/", "a larga", "car"),
    IpaGuideRow("ɒ", "/ɒ/ (UK)", "o abierta corta (UK)", "hot"),
    IpaGuideRow("ɔː", "/ɔː/", "o larga", "thought"),
    IpaGuideRow("ʊ", "/ʊ/", "u corta", "book"),
    IpaGuideRow("uː", "/uː/", "u larga", "food"),
    IpaGuideRow("ə", "/ə/", "schwa (vocal neutra)", "about"),
    IpaGuideRow("θ", "/θ/", "z suave sin voz (lengua entre dientes)", "think"),
    IpaGuideRow("ð", "/ð/", "z suave con voz (lengua entre dientes)", "this"),
    IpaGuideRow("v", "/v/", "v sonora (no 'b')", "very"),
    IpaGuideRow("z", "/z/", "s sonora", "zoo"),
    IpaGuideRow("ʃ", "/ʃ/", "sh", "she"),
    IpaGuideRow("tʃ", "/tʃ/", "ch", "chair"),
    IpaGuideRow("dʒ", "/dʒ/", "j", "job"),
    IpaGuideRow("r", "/r/", "r inglesa (suave; no vibrante)", "red"),
    IpaGuideRow("h", "/h/", "h aspirada", "hello"),
    IpaGuideRow("ˈ", "ˈ", "acento principal (sílaba fuerte)", "aˈbout"),
    IpaGuideRow("ˌ", "ˌ", "acento secundario", "ˌunderˈstand"),
]


def keys_longest_first(rows: Iterable[IpaGuideRow] = IPA_GUIDE_ROWS) -> List[str]:
    """Unique row keys, longest first; equal-length keys keep inventory order."""
    return sorted(dict.fromkeys(row.key for row in rows if row.key), key=len, reverse=True)


def extract_ipa_symbols(ipa_text: str, rows: Iterable[IpaGuideRow] = IPA_GUIDE_ROWS) -> Set[str]:
    """Find which guide symbols occur in an IPA string.

    Keys are tried longest first and every occurrence of a found key is
    blanked out before shorter keys are tried, so "tʃ" is reported without
    also reporting the "ʃ" inside it.

    Args:
        ipa_text: Transcription such as "/tʃeə/"
        rows: Guide inventory to match against

    Returns:
        Set of matching row keys
    """
    working = ipa_text.strip()
    if not working:
        return set()

    keys = keys_longest_first(rows)
    found: Set[str] = set()
    for key in keys:
        if key in working:
            found.add(key)
            working = working.replace(key, " ")
    return found


def wrap_ipa(ipa_words: List[str]) -> str:
    """Join per-word IPA and wrap in slashes; nothing to show gives "/…/"."""
    joined = re.sub(r"\s+", " ", " ".join(ipa_words)).strip()
    return f"/{joined}/" if joined else config.IPA_PLACEHOLDER
