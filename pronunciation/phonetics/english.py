"""Dictionary-backed English grapheme-to-phoneme conversion to approximate IPA."""
from __future__ import annotations

import logging
import re
from typing import Dict, List, NamedTuple, Optional

from .. import config
from .cmudict import PronunciationDict, get_word_pronunciation, load_cmudict
from .ipa_guide import wrap_ipa
from .numbers import expand_numeric_token
from .phone_mapper import convert_phone_sequence

logger = logging.getLogger(__name__)

CONTRACTION_EXPANSIONS: Dict[str, List[str]] = {
    "i'm": ["i", "am"],
    "i'd": ["i", "would"],
    "i'll": ["i", "will"],
    "you're": ["you", "are"],
    "we're": ["we", "are"],
    "they're": ["they", "are"],
    "it's": ["it", "is"],
    "that's": ["that", "is"],
    "there's": ["there", "is"],
    "what's": ["what", "is"],
    "don't": ["do", "not"],
    "doesn't": ["does", "not"],
    "didn't": ["did", "not"],
    "can't": ["can", "not"],
}


class FallbackRule(NamedTuple):
    """Orthographic rewrite applied once (first occurrence) to an unknown word."""
    pattern: re.Pattern[str]
    output: str


# Applied in this order, before the per-letter map
FALLBACK_RULES: List[FallbackRule] = [
    FallbackRule(re.compile(r"^th"), "θ"),
    FallbackRule(re.compile(r"^sh"), "ʃ"),
    FallbackRule(re.compile(r"^ch"), "tʃ"),
    FallbackRule(re.compile(r"^ph"), "f"),
    FallbackRule(re.compile(r"ng$"), "ŋ"),
    FallbackRule(re.compile(r"ee"), "iː"),
    FallbackRule(re.compile(r"oo"), "uː"),
    FallbackRule(re.compile(r"ai|ay"), "eɪ"),
]

FALLBACK_LETTERS: Dict[str, str] = {
    "a": "æ",
    "e": "e",
    "i": "ɪ",
    "o": "ɒ",
    "u": "ʌ",
    "y": "j",
    "c": "k",
    "q": "k",
    "x": "ks",
}

_QUOTES_RE = re.compile(r"[’‘]")
_DASHES_RE = re.compile(r"[\u2011\u2012\u2013\u2014]")
_TOKEN_RE = re.compile(r"[A-Za-z]+(?:'[A-Za-z]+)?|[0-9]{1,2}:[0-9]{2}|[0-9]+")


def tokenize_for_ipa(text: str) -> List[str]:
    """Extract lowercase words, clock times and integers from English text.

    Example: "It's 7:30 — well-known" -> ["it's", "7:30", "well", "known"]
    """
    normalized = _QUOTES_RE.sub("'", text)
    normalized = _DASHES_RE.sub("-", normalized).replace("-", " ")
    return [t.lower() for t in _TOKEN_RE.findall(normalized) if t.strip()]


def fallback_word_to_ipa(word: str) -> str:
    """Best-effort IPA guess for a word missing from the dictionary.

    The letter map runs over the rewritten string too, so "ee" -> "iː" -> "ɪː".

    Example: "blorp" -> "blɒrp", "sheen" -> "ʃɪːn"
    """
    working = word.replace("'", "")
    if not working:
        return ""

    for rule in FALLBACK_RULES:
        working = rule.pattern.sub(rule.output, working, count=1)

    return "".join(FALLBACK_LETTERS.get(ch, ch) for ch in working)


class EnglishG2P:
    """English text to approximate IPA using CMUdict with a spelling fallback.

    The dictionary always wins when it has the word; the fallback only
    handles misses.
    """

    def __init__(self, dictionary: Optional[PronunciationDict] = None):
        self._dictionary = dictionary

    @property
    def dictionary(self) -> PronunciationDict:
        if self._dictionary is None:
            try:
                self._dictionary = load_cmudict()
            except LookupError as exc:
                logger.warning("Pronunciation dictionary unavailable, using spelling fallback only: %s", exc)
                self._dictionary = {}
        return self._dictionary

    def word_to_ipa(self, word: str) -> str:
        """IPA for one lowercase word (no contraction or number handling)."""
        phones = get_word_pronunciation(word, self.dictionary)
        if phones:
            return convert_phone_sequence(phones)
        return fallback_word_to_ipa(word) or word

    def words_to_ipa(self, words: List[str]) -> List[str]:
        out: List[str] = []
        for word in words:
            for part in CONTRACTION_EXPANSIONS.get(word, [word]):
                ipa = self.word_to_ipa(part.lower())
                if ipa:
                    out.append(ipa)
        return out

    def to_ipa(self, text: str) -> str:
        """Transcribe English text, e.g. "Hi, I'm Anna" -> "/hˈaɪ ˈaɪ ˈæm ˈænə/".

        Empty or whitespace-only input gives the "/…/" placeholder.
        """
        if not text.strip():
            return config.IPA_PLACEHOLDER

        tokens = tokenize_for_ipa(text)
        expanded = [w for t in tokens for w in expand_numeric_token(t)]
        ipa_words = self.words_to_ipa(expanded)
        return wrap_ipa(ipa_words)
