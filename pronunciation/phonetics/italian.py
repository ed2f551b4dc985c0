"""Rule-based Italian grapheme-to-phoneme conversion to approximate IPA."""
from __future__ import annotations

import re
from typing import Dict, List, NamedTuple, Optional

from .. import config
from ..alignment.normalizer import fold_apostrophes, strip_diacritics
from .ipa_guide import wrap_ipa


class ScanRule(NamedTuple):
    """Orthographic pattern matched at the scan position.

    Attributes:
        prefix: Letters that must start at the scan position
        followed_by: Letters allowed right after the prefix ("" = anything, including end of word)
        output: IPA emitted ("" = silent)
        consume: Letters consumed; may be shorter than prefix ("gli" keeps its "i")
    """
    prefix: str
    followed_by: str
    output: str
    consume: int


# First match wins; order matters where prefixes overlap
ITALIAN_RULES: List[ScanRule] = [
    ScanRule("gli", "", "ʎ", 2),
    ScanRule("gn", "", "ɲ", 2),
    ScanRule("qu", "", "kw", 2),
    ScanRule("sch", "", "sk", 3),
    ScanRule("ch", "", "k", 2),
    ScanRule("gh", "", "g", 2),
    ScanRule("sc", "ei", "ʃ", 2),
    ScanRule("ci", "aou", "tʃ", 2),
    ScanRule("gi", "aou", "dʒ", 2),
    ScanRule("c", "ei", "tʃ", 1),
    ScanRule("g", "ei", "dʒ", 1),
    ScanRule("h", "", "", 1),
]

# Letters not listed here are dropped
ITALIAN_LETTERS: Dict[str, str] = {
    "a": "a", "e": "e", "i": "i", "o": "o", "u": "u",
    "b": "b", "d": "d", "f": "f", "l": "l", "m": "m",
    "n": "n", "p": "p", "r": "r", "s": "s", "t": "t",
    "v": "v", "z": "ts", "c": "k", "g": "g", "x": "ks",
    "y": "i", "w": "w", "k": "k", "j": "j",
}

_DASHES_RE = re.compile(r"[\u2011\u2012\u2013\u2014]")
# letters, digits and apostrophes (Unicode aware, so accented vowels survive)
_WORD_RE = re.compile(r"(?:[^\W_]|')+")


def tokenize_for_italian_ipa(text: str) -> List[str]:
    """Split Italian text into words, keeping accented letters and apostrophes.

    Example: "Com'è l'università?" -> ["Com'è", "l'università"]
    """
    normalized = fold_apostrophes(text)
    normalized = _DASHES_RE.sub("-", normalized).replace("-", " ")
    return [t for t in _WORD_RE.findall(normalized) if t]


def _match_rule(word: str, i: int) -> Optional[ScanRule]:
    for rule in ITALIAN_RULES:
        if not word.startswith(rule.prefix, i):
            continue
        if rule.followed_by:
            after = word[i + len(rule.prefix):i + len(rule.prefix) + 1]
            if not after or after not in rule.followed_by:
                continue
        return rule
    return None


def italian_word_to_ipa(word: str) -> str:
    """Scan a word left to right with longest-match-first rules.

    Examples: "gnocchi" -> "ɲokki", "figlio" -> "fiʎio", "ciao" -> "tʃao", "perché" -> "perke"
    """
    w = strip_diacritics(fold_apostrophes(word.strip().lower()).replace("'", ""))
    if not w:
        return ""

    out: List[str] = []
    i = 0
    while i < len(w):
        rule = _match_rule(w, i)
        if rule is not None:
            if rule.output:
                out.append(rule.output)
            i += rule.consume
            continue
        out.append(ITALIAN_LETTERS.get(w[i], ""))
        i += 1
    return "".join(out)


class ItalianG2P:
    """Italian text to approximate IPA, straight from spelling."""

    def to_ipa(self, text: str) -> str:
        """Transcribe Italian text, e.g. "Buongiorno!" -> "/buondʒorno/".

        Empty or whitespace-only input gives the "/…/" placeholder.
        """
        if not text.strip():
            return config.IPA_PLACEHOLDER

        ipa_words = [italian_word_to_ipa(w) for w in tokenize_for_italian_ipa(text)]
        return wrap_ipa([w for w in ipa_words if w])
