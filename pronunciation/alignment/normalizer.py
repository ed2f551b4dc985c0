"""Token normalization utilities for alignment and answer checking."""
from __future__ import annotations

import re
import unicodedata

# Typographic apostrophes folded to a plain "'"
CURLY_APOSTROPHES = "’‘‛ʼ"

_CURLY_RE = re.compile(f"[{CURLY_APOSTROPHES}]")
# \w is Unicode-aware but also admits "_"; combining marks are not \w
_NON_WORD_RE = re.compile(r"[^\w']|_")
_NON_WORD_OR_SPACE_RE = re.compile(r"[^\w' ]|_")
_EDGE_APOSTROPHES_RE = re.compile(r"^'+|'+$")


def fold_apostrophes(text: str) -> str:
    """Replace typographic apostrophes with a plain apostrophe."""
    return _CURLY_RE.sub("'", text)


def strip_diacritics(text: str) -> str:
    """Decompose to NFKD and drop combining marks ("perché" -> "perche")."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_word(word: str) -> str:
    """Normalize a word for alignment.

    Lowercases, folds curly apostrophes, strips diacritics, drops every
    character that is not a letter, digit or apostrophe, then strips
    leading/trailing apostrophes.

    Args:
        word: The raw word as typed or recognized

    Returns:
        Normalized word, possibly empty (callers drop empty tokens)
    """
    token = fold_apostrophes(word.lower())
    token = strip_diacritics(token)
    token = _NON_WORD_RE.sub("", token)
    token = _EDGE_APOSTROPHES_RE.sub("", token)
    return token.strip()


def normalize_short_answer(text: str) -> str:
    """Normalize a typed short answer (fill-in-the-blank) for exact comparison.

    Example: "  L’Été,  chaud! " -> "l'ete chaud"
    """
    s = fold_apostrophes(text.strip().lower())
    s = strip_diacritics(s)
    s = _NON_WORD_OR_SPACE_RE.sub("", s)
    return re.sub(r"\s+", " ", s).strip()
