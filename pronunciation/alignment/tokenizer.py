"""Whitespace tokenization of phrases and transcripts for alignment."""
from __future__ import annotations

import re
from typing import List

from ..models.token import Token
from .normalizer import normalize_word


def tokenize(text: str) -> List[Token]:
    """Split text on whitespace into comparable tokens.

    Pieces that normalize to an empty string (bare punctuation, emoji, ...)
    are dropped, so target and transcript are filtered identically.

    Example: "I'm  fine, thanks!" -> [Token("I'm", "i'm"), Token("fine,", "fine"), Token("thanks!", "thanks")]

    Args:
        text: Target phrase or recognized transcript

    Returns:
        List of tokens in text order
    """
    tokens: List[Token] = []
    for raw in re.split(r"\s+", text.strip()):
        if not raw:
            continue
        normalized = normalize_word(raw)
        if normalized:
            tokens.append(Token(surface=raw, normalized=normalized))
    return tokens
