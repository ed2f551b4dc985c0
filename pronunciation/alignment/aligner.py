"""Alignment orchestration between a target phrase and a recognized transcript."""
from __future__ import annotations

from typing import List, Sequence

from ..models.diff_token import DiffToken, Extra, Missing, Ok, Substituted
from ..models.token import Token
from .edit_distance import align_sequences
from .tokenizer import tokenize


def align(target: Sequence[Token], transcript: Sequence[Token]) -> List[DiffToken]:
    """Align target tokens to transcript tokens and classify each position.

    Comparison uses the normalized forms; the emitted tokens carry the
    original surface forms for display.

    Args:
        target: Tokens of the expected phrase
        transcript: Tokens of the recognized speech

    Returns:
        Diff tokens in phrase order
    """
    ops = align_sequences([t.normalized for t in target], [t.normalized for t in transcript])
    out: List[DiffToken] = []
    for op, ri, hj in ops:
        if op == "match":
            out.append(Ok(expected=target[ri].surface, actual=transcript[hj].surface))
        elif op == "sub":
            out.append(Substituted(expected=target[ri].surface, actual=transcript[hj].surface))
        elif op == "del":
            out.append(Missing(expected=target[ri].surface))
        elif op == "ins":
            out.append(Extra(actual=transcript[hj].surface))
    return out


def diff_tokens(target_text: str, transcript_text: str) -> List[DiffToken]:
    """Word-level diff of the expected phrase against what was recognized.

    Example: diff_tokens("I want to go", "I want go") -> [Ok, Ok, Missing("to"), Ok]
    """
    return align(tokenize(target_text), tokenize(transcript_text))
