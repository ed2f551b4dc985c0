"""Alignment utilities for matching a target phrase to a recognized transcript."""
from .aligner import align, diff_tokens
from .edit_distance import TIE_BREAK_ORDER, align_sequences
from .normalizer import normalize_short_answer, normalize_word
from .tokenizer import tokenize

__all__ = [
    "align",
    "diff_tokens",
    "align_sequences",
    "TIE_BREAK_ORDER",
    "normalize_word",
    "normalize_short_answer",
    "tokenize",
]
