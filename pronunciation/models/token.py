"""Data model for a single comparable word token."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """A word as typed or recognized, plus the form used for comparison.

    Attributes:
        surface: The original text slice, kept for display
        normalized: Lowercase, diacritic-free, punctuation-free form used for equality
    """
    surface: str
    normalized: str
