"""Data models for tokens and word-level diff results."""
from .diff_token import DiffStatus, DiffToken, Extra, Missing, Ok, Substituted
from .token import Token

__all__ = [
    "Token",
    "DiffStatus",
    "DiffToken",
    "Ok",
    "Missing",
    "Extra",
    "Substituted",
]
