"""Data model for word-level diff tokens between a target phrase and a transcript."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Union


class DiffStatus(str, Enum):
    """Outcome of one aligned position."""
    OK = "ok"
    MISSING = "missing"
    EXTRA = "extra"
    SUBSTITUTED = "substituted"


@dataclass(frozen=True)
class Ok:
    """Target word was spoken as expected.

    Attributes:
        expected: Surface form from the target phrase
        actual: Surface form from the transcript
    """
    expected: str
    actual: str
    status: ClassVar[DiffStatus] = DiffStatus.OK

    def to_dict(self) -> Dict[str, str]:
        return {"status": self.status.value, "expected": self.expected, "actual": self.actual}


@dataclass(frozen=True)
class Missing:
    """Target word has no counterpart in the transcript."""
    expected: str
    status: ClassVar[DiffStatus] = DiffStatus.MISSING

    def to_dict(self) -> Dict[str, str]:
        return {"status": self.status.value, "expected": self.expected}


@dataclass(frozen=True)
class Extra:
    """Transcript word has no counterpart in the target phrase."""
    actual: str
    status: ClassVar[DiffStatus] = DiffStatus.EXTRA

    def to_dict(self) -> Dict[str, str]:
        return {"status": self.status.value, "actual": self.actual}


@dataclass(frozen=True)
class Substituted:
    """Target and transcript words were aligned but differ."""
    expected: str
    actual: str
    status: ClassVar[DiffStatus] = DiffStatus.SUBSTITUTED

    def to_dict(self) -> Dict[str, str]:
        return {"status": self.status.value, "expected": self.expected, "actual": self.actual}


DiffToken = Union[Ok, Missing, Extra, Substituted]
