"""Accuracy scoring for word-level pronunciation diffs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .. import config
from ..models.diff_token import DiffStatus, DiffToken


@dataclass(frozen=True)
class AccuracyResult:
    """Reduced form of a diff token sequence.

    Attributes:
        matched: Number of "ok" tokens
        expected: Number of target words (every token except "extra")
        accuracy: matched / expected, or 0.0 when nothing was expected
    """
    matched: int
    expected: int
    accuracy: float

    def passed(self, threshold: Optional[float] = None) -> bool:
        if threshold is None:
            threshold = config.PASS_THRESHOLD
        return self.accuracy >= threshold


def token_accuracy(tokens: Iterable[DiffToken]) -> AccuracyResult:
    """Compute the share of target words that were spoken correctly.

    Extra words are informational only: they neither add to the expected
    count nor count as matches.

    Args:
        tokens: Diff tokens from diff_tokens()

    Returns:
        AccuracyResult with matched, expected and accuracy
    """
    matched = 0
    expected = 0
    for token in tokens:
        if token.status is DiffStatus.EXTRA:
            continue
        expected += 1
        if token.status is DiffStatus.OK:
            matched += 1
    accuracy = matched / expected if expected > 0 else 0.0
    return AccuracyResult(matched=matched, expected=expected, accuracy=accuracy)


def format_pct(accuracy: float) -> str:
    # half-up rounding, round() would give "12%" for 0.125
    return f"{int(accuracy * 100 + 0.5)}%"


def feedback_message(result: AccuracyResult, threshold: Optional[float] = None) -> str:
    """Short learner-facing message, e.g. "Good! Accuracy 85%." or "Keep going. Accuracy 50%."."""
    if result.passed(threshold):
        return f"Good! Accuracy {format_pct(result.accuracy)}."
    return f"Keep going. Accuracy {format_pct(result.accuracy)}."
