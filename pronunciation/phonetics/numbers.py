"""Spell out small integers and H:MM clock times as English words."""
from __future__ import annotations

import re
from typing import Dict, List

ONES: Dict[int, str] = {
    0: "zero", 1: "one", 2: "two", 3: "three", 4: "four",
    5: "five", 6: "six", 7: "seven", 8: "eight", 9: "nine",
    10: "ten", 11: "eleven", 12: "twelve", 13: "thirteen", 14: "fourteen",
    15: "fifteen", 16: "sixteen", 17: "seventeen", 18: "eighteen", 19: "nineteen",
}

TENS: Dict[int, str] = {
    20: "twenty",
    30: "thirty",
    40: "forty",
    50: "fifty",
}

CLOCK_RE = re.compile(r"^[0-9]{1,2}:[0-9]{2}$")
INTEGER_RE = re.compile(r"^[0-9]+$")


def number_to_words(n: int) -> List[str]:
    """Spell out 0-59 ("21" -> ["twenty", "one"]); empty list when unsupported."""
    if n < 0:
        return []
    if n in ONES:
        return [ONES[n]]
    if n in TENS:
        return [TENS[n]]
    if 20 < n < 60:
        return [TENS[n // 10 * 10], ONES[n % 10]]
    return []


def expand_numeric_token(token: str) -> List[str]:
    """Expand a clock time or integer token into words.

    Non-numeric tokens and numbers outside 0-59 pass through unchanged.

    Examples:
        "7:30" -> ["seven", "thirty"]
        "12:05" -> ["twelve", "five"]
        "42" -> ["forty", "two"]
        "120" -> ["120"]
        "hello" -> ["hello"]
    """
    if CLOCK_RE.match(token):
        hours, minutes = token.split(":")
        combined = number_to_words(int(hours)) + number_to_words(int(minutes))
        return combined or [token]
    if INTEGER_RE.match(token):
        return number_to_words(int(token)) or [token]
    return [token]
