"""ARPAbet to IPA phone mapping utilities."""
from __future__ import annotations

import re
from typing import Iterable, List, Optional, Tuple


# ARPAbet base phone (stress digit removed) to approximate IPA
ARPABET_TO_IPA: dict[str, str] = {
    # Vowels
    "AA": "ɑː",
    "AE": "æ",
    "AH": "ʌ",  # "ə" when unstressed, see arpabet_to_ipa()
    "AO": "ɔː",
    "AW": "aʊ",
    "AY": "aɪ",
    "EH": "e",
    "ER": "ɜːr",
    "EY": "eɪ",
    "IH": "ɪ",
    "IY": "iː",
    "OW": "oʊ",
    "OY": "ɔɪ",
    "UH": "ʊ",
    "UW": "uː",
    "AX": "ə",
    "AXR": "ər",
    # Consonants
    "B": "b",
    "CH": "tʃ",
    "D": "d",
    "DH": "ð",
    "DX": "t",  # flap written as plain t
    "F": "f",
    "G": "g",
    "HH": "h",
    "JH": "dʒ",
    "K": "k",
    "L": "l",
    "M": "m",
    "N": "n",
    "NG": "ŋ",
    "P": "p",
    "R": "r",
    "S": "s",
    "SH": "ʃ",
    "T": "t",
    "TH": "θ",
    "V": "v",
    "W": "w",
    "Y": "j",
    "Z": "z",
    "ZH": "ʒ",
}

# Vowel phones; only these carry stress marks
VOWELS = {"AA", "AE", "AH", "AO", "AW", "AY", "EH", "ER", "EY",
          "IH", "IY", "OW", "OY", "UH", "UW", "AX", "AXR"}

STRESS_MARKS = {"1": "ˈ", "2": "ˌ"}

_PHONE_RE = re.compile(r"^([A-Z]+)([0-2])?$")


def split_stress(arpabet_phone: str) -> Optional[Tuple[str, str]]:
    """Split "AY1" into ("AY", "1"); "B" into ("B", ""). None if not a phone."""
    m = _PHONE_RE.match(arpabet_phone.strip().upper())
    if not m:
        return None
    return m.group(1), m.group(2) or ""


def arpabet_to_ipa(arpabet_phone: str) -> str:
    """Convert one ARPAbet phone to IPA.

    A stress digit of 1 or 2 prefixes a primary or secondary stress mark,
    on vowels only. "AH" is rendered as schwa when unstressed (digit 0) and
    as "ʌ" otherwise. Unknown bases come back lowercased; malformed input
    gives an empty string.

    Examples: "AY1" -> "ˈaɪ", "AH0" -> "ə", "T" -> "t"
    """
    parts = split_stress(arpabet_phone)
    if parts is None:
        return ""
    base, stress = parts

    ipa = ARPABET_TO_IPA.get(base, "")
    if not ipa:
        return base.lower()

    if base == "AH":
        ipa = "ə" if stress == "0" else "ʌ"

    mark = STRESS_MARKS.get(stress, "")
    if mark and base in VOWELS:
        return mark + ipa
    return ipa


def convert_phone_sequence(arpabet_phones: Iterable[str]) -> str:
    """Convert a word's ARPAbet phones to a single IPA string.

    Example: ["HH", "AH0", "L", "OW1"] -> "həlˈoʊ"
    """
    out: List[str] = []
    for phone in arpabet_phones:
        ipa = arpabet_to_ipa(phone)
        if ipa:
            out.append(ipa)
    return "".join(out)
