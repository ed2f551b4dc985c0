"""CMU Pronouncing Dictionary integration via the cmudict distribution."""
from __future__ import annotations

import logging
import threading
from typing import Dict, List, Mapping, Optional

import cmudict as cmudict_data

logger = logging.getLogger(__name__)

PronunciationDict = Mapping[str, List[List[str]]]

# Global cache for loaded CMUdict (read-only once populated)
_CMUDICT_CACHE: Optional[Dict[str, List[List[str]]]] = None
_CMUDICT_LOCK = threading.Lock()


def load_cmudict() -> Dict[str, List[List[str]]]:
    """Load the CMU Pronouncing Dictionary.

    Caches the dictionary after first load; concurrent first callers load it once.

    Returns:
        Dict mapping lowercase words to lists of pronunciations.
        Each pronunciation is a list of ARPAbet phone symbols.
        Example: {"bicycle": [["B", "AY1", "S", "IH0", "K", "AH0", "L"]]}

    Raises:
        LookupError: If the dictionary data shipped with cmudict cannot be read
    """
    global _CMUDICT_CACHE

    if _CMUDICT_CACHE is not None:
        return _CMUDICT_CACHE

    with _CMUDICT_LOCK:
        if _CMUDICT_CACHE is None:
            try:
                loaded = cmudict_data.dict()
            except (OSError, ValueError) as exc:
                raise LookupError(
                    "CMUdict data could not be read. Reinstall with:\n"
                    "  pip install --force-reinstall cmudict"
                ) from exc
            logger.info("Loaded CMU pronouncing dictionary (%d entries)", len(loaded))
            _CMUDICT_CACHE = loaded
    return _CMUDICT_CACHE


def get_word_pronunciation(
    word: str,
    cmu_dict: Optional[PronunciationDict] = None,
    pronunciation_index: int = 0,
) -> List[str]:
    """Get pronunciation for a single word from CMUdict.

    Args:
        word: Word to look up (case-insensitive, apostrophes kept: "o'clock")
        cmu_dict: Optional pre-loaded dictionary (loads CMUdict if None)
        pronunciation_index: Which pronunciation to use when several exist

    Returns:
        List of ARPAbet phone symbols, or empty list if word not found.
        Example: ["B", "AY1", "S", "IH0", "K", "AH0", "L"] for "bicycle"
    """
    if cmu_dict is None:
        cmu_dict = load_cmudict()

    pronunciations = cmu_dict.get(word.lower().strip(), [])
    if not pronunciations:
        return []

    idx = min(pronunciation_index, len(pronunciations) - 1)
    return list(pronunciations[idx])
