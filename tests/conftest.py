"""Shared fixtures for pronunciation tests."""
import pytest

from pronunciation.phonetics import IpaCache, IpaEngine


# Small stand-in for CMUdict so expected IPA strings stay stable
SMALL_DICT = {
    "i": [["AY1"]],
    "am": [["AE1", "M"]],
    "do": [["D", "UW1"]],
    "not": [["N", "AA1", "T"]],
    "don't": [["D", "OW1", "N", "T"]],
    "hello": [["HH", "AH0", "L", "OW1"], ["HH", "EH0", "L", "OW1"]],
    "seven": [["S", "EH1", "V", "AH0", "N"]],
    "thirty": [["TH", "ER1", "T", "IY0"]],
    "twenty": [["T", "W", "EH1", "N", "T", "IY0"]],
    "one": [["W", "AH1", "N"]],
    "o'clock": [["AH0", "K", "L", "AA1", "K"]],
    "understand": [["AH2", "N", "D", "ER0", "S", "T", "AE1", "N", "D"]],
    "come": [["K", "AH1", "M"]],
}


@pytest.fixture
def small_dict():
    return SMALL_DICT


@pytest.fixture
def engine(small_dict):
    """Engine over the small dictionary with a fresh cache."""
    return IpaEngine(cache=IpaCache(), dictionary=small_dict)
