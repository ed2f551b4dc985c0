"""Phonetics package: pronunciation dictionary, G2P converters and the IPA guide."""
from .cache import IpaCache
from .cmudict import get_word_pronunciation, load_cmudict
from .engine import IpaEngine, locale_base
from .english import EnglishG2P, fallback_word_to_ipa
from .ipa_guide import IPA_GUIDE_ROWS, IpaGuideRow, extract_ipa_symbols
from .italian import ItalianG2P, italian_word_to_ipa
from .numbers import expand_numeric_token, number_to_words
from .phone_mapper import arpabet_to_ipa, convert_phone_sequence

__all__ = [
    "IpaCache",
    "IpaEngine",
    "locale_base",
    "EnglishG2P",
    "ItalianG2P",
    "load_cmudict",
    "get_word_pronunciation",
    "fallback_word_to_ipa",
    "italian_word_to_ipa",
    "expand_numeric_token",
    "number_to_words",
    "arpabet_to_ipa",
    "convert_phone_sequence",
    "IPA_GUIDE_ROWS",
    "IpaGuideRow",
    "extract_ipa_symbols",
]
