"""Tests for the IPA guide inventory and symbol extraction."""
from pronunciation import IPA_GUIDE_ROWS, extract_ipa_symbols
from pronunciation.phonetics import IpaGuideRow
from pronunciation.phonetics.ipa_guide import keys_longest_first


def test_inventory():
    keys = [row.key for row in IPA_GUIDE_ROWS]
    assert len(keys) == 22
    assert len(set(keys)) == 22
    assert {"tʃ", "dʒ", "iː", "ə", "ˈ", "ˌ"} <= set(keys)


def test_extracts_known_symbols():
    found = extract_ipa_symbols("/haɪ aɪm ˈænə/")
    assert {"h", "ˈ", "æ", "ə"} <= found
    assert found == {"h", "ˈ", "æ", "ə", "ɪ"}


def test_prefers_affricates_over_sub_symbol_matches():
    found = extract_ipa_symbols("/tʃeə/")
    assert "tʃ" in found
    assert "ʃ" not in found
    assert found == {"tʃ", "e", "ə"}


def test_reports_both_when_short_symbol_also_stands_alone():
    found = extract_ipa_symbols("/tʃ ʃ/")
    assert found == {"tʃ", "ʃ"}


def test_long_vowels_win_over_nothing_shorter():
    # "iː" is a key; plain "i" is not
    assert extract_ipa_symbols("/siː/") == {"iː"}


def test_empty_input():
    assert extract_ipa_symbols("") == set()
    assert extract_ipa_symbols("   ") == set()


def test_custom_inventory():
    rows = [IpaGuideRow("a", "/a/", "", "car"), IpaGuideRow("aɪ", "/aɪ/", "", "my")]
    assert extract_ipa_symbols("/maɪ/", rows) == {"aɪ"}
    assert extract_ipa_symbols("/ma maɪ/", rows) == {"aɪ", "a"}


def test_keys_longest_first_keeps_inventory_order():
    assert keys_longest_first() == [
        "iː", "ɑː", "ɔː", "uː", "tʃ", "dʒ",
        "ɪ", "e", "æ", "ʌ", "ɒ", "ʊ", "ə", "θ", "ð", "v", "z", "ʃ", "r", "h", "ˈ", "ˌ",
    ]


def test_keys_longest_first_drops_duplicates():
    rows = [
        IpaGuideRow("ʃ", "/ʃ/", "", "she"),
        IpaGuideRow("tʃ", "/tʃ/", "", "chair"),
        IpaGuideRow("ʃ", "ʃ", "", "ship"),
        IpaGuideRow("", "", "", ""),
    ]
    assert keys_longest_first(rows) == ["tʃ", "ʃ"]
