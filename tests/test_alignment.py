"""Tests for tokenization and word-level alignment."""
import pytest

from pronunciation import diff_tokens, tokenize
from pronunciation.alignment import TIE_BREAK_ORDER, align_sequences, normalize_short_answer, normalize_word
from pronunciation.models import DiffStatus, Extra, Missing, Ok, Substituted, Token


def statuses(tokens):
    return [t.status.value for t in tokens]


class TestNormalizer:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Hello,", "hello"),
            ("WORLD!", "world"),
            ("I'm", "i'm"),
            ("I’m", "i'm"),
            ("'quoted'", "quoted"),
            ("Perché", "perche"),
            ("università", "universita"),
            ("7:30", "730"),
            ("—", ""),
            ("snake_case", "snakecase"),
        ],
    )
    def test_normalize_word(self, raw, expected):
        assert normalize_word(raw) == expected

    def test_normalize_short_answer(self):
        assert normalize_short_answer("  L’Été,  chaud! ") == "l'ete chaud"
        assert normalize_short_answer("Don't   worry") == "don't worry"
        assert normalize_short_answer("") == ""


class TestTokenizer:
    def test_keeps_surface_forms(self):
        tokens = tokenize("I'm  fine, thanks!")
        assert tokens == [
            Token("I'm", "i'm"),
            Token("fine,", "fine"),
            Token("thanks!", "thanks"),
        ]

    def test_drops_tokens_that_normalize_to_empty(self):
        assert [t.normalized for t in tokenize("I - go ... home")] == ["i", "go", "home"]

    def test_whitespace_only(self):
        assert tokenize("   \n\t ") == []


class TestEditDistance:
    def test_tie_break_order_is_diagonal_then_delete_then_insert(self):
        assert TIE_BREAK_ORDER == ("diagonal", "del", "ins")

    def test_substitution_preferred_over_delete_plus_insert(self):
        ops = align_sequences(["a", "b"], ["c"])
        assert [op for op, _, _ in ops] == ["del", "sub"]
        assert ops[1] == ("sub", 1, 0)

    def test_single_mismatch_is_substitution(self):
        ops = align_sequences(["i", "want", "go"], ["i", "won't", "go"])
        assert [op for op, _, _ in ops] == ["match", "sub", "match"]

    def test_indices(self):
        ops = align_sequences(["i", "go", "home"], ["i", "go", "to", "home"])
        assert ops == [("match", 0, 0), ("match", 1, 1), ("ins", None, 2), ("match", 2, 3)]


class TestDiffTokens:
    def test_missing_word(self):
        tokens = diff_tokens("I want to go", "I want go")
        assert statuses(tokens) == ["ok", "ok", "missing", "ok"]
        assert tokens[2] == Missing(expected="to")

    def test_extra_word(self):
        tokens = diff_tokens("I go home", "I go to home")
        assert any(t.status is DiffStatus.EXTRA for t in tokens)
        assert tokens == [Ok("I", "I"), Ok("go", "go"), Extra("to"), Ok("home", "home")]

    def test_substitution_keeps_surface_forms(self):
        tokens = diff_tokens("I want to go.", "i want two go")
        assert tokens[2] == Substituted(expected="to", actual="two")
        assert tokens[3] == Ok(expected="go.", actual="go")

    def test_case_punctuation_and_accents_ignored(self):
        tokens = diff_tokens("Perché no?", "perche NO")
        assert statuses(tokens) == ["ok", "ok"]
        assert tokens[0] == Ok(expected="Perché", actual="perche")

    def test_empty_target_gives_all_extra(self):
        assert diff_tokens("", "hello there") == [Extra("hello"), Extra("there")]

    def test_empty_transcript_gives_all_missing(self):
        assert diff_tokens("hello there", "  ") == [Missing("hello"), Missing("there")]

    def test_both_empty(self):
        assert diff_tokens("", "") == []

    def test_punctuation_only_transcript(self):
        assert statuses(diff_tokens("good morning", "... !")) == ["missing", "missing"]

    @pytest.mark.parametrize(
        "text",
        ["I want to go", "the cat sat on the mat", "a a a", "Ciao, come stai?", "x"],
    )
    def test_identical_inputs_are_all_ok(self, text):
        tokens = diff_tokens(text, text)
        words = [t.surface for t in tokenize(text)]
        assert tokens == [Ok(expected=w, actual=w) for w in words]

    @pytest.mark.parametrize(
        "target, transcript",
        [
            ("I want to go", "I want go"),
            ("I go home", "I go to home"),
            ("one two three four", "five six"),
            ("a b", "c"),
            ("the the the", "the"),
            ("", "x y z"),
            ("how are you today", "who are you to day"),
        ],
    )
    def test_length_bounds_and_path_validity(self, target, transcript):
        tokens = diff_tokens(target, transcript)
        a, b = tokenize(target), tokenize(transcript)
        assert max(len(a), len(b)) <= len(tokens) <= len(a) + len(b)

        # reading expected/actual in order reproduces both token sequences
        expected = [t.expected for t in tokens if not isinstance(t, Extra)]
        actual = [t.actual for t in tokens if not isinstance(t, Missing)]
        assert expected == [t.surface for t in a]
        assert actual == [t.surface for t in b]

    def test_to_dict_wire_shape(self):
        tokens = diff_tokens("I want to go", "I want two")
        assert [t.to_dict() for t in tokens] == [
            {"status": "ok", "expected": "I", "actual": "I"},
            {"status": "ok", "expected": "want", "actual": "want"},
            {"status": "missing", "expected": "to"},
            {"status": "substituted", "expected": "go", "actual": "two"},
        ]
