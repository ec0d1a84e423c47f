"""Tests for tokenizing and sentence splitting."""
from prompt_optimizer.text import (
    contains_any,
    count_in,
    has_digit,
    split_sentences,
    tokenize,
    word_count,
)


class TestTokenize:
    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("Hello, World! It's 3pm.") == ["hello", "world", "it", "s", "3pm"]

    def test_empty_and_whitespace(self):
        assert tokenize("") == []
        assert tokenize("   \n\t ") == []

    def test_order_preserved(self):
        assert tokenize("Write, then EXPLAIN; finally: list") == [
            "write", "then", "explain", "finally", "list",
        ]

    def test_underscore_is_word_char(self):
        assert tokenize("snake_case-name") == ["snake_case", "name"]


class TestSplitSentences:
    def test_basic_split(self):
        assert split_sentences("One. Two! Three?") == ["One", "Two", "Three"]

    def test_runs_collapse(self):
        assert split_sentences("Wait... what?! Really") == ["Wait", "what", "Really"]

    def test_only_delimiters(self):
        assert split_sentences("...!?") == []
        assert split_sentences("") == []

    def test_no_delimiter(self):
        assert split_sentences("  a single sentence  ") == ["a single sentence"]


class TestHelpers:
    def test_word_count_keeps_punctuation_chunks(self):
        assert word_count("a  b\nc.") == 3
        assert word_count("") == 0

    def test_contains_any_case_insensitive_substring(self):
        assert contains_any("For BEGINNERS", ["beginner"])
        assert not contains_any("plain text", ["beginner"])

    def test_count_in(self):
        assert count_in(["a", "b", "a", "c"], ["a", "c"]) == 3
        assert count_in([], ["a"]) == 0

    def test_has_digit(self):
        assert has_digit("top 10")
        assert not has_digit("ten")

    def test_non_ascii_digits_ignored(self):
        assert not has_digit("give \u0663 ideas")
        assert has_digit("give 3 ideas")
