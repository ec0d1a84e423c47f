"""Tests for the prompt scoring engine."""
import pytest

from prompt_optimizer.analyzer import (
    Dimension,
    Priority,
    ScoreBreakdown,
    ScoreReport,
    analyze,
    score_clarity,
    score_context,
    score_specificity,
    score_structure,
)
from prompt_optimizer.text import split_sentences, tokenize


# ── Fixtures ────────────────────────────────────────────────

WELL_FORMED = (
    "First, explain the purpose of unit tests for junior developers. "
    "Then write exactly 3 examples in a numbered list format. "
    "Include a summary table?"
)

QUANTUM = "Explain quantum computing to beginners in exactly 200 words with 3 examples."

VAGUE = "good nice stuff very really things something maybe"

SAMPLES = [
    "",
    "   ",
    "hi",
    VAGUE,
    QUANTUM,
    WELL_FORMED,
    "- a\n- b\n* c\n1. d",
    "?" * 50,
    "analyze " * 200,
]


def _clarity(text):
    return score_clarity(text, tokenize(text))


# ── Invariants ──────────────────────────────────────────────

class TestInvariants:
    @pytest.mark.parametrize("prompt", SAMPLES)
    def test_total_is_sum_of_subscores(self, prompt):
        r = analyze(prompt)
        assert r.total_score == r.clarity + r.specificity + r.context + r.structure

    @pytest.mark.parametrize("prompt", SAMPLES)
    def test_subscores_in_range(self, prompt):
        r = analyze(prompt)
        for d in Dimension:
            assert 0 <= getattr(r, d.value) <= 25
        assert 0 <= r.total_score <= 100


# ── Dimensions ──────────────────────────────────────────────

class TestClarity:
    def test_vague_words_clamped_at_zero(self):
        assert _clarity(VAGUE) == 0

    def test_action_words_capped(self):
        # 5 action words -> 15, length bonus +5, only 5 tokens so no +5
        assert _clarity("analyze explain create write generate") == 20

    def test_full_marks(self):
        assert _clarity("Explain, compare and evaluate the two sorting algorithms in depth") == 25

    def test_short_prompt_no_length_bonus(self):
        assert _clarity("explain") == 5

    def test_vague_word_blocks_clean_bonus(self):
        # 1 action (5) + length bonus (5) - 1 vague (2)
        assert _clarity("explain the good parts of this library please") == 8


class TestSpecificity:
    def test_format_indicators_capped(self):
        text = "format structure style length table"
        assert score_specificity(text, tokenize(text)) == 10

    def test_digit_quantifier_detail(self):
        text = "You must give exactly 3"
        assert score_specificity(text, tokenize(text)) == 15

    def test_nothing(self):
        assert score_specificity("tell me about cats", tokenize("tell me about cats")) == 0

    def test_non_ascii_digit_is_not_a_number(self):
        text = "Give \u0663 ideas"
        assert score_specificity(text, tokenize(text)) == 0


class TestContext:
    def test_all_signals_capped(self):
        text = "for audience target goal"
        assert score_context(text, tokenize(text)) == 25

    def test_audience_substring(self):
        text = "teach beginners"
        assert score_context(text, tokenize(text)) == 10

    def test_none(self):
        assert score_context("cats", ["cats"]) == 0


class TestStructure:
    def test_bullets(self):
        text = "Do this\n- a\n- b"
        assert score_structure(text, split_sentences(text)) == 8

    def test_numbered_and_sentences(self):
        text = "Steps: 1. mix. 2. bake"
        # list 8 + multiple sentences 7
        assert score_structure(text, split_sentences(text)) == 15

    def test_capped(self):
        text = "First, do 1. this. Then do that - okay?"
        assert score_structure(text, split_sentences(text)) == 25

    def test_plain(self):
        assert score_structure("hello world", ["hello world"]) == 0

    def test_non_ascii_numbered_item_is_not_a_list(self):
        text = "Steps \u0663. mix"
        # two sentences, no list marker
        assert score_structure(text, split_sentences(text)) == 7


# ── analyze() ───────────────────────────────────────────────

class TestAnalyze:
    def test_empty_prompt_minimum_scores(self):
        r = analyze("")
        assert r.total_score == 0
        assert r.analysis.word_count == 0
        assert r.analysis.sentence_count == 0

    def test_empty_prompt_suggests_every_dimension(self):
        r = analyze("")
        assert {s.dimension for s in r.suggestions} == set(Dimension)
        assert len(r.suggestions) == 7

    def test_suggestion_order(self):
        r = analyze("")
        dims = [s.dimension for s in r.suggestions]
        assert dims == [
            Dimension.CLARITY,
            Dimension.SPECIFICITY, Dimension.SPECIFICITY,
            Dimension.CONTEXT, Dimension.CONTEXT,
            Dimension.STRUCTURE, Dimension.STRUCTURE,
        ]
        assert [s.priority for s in r.suggestions] == [
            Priority.HIGH,
            Priority.HIGH, Priority.MEDIUM,
            Priority.HIGH, Priority.MEDIUM,
            Priority.MEDIUM, Priority.LOW,
        ]

    def test_vague_prompt_gets_replace_suggestion(self):
        r = analyze(VAGUE)
        clarity = [s for s in r.suggestions if s.dimension == Dimension.CLARITY]
        assert clarity[0].priority == Priority.HIGH
        assert clarity[1].priority == Priority.MEDIUM
        assert "vague" in clarity[1].message.lower()

    def test_quantum_prompt_rule_values(self):
        r = analyze(QUANTUM)
        assert (r.clarity, r.specificity, r.context, r.structure) == (15, 13, 10, 0)
        assert r.total_score == 38
        assert r.total_score > analyze("quantum stuff").total_score

    def test_quantum_prompt_suggestions(self):
        r = analyze(QUANTUM)
        dims = [s.dimension for s in r.suggestions]
        assert Dimension.CLARITY not in dims
        assert Dimension.SPECIFICITY not in dims
        assert dims == [Dimension.CONTEXT, Dimension.CONTEXT,
                        Dimension.STRUCTURE, Dimension.STRUCTURE]

    def test_well_formed_prompt_scores_high(self):
        r = analyze(WELL_FORMED)
        assert (r.clarity, r.specificity, r.context, r.structure) == (25, 25, 24, 17)
        assert r.total_score > 70
        assert r.suggestions == []

    def test_analysis_meta(self):
        r = analyze(WELL_FORMED)
        assert r.analysis.word_count == 24
        assert r.analysis.sentence_count == 3
        assert r.analysis.has_action_words
        assert not r.analysis.has_vague_words
        assert r.analysis.has_context
        assert r.analysis.has_format

    def test_long_input_does_not_crash(self):
        r = analyze("explain " * 5000)
        assert r.clarity == 25


# ── ScoreReport / ScoreBreakdown ────────────────────────────

class TestScoreReport:
    def test_grade(self):
        assert ScoreReport(25, 25, 25, 20).grade == "A+"
        assert ScoreReport(20, 20, 20, 10).grade == "B"
        assert ScoreReport(0, 0, 0, 0).grade == "F"

    def test_percentage(self):
        assert ScoreReport(10, 10, 10, 7).percentage == 37

    def test_to_dict_shape(self):
        d = analyze(QUANTUM).to_dict()
        assert d["totalScore"] == 38
        assert d["maxScore"] == 100
        assert d["scores"] == {"clarity": 15, "specificity": 13, "context": 10, "structure": 0}
        assert d["breakdown"]["clarity"]["maxScore"] == 25
        assert d["breakdown"]["context"]["description"]
        assert d["suggestions"][0] == {
            "type": "context",
            "message": 'Add context about your audience (e.g., "for beginners", "for professionals")',
            "priority": "high",
        }
        assert d["analysis"]["wordCount"] == 12

    def test_summary(self):
        text = analyze("").summary()
        assert "Prompt Score: 0/100" in text
        assert "Suggestions" in text

    def test_breakdown_property(self):
        b = analyze(QUANTUM).breakdown
        assert b.clarity == 15
        assert b.total_score == 38


class TestScoreBreakdown:
    def test_from_camel_case(self):
        b = ScoreBreakdown.from_dict({"clarity": 5, "specificity": 6, "context": 7,
                                      "structure": 8, "totalScore": 26})
        assert b == ScoreBreakdown(5, 6, 7, 8, 26)

    def test_from_report_dict(self):
        b = ScoreBreakdown.from_dict(analyze(QUANTUM).to_dict())
        assert b == ScoreBreakdown(15, 13, 10, 0, 38)

    def test_missing_keys_are_unknown(self):
        b = ScoreBreakdown.from_dict({"clarity": 3})
        assert b.below(Dimension.CLARITY)
        assert not b.below(Dimension.STRUCTURE)
        assert b.total_score is None

    def test_rejects_non_dict(self):
        with pytest.raises(ValueError):
            ScoreBreakdown.from_dict([1, 2])
