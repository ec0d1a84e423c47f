"""Prompt scoring engine.

Scores a prompt on four dimensions, 0-25 points each:
- Clarity (action words present, vague words absent)
- Specificity (numbers, quantifiers, format and detail requirements)
- Context (audience, purpose, background indicators)
- Structure (lists, multiple sentences, transitions, questions)
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from prompt_optimizer.lexicon import DEFAULT_LEXICON, Lexicon
from prompt_optimizer.text import (
    contains_any,
    count_in,
    has_digit,
    split_sentences,
    tokenize,
)

DIMENSION_MAX = 25
MAX_SCORE = 100
SUGGESTION_THRESHOLD = 15


class Dimension(str, Enum):
    CLARITY = "clarity"
    SPECIFICITY = "specificity"
    CONTEXT = "context"
    STRUCTURE = "structure"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


DIMENSION_DESCRIPTIONS = {
    Dimension.CLARITY: "Measures the presence of clear action words and absence of vague terms",
    Dimension.SPECIFICITY: "Evaluates concrete details, format specifications, and measurable requirements",
    Dimension.CONTEXT: "Assesses background information, audience definition, and situational context",
    Dimension.STRUCTURE: "Examines prompt organization, logical flow, and formatting",
}


# ── Models ───────────────────────────────────────────────────

@dataclass
class Suggestion:
    dimension: Dimension
    message: str
    priority: Priority

    def to_dict(self) -> dict:
        return {
            "type": self.dimension.value,
            "message": self.message,
            "priority": self.priority.value,
        }


@dataclass
class AnalysisMeta:
    word_count: int
    sentence_count: int
    has_action_words: bool
    has_vague_words: bool
    has_context: bool
    has_format: bool

    def to_dict(self) -> dict:
        return {
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "hasActionWords": self.has_action_words,
            "hasVagueWords": self.has_vague_words,
            "hasContext": self.has_context,
            "hasFormat": self.has_format,
        }


@dataclass
class ScoreBreakdown:
    """Sub-scores handed to the enhancer. `None` means unknown."""
    clarity: Optional[int] = None
    specificity: Optional[int] = None
    context: Optional[int] = None
    structure: Optional[int] = None
    total_score: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ScoreBreakdown":
        """Accept snake_case, camelCase, or a full report with nested `scores`."""
        if not isinstance(data, dict):
            raise ValueError("score breakdown must be an object")
        scores = data.get("scores") if isinstance(data.get("scores"), dict) else data

        def _get(*keys):
            for src in (scores, data):
                for k in keys:
                    v = src.get(k)
                    if v is not None:
                        return int(v)
            return None

        return cls(
            clarity=_get("clarity"),
            specificity=_get("specificity"),
            context=_get("context"),
            structure=_get("structure"),
            total_score=_get("totalScore", "total_score"),
        )

    def below(self, dimension: Dimension, threshold: int = SUGGESTION_THRESHOLD) -> bool:
        value = getattr(self, dimension.value)
        return value is not None and value < threshold


@dataclass
class ScoreReport:
    clarity: int
    specificity: int
    context: int
    structure: int
    suggestions: list[Suggestion] = field(default_factory=list)
    analysis: Optional[AnalysisMeta] = None

    @property
    def total_score(self) -> int:
        return self.clarity + self.specificity + self.context + self.structure

    @property
    def max_score(self) -> int:
        return MAX_SCORE

    @property
    def percentage(self) -> int:
        return round(self.total_score / MAX_SCORE * 100)

    @property
    def grade(self) -> str:
        t = self.total_score
        if t >= 90:
            return "A+"
        if t >= 80:
            return "A"
        if t >= 70:
            return "B"
        if t >= 60:
            return "C"
        if t >= 50:
            return "D"
        return "F"

    @property
    def scores(self) -> dict[str, int]:
        return {d.value: getattr(self, d.value) for d in Dimension}

    @property
    def breakdown(self) -> ScoreBreakdown:
        return ScoreBreakdown(
            clarity=self.clarity,
            specificity=self.specificity,
            context=self.context,
            structure=self.structure,
            total_score=self.total_score,
        )

    def to_dict(self) -> dict:
        return {
            "totalScore": self.total_score,
            "maxScore": self.max_score,
            "percentage": self.percentage,
            "scores": self.scores,
            "breakdown": {
                d.value: {
                    "score": getattr(self, d.value),
                    "maxScore": DIMENSION_MAX,
                    "description": DIMENSION_DESCRIPTIONS[d],
                }
                for d in Dimension
            },
            "suggestions": [s.to_dict() for s in self.suggestions],
            "analysis": self.analysis.to_dict() if self.analysis else None,
        }

    def summary(self) -> str:
        lines = [f"📊 Prompt Score: {self.total_score}/{MAX_SCORE} (Grade: {self.grade})", ""]
        for d in Dimension:
            score = getattr(self, d.value)
            filled = int(score / DIMENSION_MAX * 10)
            bar = "█" * filled + "░" * (10 - filled)
            lines.append(f"  {d.value.title()}: {score}/{DIMENSION_MAX} [{bar}]")
        if self.suggestions:
            lines.append("")
            lines.append("💡 Suggestions:")
            icons = {Priority.HIGH: "🔴", Priority.MEDIUM: "🟡", Priority.LOW: "🟢"}
            for s in self.suggestions:
                lines.append(f"  {icons[s.priority]} [{s.dimension.value}] {s.message}")
        return "\n".join(lines)


# ── Dimension Rules ──────────────────────────────────────────

_LIST_PATTERN = re.compile(r"\d+\.|\*|-", re.ASCII)


def _clamp(score: int) -> int:
    return max(0, min(score, DIMENSION_MAX))


def score_clarity(prompt: str, tokens: list[str], lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    actions = count_in(tokens, lexicon.action_words)
    vague = count_in(tokens, lexicon.vague_words)

    score = min(actions * 5, 15)
    score -= min(vague * 2, 10)
    if len(prompt) > 10 and actions > 0:
        score += 5
    if len(tokens) > 5 and vague == 0:
        score += 5
    # Vague words can push the running total below zero
    return _clamp(score)


def score_specificity(prompt: str, tokens: list[str], lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    score = 0
    if has_digit(prompt):
        score += 5
    if contains_any(prompt, lexicon.quantifier_phrases):
        score += 5
    score += min(count_in(tokens, lexicon.format_indicators) * 3, 10)
    if contains_any(prompt, lexicon.detail_words):
        score += 5
    return _clamp(score)


def score_context(prompt: str, tokens: list[str], lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    score = 0
    if contains_any(prompt, lexicon.audience_words):
        score += 10
    if contains_any(prompt, lexicon.purpose_words):
        score += 10
    score += min(count_in(tokens, lexicon.context_indicators) * 2, 5)
    return _clamp(score)


def score_structure(prompt: str, sentences: list[str], lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    score = 0
    if _LIST_PATTERN.search(prompt):
        score += 8
    if len(sentences) > 1:
        score += 7
    if contains_any(prompt, lexicon.transition_words):
        score += 5
    if "?" in prompt:
        score += 5
    return _clamp(score)


# ── Suggestions ──────────────────────────────────────────────

def generate_suggestions(
    prompt: str,
    tokens: list[str],
    sentences: list[str],
    scores: dict[str, int],
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> list[Suggestion]:
    """Improvement hints for every dimension under the threshold.

    Ordered by dimension (clarity, specificity, context, structure), then by
    check within the dimension.
    """
    out: list[Suggestion] = []

    if scores[Dimension.CLARITY.value] < SUGGESTION_THRESHOLD:
        if not count_in(tokens, lexicon.action_words):
            out.append(Suggestion(
                Dimension.CLARITY,
                'Add a clear action word like "explain", "analyze", "create", or "describe"',
                Priority.HIGH,
            ))
        if count_in(tokens, lexicon.vague_words):
            out.append(Suggestion(
                Dimension.CLARITY,
                'Replace vague words like "good", "nice", or "something" with specific terms',
                Priority.MEDIUM,
            ))

    if scores[Dimension.SPECIFICITY.value] < SUGGESTION_THRESHOLD:
        if not count_in(tokens, lexicon.format_indicators):
            out.append(Suggestion(
                Dimension.SPECIFICITY,
                'Specify the desired output format (e.g., "in 200 words", "as a list", "in table format")',
                Priority.HIGH,
            ))
        if not has_digit(prompt):
            out.append(Suggestion(
                Dimension.SPECIFICITY,
                "Include specific numbers or quantities for better results",
                Priority.MEDIUM,
            ))

    if scores[Dimension.CONTEXT.value] < SUGGESTION_THRESHOLD:
        if not count_in(tokens, lexicon.context_indicators):
            out.append(Suggestion(
                Dimension.CONTEXT,
                'Add context about your audience (e.g., "for beginners", "for professionals")',
                Priority.HIGH,
            ))
        out.append(Suggestion(
            Dimension.CONTEXT,
            "Explain the purpose or goal of your request",
            Priority.MEDIUM,
        ))

    if scores[Dimension.STRUCTURE.value] < SUGGESTION_THRESHOLD:
        if len(sentences) <= 1:
            out.append(Suggestion(
                Dimension.STRUCTURE,
                "Break your prompt into multiple sentences for better clarity",
                Priority.MEDIUM,
            ))
        out.append(Suggestion(
            Dimension.STRUCTURE,
            "Consider organizing your requirements in a numbered list",
            Priority.LOW,
        ))

    return out


# ── Entry Point ──────────────────────────────────────────────

def analyze(prompt: str, lexicon: Lexicon = DEFAULT_LEXICON) -> ScoreReport:
    """Score a prompt on all four dimensions.

    Args:
        prompt: The raw prompt text. Callers validate type and length first.
        lexicon: Vocabulary tables driving the rules.

    Returns:
        ScoreReport with clamped sub-scores, suggestions and token metadata.
    """
    tokens = tokenize(prompt)
    sentences = split_sentences(prompt)

    scores = {
        Dimension.CLARITY.value: score_clarity(prompt, tokens, lexicon),
        Dimension.SPECIFICITY.value: score_specificity(prompt, tokens, lexicon),
        Dimension.CONTEXT.value: score_context(prompt, tokens, lexicon),
        Dimension.STRUCTURE.value: score_structure(prompt, sentences, lexicon),
    }

    return ScoreReport(
        **scores,
        suggestions=generate_suggestions(prompt, tokens, sentences, scores, lexicon),
        analysis=AnalysisMeta(
            word_count=len(tokens),
            sentence_count=len(sentences),
            has_action_words=count_in(tokens, lexicon.action_words) > 0,
            has_vague_words=count_in(tokens, lexicon.vague_words) > 0,
            has_context=count_in(tokens, lexicon.context_indicators) > 0,
            has_format=count_in(tokens, lexicon.format_indicators) > 0,
        ),
    )
