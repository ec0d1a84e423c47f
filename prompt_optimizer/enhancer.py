"""Prompt rewrite engine.

Rewrites a prompt by running up to four deterministic passes, each gated on
the matching analyzer sub-score being below 15:

1. Clarity: prepend an action word, swap vague words for specific ones
2. Specificity: append an output format and a quantifier
3. Context: append an audience and a purpose
4. Structure: split long run-on sentences, append an organization clause

Phrasing picks (which format, which audience...) are random so repeated
requests for the same weak prompt get some variety. Pass a seeded
`random.Random` to pin them.
"""
from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from prompt_optimizer.analyzer import Dimension, ScoreBreakdown
from prompt_optimizer.lexicon import DEFAULT_LEXICON, Lexicon
from prompt_optimizer.text import contains_any, has_digit, split_sentences, word_count

TEMPLATE_THRESHOLD = 50
MIN_PART_LENGTH = 10
LONG_SENTENCE_CHARS = 100
STRUCTURE_CLAUSE_MIN_CHARS = 50


class Category(str, Enum):
    CREATIVE = "creative"
    ANALYTICAL = "analytical"
    EXPLANATORY = "explanatory"
    INSTRUCTIONAL = "instructional"
    GENERAL = "general"


TEMPLATES: dict[Category, str] = {
    Category.CREATIVE:
        "Create a [LENGTH] [FORMAT] about [TOPIC]. [REQUIREMENTS]. [AUDIENCE]. [STYLE].",
    Category.ANALYTICAL:
        "Analyze [TOPIC] by [METHOD]. Provide: 1) [REQUIREMENT1], 2) [REQUIREMENT2], "
        "3) [REQUIREMENT3]. [AUDIENCE]. [FORMAT].",
    Category.EXPLANATORY:
        "Explain [TOPIC] to [AUDIENCE]. Cover: [KEYPOINTS]. Use [STYLE] and provide "
        "[EXAMPLES]. [LENGTH].",
    Category.INSTRUCTIONAL:
        "Provide a step-by-step guide on [TOPIC]. Include: [REQUIREMENTS]. [AUDIENCE]. [FORMAT].",
}

# Numbered items, or a bullet standing alone (hyphenated words do not count)
_LIST_MARKER = re.compile(r"[123]\.|(?:^|\s)[-•*]\s")


# ── Models ───────────────────────────────────────────────────

@dataclass
class Comparison:
    original_word_count: int
    enhanced_word_count: int

    @property
    def delta(self) -> int:
        return self.enhanced_word_count - self.original_word_count

    @property
    def ratio(self) -> Optional[float]:
        """Enhanced/original word ratio; undefined for an empty original."""
        if self.original_word_count == 0:
            return None
        return self.enhanced_word_count / self.original_word_count

    def to_dict(self) -> dict:
        return {
            "originalLength": self.original_word_count,
            "enhancedLength": self.enhanced_word_count,
            "lengthIncrease": self.delta,
            "improvementRatio": self.ratio,
        }


@dataclass
class PassResult:
    text: str
    improvements: list[str] = field(default_factory=list)


@dataclass
class EnhancementResult:
    original: str
    enhanced: str
    category: Category
    improvements: list[str] = field(default_factory=list)
    comparison: Optional[Comparison] = None

    @property
    def changed(self) -> bool:
        return self.enhanced != self.original

    def to_dict(self) -> dict:
        return {
            "original": self.original,
            "enhanced": self.enhanced,
            "category": self.category.value,
            "improvements": list(self.improvements),
            "comparisonAnalysis": self.comparison.to_dict() if self.comparison else None,
        }

    def summary(self) -> str:
        lines = [f"✨ Enhanced prompt ({self.category.value})", "", self.enhanced, ""]
        if self.improvements:
            lines.append("🔧 Improvements:")
            for item in self.improvements:
                lines.append(f"  • {item}")
        else:
            lines.append("No changes needed.")
        if self.comparison:
            c = self.comparison
            ratio = f"{c.ratio:.2f}x" if c.ratio is not None else "n/a"
            lines.append("")
            lines.append(
                f"📏 Words: {c.original_word_count} → {c.enhanced_word_count} "
                f"({c.delta:+d}, {ratio})"
            )
        return "\n".join(lines)


# ── Category Detection ───────────────────────────────────────

def matches_any_template(prompt: str, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    return any(contains_any(prompt, keywords) for _, keywords in lexicon.category_keywords)


def detect_category(prompt: str, lexicon: Lexicon = DEFAULT_LEXICON) -> Category:
    """Classify the prompt by the first category keyword it contains.

    The template keywords are tried first, then the shorter fallback stems.
    """
    for table in (lexicon.category_keywords, lexicon.category_fallbacks):
        for name, keywords in table:
            if contains_any(prompt, keywords):
                return Category(name)
    return Category.GENERAL


# ── Passes ───────────────────────────────────────────────────

def enhance_clarity(prompt: str, rng: random.Random, lexicon: Lexicon = DEFAULT_LEXICON) -> PassResult:
    result = PassResult(text=prompt)

    if not matches_any_template(prompt, lexicon):
        action = rng.choice(lexicon.added_action_words)
        result.text = f"{action} {prompt.lower()}"
        result.improvements.append("Added clear action word")

    for vague, specific in lexicon.vague_replacements:
        pattern = re.compile(rf"\b{re.escape(vague)}\b", re.IGNORECASE)
        replaced, n = pattern.subn(lambda _m: specific, result.text)
        if n:
            result.text = replaced
            result.improvements.append(f'Replaced vague term "{vague}" with "{specific}"')

    return result


def enhance_specificity(prompt: str, rng: random.Random, lexicon: Lexicon = DEFAULT_LEXICON) -> PassResult:
    result = PassResult(text=prompt)

    if not contains_any(prompt, lexicon.format_hints):
        fmt = rng.choice(lexicon.output_formats)
        result.text += f" Present the response {fmt}."
        result.improvements.append(f'Added format specification: "{fmt}"')

    if not has_digit(prompt):
        quantifier = rng.choice(lexicon.quantifiers)
        result.text += f" Include {quantifier}."
        result.improvements.append(f'Added quantifier: "{quantifier}"')

    return result


def enhance_context(prompt: str, rng: random.Random, lexicon: Lexicon = DEFAULT_LEXICON) -> PassResult:
    result = PassResult(text=prompt)

    if not contains_any(prompt, lexicon.audience_hints):
        audience = rng.choice(lexicon.audiences)
        result.text += f" Write this {audience}."
        result.improvements.append(f'Added audience context: "{audience}"')

    if not contains_any(prompt, lexicon.purpose_hints):
        purpose = rng.choice(lexicon.purposes)
        result.text += f" This content is intended {purpose}."
        result.improvements.append(f'Added purpose: "{purpose}"')

    return result


def break_into_logical_parts(text: str, conjunctions: tuple[str, ...] = DEFAULT_LEXICON.conjunctions) -> list[str]:
    """Split on each conjunction in turn, dropping fragments under 10 chars."""
    parts = [text]
    for conjunction in conjunctions:
        splitter = re.compile(rf"\s+{re.escape(conjunction)}\s+", re.IGNORECASE)
        next_parts = []
        for part in parts:
            next_parts.extend(splitter.split(part))
        parts = next_parts
    return [p.strip() for p in parts if len(p.strip()) >= MIN_PART_LENGTH]


def enhance_structure(prompt: str, lexicon: Lexicon = DEFAULT_LEXICON) -> PassResult:
    result = PassResult(text=prompt)

    if len(split_sentences(prompt)) == 1 and len(prompt) > LONG_SENTENCE_CHARS:
        # A single sentence only carries punctuation at its ends
        body = prompt.strip().strip(".!?").strip()
        parts = break_into_logical_parts(body, lexicon.conjunctions)
        if len(parts) > 1:
            result.text = ". ".join(parts) + "."
            result.improvements.append("Broke long sentence into structured parts")

    has_markers = contains_any(prompt, lexicon.structure_markers) or _LIST_MARKER.search(prompt)
    if not has_markers and len(result.text) > STRUCTURE_CLAUSE_MIN_CHARS:
        result.text += f" {lexicon.structure_clause}"
        result.improvements.append("Added structural organization")

    return result


def apply_template(prompt: str, category: Category) -> PassResult:
    """Slot-filling template step.

    Intentionally inert: filling the [TOPIC]/[AUDIENCE] slots of
    `TEMPLATES[category]` would need entity extraction, which this engine does
    not do. The text is returned unchanged and no improvement is recorded.
    """
    return PassResult(text=prompt)


# ── Entry Points ─────────────────────────────────────────────

def compare_prompts(original: str, enhanced: str) -> Comparison:
    return Comparison(
        original_word_count=word_count(original),
        enhanced_word_count=word_count(enhanced),
    )


def enhance(
    prompt: str,
    prior_scores: Optional[ScoreBreakdown] = None,
    rng: Optional[random.Random] = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> EnhancementResult:
    """Rewrite a prompt using the analyzer's sub-scores to pick passes.

    Args:
        prompt: The original prompt text.
        prior_scores: Sub-scores from `analyze()`. Without them no pass runs.
        rng: Source for phrasing picks; a fresh unseeded one if omitted.
        lexicon: Vocabulary tables for the passes.

    Returns:
        EnhancementResult; `improvements` lists passes in the order they ran.
    """
    rng = rng or random.Random()
    category = detect_category(prompt, lexicon)
    text = prompt
    improvements: list[str] = []

    if prior_scores is not None:
        passes = [
            (Dimension.CLARITY, lambda t: enhance_clarity(t, rng, lexicon)),
            (Dimension.SPECIFICITY, lambda t: enhance_specificity(t, rng, lexicon)),
            (Dimension.CONTEXT, lambda t: enhance_context(t, rng, lexicon)),
            (Dimension.STRUCTURE, lambda t: enhance_structure(t, lexicon)),
        ]
        for dimension, run in passes:
            if prior_scores.below(dimension):
                step = run(text)
                text = step.text
                improvements.extend(step.improvements)

        total = prior_scores.total_score
        if total is not None and total < TEMPLATE_THRESHOLD:
            step = apply_template(text, category)
            if step.text != text:
                text = step.text
                improvements.append("Applied structured template")

    return EnhancementResult(
        original=prompt,
        enhanced=text,
        category=category,
        improvements=improvements,
        comparison=compare_prompts(prompt, text),
    )
