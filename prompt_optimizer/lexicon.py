"""Vocabulary tables used by the analyzer and enhancer rules.

The rule engine only reads these tables, so vocabularies can evolve (or be
replaced per deployment through a JSON override file) without touching the
scoring and rewriting logic.
"""
import json
from dataclasses import dataclass, fields, replace

LEXICON_VERSION = "1.0"


class LexiconError(ValueError):
    """Raised when a lexicon override file is malformed."""


@dataclass(frozen=True)
class Lexicon:
    # ── Analyzer ─────────────────────────────────────────────
    action_words: tuple[str, ...]
    vague_words: tuple[str, ...]
    context_indicators: tuple[str, ...]
    format_indicators: tuple[str, ...]
    quantifier_phrases: tuple[str, ...]
    detail_words: tuple[str, ...]
    audience_words: tuple[str, ...]
    purpose_words: tuple[str, ...]
    transition_words: tuple[str, ...]
    # ── Enhancer ─────────────────────────────────────────────
    category_keywords: tuple[tuple[str, tuple[str, ...]], ...]
    category_fallbacks: tuple[tuple[str, tuple[str, ...]], ...]
    format_hints: tuple[str, ...]
    audience_hints: tuple[str, ...]
    purpose_hints: tuple[str, ...]
    structure_markers: tuple[str, ...]
    added_action_words: tuple[str, ...]
    vague_replacements: tuple[tuple[str, str], ...]
    output_formats: tuple[str, ...]
    quantifiers: tuple[str, ...]
    audiences: tuple[str, ...]
    purposes: tuple[str, ...]
    conjunctions: tuple[str, ...]
    structure_clause: str
    version: str = LEXICON_VERSION


DEFAULT_LEXICON = Lexicon(
    action_words=(
        "analyze", "explain", "create", "write", "generate", "describe", "compare",
        "summarize", "evaluate", "design", "develop", "build", "implement",
        "calculate", "solve", "identify", "list", "outline", "define", "classify",
    ),
    vague_words=(
        "good", "bad", "nice", "great", "awesome", "terrible", "amazing",
        "fine", "okay", "decent", "pretty", "quite", "very", "really",
        "something", "anything", "stuff", "things", "some", "maybe",
    ),
    context_indicators=(
        "for", "audience", "target", "purpose", "goal", "background", "context",
        "situation", "scenario", "use case", "intended", "aimed at", "designed for",
    ),
    format_indicators=(
        "format", "structure", "style", "length", "words", "paragraphs",
        "list", "bullet", "numbered", "table", "report", "essay", "summary",
    ),
    quantifier_phrases=("how many", "how much", "specific", "exactly", "precisely"),
    detail_words=("include", "must", "should", "need", "require", "ensure"),
    audience_words=("audience", "for", "student", "beginner", "expert", "professional"),
    purpose_words=("purpose", "goal", "objective", "aim", "intend", "because"),
    transition_words=("first", "then", "next", "finally", "also", "additionally"),
    # Priority order: the first category with a matching keyword wins
    category_keywords=(
        ("creative", ("write", "create", "generate", "compose")),
        ("analytical", ("analyze", "examine", "evaluate", "assess", "compare")),
        ("explanatory", ("explain", "describe", "define", "clarify")),
        ("instructional", ("how to", "steps", "guide", "tutorial")),
    ),
    category_fallbacks=(
        ("creative", ("write", "create")),
        ("analytical", ("analyze", "compare")),
        ("explanatory", ("explain", "describe")),
        ("instructional", ("how", "step")),
    ),
    format_hints=("format", "length", "words", "style", "structure"),
    audience_hints=("audience", "for", "student", "beginner", "expert", "professional"),
    purpose_hints=("purpose", "goal", "because"),
    structure_markers=("first", "then", "next", "finally"),
    added_action_words=("Analyze", "Explain", "Create", "Describe", "Compare", "Evaluate"),
    vague_replacements=(
        ("good", "high-quality"),
        ("bad", "poor-quality"),
        ("nice", "well-designed"),
        ("great", "excellent"),
        ("stuff", "content"),
        ("things", "elements"),
        ("something", "a specific example"),
    ),
    output_formats=(
        "in 200-300 words",
        "as a bulleted list",
        "in table format",
        "as a structured report",
        "with numbered steps",
        "in paragraph form",
    ),
    quantifiers=(
        "exactly 3 examples",
        "at least 5 key points",
        "no more than 500 words",
        "between 3-5 paragraphs",
    ),
    audiences=(
        "for beginners with no prior knowledge",
        "for professionals in the field",
        "for high school students",
        "for a general audience",
        "for technical experts",
    ),
    purposes=(
        "for educational purposes",
        "for business presentation",
        "for academic research",
        "for practical application",
        "for decision-making",
    ),
    conjunctions=("and", "but", "or", "also", "additionally", "furthermore"),
    structure_clause=(
        "Please organize your response with: 1) Main points, "
        "2) Supporting details, and 3) Conclusion."
    ),
)


CATEGORY_NAMES = ("creative", "analytical", "explanatory", "instructional")

# Tables compared against lowercased tokens or lowercased text
MATCH_TABLES = frozenset({
    "action_words", "vague_words", "context_indicators", "format_indicators",
    "quantifier_phrases", "detail_words", "audience_words", "purpose_words",
    "transition_words", "format_hints", "audience_hints", "purpose_hints",
    "structure_markers",
})


def _coerce_categories(name: str, value) -> tuple:
    """Accept {"creative": [...], ...} or [["creative", [...]], ...], order kept."""
    items = list(value.items()) if isinstance(value, dict) else value
    if not isinstance(items, list):
        raise LexiconError(f"'{name}' must be an object or a list of pairs")
    out = []
    for item in items:
        if not (isinstance(item, (list, tuple)) and len(item) == 2):
            raise LexiconError(f"'{name}' entries must be [category, keywords] pairs")
        category, keywords = item
        if category not in CATEGORY_NAMES:
            raise LexiconError(f"'{name}' has unknown category '{category}'")
        if not isinstance(keywords, list) or not keywords:
            raise LexiconError(f"'{name}.{category}' must be a non-empty list")
        out.append((category, tuple(str(k).lower() for k in keywords)))
    return tuple(out)


def _coerce(name: str, value):
    if name in ("structure_clause", "version"):
        if not isinstance(value, str):
            raise LexiconError(f"'{name}' must be a string")
        return value
    if name in ("category_keywords", "category_fallbacks"):
        return _coerce_categories(name, value)
    if not isinstance(value, list):
        raise LexiconError(f"'{name}' must be a list")
    if name == "vague_replacements":
        pairs = []
        for item in value:
            if not (isinstance(item, (list, tuple)) and len(item) == 2):
                raise LexiconError("'vague_replacements' entries must be [vague, specific] pairs")
            pairs.append((str(item[0]).lower(), str(item[1])))
        return tuple(pairs)
    if not value:
        raise LexiconError(f"'{name}' must not be empty")
    if name in MATCH_TABLES:
        return tuple(str(v).lower() for v in value)
    return tuple(str(v) for v in value)


def load_lexicon(path: str, base: Lexicon = DEFAULT_LEXICON) -> Lexicon:
    """Load a JSON override file on top of `base`.

    Only the keys present in the file are replaced; unknown keys are an error
    so a typo does not silently fall back to the default table.
    """
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise LexiconError(f"Invalid lexicon JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise LexiconError("Lexicon file must contain a JSON object")

    known = {f.name for f in fields(Lexicon)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise LexiconError(f"Unknown lexicon keys: {', '.join(unknown)}")

    overrides = {k: _coerce(k, v) for k, v in data.items()}
    return replace(base, **overrides)


def describe_lexicon(lexicon: Lexicon = DEFAULT_LEXICON) -> str:
    """One line per table with its size, for the CLI."""
    lines = [f"📚 Lexicon v{lexicon.version}"]
    for f in fields(Lexicon):
        value = getattr(lexicon, f.name)
        if isinstance(value, tuple):
            lines.append(f"  {f.name}: {len(value)} entries")
    return "\n".join(lines)
