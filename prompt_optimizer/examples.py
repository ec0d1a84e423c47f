"""Before/after prompt examples shown to users."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PromptExample:
    category: str
    before: str
    after: str
    improvements: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "before": self.before,
            "after": self.after,
            "improvements": list(self.improvements),
        }


EXAMPLES: list[PromptExample] = [
    PromptExample(
        category="Creative Writing",
        before="Write a story.",
        after=(
            "Write a 500-word short story about a time traveler who accidentally changes "
            "a minor historical event. Use third-person narrative, include dialogue, and "
            "end with an unexpected twist."
        ),
        improvements=[
            "Added specific length requirement",
            "Specified narrative style",
            "Included clear plot elements",
            "Defined story structure",
        ],
    ),
    PromptExample(
        category="Technical Explanation",
        before="Explain AI.",
        after=(
            "Explain artificial intelligence to a high school student with no technical "
            "background. Cover the basic definition, how it works in simple terms, provide "
            "3 real-world examples, and explain both benefits and concerns. Keep the "
            "explanation under 300 words."
        ),
        improvements=[
            "Defined target audience",
            "Specified complexity level",
            "Added structure requirements",
            "Set word limit",
        ],
    ),
    PromptExample(
        category="Data Analysis",
        before="Analyze this data.",
        after=(
            "Analyze the sales data for trends and patterns. Provide: 1) Summary statistics, "
            "2) Identify top 3 trends, 3) Compare year-over-year growth, 4) Recommend "
            "actionable next steps. Present findings in a structured report format."
        ),
        improvements=[
            "Specified analysis type",
            "Listed required outputs",
            "Added comparison request",
            "Defined format",
        ],
    ),
]


def get_examples(category: Optional[str] = None) -> list[PromptExample]:
    """All examples, or those whose category contains `category`."""
    if not category:
        return list(EXAMPLES)
    needle = category.lower()
    return [e for e in EXAMPLES if needle in e.category.lower()]


def format_examples(examples: Optional[list[PromptExample]] = None) -> str:
    examples = EXAMPLES if examples is None else examples
    if not examples:
        return "No examples."
    lines = []
    for e in examples:
        lines.append(f"📝 {e.category}")
        lines.append(f"  ❌ Before: {e.before}")
        lines.append(f"  ✅ After: {e.after}")
        for imp in e.improvements:
            lines.append(f"     → {imp}")
        lines.append("")
    return "\n".join(lines).rstrip()
