"""Analyze → enhance → re-score round trip."""
import random
from dataclasses import dataclass
from typing import Optional

from prompt_optimizer.analyzer import ScoreReport, analyze
from prompt_optimizer.enhancer import EnhancementResult, enhance
from prompt_optimizer.lexicon import DEFAULT_LEXICON, Lexicon


@dataclass
class OptimizationResult:
    before: ScoreReport
    enhancement: EnhancementResult
    after: ScoreReport

    @property
    def score_delta(self) -> int:
        return self.after.total_score - self.before.total_score

    def to_dict(self) -> dict:
        return {
            "analysis": self.before.to_dict(),
            "enhancement": self.enhancement.to_dict(),
            "enhancedAnalysis": self.after.to_dict(),
            "scoreDelta": self.score_delta,
        }

    def summary(self) -> str:
        return "\n".join([
            self.before.summary(),
            "",
            self.enhancement.summary(),
            "",
            f"📈 Score: {self.before.total_score} → {self.after.total_score} "
            f"({self.score_delta:+d})",
        ])


def optimize_prompt(
    prompt: str,
    rng: Optional[random.Random] = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> OptimizationResult:
    before = analyze(prompt, lexicon)
    enhancement = enhance(prompt, before.breakdown, rng=rng, lexicon=lexicon)
    after = analyze(enhancement.enhanced, lexicon)
    return OptimizationResult(before=before, enhancement=enhancement, after=after)
