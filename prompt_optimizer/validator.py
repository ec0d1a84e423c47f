"""Request-side prompt validation.

The scoring engine accepts any string; these checks are what a front end
runs before calling it:
- Type and emptiness
- Maximum length
- Very short prompts (informational only)
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from prompt_optimizer.config import config

MIN_USEFUL_LENGTH = 10


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    severity: Severity
    field: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    issues: list[ValidationIssue] = field(default_factory=list)
    length: int = 0

    @property
    def passed(self) -> bool:
        return not any(i.severity == Severity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def first_error(self) -> Optional[str]:
        errors = self.errors
        return errors[0].message if errors else None

    def summary(self) -> str:
        status = "✅ PASS" if self.passed else "❌ FAIL"
        return f"{status} | Length: {self.length} | Errors: {len(self.errors)}"


class PromptValidationError(ValueError):
    """Raised by `require_valid_prompt` for prompts the engine should not see."""

    def __init__(self, result: ValidationResult):
        super().__init__(result.first_error or "Invalid prompt")
        self.result = result


def validate_prompt(prompt, max_length: Optional[int] = None) -> ValidationResult:
    """Check a raw request value before analysis."""
    limit = max_length if max_length is not None else config.MAX_PROMPT_LENGTH
    result = ValidationResult()

    if not isinstance(prompt, str) or not prompt.strip():
        result.issues.append(ValidationIssue(
            Severity.ERROR, "prompt",
            "Invalid prompt provided. Please provide a valid string.",
        ))
        return result

    result.length = len(prompt)
    if result.length > limit:
        result.issues.append(ValidationIssue(
            Severity.ERROR, "prompt",
            f"Prompt too long. Maximum length is {limit} characters.",
            f"Trim {result.length - limit} characters",
        ))
    elif len(prompt.strip()) < MIN_USEFUL_LENGTH:
        result.issues.append(ValidationIssue(
            Severity.INFO, "prompt",
            "Very short prompt; most dimensions will score low",
            "Describe the task, audience and desired format",
        ))
    return result


def require_valid_prompt(prompt, max_length: Optional[int] = None) -> str:
    result = validate_prompt(prompt, max_length)
    if not result.passed:
        raise PromptValidationError(result)
    return prompt
