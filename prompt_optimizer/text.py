"""Tokenizing and sentence splitting shared by the analyzer and enhancer."""
import re
from typing import Iterable

_NON_WORD = re.compile(r"[^\w\s]")
_SENTENCE_END = re.compile(r"[.!?]+")
_DIGIT = re.compile(r"\d", re.ASCII)


def tokenize(text: str) -> list[str]:
    """Lowercase words with punctuation stripped, in order."""
    return _NON_WORD.sub(" ", text.lower()).split()


def split_sentences(text: str) -> list[str]:
    """Trimmed, non-empty pieces between runs of `.`, `!` or `?`."""
    return [s.strip() for s in _SENTENCE_END.split(text) if s.strip()]


def word_count(text: str) -> int:
    """Whitespace-separated chunk count (punctuation kept)."""
    return len(text.split())


def contains_any(text: str, phrases: Iterable[str]) -> bool:
    lower = text.lower()
    return any(p in lower for p in phrases)


def count_in(tokens: Iterable[str], vocabulary: Iterable[str]) -> int:
    vocab = set(vocabulary)
    return sum(1 for t in tokens if t in vocab)


def has_digit(text: str) -> bool:
    """ASCII digits only; Arabic-Indic "٣" does not count."""
    return bool(_DIGIT.search(text))
