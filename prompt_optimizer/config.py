"""Configuration management."""
import os
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else None


class Config:
    def __init__(self):
        self.BOT_TOKEN: str = os.environ.get("BOT_TOKEN", "")
        self.REDIS_URL: str = os.environ.get("REDIS_URL", "redis://localhost:6379/0")
        self.RATE_LIMIT_MAX: int = int(os.environ.get("RATE_LIMIT_MAX", "100"))
        self.RATE_LIMIT_WINDOW: int = int(os.environ.get("RATE_LIMIT_WINDOW", "900"))
        self.MAX_PROMPT_LENGTH: int = int(os.environ.get("MAX_PROMPT_LENGTH", "5000"))
        self.ENHANCE_SEED: Optional[int] = _optional_int("ENHANCE_SEED")
        self.LEXICON_PATH: str = os.environ.get("LEXICON_PATH", "")

    def validate(self):
        if not self.BOT_TOKEN:
            raise ValueError("BOT_TOKEN is not set!")
        if self.MAX_PROMPT_LENGTH <= 0:
            raise ValueError("MAX_PROMPT_LENGTH must be positive")
        if self.RATE_LIMIT_MAX <= 0 or self.RATE_LIMIT_WINDOW <= 0:
            raise ValueError("RATE_LIMIT_MAX and RATE_LIMIT_WINDOW must be positive")


config = Config()
