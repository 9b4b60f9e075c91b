"""
Application configuration with environment variable support.
"""
from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings


def _split_list(value: str, separator: str = ",") -> List[str]:
    """Split a separated string into trimmed, non-empty items."""
    return [item.strip() for item in value.split(separator) if item.strip()]


class Settings(BaseSettings):
    # Forum sources scanned when a request names none
    DEFAULT_SOURCES: str = "Ultralight,MechanicalKeyboards,OneBag,HeadphoneAdvice,Ergonomics"
    PER_SOURCE_LIMIT: int = 50

    # HTTP client
    REDDIT_BASE_URL: str = "https://www.reddit.com"
    REQUEST_TIMEOUT: float = 20.0
    USER_AGENT: str = "trend-brief/0.1 (frustration trend scanner)"

    # Raw sentiment is rescaled so the negativity gate sits on a lexicon-sum scale
    SENTIMENT_SCALE: float = 5.0

    CORS_ALLOW_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def default_sources(self) -> List[str]:
        return _split_list(self.DEFAULT_SOURCES)

    @property
    def cors_allow_origins(self) -> List[str]:
        return _split_list(self.CORS_ALLOW_ORIGINS) or ["*"]


settings = Settings(_env_file=".env", _env_file_encoding="utf-8")


# Ranking and accumulation constants
TOP_K: int = 25
EXAMPLE_CAP: int = 3
HINT_BONUS: float = 1.3
NEGATIVITY_GATE: float = 1.0
MIN_TOKEN_LENGTH: int = 3
MIN_PHRASE_LENGTH: int = 4
NGRAM_MIN: int = 1
NGRAM_MAX: int = 3

# Bounds for the per-source fetch size
MIN_PER_SOURCE_LIMIT: int = 1
MAX_PER_SOURCE_LIMIT: int = 100

HTTP_HEADERS = {"User-Agent": settings.USER_AGENT}
