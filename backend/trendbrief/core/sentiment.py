"""
Lexicon-based negativity scoring.

Raw sentiment comes from a pluggable ``SentimentScorer`` (signed float,
positive = favorable). The analyzer only consumes the negative portion of
that score as a non-negative magnitude.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional, Protocol

from trendbrief.config import settings

logger = logging.getLogger(__name__)


class SentimentScorer(Protocol):
    def score(self, text: str) -> float:
        """Return a signed sentiment score for raw text."""
        ...


@lru_cache(maxsize=1)
def _load_analyzer():
    """
    Load the VADER sentiment analyzer.
    
    Returns:
        A shared SentimentIntensityAnalyzer instance
        
    Raises:
        RuntimeError: If vaderSentiment is not installed
    """
    try:
        from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer
    except ImportError as e:
        raise RuntimeError(
            "Sentiment lexicon is missing. Install it with: pip install vaderSentiment"
        ) from e

    return SentimentIntensityAnalyzer()


class VaderScorer:
    """VADER compound score rescaled by ``scale`` (default ``SENTIMENT_SCALE``)."""

    def __init__(self, scale: Optional[float] = None):
        self.scale = settings.SENTIMENT_SCALE if scale is None else scale

    def score(self, text: str) -> float:
        if not text:
            return 0.0
        compound = _load_analyzer().polarity_scores(text)["compound"]
        return float(compound) * self.scale


@lru_cache(maxsize=1)
def default_scorer() -> VaderScorer:
    return VaderScorer()


def negativity_from_raw(raw: float) -> float:
    """Keep only the unfavorable part of a signed score, as a magnitude."""
    return max(0.0, -min(0.0, raw))


def score_negativity(text: str, scorer: Optional[SentimentScorer] = None) -> float:
    """
    Score how negative a piece of raw (un-normalized) text is.
    
    Args:
        text: Post text as written
        scorer: Raw sentiment source, defaults to the VADER scorer
        
    Returns:
        Negativity magnitude >= 0; 0 for neutral or favorable text
    """
    scorer = scorer or default_scorer()
    return negativity_from_raw(scorer.score(text))


def warm_up() -> None:
    """Load the lexicon ahead of the first request."""
    _load_analyzer()
    logger.debug("Sentiment lexicon loaded")
