"""
Frustration phrase extraction and ranking.

A single ``analyze`` call turns a materialized list of posts into a
``TrendBrief``: qualifying posts are weighted by negativity, split into
1-3 word phrases, and accumulated into one global map plus one map per
source. All accumulator state is local to the call.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

from trendbrief.config import (
    EXAMPLE_CAP,
    HINT_BONUS,
    MIN_PHRASE_LENGTH,
    NEGATIVITY_GATE,
    TOP_K,
)
from trendbrief.core.sentiment import SentimentScorer, default_scorer, score_negativity
from trendbrief.core.text import contains_hint, generate_phrases, tokenize
from trendbrief.models import Example, PhraseAccumulator, Post
from trendbrief.schemas import SourceTrends, Trend, TrendBrief, TrendExample
from trendbrief.utils import now_utc

logger = logging.getLogger(__name__)

AccumulatorMap = Dict[str, PhraseAccumulator]


def post_text(post: Post) -> str:
    return f"{post.title} {post.body}".strip()


def post_weight(text: str, scorer: SentimentScorer) -> Optional[float]:
    """
    Weight a post's text, or reject it.
    
    Args:
        text: Concatenated title and body, not normalized
        scorer: Raw sentiment source
        
    Returns:
        The weight every phrase of the post contributes, or None when the
        post is empty or carries neither a hint term nor enough negativity
    """
    if not text:
        return None

    negativity = score_negativity(text, scorer)
    hint = contains_hint(text)

    # Neutral text without complaint vocabulary is noise
    if not hint and negativity < NEGATIVITY_GATE:
        return None

    base_weight = negativity if negativity > 0 else 1.0
    return base_weight * (HINT_BONUS if hint else 1.0)


def accumulate(acc_map: AccumulatorMap, phrase: str, weight: float, example: Example) -> None:
    acc = acc_map.get(phrase)
    if acc is None:
        acc = acc_map[phrase] = PhraseAccumulator()
    acc.score += weight
    acc.count += 1
    if len(acc.examples) < EXAMPLE_CAP:
        acc.examples.append(example)


def rank(acc_map: AccumulatorMap, limit: int = TOP_K) -> List[Trend]:
    """
    Rank accumulated phrases by score, then by occurrence count.
    
    Args:
        acc_map: Phrase accumulators for one scope
        limit: Maximum number of trends to keep
        
    Returns:
        Trends in descending (score, count) order
    """
    ordered = sorted(
        acc_map.items(),
        key=lambda entry: (entry[1].score, entry[1].count),
        reverse=True,
    )
    return [
        Trend(
            phrase=phrase,
            score=acc.score,
            count=acc.count,
            examples=[
                TrendExample(source=ex.source, title=ex.title, permalink=ex.permalink)
                for ex in acc.examples
            ],
        )
        for phrase, acc in ordered[:limit]
    ]


def sample_size(acc_map: AccumulatorMap) -> int:
    """Total phrase occurrences in a scope (not the number of posts)."""
    return sum(acc.count for acc in acc_map.values())


def analyze_posts(
    posts: Iterable[Post],
    sources: Sequence[str],
    scorer: Optional[SentimentScorer] = None,
) -> TrendBrief:
    """
    Build a ranked frustration brief from a snapshot of posts.
    
    Args:
        posts: Posts from any number of sources, in any order
        sources: Requested source names; each gets a ``by_source`` entry
        scorer: Raw sentiment source, defaults to the VADER scorer
        
    Returns:
        TrendBrief with global and per-source rankings
    """
    scorer = scorer or default_scorer()
    global_map: AccumulatorMap = {}
    by_source_maps: Dict[str, AccumulatorMap] = {}

    seen = qualified = 0
    for post in posts:
        seen += 1
        text = post_text(post)
        weight = post_weight(text, scorer)
        if weight is None:
            continue
        qualified += 1

        source_map = by_source_maps.setdefault(post.source, {})
        example = Example(source=post.source, title=post.title, permalink=post.permalink)

        for phrase in generate_phrases(tokenize(text)):
            # Only ever removes 3-letter unigrams; n-grams are longer
            if len(phrase) < MIN_PHRASE_LENGTH:
                continue
            accumulate(global_map, phrase, weight, example)
            accumulate(source_map, phrase, weight, example)

    logger.debug("Analyzed %d posts, %d qualified, %d phrases", seen, qualified, len(global_map))

    by_source: Dict[str, SourceTrends] = {}
    for source in sources:
        source_map = by_source_maps.get(source, {})
        by_source[source] = SourceTrends(
            top_trends=rank(source_map),
            sample_size=sample_size(source_map),
        )

    return TrendBrief(
        generated_at=now_utc().isoformat(),
        sources=list(sources),
        top_trends=rank(global_map),
        by_source=by_source,
    )


# Short public name used by the request handler
analyze = analyze_posts
