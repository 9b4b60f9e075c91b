"""
Text normalization, tokenization and phrase generation for frustration mining.

Everything here is pure and deterministic. ``normalize`` is shared by the
tokenizer and the hint detector so both see the same lowercased,
punctuation-free view of a post.
"""
from __future__ import annotations

import re
from typing import List, Sequence

from trendbrief.config import MIN_TOKEN_LENGTH, NGRAM_MAX, NGRAM_MIN

_URL_RE = re.compile(r"https?://\S+")
_DISALLOWED_RE = re.compile(r"[^a-z0-9\s'-]")
_WHITESPACE_RE = re.compile(r"\s+")

STOPWORDS = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an", "and",
    "any", "are", "as", "at", "be", "because", "been", "before", "being", "below",
    "between", "both", "but", "by", "can", "did", "do", "does", "doing", "down",
    "during", "each", "few", "for", "from", "further", "had", "has", "have",
    "having", "he", "her", "here", "hers", "herself", "him", "himself", "his",
    "how", "i", "if", "in", "into", "is", "it", "its", "itself", "let", "me",
    "more", "most", "my", "myself", "no", "nor", "not", "of", "off", "on", "once",
    "only", "or", "other", "our", "ours", "ourselves", "out", "over", "own",
    "same", "she", "should", "so", "some", "such", "than", "that", "the", "their",
    "theirs", "them", "themselves", "then", "there", "these", "they", "this",
    "those", "through", "to", "too", "under", "until", "up", "very", "was", "we",
    "were", "what", "when", "where", "which", "while", "who", "whom", "why",
    "with", "you", "your", "yours", "yourself", "yourselves",
})

# Product-complaint vocabulary, matched as substrings of normalized text.
FRUSTRATION_HINTS = (
    # defects
    "issue", "problem", "broken", "broke", "crack", "peel", "scratch", "missing",
    "dirty", "stuck",
    # returns and warranty
    "warranty", "return", "refund", "scam", "fake", "delay", "late", "shipping",
    "lost",
    # fit and comfort
    "pain", "hurt", "uncomfortable", "sizing", "tight", "loose",
    # noise and smell
    "noise", "rattle", "squeak", "smell", "odor",
    # reliability
    "can't", "cant", "cannot", "doesn't", "doesnt", "won't", "wont", "bad",
    "worse", "fail", "failure", "inconsistent", "battery", "overheat", "heat",
    "cold",
    # usability and software
    "confusing", "hard", "difficult", "slow", "lag", "stutter", "bug", "glitch",
)


def normalize(text: str) -> str:
    """Lowercase, drop URLs and punctuation, collapse whitespace."""
    text = (text or "").lower()
    text = _URL_RE.sub(" ", text)
    text = _DISALLOWED_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def tokenize(text: str) -> List[str]:
    return [token for token in normalize(text).split(" ") if token]


def contains_hint(text: str) -> bool:
    """
    Check whether text mentions any frustration hint term.
    
    Matching is plain substring containment on the normalized text, so
    "overheating" matches "overheat" and "latest" matches "late".
    
    Args:
        text: Raw post text
        
    Returns:
        True if at least one hint term occurs
    """
    normalized = normalize(text)
    return any(hint in normalized for hint in FRUSTRATION_HINTS)


def content_tokens(tokens: Sequence[str]) -> List[str]:
    """Drop stopwords and tokens shorter than the minimum token length."""
    return [t for t in tokens if t not in STOPWORDS and len(t) >= MIN_TOKEN_LENGTH]


def generate_phrases(
    tokens: Sequence[str],
    n_min: int = NGRAM_MIN,
    n_max: int = NGRAM_MAX,
) -> List[str]:
    """
    Build contiguous n-grams over the content tokens of a post.
    
    Phrases are grouped by size: all unigrams left to right, then all
    bigrams, then all trigrams. Repeats are kept.
    
    Args:
        tokens: Tokens from ``tokenize``
        n_min: Smallest n-gram size
        n_max: Largest n-gram size
        
    Returns:
        List of space-joined phrases
    """
    words = content_tokens(tokens)
    phrases: List[str] = []
    for n in range(max(1, n_min), n_max + 1):
        for i in range(len(words) - n + 1):
            phrases.append(" ".join(words[i : i + n]))
    return phrases
