"""
File: trendbrief/models.py
Internal data structures used during collection/analysis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Post:
    """One forum post as returned by a fetcher. Never mutated by the analyzer."""

    id: str
    source: str  # forum name, e.g. "Ultralight"
    title: str
    body: str = ""
    permalink: str = ""
    url: str = ""
    created_at: float = 0.0  # unix seconds, 0 when unknown


@dataclass(frozen=True)
class Example:
    source: str
    title: str
    permalink: str


@dataclass
class PhraseAccumulator:
    """Running totals for one phrase within a single analysis run."""

    score: float = 0.0  # weighted negativity sum
    count: int = 0  # phrase occurrences
    examples: List[Example] = field(default_factory=list)


__all__ = ["Post", "Example", "PhraseAccumulator"]
