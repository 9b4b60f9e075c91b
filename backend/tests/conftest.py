from typing import Dict

import pytest

from trendbrief.models import Post


class KeywordScorer:
    """Returns the raw score of the first keyword found in the text, else a default."""

    def __init__(self, scores: Dict[str, float] | None = None, default: float = 0.0):
        self.scores = scores or {}
        self.default = default
        self.calls: list[str] = []

    def score(self, text: str) -> float:
        self.calls.append(text)
        lowered = text.lower()
        for keyword, value in self.scores.items():
            if keyword in lowered:
                return value
        return self.default


def make_post(title: str, body: str = "", source: str = "Gadgets", post_id: str = "p1") -> Post:
    return Post(
        id=post_id,
        source=source,
        title=title,
        body=body,
        permalink=f"/r/{source}/comments/{post_id}/",
        url=f"https://www.reddit.com/r/{source}/comments/{post_id}/",
        created_at=1700000000.0,
    )


@pytest.fixture
def neutral_scorer() -> KeywordScorer:
    return KeywordScorer()
