"""
Plain-text rendering of a trend brief.
"""
from __future__ import annotations

from textwrap import shorten
from typing import List

from trendbrief.schemas import TrendBrief


def render_digest(brief: TrendBrief, top_n: int = 10, per_source_n: int = 5) -> str:
    """
    Render a brief as a readable plain-text digest.
    
    Args:
        brief: Brief produced by the analyzer
        top_n: Number of global trends to list
        per_source_n: Number of trends to list per source
        
    Returns:
        Multi-line digest text
    """
    lines: List[str] = ["Top Emerging Frustrations", ""]

    if not brief.top_trends:
        lines.append("No frustration signal found.")
    for i, trend in enumerate(brief.top_trends[:top_n], start=1):
        lines.append(f"{i}. {trend.phrase} (score {trend.score:.1f}, {trend.count} mentions)")
        for ex in trend.examples:
            title = shorten(ex.title, width=100, placeholder="...")
            lines.append(f"     [r/{ex.source}] {title}")

    lines += ["", "By Source"]
    for source in brief.sources:
        entry = brief.by_source.get(source)
        sample = entry.sample_size if entry else 0
        lines += ["", f"r/{source} (sample: {sample})"]
        for trend in (entry.top_trends if entry else [])[:per_source_n]:
            lines.append(f"  - {trend.phrase}: {trend.count} mentions")

    lines += ["", f"Generated at {brief.generated_at}"]
    return "\n".join(lines) + "\n"
