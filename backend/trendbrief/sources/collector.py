"""
Post collection coordinator that aggregates across forum sources.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from trendbrief.config import settings
from trendbrief.models import Post
from trendbrief.sources.reddit import RedditFetcher

logger = logging.getLogger(__name__)


async def collect_posts(
    sources: Sequence[str],
    per_source_limit: int | None = None,
    fetcher: Optional[RedditFetcher] = None,
) -> List[Post]:
    """
    Fetch recent posts from every source concurrently.
    
    A source that fails for any reason contributes no posts; the failure is
    logged and never raised, so one unreachable forum cannot sink the rest.
    
    Args:
        sources: Source names to fetch
        per_source_limit: Posts requested per source (defaults to PER_SOURCE_LIMIT)
        fetcher: Fetcher to use (defaults to a fresh RedditFetcher)
        
    Returns:
        Flat list of posts from all sources that answered
    """
    fetcher = fetcher or RedditFetcher()
    limit = per_source_limit or settings.PER_SOURCE_LIMIT

    results = await asyncio.gather(
        *(fetcher.fetch(source, limit) for source in sources),
        return_exceptions=True,
    )

    posts: List[Post] = []
    for source, result in zip(sources, results):
        if isinstance(result, Exception):
            logger.warning("Fetching %s failed, treating as empty: %s", source, result)
            continue
        if isinstance(result, BaseException):
            raise result
        posts.extend(result)

    logger.info("Collected %d posts from %d sources", len(posts), len(sources))
    return posts

