"""
File: trendbrief/sources/reddit.py
Subreddit "new" listing fetcher (unauthenticated JSON endpoint).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlencode

import httpx

from trendbrief.config import HTTP_HEADERS, MAX_PER_SOURCE_LIMIT, MIN_PER_SOURCE_LIMIT, settings
from trendbrief.models import Post
from trendbrief.utils import clamp


def _post_from_listing(data: Dict[str, Any]) -> Post:
    return Post(
        id=str(data.get("id") or ""),
        source=str(data.get("subreddit") or ""),
        title=str(data.get("title") or ""),
        body=str(data.get("selftext") or ""),
        permalink=str(data.get("permalink") or ""),
        url=str(data.get("url") or ""),
        created_at=float(data.get("created_utc") or 0),
    )


class RedditFetcher:
    """Fetches the newest posts of a subreddit."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, base_url: Optional[str] = None):
        self._client = client
        self.base_url = (base_url or settings.REDDIT_BASE_URL).rstrip("/")

    def listing_url(self, subreddit: str, limit: int) -> str:
        limit = clamp(limit, MIN_PER_SOURCE_LIMIT, MAX_PER_SOURCE_LIMIT)
        return f"{self.base_url}/r/{quote(subreddit, safe='')}/new.json?" + urlencode({"limit": limit})

    async def _get_json(self, client: httpx.AsyncClient, url: str) -> Dict[str, Any]:
        r = await client.get(url)
        r.raise_for_status()
        return r.json()

    async def fetch(self, subreddit: str, limit: int = 50) -> List[Post]:
        """
        Fetch recent posts for one subreddit.
        
        Args:
            subreddit: Subreddit name without the "r/" prefix
            limit: Requested post count, clamped to 1..100
            
        Returns:
            List of Post objects, stickied and locked posts excluded
            
        Raises:
            httpx.HTTPError: On transport failures or non-2xx responses
        """
        url = self.listing_url(subreddit, limit)

        if self._client is not None:
            data = await self._get_json(self._client, url)
        else:
            async with httpx.AsyncClient(
                headers=HTTP_HEADERS,
                timeout=settings.REQUEST_TIMEOUT,
                follow_redirects=True,
            ) as client:
                data = await self._get_json(client, url)

        posts: List[Post] = []
        for child in data["data"]["children"]:
            p = child.get("data", {})
            if p.get("stickied") or p.get("locked"):
                continue
            posts.append(_post_from_listing(p))

        return posts
