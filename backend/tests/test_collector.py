from typing import Any, Dict, List

import httpx
import pytest

from trendbrief.sources.collector import collect_posts
from trendbrief.sources.reddit import RedditFetcher


def listing(*children: Dict[str, Any]) -> Dict[str, Any]:
    return {"data": {"children": [{"data": child} for child in children]}}


def child(post_id: str, subreddit: str, **extra: Any) -> Dict[str, Any]:
    data = {
        "id": post_id,
        "subreddit": subreddit,
        "title": f"Title {post_id}",
        "selftext": f"Body {post_id}",
        "permalink": f"/r/{subreddit}/comments/{post_id}/",
        "url": f"https://www.reddit.com/r/{subreddit}/comments/{post_id}/",
        "created_utc": 1700000000,
    }
    data.update(extra)
    return data


def make_client(routes: Dict[str, httpx.Response], calls: List[httpx.URL]) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url)
        return routes.get(request.url.path, httpx.Response(404, json={}))

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_parses_listing_and_skips_pinned_posts() -> None:
    calls: List[httpx.URL] = []
    routes = {
        "/r/OneBag/new.json": httpx.Response(
            200,
            json=listing(
                child("a", "OneBag"),
                child("b", "OneBag", stickied=True),
                child("c", "OneBag", locked=True),
                child("d", "OneBag", selftext=None, created_utc=None),
            ),
        )
    }

    async with make_client(routes, calls) as client:
        posts = await RedditFetcher(client=client).fetch("OneBag", 25)

    assert [p.id for p in posts] == ["a", "d"]
    assert posts[0].source == "OneBag"
    assert posts[0].body == "Body a"
    assert posts[0].created_at == 1700000000.0
    assert posts[1].body == ""
    assert posts[1].created_at == 0.0
    assert calls[0].params["limit"] == "25"


def test_listing_url_clamps_limit() -> None:
    fetcher = RedditFetcher(base_url="https://www.reddit.com/")

    assert fetcher.listing_url("Ultralight", 500).endswith("/r/Ultralight/new.json?limit=100")
    assert fetcher.listing_url("Ultralight", 0).endswith("limit=1")
    assert fetcher.listing_url("Ultra light", 10).startswith("https://www.reddit.com/r/Ultra%20light/")


@pytest.mark.asyncio
async def test_fetch_raises_on_http_error() -> None:
    async with make_client({}, []) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await RedditFetcher(client=client).fetch("Missing", 10)


@pytest.mark.asyncio
async def test_collect_posts_swallows_failed_sources() -> None:
    calls: List[httpx.URL] = []
    routes = {
        "/r/OneBag/new.json": httpx.Response(200, json=listing(child("a", "OneBag"))),
        "/r/Broken/new.json": httpx.Response(503, json={}),
        "/r/Weird/new.json": httpx.Response(200, json={"unexpected": True}),
        "/r/Ergonomics/new.json": httpx.Response(
            200, json=listing(child("e1", "Ergonomics"), child("e2", "Ergonomics"))
        ),
    }

    async with make_client(routes, calls) as client:
        posts = await collect_posts(
            ["OneBag", "Broken", "Weird", "Ergonomics"],
            per_source_limit=10,
            fetcher=RedditFetcher(client=client),
        )

    assert sorted(p.id for p in posts) == ["a", "e1", "e2"]
    assert len(calls) == 4


@pytest.mark.asyncio
async def test_collect_posts_with_no_sources() -> None:
    async with make_client({}, []) as client:
        posts = await collect_posts([], fetcher=RedditFetcher(client=client))

    assert posts == []
