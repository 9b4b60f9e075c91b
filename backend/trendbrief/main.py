"""
Main FastAPI application and routing layer.
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from trendbrief import __version__
from trendbrief.config import MAX_PER_SOURCE_LIMIT, MIN_PER_SOURCE_LIMIT, settings
from trendbrief.core.analyzer import analyze
from trendbrief.schemas import ErrorResponse, TrendBrief
from trendbrief.services.digest import render_digest
from trendbrief.sources.collector import collect_posts
from trendbrief.utils import clamp, now_utc, parse_source_list

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
logger = logging.getLogger("uvicorn")

NO_STORE = {"Cache-Control": "no-store"}


async def build_brief(subs: Optional[str], limit: int) -> TrendBrief:
    """
    Fetch posts and analyze them into a brief.
    
    Args:
        subs: Comma-separated source names from the request, or None
        limit: Requested posts per source
        
    Returns:
        TrendBrief for the resolved source list
    """
    sources = parse_source_list(subs, settings.default_sources)
    per_source = clamp(limit, MIN_PER_SOURCE_LIMIT, MAX_PER_SOURCE_LIMIT)

    logger.info(f"Collecting up to {per_source} posts from {len(sources)} sources")
    posts = await collect_posts(sources, per_source)

    logger.info(f"Analyzing {len(posts)} posts")
    return analyze(posts, sources)


def error_response(e: Exception) -> JSONResponse:
    body = ErrorResponse(error=str(e) or "Failed to generate trend brief")
    return JSONResponse(body.model_dump(), status_code=500, headers=NO_STORE)


# Initialize FastAPI app
app = FastAPI(
    title="Frustration Trend Brief API",
    version=__version__,
    description="Ranks recurring complaint phrases across discussion forums",
)


@app.on_event("startup")
async def warm_startup():
    """Load the sentiment lexicon on startup."""
    async def load_lexicon():
        start_time = time.perf_counter()
        try:
            from trendbrief.core.sentiment import warm_up
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, warm_up)
            logger.info("Sentiment lexicon loaded in %.1fs", time.perf_counter() - start_time)
        except Exception as e:
            logger.warning("Lexicon warm-up skipped: %s", e)

    asyncio.create_task(load_lexicon())


# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "as_of": now_utc().isoformat(),
        "service": "trend-brief-api",
    }


@app.get(
    "/trends",
    response_model=TrendBrief,
    responses={500: {"model": ErrorResponse}},
)
async def get_trends(
    subs: Optional[str] = Query(None, description="Comma-separated subreddits (e.g. OneBag,Ultralight)"),
    limit: int = Query(settings.PER_SOURCE_LIMIT, description="Posts per subreddit, clamped to 1-100"),
):
    """
    Rank frustration phrases across the requested subreddits.
    
    Args:
        subs: Comma-separated subreddit names; defaults are used when empty
        limit: Posts fetched per subreddit
        
    Returns:
        TrendBrief as camelCase JSON
    """
    try:
        brief = await build_brief(subs, limit)
    except Exception as e:
        logger.error(f"Error generating trend brief: {e}")
        return error_response(e)

    return JSONResponse(brief.model_dump(mode="json", by_alias=True), headers=NO_STORE)


@app.get("/trends/digest", response_class=PlainTextResponse)
async def get_trends_digest(
    subs: Optional[str] = Query(None, description="Comma-separated subreddits"),
    limit: int = Query(settings.PER_SOURCE_LIMIT, description="Posts per subreddit, clamped to 1-100"),
):
    """Same brief as /trends, rendered as plain text."""
    try:
        brief = await build_brief(subs, limit)
    except Exception as e:
        logger.error(f"Error generating trend digest: {e}")
        return error_response(e)

    return PlainTextResponse(render_digest(brief), headers=NO_STORE)


if __name__ == "__main__":
    # For development
    import uvicorn
    uvicorn.run("trendbrief.main:app", host="0.0.0.0", port=8000, reload=True)
