"""
Shared utility functions for the trend brief application.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import List


def now_utc() -> datetime:
    """
    Get current UTC datetime with timezone information.
    
    Returns:
        Current UTC datetime
    """
    return datetime.now(timezone.utc)


def clamp(value: int, low: int, high: int) -> int:
    """Clamp an integer into the inclusive range [low, high]."""
    return max(low, min(high, value))


def parse_source_list(raw: str | None, default: List[str]) -> List[str]:
    """
    Parse a comma-separated source list from a request.
    
    Args:
        raw: Comma-separated source names, or None
        default: Sources used when nothing usable was supplied
        
    Returns:
        Trimmed, non-empty source names in the order given
    """
    if not raw:
        return list(default)
    parts = [part.strip() for part in raw.split(",")]
    sources = [part for part in parts if part]
    return sources or list(default)
