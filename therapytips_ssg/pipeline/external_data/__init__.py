"""Third-party data providers: YouTube metadata and trending pages."""

from .trending import (
    TrendingItem,
    fetch_analytics_trending,
    fetch_legacy_trending,
    parse_trending_html,
    select_trending_items,
)
from .youtube import extract_video_id, fetch_video_metadata, first_video_item

__all__ = [
    "TrendingItem",
    "extract_video_id",
    "fetch_analytics_trending",
    "fetch_legacy_trending",
    "fetch_video_metadata",
    "first_video_item",
    "parse_trending_html",
    "select_trending_items",
]
