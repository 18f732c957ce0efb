"""YouTube video metadata fetcher.

Metadata is decoration: every failure is logged and reported as ``None`` so
the templates can omit duration and view counts without failing the build.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any
from urllib.parse import parse_qs, urlparse

import aiohttp

from therapytips_ssg.config import YOUTUBE_API_URL, YOUTUBE_PARTS

logger = logging.getLogger(__name__)


def extract_video_id(video_url: str) -> str | None:
    """Return the ``v`` parameter of a YouTube watch-page URL.

    >>> extract_video_id("https://www.youtube.com/watch?v=-4u-egrCw1A")
    '-4u-egrCw1A'
    >>> extract_video_id("https://www.youtube.com/") is None
    True
    """
    values = parse_qs(urlparse(video_url).query).get("v")
    return values[0] if values else None


async def fetch_video_metadata(
    session: aiohttp.ClientSession, video_url: str, api_key: str
) -> dict[str, Any] | None:
    """Fetch the raw ``videos`` resource for ``video_url``.

    Returns
    -------
    dict or None
        The provider JSON response, or ``None`` when the id cannot be
        extracted, no API key is configured, or the request fails.
    """
    video_id = extract_video_id(video_url)
    if not video_id:
        logger.warning("No video id in YouTube URL %s", video_url)
        return None
    if not api_key:
        logger.warning("YT_API_KEY not set; skipping metadata for %s", video_id)
        return None
    params = {
        "key": api_key,
        "part": YOUTUBE_PARTS,
        "id": video_id,
        "_": str(int(time.time() * 1000)),
    }
    try:
        async with session.get(YOUTUBE_API_URL, params=params) as response:
            text = await response.text()
        return json.loads(text)
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
        logger.error("Error fetching video data for %s: %s", video_id, exc)
        return None


def first_video_item(metadata: dict[str, Any] | None) -> dict[str, Any] | None:
    """Return the first ``items`` entry of a metadata response, if any."""
    if not metadata:
        return None
    items = metadata.get("items") or []
    return items[0] if items else None
