"""Trending-pages fetchers.

Two alternative sources produce the same ``TrendingItem`` list:

- ``analytics``: the Google Analytics Data API report of the most-viewed
  pages over the trailing 30 days. This is the default source.
- ``legacy-html``: the HTML fragment served by the site's
  ``fetch-top-articles.php`` endpoint.

Exactly one source is used per build (``BuildConfig.trending_source``); the
results are never merged. Both fail loudly with ``RemoteFetchError`` when
the source itself cannot be read.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import aiohttp
from bs4 import BeautifulSoup

from therapytips_ssg.config import (
    LEGACY_TRENDING_URL,
    SITE_URL,
    TRENDING_END_DATE,
    TRENDING_FALLBACK_TITLE,
    TRENDING_MAX_ITEMS,
    TRENDING_PATH_PREFIXES,
    TRENDING_REPORT_LIMIT,
    TRENDING_START_DATE,
)
from therapytips_ssg.exceptions import RemoteFetchError

logger = logging.getLogger(__name__)

VIEWS_PATTERN = re.compile(r"(\d+)\s+views")


@dataclass(frozen=True)
class TrendingItem:
    title: str
    views: int
    link: str


def is_trending_path(page_path: str) -> bool:
    """Return True if ``page_path`` lies under one of the content folders."""
    return any(prefix in page_path for prefix in TRENDING_PATH_PREFIXES)


def select_trending_items(
    rows: Iterable[tuple[str | None, str | None, str | None]] | None,
) -> list[TrendingItem]:
    """Turn ``(pagePath, pageTitle, screenPageViews)`` rows into trending items.

    Rows without a path or view count, or outside the content folders, are
    skipped. At most ``TRENDING_MAX_ITEMS`` items are returned, in row order.
    """
    items: list[TrendingItem] = []
    for page_path, page_title, page_views in rows or ():
        if len(items) >= TRENDING_MAX_ITEMS:
            break
        if not page_path or not page_views or not is_trending_path(page_path):
            continue
        items.append(
            TrendingItem(
                title=page_title or TRENDING_FALLBACK_TITLE,
                views=int(page_views),
                link=f"{SITE_URL}{page_path}",
            )
        )
    return items


def _run_analytics_report(key_file: Path, property_id: str):
    from google.analytics.data_v1beta import BetaAnalyticsDataClient
    from google.analytics.data_v1beta.types import (
        DateRange,
        Dimension,
        Metric,
        RunReportRequest,
    )
    from google.oauth2 import service_account

    credentials = service_account.Credentials.from_service_account_file(
        str(key_file)
    )
    client = BetaAnalyticsDataClient(credentials=credentials)
    request = RunReportRequest(
        property=f"properties/{property_id}",
        date_ranges=[DateRange(start_date=TRENDING_START_DATE, end_date=TRENDING_END_DATE)],
        dimensions=[Dimension(name="pagePath"), Dimension(name="pageTitle")],
        metrics=[Metric(name="screenPageViews")],
        limit=TRENDING_REPORT_LIMIT,
    )
    return client.run_report(request)


def _report_rows(response) -> list[tuple[str | None, str | None, str | None]]:
    rows = []
    for row in getattr(response, "rows", None) or []:
        dims = list(row.dimension_values)
        metrics = list(row.metric_values)
        rows.append(
            (
                dims[0].value if len(dims) > 0 else None,
                dims[1].value if len(dims) > 1 else None,
                metrics[0].value if metrics else None,
            )
        )
    return rows


async def fetch_analytics_trending(
    key_file: Path, property_id: str
) -> list[TrendingItem]:
    """Fetch the top pages of the last 30 days from Google Analytics.

    The blocking report call runs in a worker thread so concurrent fetches on
    the event loop keep progressing.

    Raises
    ------
    RemoteFetchError
        If the credentials cannot be loaded or the report call fails.
    """
    try:
        response = await asyncio.to_thread(_run_analytics_report, key_file, property_id)
    except Exception as exc:
        logger.error("Error fetching top articles: %s", exc)
        raise RemoteFetchError(
            f"Failed to fetch trending pages from analytics: {exc}",
            context={"property_id": property_id, "key_file": str(key_file)},
        ) from exc
    return select_trending_items(_report_rows(response))


def parse_trending_html(html: str) -> list[TrendingItem]:
    """Parse the legacy top-articles HTML fragment.

    Each ``<p>`` is expected to hold an ``<a>`` and a ``<small><em>`` caption
    such as ``4329 views this month``. Paragraphs missing either part, or with
    an empty title or link, are skipped. A caption without a view count
    counts as zero views.

    Examples
    --------
    >>> html = '<p><a href="/a">A</a><small><em>12 views this month</em></small></p>'
    >>> parse_trending_html(html)
    [TrendingItem(title='A', views=12, link='/a')]
    """
    soup = BeautifulSoup(html or "", "html.parser")
    items: list[TrendingItem] = []
    for paragraph in soup.find_all("p"):
        anchor = paragraph.find("a")
        caption = paragraph.select_one("small em")
        if anchor is None or caption is None:
            continue
        match = VIEWS_PATTERN.search(caption.get_text())
        views = int(match.group(1)) if match else 0
        title = anchor.get_text().strip()
        link = anchor.get("href") or ""
        if title and link:
            items.append(TrendingItem(title=title, views=views, link=link))
    return items


async def fetch_legacy_trending(
    session: aiohttp.ClientSession, url: str = LEGACY_TRENDING_URL
) -> list[TrendingItem]:
    """Fetch and parse the legacy top-articles HTML endpoint."""
    try:
        async with session.get(url, headers={"Content-Type": "text/html"}) as response:
            html = await response.text()
    except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as exc:
        raise RemoteFetchError(
            f"Failed to fetch trending pages: {exc or type(exc).__name__}", context={"url": url}
        ) from exc
    items = parse_trending_html(html)
    logger.debug("Parsed %d trending items from %s", len(items), url)
    return items
