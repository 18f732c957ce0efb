"""Content aggregation for one site build.

The aggregator fetches every data slice the page plan needs and returns a
single immutable ``SiteModel``. Fetches are grouped into phases; the fetches
of one phase run concurrently through ``fan_out`` and the next phase starts
only when all of them resolved.

Failure policy
--------------
- An author lookup that fails falls back to a placeholder author and a
  logged warning. It never aborts the build.
- Every other failure (article lists, featured articles, question sets,
  trending pages) raises ``RemoteFetchError`` before any output is written.
- Missing YouTube metadata is represented as ``None``.

Usage
-----
>>> # model = await aggregate_site_data(config, client, session)
>>> # model.latest["articles"]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any

import aiohttp

from therapytips_ssg.config import (
    CONTENT_TYPES,
    DETAIL_PAGE_LIMIT,
    EXTRA_VIDEO_URLS,
    FEATURED_SLUGS,
    LATEST_LIST_LIMITS,
    NEWEST_FIRST_SORT,
    RECENT_WINDOW_DAYS,
    RECENT_WINDOW_TYPES,
    SECTION_VIDEO_URLS,
)
from therapytips_ssg.exceptions import RemoteFetchError
from therapytips_ssg.pipeline.content_api import (
    Article,
    Author,
    ContentAPIClient,
    SearchParams,
)
from therapytips_ssg.pipeline.external_data import (
    TrendingItem,
    fetch_analytics_trending,
    fetch_legacy_trending,
    fetch_video_metadata,
)

from .config import BuildConfig
from .fanout import fan_out, fan_out_list
from .personality_tests_data import PERSONALITY_TESTS, find_test, to_questions_json

logger = logging.getLogger(__name__)

PERSONALITY_TEST_TYPE = "personality-tests"


@dataclass(frozen=True)
class DetailPageSource:
    """One detail page: the article, its author and its ordered questions."""

    article: Article
    author: Author
    questions: tuple[str, ...] = ()


@dataclass(frozen=True)
class SiteModel:
    """Every data slice fetched for one build.

    Attributes
    ----------
    section_videos : dict
        Raw YouTube metadata per section (``landing``, ``articles``,
        ``interviews``, ``advice``, ``personality-tests``); ``None`` when
        unavailable.
    extra_videos : tuple
        Raw metadata of the additional video strip.
    featured : dict
        Hand-picked articles per content type, in configured order.
    trending : tuple of TrendingItem
        Most-viewed pages from the configured trending source.
    latest : dict
        The listing ("latest") list per content type.
    details : dict
        Detail page sources per content type.
    build_time : str
        ISO-8601 UTC timestamp of the aggregation.
    """

    section_videos: dict[str, dict[str, Any] | None] = field(default_factory=dict)
    extra_videos: tuple[dict[str, Any] | None, ...] = ()
    featured: dict[str, tuple[Article, ...]] = field(default_factory=dict)
    trending: tuple[TrendingItem, ...] = ()
    latest: dict[str, tuple[Article, ...]] = field(default_factory=dict)
    details: dict[str, tuple[DetailPageSource, ...]] = field(default_factory=dict)
    build_time: str = ""


def recent_window(today: date, days: int = RECENT_WINDOW_DAYS) -> tuple[str, str]:
    """Return ``(date_from, date_to)`` covering the last ``days`` days.

    >>> recent_window(date(2024, 3, 1))
    ('2024-01-01', '2024-03-01')
    """
    start = today - timedelta(days=days)
    return start.isoformat(), today.isoformat()


def latest_list_params(content_type: str, today: date) -> SearchParams:
    """Return the query for the listing page of ``content_type``.

    Articles and advice are limited to the recent window, interviews are
    sorted newest first and personality tests are unfiltered.
    """
    limit = LATEST_LIST_LIMITS[content_type]
    if content_type in RECENT_WINDOW_TYPES:
        date_from, date_to = recent_window(today)
        return SearchParams(
            article_type=content_type,
            limit=limit,
            date_from=date_from,
            date_to=date_to,
        )
    if content_type == "interviews":
        return SearchParams(article_type=content_type, limit=limit, sort=NEWEST_FIRST_SORT)
    return SearchParams(article_type=content_type, limit=limit)


def detail_list_params(content_type: str) -> SearchParams:
    """Return the query for the detail pages of ``content_type``."""
    return SearchParams(
        article_type=content_type, limit=DETAIL_PAGE_LIMIT, sort=NEWEST_FIRST_SORT
    )


async def fetch_videos(
    session: aiohttp.ClientSession, api_key: str
) -> tuple[dict[str, dict[str, Any] | None], tuple[dict[str, Any] | None, ...]]:
    """Fetch metadata for the section videos and the extra video strip."""
    results = await fan_out(
        {
            "sections": fan_out(
                {
                    name: fetch_video_metadata(session, url, api_key)
                    for name, url in SECTION_VIDEO_URLS.items()
                }
            ),
            "extras": fan_out_list(
                [fetch_video_metadata(session, url, api_key) for url in EXTRA_VIDEO_URLS]
            ),
        }
    )
    logger.info("Fetched %d additional YouTube videos", len(results["extras"]))
    return results["sections"], tuple(results["extras"])


async def fetch_featured(client: ContentAPIClient) -> dict[str, tuple[Article, ...]]:
    """Fetch the hand-picked articles of every content type by slug."""
    results = await fan_out(
        {
            content_type: fan_out_list([client.get_article(slug) for slug in slugs])
            for content_type, slugs in FEATURED_SLUGS.items()
        }
    )
    return {content_type: tuple(items) for content_type, items in results.items()}


async def fetch_trending(
    config: BuildConfig, session: aiohttp.ClientSession
) -> tuple[TrendingItem, ...]:
    """Fetch trending pages from the source selected in ``config``."""
    if config.trending_source == "legacy-html":
        items = await fetch_legacy_trending(session)
    else:
        items = await fetch_analytics_trending(
            config.analytics_key_file, config.analytics_property_id
        )
    logger.info("Prepared %d trending items (%s)", len(items), config.trending_source)
    return tuple(items)


async def fetch_latest(
    client: ContentAPIClient, today: date
) -> dict[str, tuple[Article, ...]]:
    """Fetch the listing-page article list of every content type."""
    results = await fan_out(
        {
            content_type: client.get_articles(latest_list_params(content_type, today))
            for content_type in CONTENT_TYPES
        }
    )
    for content_type, items in results.items():
        logger.info("Fetched %d latest %s", len(items), content_type)
    return {content_type: tuple(items) for content_type, items in results.items()}


async def fetch_detail_lists(
    client: ContentAPIClient,
) -> dict[str, list[Article]]:
    """Fetch up to ``DETAIL_PAGE_LIMIT`` newest articles per content type."""
    return await fan_out(
        {
            content_type: client.get_articles(detail_list_params(content_type))
            for content_type in CONTENT_TYPES
        }
    )


async def resolve_author(client: ContentAPIClient, article: Article) -> Author:
    """Return the author of ``article``, or a placeholder when unavailable.

    Articles without ``author_id`` get the placeholder without a lookup. A
    failed lookup is logged and replaced with the placeholder, named after
    the article's inline ``author_name`` when present.
    """
    if article.author_id is None:
        return Author.placeholder(article.author_name)
    try:
        return await client.get_author(article.author_id)
    except RemoteFetchError as exc:
        logger.warning(
            "Could not fetch author %s for %s: %s",
            article.author_id,
            article.slug,
            exc.message,
        )
        return Author.placeholder(article.author_name)


async def resolve_questions(
    client: ContentAPIClient, article: Article
) -> tuple[str, ...]:
    """Return the ordered questions of a personality-test ``article``.

    An empty stored question set falls back to the bundled table entry with
    the same slug. Fetch failures propagate.
    """
    question_set = await client.get_personality_test_questions(article.id)
    questions = question_set.ordered_questions
    if not questions:
        bundled = find_test(article.slug)
        if bundled is not None:
            logger.info("Using bundled questions for %s", article.slug)
            questions = list(to_questions_json(bundled).values())
    return tuple(questions)


async def build_detail_source(
    client: ContentAPIClient, article: Article, content_type: str
) -> DetailPageSource:
    """Resolve the author (and questions, for tests) of one detail article.

    ``content_type`` is the list the article was fetched for; it decides
    whether questions are needed.
    """
    if content_type == PERSONALITY_TEST_TYPE:
        author, questions = await fan_out_list(
            [resolve_author(client, article), resolve_questions(client, article)]
        )
    else:
        author, questions = await resolve_author(client, article), ()
    return DetailPageSource(article=article, author=author, questions=questions)


async def enrich_details(
    client: ContentAPIClient, detail_lists: dict[str, list[Article]]
) -> dict[str, tuple[DetailPageSource, ...]]:
    """Build detail page sources for every listed article concurrently."""
    results = await fan_out(
        {
            content_type: fan_out_list(
                [build_detail_source(client, article, content_type) for article in articles]
            )
            for content_type, articles in detail_lists.items()
        }
    )
    return {content_type: tuple(items) for content_type, items in results.items()}


async def aggregate_site_data(
    config: BuildConfig,
    client: ContentAPIClient,
    session: aiohttp.ClientSession,
    today: date | None = None,
) -> SiteModel:
    """Fetch everything one build renders and return it as a ``SiteModel``.

    Parameters
    ----------
    config : BuildConfig
        Settings of the environment being built.
    client : ContentAPIClient
        Client bound to ``config.api_base_url``.
    session : aiohttp.ClientSession
        Session used for YouTube and legacy trending requests.
    today : date or None
        Reference date of the recent-listing window; defaults to today (UTC).

    Raises
    ------
    RemoteFetchError
        If any fetch other than an author lookup fails.
    """
    today = today or datetime.now(timezone.utc).date()
    logger.info(
        "Aggregating site data for %s from %s", config.environment, config.api_base_url
    )
    logger.debug("%d personality tests bundled", len(PERSONALITY_TESTS))

    sections, extras = await fetch_videos(session, config.youtube_api_key)
    phase = await fan_out(
        {
            "featured": fetch_featured(client),
            "trending": fetch_trending(config, session),
            "latest": fetch_latest(client, today),
            "detail_lists": fetch_detail_lists(client),
        }
    )
    details = await enrich_details(client, phase["detail_lists"])

    return SiteModel(
        section_videos=sections,
        extra_videos=extras,
        featured=phase["featured"],
        trending=phase["trending"],
        latest=phase["latest"],
        details=details,
        build_time=datetime.now(timezone.utc).isoformat(),
    )


__all__ = [
    "DetailPageSource",
    "SiteModel",
    "aggregate_site_data",
    "detail_list_params",
    "latest_list_params",
    "recent_window",
    "resolve_author",
]
