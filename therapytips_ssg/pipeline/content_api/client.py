"""content_api.client module.

This module defines ``ContentAPIClient``, the asynchronous networking boundary
for every request to the TherapyTips backend API. Each operation issues one
GET request, decodes the JSON envelope into ``Ok``/``Err`` and either returns
the typed payload or raises ``RemoteFetchError``.

The client never retries and does not configure timeouts; a failing request
fails the operation immediately. The ``aiohttp`` session is injected by the
caller and is used but not closed here.

Examples
--------
>>> import aiohttp
>>> from therapytips_ssg.pipeline.content_api.client import ContentAPIClient
>>> async def main():
...     async with aiohttp.ClientSession() as session:
...         client = ContentAPIClient("https://api.therapytips.org", session)
...         return await client.get_article("codependency-scale")
>>> # import asyncio; asyncio.run(main())
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from therapytips_ssg.exceptions import RemoteFetchError

from .models import (
    ApiResult,
    Article,
    Author,
    Err,
    PersonalityTestQuestions,
    SearchParams,
    decode_envelope,
)

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class ContentAPIClient:
    """Typed wrapper around the content API endpoints.

    Parameters
    ----------
    base_url : str
        API root, e.g. ``https://api.therapytips.org``. A trailing slash is
        ignored.
    session : aiohttp.ClientSession
        Session used for all requests.
    """

    def __init__(self, base_url: str, session: aiohttp.ClientSession) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session

    async def fetch_envelope(
        self,
        path: str,
        default_message: str,
        params: dict[str, str] | None = None,
    ) -> ApiResult:
        """GET ``path`` and decode the response envelope.

        Network failures, timeouts, undecodable bodies and JSON parse failures
        are reported as ``Err`` so that every failure mode reaches the caller
        through the same result type.
        """
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            async with self.session.get(
                url, params=params, headers=JSON_HEADERS
            ) as response:
                text = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as exc:
            return Err(f"{default_message}: {exc or type(exc).__name__}")
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            return Err(f"{default_message}: invalid JSON response from {url}")
        return decode_envelope(payload, default_message)

    async def _get(
        self,
        path: str,
        default_message: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        result = await self.fetch_envelope(path, default_message, params)
        try:
            return result.unwrap()
        except RemoteFetchError as exc:
            exc.context.update({"path": path, "params": params or {}})
            raise

    async def get_articles(self, params: SearchParams | None = None) -> list[Article]:
        """Fetch a filtered, paginated article list."""
        query = params.to_query() if params else None
        data = await self._get("/articles", "Failed to fetch articles", query)
        return [Article.from_dict(item) for item in data or []]

    async def get_article(self, slug: str) -> Article:
        """Fetch one article by slug."""
        data = await self._get(f"/articles/slug/{slug}", "Failed to fetch article")
        return Article.from_dict(data or {})

    async def get_author(self, author_id: int) -> Author:
        """Fetch one author by id."""
        data = await self._get(f"/authors/{author_id}", "Failed to fetch author")
        return Author.from_dict(data or {})

    async def get_personality_test_questions(
        self, article_id: int
    ) -> PersonalityTestQuestions:
        """Fetch the question set of the personality test ``article_id``."""
        data = await self._get(
            f"/personality-test-questions/{article_id}",
            "Failed to fetch personality test questions",
        )
        return PersonalityTestQuestions.from_dict(data or {})

    async def get_all_personality_test_questions(
        self,
    ) -> list[PersonalityTestQuestions]:
        """Fetch every stored personality-test question set."""
        data = await self._get(
            "/personality-test-questions",
            "Failed to fetch all personality test questions",
        )
        return [PersonalityTestQuestions.from_dict(item) for item in data or []]
