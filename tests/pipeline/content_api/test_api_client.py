"""Tests for ContentAPIClient using a fake aiohttp session."""

import asyncio
import json

import aiohttp
import pytest

from therapytips_ssg.exceptions import RemoteFetchError
from therapytips_ssg.pipeline.content_api import ContentAPIClient, SearchParams

BASE = "https://api.example.test"


class FakeResponse:
    def __init__(self, text: str, status: int = 200):
        self.status = status
        self._text = text

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def get(self, url, params=None, headers=None):
        self.calls.append({"url": url, "params": params, "headers": headers})
        value = self.routes.get(url)
        if isinstance(value, Exception):
            raise value
        if value is None:
            return FakeResponse(json.dumps({"success": False, "message": "Not found"}), 404)
        return FakeResponse(value if isinstance(value, str) else json.dumps(value))


def ok(data):
    return {"success": True, "data": data}


@pytest.mark.asyncio
async def test_get_articles_sends_only_set_filters():
    session = FakeSession(
        {f"{BASE}/articles": ok([{"title": "A", "slug": "a", "article_type": "advice"}])}
    )
    client = ContentAPIClient(BASE + "/", session)
    articles = await client.get_articles(SearchParams(article_type="advice", limit=12))
    assert [a.slug for a in articles] == ["a"]
    call = session.calls[0]
    assert call["params"] == {"article_type": "advice", "limit": "12"}
    assert call["headers"] == {"Content-Type": "application/json"}


@pytest.mark.asyncio
async def test_endpoints_paths():
    session = FakeSession(
        {
            f"{BASE}/articles/slug/hello": ok({"title": "Hello", "slug": "hello"}),
            f"{BASE}/authors/5": ok({"id": 5, "name": "Ann"}),
            f"{BASE}/personality-test-questions/9": ok(
                {"article_id": 9, "questions_json": {"1": "Q1"}}
            ),
            f"{BASE}/personality-test-questions": ok(
                [{"article_id": 9, "questions_json": {"1": "Q1"}}]
            ),
        }
    )
    client = ContentAPIClient(BASE, session)
    assert (await client.get_article("hello")).title == "Hello"
    assert (await client.get_author(5)).name == "Ann"
    assert (await client.get_personality_test_questions(9)).ordered_questions == ["Q1"]
    assert len(await client.get_all_personality_test_questions()) == 1


@pytest.mark.asyncio
async def test_envelope_failure_raises_with_server_message():
    session = FakeSession(
        {f"{BASE}/authors/1": {"success": False, "message": "Author not found"}}
    )
    client = ContentAPIClient(BASE, session)
    with pytest.raises(RemoteFetchError) as excinfo:
        await client.get_author(1)
    assert excinfo.value.message == "Author not found"
    assert excinfo.value.context["path"] == "/authors/1"


@pytest.mark.asyncio
async def test_network_error_becomes_remote_fetch_error():
    session = FakeSession({f"{BASE}/articles": aiohttp.ClientError("connection refused")})
    client = ContentAPIClient(BASE, session)
    with pytest.raises(RemoteFetchError, match="Failed to fetch articles"):
        await client.get_articles()


@pytest.mark.asyncio
async def test_invalid_json_becomes_remote_fetch_error():
    session = FakeSession({f"{BASE}/articles/slug/x": "<html>oops</html>"})
    client = ContentAPIClient(BASE, session)
    with pytest.raises(RemoteFetchError, match="invalid JSON"):
        await client.get_article("x")


@pytest.mark.asyncio
async def test_timeout_becomes_remote_fetch_error():
    session = FakeSession({f"{BASE}/authors/3": asyncio.TimeoutError()})
    client = ContentAPIClient(BASE, session)
    with pytest.raises(RemoteFetchError, match="Failed to fetch author: TimeoutError"):
        await client.get_author(3)


@pytest.mark.asyncio
async def test_undecodable_body_becomes_remote_fetch_error():
    class BadCharsetResponse(FakeResponse):
        async def text(self):
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

    session = FakeSession({})
    session.get = lambda url, params=None, headers=None: BadCharsetResponse("")
    client = ContentAPIClient(BASE, session)
    with pytest.raises(RemoteFetchError, match="Failed to fetch articles"):
        await client.get_articles()
