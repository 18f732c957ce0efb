"""Tests for aggregate_site_data with a fake content client."""

import asyncio
from datetime import date

import pytest

from therapytips_ssg.exceptions import RemoteFetchError
from therapytips_ssg.pipeline.content_api import (
    Article,
    Author,
    ContentAPIClient,
    PersonalityTestQuestions,
)
from therapytips_ssg.pipeline.site_builder import data_aggregator as agg
from therapytips_ssg.pipeline.site_builder.config import BuildConfig

TODAY = date(2024, 3, 1)

LEGACY_HTML = (
    '<p><a href="https://therapytips.org/advice/a.html">Advice A</a>'
    "<small><em>321 views this month</em></small></p>"
)


def make_article(article_type, slug, **kwargs):
    return Article(title=slug.title(), slug=slug, content="Some words here.", article_type=article_type, **kwargs)


class FakeClient:
    def __init__(
        self,
        articles=None,
        questions=None,
        failing_authors=(),
        failing_slugs=(),
        failing_questions=(),
    ):
        self.articles = articles or {}
        self.questions = questions or {}
        self.failing_authors = set(failing_authors)
        self.failing_slugs = set(failing_slugs)
        self.failing_questions = set(failing_questions)
        self.queries = []
        self.author_lookups = []

    async def get_articles(self, params=None):
        self.queries.append(params)
        return list(self.articles.get(params.article_type, []))[: params.limit]

    async def get_article(self, slug):
        if slug in self.failing_slugs:
            raise RemoteFetchError("Article not found")
        return make_article("articles", slug)

    async def get_author(self, author_id):
        self.author_lookups.append(author_id)
        if author_id in self.failing_authors:
            raise RemoteFetchError("Author not found")
        return Author(name=f"Author {author_id}", id=author_id)

    async def get_personality_test_questions(self, article_id):
        if article_id in self.failing_questions:
            raise RemoteFetchError("Failed to fetch personality test questions")
        return PersonalityTestQuestions(
            article_id=article_id, questions_json=self.questions.get(article_id, {})
        )


class FakeResponse:
    def __init__(self, text):
        self._text = text

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    def __init__(self):
        self.urls = []

    def get(self, url, **kwargs):
        self.urls.append(url)
        return FakeResponse(LEGACY_HTML)


@pytest.fixture
def config(tmp_path):
    return BuildConfig.from_env(
        "dev", environ={"TRENDING_SOURCE": "legacy-html"}, builds_dir=tmp_path
    )


def test_latest_list_params_per_type():
    articles = agg.latest_list_params("articles", TODAY)
    assert (articles.limit, articles.date_from, articles.date_to) == (12, "2024-01-01", "2024-03-01")
    assert articles.sort is None
    interviews = agg.latest_list_params("interviews", TODAY)
    assert (interviews.limit, interviews.sort, interviews.date_from) == (12, "publication_date_desc", None)
    advice = agg.latest_list_params("advice", TODAY)
    assert advice.date_from == "2024-01-01"
    tests = agg.latest_list_params("personality-tests", TODAY)
    assert tests.to_query() == {"limit": "16", "article_type": "personality-tests"}


def test_detail_list_params():
    params = agg.detail_list_params("advice")
    assert (params.limit, params.sort) == (10, "publication_date_desc")


@pytest.mark.asyncio
async def test_aggregate_builds_complete_model(config):
    client = FakeClient(
        articles={
            "articles": [make_article("articles", "a1", author_id=1)],
            "advice": [make_article("advice", "ad1", author_id=2)],
            "interviews": [make_article("interviews", "i1")],
            "personality-tests": [make_article("personality-tests", "t1", id=77, author_id=3)],
        },
        questions={77: {"2": "Second", "1": "First"}},
    )
    session = FakeSession()
    model = await agg.aggregate_site_data(config, client, session, today=TODAY)

    assert set(model.latest) == {"articles", "advice", "interviews", "personality-tests"}
    assert [a.slug for a in model.latest["advice"]] == ["ad1"]
    assert len(model.featured["articles"]) == 4
    assert len(model.featured["personality-tests"]) == 2
    assert [i.title for i in model.trending] == ["Advice A"]
    # no YT_API_KEY: metadata is unavailable but the build continues
    assert set(model.section_videos) == {"landing", "articles", "interviews", "advice", "personality-tests"}
    assert all(v is None for v in model.section_videos.values())
    assert model.extra_videos == (None, None)

    test_page = model.details["personality-tests"][0]
    assert test_page.questions == ("First", "Second")
    assert test_page.author.name == "Author 3"
    assert model.details["interviews"][0].questions == ()
    assert model.build_time


@pytest.mark.asyncio
async def test_author_failure_falls_back_to_placeholder(config, caplog):
    client = FakeClient(
        articles={
            "articles": [
                make_article("articles", "named", author_id=9, author_name="Jane Roe"),
                make_article("articles", "anonymous", author_id=9),
                make_article("articles", "no-author"),
            ]
        },
        failing_authors={9},
    )
    model = await agg.aggregate_site_data(config, client, FakeSession(), today=TODAY)
    authors = {d.article.slug: d.author for d in model.details["articles"]}
    assert authors["named"] == Author(name="Jane Roe")
    assert authors["anonymous"].name == "Unknown Author"
    assert authors["no-author"].name == "Unknown Author"
    # articles without author_id are never looked up
    assert client.author_lookups == [9, 9]
    assert "Could not fetch author 9" in caplog.text


@pytest.mark.asyncio
async def test_featured_failure_is_fatal(config):
    client = FakeClient(failing_slugs={"codependency-scale"})
    with pytest.raises(RemoteFetchError, match="Article not found"):
        await agg.aggregate_site_data(config, client, FakeSession(), today=TODAY)


@pytest.mark.asyncio
async def test_empty_question_set_uses_bundled_questions(config):
    client = FakeClient(
        articles={
            "personality-tests": [
                make_article("personality-tests", "active-empathic-listening-scale", id=1)
            ]
        }
    )
    model = await agg.aggregate_site_data(config, client, FakeSession(), today=TODAY)
    questions = model.details["personality-tests"][0].questions
    assert questions[0] == "I am sensitive to what others are not saying."
    assert len(questions) == 9


@pytest.mark.asyncio
async def test_analytics_source_is_used_by_default(tmp_path, monkeypatch):
    cfg = BuildConfig.from_env("prod", environ={}, builds_dir=tmp_path)
    seen = []

    async def fake_analytics(key_file, property_id):
        seen.append(property_id)
        return []

    monkeypatch.setattr(agg, "fetch_analytics_trending", fake_analytics)
    session = FakeSession()
    model = await agg.aggregate_site_data(cfg, FakeClient(), session, today=TODAY)
    assert seen == ["272582946"]
    assert model.trending == ()
    assert session.urls == []


@pytest.mark.asyncio
async def test_question_fetch_failure_is_fatal(config):
    client = FakeClient(
        articles={
            "personality-tests": [make_article("personality-tests", "t1", id=5, author_id=1)]
        },
        failing_questions={5},
    )
    with pytest.raises(RemoteFetchError, match="personality test questions"):
        await agg.aggregate_site_data(config, client, FakeSession(), today=TODAY)


class TimingOutSession:
    def get(self, url, **kwargs):
        raise asyncio.TimeoutError()


@pytest.mark.asyncio
async def test_author_timeout_falls_back_to_placeholder():
    client = ContentAPIClient("https://api.example.test", TimingOutSession())
    article = make_article("articles", "slow", author_id=3, author_name="Jane")
    author = await agg.resolve_author(client, article)
    assert author == Author.placeholder("Jane")
