"""Tests for the template helper functions."""

import pytest

from therapytips_ssg.pipeline.site_builder.formatting import (
    Duration,
    duration_to_minutes,
    markdown_to_sanitized_html,
    parse_iso_duration,
    read_duration_in_mins_from_words,
    views_in_k,
)


@pytest.mark.parametrize(
    "iso, expected",
    [
        ("PT1H2M3S", Duration(1, 2, 3)),
        ("PT15M", Duration(0, 15, 0)),
        ("PT45S", Duration(0, 0, 45)),
        ("", Duration(0, 0, 0)),
        (None, Duration(0, 0, 0)),
    ],
)
def test_parse_iso_duration(iso, expected):
    assert parse_iso_duration(iso) == expected


def test_duration_to_minutes_drops_seconds():
    assert duration_to_minutes("PT1H2M59S") == 62
    assert duration_to_minutes("bogus") == 0


@pytest.mark.parametrize(
    "views, expected",
    [("15234", "15.2K"), (1001, "1.0K"), ("1000", "1000"), ("12", "12"), (None, ""), ("n/a", "n/a")],
)
def test_views_in_k(views, expected):
    assert views_in_k(views) == expected


def test_read_duration_rounds_up():
    assert read_duration_in_mins_from_words("word " * 201) == 2
    assert read_duration_in_mins_from_words("a b c") == 1
    assert read_duration_in_mins_from_words("a b c d", words_per_minute=2) == 2


@pytest.mark.parametrize("text", [None, "", "   "])
def test_read_duration_is_at_least_one_minute(text):
    assert read_duration_in_mins_from_words(text) == 1


def test_markdown_is_converted_and_scripts_removed():
    html = markdown_to_sanitized_html("# Title\n\n<script>alert(1)</script>\n\n| a | b |\n|---|---|\n| 1 | 2 |")
    assert "<h1>Title</h1>" in html
    assert "<script" not in html
    assert "alert(1)" not in html
    assert "<table>" in html


def test_markdown_keeps_harmless_inline_html():
    html = markdown_to_sanitized_html(
        'Stay <em>calm</em>, read <a href="/advice/sleep.html">this</a>.'
    )
    assert "<em>calm</em>" in html
    assert 'href="/advice/sleep.html"' in html
    assert "&lt;em&gt;" not in html


def test_markdown_strips_event_handlers_and_script_urls():
    html = markdown_to_sanitized_html(
        '<img src="x.png" alt="x" onerror="alert(1)"> <a href="javascript:alert(1)">go</a>'
    )
    assert "onerror" not in html
    assert "javascript:" not in html
    assert 'src="x.png"' in html


@pytest.mark.parametrize("text", [None, "", "   \n\t "])
def test_markdown_blank_input_is_empty(text):
    assert markdown_to_sanitized_html(text) == ""
