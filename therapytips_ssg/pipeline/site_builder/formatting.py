"""Formatting helpers exposed to the page templates.

All helpers are pure functions of their input. They are registered as Jinja2
globals by the renderer and can be called directly from tests.
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple

import markdown2
import nh3

from therapytips_ssg.config import WORDS_PER_MINUTE

ISO_DURATION_PATTERN = re.compile(r"PT(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?")


class Duration(NamedTuple):
    hours: int
    minutes: int
    seconds: int


def parse_iso_duration(iso: str | None) -> Duration:
    """Parse a ``PT#H#M#S`` duration; unmatched input is zero.

    >>> parse_iso_duration("PT1H2M3S")
    Duration(hours=1, minutes=2, seconds=3)
    >>> parse_iso_duration("garbage")
    Duration(hours=0, minutes=0, seconds=0)
    """
    match = ISO_DURATION_PATTERN.search(iso or "")
    if not match:
        return Duration(0, 0, 0)
    hours, minutes, seconds = (int(part or 0) for part in match.groups())
    return Duration(hours, minutes, seconds)


def duration_to_minutes(duration: str | None) -> int:
    """Whole minutes of an ISO-8601 video duration (seconds are dropped)."""
    parsed = parse_iso_duration(duration)
    return parsed.hours * 60 + parsed.minutes


def views_in_k(views: str | int | None) -> str:
    """Format a view count, abbreviating values above 1000.

    >>> views_in_k("15234")
    '15.2K'
    >>> views_in_k("999")
    '999'
    """
    try:
        count = int(views)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return str(views or "")
    if count > 1000:
        return f"{count / 1000:.1f}K"
    return str(views)


def read_duration_in_mins_from_words(
    paragraph: str | None, words_per_minute: int = WORDS_PER_MINUTE
) -> int:
    """Estimated reading time in minutes, rounded up; never below one.

    >>> read_duration_in_mins_from_words("")
    1
    """
    word_count = max(1, len((paragraph or "").split()))
    return math.ceil(word_count / words_per_minute)


def markdown_to_sanitized_html(markdown_text: str | None) -> str:
    """Convert article Markdown to HTML and sanitize the result.

    Harmless inline HTML in the source such as ``<em>`` or links is kept;
    dangerous markup such as scripts or ``javascript:`` URLs is stripped by
    nh3. Blank input yields an empty string.
    """
    if not markdown_text or not markdown_text.strip():
        return ""
    html = markdown2.markdown(markdown_text, extras=["tables", "fenced-code-blocks"])
    return nh3.clean(html).strip()


TEMPLATE_HELPERS = {
    "duration_to_minutes": duration_to_minutes,
    "views_in_k": views_in_k,
    "read_duration_in_mins_from_words": read_duration_in_mins_from_words,
    "markdown_to_sanitized_html": markdown_to_sanitized_html,
}
