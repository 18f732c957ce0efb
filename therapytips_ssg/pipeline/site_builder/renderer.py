"""Page rendering for the static site.

The renderer maps a ``SiteModel`` onto a fixed page plan, renders every page
with Jinja2 and writes it below ``builds/{env}``. Rendering and writing are
sequential: each page is written before the next one is rendered, so a
failure leaves the pages written so far in place.

Page plan
---------
- ``index.html`` and one listing page per content type, each fed with its
  own "latest" list and the shared trending, video and config data.
- ``book-publication.html``, a static informational page.
- ``{type}/{slug}.html`` detail pages for every aggregated detail article.

Example
-------
>>> # written = render_site(model, config)
>>> # written[0].name
>>> # 'index.html'
"""

from __future__ import annotations

import logging
import re
import shutil
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from therapytips_ssg.config import (
    CONTENT_TYPES,
    IMAGES_DIR,
    PAGE_EXTENSION,
    PHOTOS_DIR,
    STYLESHEET_PATH,
    TEMPLATES_DIR,
)
from therapytips_ssg.exceptions import FilesystemError, RenderError
from therapytips_ssg.fs_utils import reset_directory
from therapytips_ssg.pipeline.external_data import first_video_item

from .config import BuildConfig
from .data_aggregator import PERSONALITY_TEST_TYPE, DetailPageSource, SiteModel
from .formatting import TEMPLATE_HELPERS

logger = logging.getLogger(__name__)

# Listing pages: (content type, output file, template)
LISTING_PAGES: tuple[tuple[str, str, str], ...] = (
    ("articles", "articles.html", "articles-page.html"),
    ("interviews", "interviews.html", "interviews-page.html"),
    ("advice", "advice.html", "advice-page.html"),
    ("personality-tests", "personality-tests.html", "personalitytests-page.html"),
)
LANDING_TEMPLATE = "landing-page.html"
BOOK_TEMPLATE = "book-publication.html"
ARTICLE_TEMPLATE = "article-content-page.html"
PERSONALITY_TEST_TEMPLATE = "personalitytest-content-page.html"

PRE_BLOCK = re.compile(r"(<pre\b.*?</pre>)", re.S | re.I)


@dataclass(frozen=True)
class PagePlanEntry:
    """One page to render: template name, output-relative path and data."""

    template: str
    output: str
    data: dict[str, Any]


def context_key(content_type: str) -> str:
    """Template variable name of ``content_type`` (``personality-tests`` -> ``personality_tests``)."""
    return content_type.replace("-", "_")


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Create the Jinja2 environment with the template helpers as globals."""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.globals.update(TEMPLATE_HELPERS)
    env.globals["first_video_item"] = first_video_item
    return env


def shared_context(model: SiteModel, config: BuildConfig) -> dict[str, Any]:
    """Data every page receives."""
    return {
        "items": list(model.trending),
        "yt_data_list": list(model.extra_videos),
        "environment": config.environment,
        "config": config.template_view(),
        "build_time": model.build_time,
        "root_path": "",
    }


def detail_entry(
    content_type: str, source: DetailPageSource, model: SiteModel, config: BuildConfig
) -> PagePlanEntry:
    """Plan entry for the detail page of ``source.article`` under ``content_type``."""
    article = source.article
    template = (
        PERSONALITY_TEST_TEMPLATE
        if content_type == PERSONALITY_TEST_TYPE
        else ARTICLE_TEMPLATE
    )
    data = {
        **shared_context(model, config),
        "content_type": content_type,
        "article": article,
        "author": source.author,
        "questions": list(source.questions),
        "yt_data": model.section_videos.get("articles"),
        "base_url": config.base_url,
        "base_dir": config.base_dir,
        "root_path": "../",
    }
    return PagePlanEntry(
        template=template,
        output=f"{content_type}/{article.slug}{PAGE_EXTENSION}",
        data=data,
    )


def build_page_plan(model: SiteModel, config: BuildConfig) -> list[PagePlanEntry]:
    """Return the deterministic page plan of one build.

    Detail pages are keyed by the content type they were listed under, so
    ``articles`` entries land in ``articles/`` even if the API labels them
    differently. Articles without a slug are skipped with a warning.
    """
    shared = shared_context(model, config)
    plan = [
        PagePlanEntry(
            template=LANDING_TEMPLATE,
            output="index.html",
            data={
                **shared,
                "yt_data": model.section_videos.get("landing"),
                **{
                    context_key(content_type): list(model.featured.get(content_type, ()))
                    for content_type in CONTENT_TYPES
                },
            },
        )
    ]
    for content_type, output, template in LISTING_PAGES:
        plan.append(
            PagePlanEntry(
                template=template,
                output=output,
                data={
                    **shared,
                    "yt_data": model.section_videos.get(content_type),
                    context_key(content_type): list(model.latest.get(content_type, ())),
                },
            )
        )
    plan.append(PagePlanEntry(template=BOOK_TEMPLATE, output="book-publication.html", data=shared))

    for content_type in CONTENT_TYPES:
        for source in model.details.get(content_type, ()):
            if not source.article.slug:
                logger.warning(
                    "Skipping %s detail page without slug (id=%s)",
                    content_type,
                    source.article.id,
                )
                continue
            plan.append(detail_entry(content_type, source, model, config))
    return plan


def minify_html(html_content: str) -> str:
    r"""Normalize whitespace of rendered HTML.

    Removes comments and empty paragraphs and collapses indentation and
    blank lines. ``<pre>`` blocks are left untouched.

    Raises
    ------
    TypeError
        If input is not str.

    Examples
    --------
    >>> minify_html("<div>\n    <p></p>\n    <h1>Hi</h1>\n</div>\n")
    '<div>\n<h1>Hi</h1>\n</div>'
    """
    if not isinstance(html_content, str):
        raise TypeError("Input must be a string.")
    parts = PRE_BLOCK.split(html_content)
    for index in range(0, len(parts), 2):
        part = re.sub(r"<!--(?!\[if).*?-->", "", parts[index], flags=re.S)
        part = re.sub(r"<p>\s*</p>", "", part)
        part = re.sub(r"\s*\n\s*", "\n", part)
        parts[index] = re.sub(r"[ \t]{2,}", " ", part)
    return "".join(parts).strip()


def render_page(env: Environment, entry: PagePlanEntry, minify: bool = False) -> str:
    """Render one plan entry.

    Raises
    ------
    RenderError
        If the template is missing or fails while rendering.
    """
    try:
        html = env.get_template(entry.template).render(**entry.data)
    except Exception as exc:
        raise RenderError(
            entry.output, str(exc), context={"template": entry.template}
        ) from exc
    return minify_html(html) if minify else html


def write_page(output_dir: Path, relative: str, html_content: str) -> Path:
    """Write ``html_content`` to ``output_dir / relative``, creating parents."""
    target = output_dir / relative
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html_content, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(
            f"Failed to write {relative}: {exc}", context={"path": str(target)}
        ) from exc
    return target


def render_pages(
    env: Environment, plan: Iterable[PagePlanEntry], output_dir: Path, minify: bool
) -> list[Path]:
    """Render and write ``plan`` one page at a time."""
    written: list[Path] = []
    for entry in plan:
        html = render_page(env, entry, minify)
        written.append(write_page(output_dir, entry.output, html))
        logger.debug("%s rendered successfully", entry.output)
    return written


def copy_assets(
    output_dir: Path,
    copy_photos: bool,
    stylesheet: Path = STYLESHEET_PATH,
    images_dir: Path = IMAGES_DIR,
    photos_dir: Path = PHOTOS_DIR,
) -> None:
    """Copy the stylesheet, images and (optionally) photos into ``output_dir``.

    A missing photos tree is logged and skipped. A missing stylesheet is an
    error.
    """
    try:
        shutil.copyfile(stylesheet, output_dir / "style.css")
        if images_dir.is_dir():
            shutil.copytree(images_dir, output_dir / "assets" / "images", dirs_exist_ok=True)
        else:
            logger.warning("Images directory %s not found; skipping", images_dir)
        if copy_photos:
            if photos_dir.is_dir():
                shutil.copytree(photos_dir, output_dir / "photos", dirs_exist_ok=True)
                logger.info("Copied photos from %s", photos_dir)
            else:
                logger.warning("Photos directory %s not found; skipping", photos_dir)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to copy assets into {output_dir}: {exc}",
            context={"output_dir": str(output_dir)},
        ) from exc


def render_site(
    model: SiteModel,
    config: BuildConfig,
    templates_dir: Path | None = None,
    stylesheet: Path = STYLESHEET_PATH,
    images_dir: Path = IMAGES_DIR,
    photos_dir: Path = PHOTOS_DIR,
) -> list[Path]:
    """Wipe ``config.output_dir`` and write the full site into it.

    Parameters
    ----------
    model : SiteModel
        Aggregated data of this build.
    config : BuildConfig
        Settings of the environment being built.
    templates_dir : Path or None
        Template directory; defaults to ``TEMPLATES_DIR``.
    stylesheet, images_dir, photos_dir : Path
        Asset sources.

    Returns
    -------
    list of Path
        Written page files, in plan order.

    Raises
    ------
    RenderError
        If a page fails to render; later pages are not written.
    FilesystemError
        If the output directory cannot be reset or written.
    """
    plan = build_page_plan(model, config)
    env = create_environment(templates_dir)
    output_dir = reset_directory(config.output_dir, config.builds_dir)
    logger.info("Rendering %d pages into %s", len(plan), output_dir)
    written = render_pages(env, plan, output_dir, config.minify_assets)
    copy_assets(output_dir, config.copy_photos, stylesheet, images_dir, photos_dir)
    logger.info("Build for %s complete: %d pages", config.environment, len(written))
    return written


__all__ = [
    "PagePlanEntry",
    "build_page_plan",
    "copy_assets",
    "create_environment",
    "minify_html",
    "render_page",
    "render_site",
]
