"""Headless build runner.

Builds one or more environments strictly one after another. Each build opens
its own HTTP session, aggregates the site data and renders it; nothing is
shared between builds.

Usage Examples
--------------
Build production programmatically::

    import asyncio
    from therapytips_ssg.pipeline.site_builder.runner import run_builds

    asyncio.run(run_builds(["prod"]))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import aiohttp

from therapytips_ssg.env_loader import load_environ
from therapytips_ssg.pipeline.content_api import ContentAPIClient

from .config import BuildConfig
from .data_aggregator import aggregate_site_data
from .renderer import render_site

logger = logging.getLogger(__name__)


async def build_environment(
    config: BuildConfig,
    session_factory: Callable[[], aiohttp.ClientSession] = aiohttp.ClientSession,
) -> list[Path]:
    """Aggregate and render the site for ``config.environment``.

    All fetches complete before the output directory is touched, so a failed
    fetch leaves the previous build in place.

    Returns
    -------
    list of Path
        Written page files.
    """
    logger.info("Building %s site", config.environment)
    async with session_factory() as session:
        client = ContentAPIClient(config.api_base_url, session)
        model = await aggregate_site_data(config, client, session)
    return render_site(model, config)


async def run_builds(
    environments: Sequence[str],
    copy_photos_flag: bool = False,
    environ: Mapping[str, str] | None = None,
    builds_dir: Path | None = None,
    session_factory: Callable[[], aiohttp.ClientSession] = aiohttp.ClientSession,
) -> dict[str, int]:
    """Build every environment in ``environments`` sequentially.

    Each environment reads its own dotenv file on top of ``environ`` (the
    process environment when ``None``). The first failing build stops the
    run and its exception propagates.

    Returns
    -------
    dict
        Number of pages written per environment.
    """
    pages: dict[str, int] = {}
    for environment in environments:
        settings = load_environ(environment, base=environ)
        config = BuildConfig.from_env(
            environment, copy_photos_flag, settings, builds_dir=builds_dir
        )
        written = await build_environment(config, session_factory)
        pages[environment] = len(written)
    return pages


__all__ = ["build_environment", "run_builds"]
