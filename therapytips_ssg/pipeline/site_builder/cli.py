"""Command-line entrypoint for building the static site.

The target environments come from ``--env``, then ``NODE_ENV`` or
``BUILD_ENV``, then heuristics on ``API_BASE_URL``; when none applies all
three environments are built in order. The exit status is 0 on success and
1 on an invalid environment or any build failure.

Examples
--------
>>> # In shell
>>> # ssg-build --env=prod --copy-photos
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

from therapytips_ssg.config import LOG_FILENAME_BUILD_SITE, VALID_ENVIRONMENTS
from therapytips_ssg.env_loader import load_environ
from therapytips_ssg.exceptions import AppError
from therapytips_ssg.logging_setup import configure_logging, file_logs_enabled

from .config import resolve_target_environments
from .runner import run_builds

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the build tool."""
    parser = argparse.ArgumentParser(
        prog="ssg-build",
        description="Build the TherapyTips static site for one or all environments.",
        epilog=(
            "Environment variables: NODE_ENV, BUILD_ENV, API_BASE_URL, "
            "COPY_PHOTOS, INCLUDE_PHOTOS, YT_API_KEY, TRENDING_SOURCE."
        ),
    )
    parser.add_argument(
        "--env",
        help="Environment to build (" + ", ".join(VALID_ENVIRONMENTS) + ").",
    )
    parser.add_argument(
        "-p",
        "--copy-photos",
        "--include-photos",
        dest="copy_photos",
        action="store_true",
        help="Copy the photos/ directory into the build output.",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, build the selected environments and return an exit code."""
    args = build_parser().parse_args(argv)
    environ = load_environ()
    try:
        targets = resolve_target_environments(args.env, environ)
    except AppError as exc:
        # Console only: an invalid invocation writes nothing to disk.
        configure_logging(args.log_level, enable_file=False)
        logger.error("%s", exc.message)
        return 1

    configure_logging(args.log_level, LOG_FILENAME_BUILD_SITE, file_logs_enabled())
    logger.info("Building environments: %s", ", ".join(targets))
    try:
        pages = asyncio.run(run_builds(targets, args.copy_photos))
    except AppError as exc:
        logger.error("Build failed: %s (context: %s)", exc, exc.context)
        return 1
    except Exception:
        logger.exception("Build failed with an unexpected error")
        return 1
    for environment, count in pages.items():
        logger.info("%s: %d pages written", environment, count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
