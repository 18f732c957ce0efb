"""Command-line entrypoint for uploading a build over FTP/FTPS.

Uploads ``builds/{env}`` to the remote host configured by the ``FTP_*``
settings of that environment's dotenv file. The exit status is 0 on success
or after a dry run and 1 on an invalid environment, a missing build
directory, missing FTP settings or a failed transfer.

Examples
--------
>>> # In shell
>>> # ssg-upload stage --dry-run
>>> # ssg-upload prod --verbose
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console

from therapytips_ssg import config as _config
from therapytips_ssg.env_loader import env_file_for, load_environ
from therapytips_ssg.exceptions import AppError, ConfigurationError
from therapytips_ssg.logging_setup import configure_logging, file_logs_enabled

from .config import FtpConfig
from .scanner import plan_transfers
from .shipper import FtpFactory, FtpShipper, default_ftp_factory, dry_run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the upload tool."""
    parser = argparse.ArgumentParser(
        prog="ssg-upload",
        description="Upload a TherapyTips build to the remote host over FTP.",
        epilog=(
            "Environment variables (in .env.development, .env.staging, "
            ".env.production): FTP_HOST, FTP_PORT (default 21), FTP_USER, "
            "FTP_PASSWORD, FTP_REMOTE_PATH (default /), FTP_SECURE (true for FTPS)."
        ),
    )
    parser.add_argument(
        "environment",
        nargs="?",
        default=_config.DEFAULT_UPLOAD_ENVIRONMENT,
        help="Target environment (" + ", ".join(_config.VALID_ENVIRONMENTS) + "); defaults to prod.",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Show what would be uploaded without uploading.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every transferred file."
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser


def main(
    argv: Sequence[str] | None = None,
    console: Console | None = None,
    ftp_factory: FtpFactory = default_ftp_factory,
) -> int:
    """Parse arguments, upload (or preview) the build and return an exit code."""
    args = build_parser().parse_args(argv)
    console = console or Console()
    environment = args.environment
    if environment not in _config.VALID_ENVIRONMENTS:
        configure_logging(args.log_level, enable_file=False)
        logger.error(
            "Invalid environment: %s. Valid environments: %s",
            environment,
            ", ".join(_config.VALID_ENVIRONMENTS),
        )
        return 1

    level = "DEBUG" if args.verbose and args.log_level.upper() == "INFO" else args.log_level
    configure_logging(level, _config.LOG_FILENAME_UPLOAD_SITE, file_logs_enabled())
    build_dir = _config.BUILDS_DIR / environment
    logger.info("Target environment: %s (%s)", environment.upper(), build_dir)

    try:
        if not build_dir.is_dir():
            raise ConfigurationError(
                f"Build directory not found: {build_dir}. "
                f"Run ssg-build --env={environment} first.",
                context={"build_dir": str(build_dir)},
            )
        env_file = env_file_for(environment)
        ftp_config = FtpConfig.from_env(load_environ(environment), source=env_file)
        logger.debug("FTP configuration: %s", ftp_config.describe())

        transfers = plan_transfers(build_dir, ftp_config.remote_path)
        logger.info("Files found: %d", len(transfers))
        if args.dry_run:
            dry_run(transfers, console)
            return 0

        shipper = FtpShipper(
            ftp_config, verbose=args.verbose, console=console, ftp_factory=ftp_factory
        )
        uploaded = shipper.upload(transfers)
    except AppError as exc:
        logger.error("Upload failed: %s", exc)
        return 1
    except Exception:
        logger.exception("Upload failed with an unexpected error")
        return 1

    logger.info(
        "Uploaded %d files for %s to %s on %s",
        uploaded,
        environment.upper(),
        ftp_config.remote_path,
        ftp_config.host,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
