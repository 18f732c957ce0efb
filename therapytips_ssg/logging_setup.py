"""Logging configuration shared by the build and upload command-line tools."""

from __future__ import annotations

import logging
import os

from therapytips_ssg.config import LOG_DIR, LOG_FORMAT


def file_logs_enabled() -> bool:
    """Return False when ``DISABLE_FILE_LOGS`` is set (tests and CI)."""
    return not bool(os.environ.get("DISABLE_FILE_LOGS"))


def configure_logging(
    level: str = "INFO", log_filename: str | None = None, enable_file: bool = True
) -> None:
    r"""Configure the root logger for a CLI run.

    A console handler is always installed. When ``enable_file`` is true and a
    ``log_filename`` is given, a file handler appending to
    ``LOG_DIR / log_filename`` is added as well. Existing root handlers are
    replaced, so calling this twice does not duplicate output.

    Parameters
    ----------
    level : str, optional
        Level name such as ``"DEBUG"`` or ``"INFO"``. Unknown names fall back
        to ``INFO``.
    log_filename : str or None, optional
        File name inside ``LOG_DIR``.
    enable_file : bool, optional
        Whether to add the file handler.

    Examples
    --------
    >>> configure_logging("DEBUG", enable_file=False)
    >>> logging.getLogger().level == logging.DEBUG
    True
    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    file_error: OSError | None = None
    if enable_file and log_filename:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(0, logging.FileHandler(LOG_DIR / log_filename, mode="a"))
        except OSError as exc:
            file_error = exc
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
    if file_error is not None:
        logging.getLogger(__name__).warning(
            "File logging disabled: %s", file_error
        )
