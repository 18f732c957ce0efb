"""Environment variable loading for build and upload settings.

Settings come from the process environment, the project ``.env`` file and the
environment-specific file (``.env.development``, ``.env.staging`` or
``.env.production``). Files are read with ``dotenv_values`` rather than
``load_dotenv`` so that building several environments in one process never
leaks one environment's file into the next. Values already set in the process
environment take precedence over both files.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values

from therapytips_ssg import config as _config

logger = logging.getLogger(__name__)


def env_file_for(environment: str) -> str:
    """Return the dotenv filename used for ``environment``."""
    return _config.ENV_FILES.get(environment, ".env")


def load_environ(
    environment: str | None = None,
    project_root: Path | None = None,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return the merged settings mapping for ``environment``.

    Parameters
    ----------
    environment : str or None
        ``dev``, ``stage`` or ``prod``; ``None`` reads only ``.env``.
    project_root : Path or None
        Directory holding the dotenv files. Defaults to ``PROJECT_ROOT``.
    base : Mapping or None
        Process environment to overlay; defaults to ``os.environ``.
    """
    root = Path(project_root) if project_root is not None else _config.PROJECT_ROOT
    merged: dict[str, str] = {}
    candidates = [root / ".env"]
    if environment is not None:
        candidates.append(root / env_file_for(environment))
    for path in candidates:
        if path.is_file():
            logger.debug("Loading settings from %s", path)
            merged.update({k: v for k, v in dotenv_values(path).items() if v is not None})
    merged.update(os.environ if base is None else base)
    return merged


def env_flag(environ: Mapping[str, str], name: str) -> bool:
    """Return True if ``name`` is set to the string ``true``."""
    return environ.get(name, "").strip().lower() == "true"
