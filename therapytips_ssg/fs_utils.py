"""Filesystem utilities to validate and safely remove build output.

Output directories are wiped before every build. Removal is only permitted
for directories strictly inside the builds root so that a misconfigured
output path can never delete project sources or anything outside the
project.

Functions
---------
- ``create_safe_path``: Validate and stamp a path as safe for removal.
- ``safe_rmtree``: Remove a validated directory tree.
- ``reset_directory``: Remove and recreate an output directory.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import NewType

from therapytips_ssg import config as _config
from therapytips_ssg.exceptions import FilesystemError

logger = logging.getLogger(__name__)

# Static marker for paths that passed validation.
_ValidatedPath = NewType("_ValidatedPath", Path)


def create_safe_path(
    path_to_validate: Path, builds_root: Path | None = None
) -> _ValidatedPath:
    r"""Validate and stamp a path as safe for destructive operations.

    Parameters
    ----------
    path_to_validate : Path
        The directory to be removed.
    builds_root : Path or None
        Root under which removal is allowed. Defaults to ``BUILDS_DIR``.

    Returns
    -------
    _ValidatedPath
        The resolved path, stamped for use by ``safe_rmtree``.

    Raises
    ------
    FilesystemError
        If the path is the builds root itself or lies outside it.

    Examples
    --------
    >>> from pathlib import Path
    >>> create_safe_path(Path("/"))  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    FilesystemError: FILESYSTEM_ERROR: Refusing to remove '/': not inside the builds directory.
    """
    root = Path(builds_root if builds_root is not None else _config.BUILDS_DIR).resolve()
    target_path = Path(path_to_validate).resolve()

    if target_path == root or not target_path.is_relative_to(root):
        raise FilesystemError(
            f"Refusing to remove '{target_path}': not inside the builds directory.",
            context={"path": str(target_path), "builds_root": str(root)},
        )
    return _ValidatedPath(target_path)


def safe_rmtree(path: _ValidatedPath | Path, builds_root: Path | None = None) -> None:
    """Remove a directory tree after validating it with ``create_safe_path``.

    A missing directory is a no-op.

    Raises
    ------
    FilesystemError
        If validation fails or the tree cannot be removed.
    """
    validated = create_safe_path(Path(path), builds_root)
    if not validated.exists():
        logger.debug("Path '%s' does not exist; nothing to remove.", validated)
        return
    logger.info("Removing directory: %s", validated)
    try:
        shutil.rmtree(validated)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to remove '{validated}': {exc}", context={"path": str(validated)}
        ) from exc


def reset_directory(path: Path, builds_root: Path | None = None) -> Path:
    """Delete ``path`` (guarded) and create it again, empty."""
    safe_rmtree(path, builds_root)
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to create '{path}': {exc}", context={"path": str(path)}
        ) from exc
    return Path(path)


__all__ = ["create_safe_path", "reset_directory", "safe_rmtree"]
