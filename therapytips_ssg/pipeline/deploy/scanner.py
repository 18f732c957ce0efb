"""Enumerate a build directory and map its files onto remote paths."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from pathlib import Path

from therapytips_ssg.exceptions import FilesystemError


@dataclass(frozen=True)
class FileTransfer:
    """One file to upload: local path, remote path and size in bytes."""

    local: Path
    remote: str
    size: int


def collect_files(build_dir: Path) -> list[Path]:
    """Return every regular file below ``build_dir``, depth first.

    Entries of each directory are visited in name order; a subdirectory's
    files are listed at the position of the subdirectory.
    """
    files: list[Path] = []
    for entry in sorted(Path(build_dir).iterdir()):
        if entry.is_dir():
            files.extend(collect_files(entry))
        elif entry.is_file():
            files.append(entry)
    return files


def remote_path_for(local: Path, build_dir: Path, remote_root: str) -> str:
    """Map ``local`` under ``build_dir`` onto ``remote_root``.

    >>> remote_path_for(Path("b/prod/articles/x.html"), Path("b/prod"), "/")
    '/articles/x.html'
    >>> remote_path_for(Path("b/prod/index.html"), Path("b/prod"), "/public_html")
    '/public_html/index.html'
    """
    relative = Path(local).resolve().relative_to(Path(build_dir).resolve())
    return posixpath.normpath(posixpath.join(remote_root, relative.as_posix()))


def plan_transfers(build_dir: Path, remote_root: str) -> list[FileTransfer]:
    """Return the transfers that upload ``build_dir`` into ``remote_root``.

    Raises
    ------
    FilesystemError
        If ``build_dir`` does not exist or cannot be read.
    """
    build_dir = Path(build_dir)
    if not build_dir.is_dir():
        raise FilesystemError(
            f"Build directory not found: {build_dir}", context={"path": str(build_dir)}
        )
    try:
        return [
            FileTransfer(
                local=path,
                remote=remote_path_for(path, build_dir, remote_root),
                size=path.stat().st_size,
            )
            for path in collect_files(build_dir)
        ]
    except OSError as exc:
        raise FilesystemError(
            f"Failed to scan {build_dir}: {exc}", context={"path": str(build_dir)}
        ) from exc


def human_size(size: int) -> str:
    """Format ``size`` bytes as ``B``, ``KB`` or ``MB`` with two decimals.

    >>> human_size(512), human_size(2048), human_size(3 * 1024 * 1024)
    ('512 B', '2.00 KB', '3.00 MB')
    """
    if size > 1024 * 1024:
        return f"{size / 1024 / 1024:.2f} MB"
    if size > 1024:
        return f"{size / 1024:.2f} KB"
    return f"{size} B"
