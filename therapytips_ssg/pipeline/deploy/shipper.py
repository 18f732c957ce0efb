"""Sequential FTP/FTPS upload of a planned build.

``FtpShipper`` connects once, creates missing remote directories and uploads
each file in turn. The first failing transfer aborts the run with a
``TransferError``; there is no resume. ``dry_run`` prints the same plan
without touching the network.
"""

from __future__ import annotations

import ftplib
import logging
import posixpath
from collections.abc import Callable, Sequence
from typing import NamedTuple

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
)

from therapytips_ssg.exceptions import TransferError

from .config import FtpConfig
from .scanner import FileTransfer, human_size

logger = logging.getLogger(__name__)

FtpFactory = Callable[[bool], ftplib.FTP]


class DryRunSummary(NamedTuple):
    file_count: int
    total_size: int


def default_ftp_factory(secure: bool) -> ftplib.FTP:
    """Return an unconnected ``FTP_TLS`` or plain ``FTP`` client."""
    return ftplib.FTP_TLS() if secure else ftplib.FTP()


def dry_run(transfers: Sequence[FileTransfer], console: Console) -> DryRunSummary:
    """Print what an upload of ``transfers`` would do.

    Returns
    -------
    DryRunSummary
        Number of files and their total size in bytes.
    """
    console.print("DRY RUN - files that would be uploaded:", style="bold")
    for index, transfer in enumerate(transfers, start=1):
        console.print(
            f"  [{index}] {transfer.local} → {transfer.remote} ({human_size(transfer.size)})",
            markup=False,
            highlight=False,
        )
    summary = DryRunSummary(len(transfers), sum(t.size for t in transfers))
    console.print(f"Total files: {summary.file_count}", markup=False)
    console.print(f"Total size: {human_size(summary.total_size)}", markup=False)
    console.print("Dry run completed (no files were uploaded)", style="green")
    return summary


class FtpShipper:
    """Upload planned transfers to the host described by an ``FtpConfig``.

    Parameters
    ----------
    config : FtpConfig
        Connection settings.
    verbose : bool, optional
        Log every file with its progress percentage instead of drawing a
        progress bar.
    console : Console or None, optional
        Console the progress bar is drawn on.
    ftp_factory : callable, optional
        ``factory(secure) -> ftplib.FTP``; replaced in tests.
    """

    def __init__(
        self,
        config: FtpConfig,
        verbose: bool = False,
        console: Console | None = None,
        ftp_factory: FtpFactory = default_ftp_factory,
    ) -> None:
        self.config = config
        self.verbose = verbose
        self.console = console or Console()
        self.ftp_factory = ftp_factory
        self._known_dirs: set[str] = {"/", "", "."}

    def connect(self) -> ftplib.FTP:
        """Open and authenticate the control connection.

        Raises
        ------
        TransferError
            If the connection or login fails.
        """
        cfg = self.config
        ftp = self.ftp_factory(cfg.secure)
        try:
            ftp.connect(cfg.host, cfg.port)
            ftp.login(cfg.user, cfg.password)
            if cfg.secure:
                ftp.prot_p()
        except ftplib.all_errors as exc:
            ftp.close()
            raise TransferError(
                f"Could not connect to {cfg.host}:{cfg.port}: {exc}",
                context={"host": cfg.host, "port": cfg.port},
            ) from exc
        logger.info("Connected to FTP server %s:%s", cfg.host, cfg.port)
        return ftp

    def ensure_dir(self, ftp: ftplib.FTP, remote_dir: str) -> None:
        """Create ``remote_dir`` and any missing parents."""
        if remote_dir in self._known_dirs:
            return
        parent = posixpath.dirname(remote_dir)
        if parent != remote_dir:
            self.ensure_dir(ftp, parent)
        try:
            ftp.mkd(remote_dir)
            logger.debug("Created remote directory %s", remote_dir)
        except ftplib.error_perm:
            # 550: directory already exists
            pass
        except ftplib.all_errors as exc:
            raise TransferError(
                f"Failed to create remote directory {remote_dir}: {exc}",
                context={"remote": remote_dir},
            ) from exc
        self._known_dirs.add(remote_dir)

    def _upload_one(self, ftp: ftplib.FTP, transfer: FileTransfer) -> None:
        self.ensure_dir(ftp, posixpath.dirname(transfer.remote))
        try:
            with transfer.local.open("rb") as fh:
                ftp.storbinary(f"STOR {transfer.remote}", fh)
        except (OSError, *ftplib.all_errors) as exc:
            raise TransferError(
                f"Failed to upload {transfer.local} to {transfer.remote}: {exc}",
                context={"local": str(transfer.local), "remote": transfer.remote},
            ) from exc

    def upload(self, transfers: Sequence[FileTransfer]) -> int:
        """Upload ``transfers`` in order and return the number uploaded.

        Raises
        ------
        TransferError
            On the first failed connection, directory or file transfer.
        """
        ftp = self.connect()
        total = len(transfers)
        try:
            if self.config.remote_path != "/":
                logger.info("Ensuring remote directory %s", self.config.remote_path)
                self.ensure_dir(ftp, self.config.remote_path.rstrip("/") or "/")
            if self.verbose:
                for count, transfer in enumerate(transfers, start=1):
                    logger.info(
                        "[%d%%] Uploading (%d/%d): %s -> %s",
                        round(count / total * 100),
                        count,
                        total,
                        transfer.local,
                        transfer.remote,
                    )
                    self._upload_one(ftp, transfer)
            else:
                with Progress(
                    TextColumn("Uploading files..."),
                    BarColumn(),
                    TaskProgressColumn(),
                    MofNCompleteColumn(),
                    console=self.console,
                ) as progress:
                    task = progress.add_task("upload", total=total)
                    for transfer in transfers:
                        self._upload_one(ftp, transfer)
                        progress.advance(task)
        finally:
            ftp.close()
        logger.info("All files uploaded successfully (%d)", total)
        return total


__all__ = ["DryRunSummary", "FtpShipper", "default_ftp_factory", "dry_run"]
