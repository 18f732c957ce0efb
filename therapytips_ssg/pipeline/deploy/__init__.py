"""Deployment of a finished build to the remote host over FTP/FTPS."""

from .config import FtpConfig
from .scanner import FileTransfer, collect_files, human_size, plan_transfers
from .shipper import DryRunSummary, FtpShipper, dry_run

__all__ = [
    "DryRunSummary",
    "FileTransfer",
    "FtpConfig",
    "FtpShipper",
    "collect_files",
    "dry_run",
    "human_size",
    "plan_transfers",
]
