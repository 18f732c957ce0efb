"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Keeps process-level build settings from leaking into tests.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

BUILD_SETTINGS = (
    "NODE_ENV",
    "BUILD_ENV",
    "API_BASE_URL",
    "COPY_PHOTOS",
    "INCLUDE_PHOTOS",
    "TRENDING_SOURCE",
    "FTP_HOST",
    "FTP_USER",
    "FTP_PASSWORD",
    "FTP_PORT",
    "FTP_REMOTE_PATH",
    "FTP_SECURE",
)


@pytest.fixture(autouse=True)
def _clean_build_settings(monkeypatch):
    """Unset build and upload settings inherited from the shell."""
    for name in BUILD_SETTINGS:
        monkeypatch.delenv(name, raising=False)
