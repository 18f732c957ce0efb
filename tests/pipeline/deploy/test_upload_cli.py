"""Tests for the ``ssg-upload`` command-line entrypoint."""

import io

import pytest
from rich.console import Console

from therapytips_ssg import config as app_config
from therapytips_ssg.pipeline.deploy import cli

FTP_SETTINGS = {"FTP_HOST": "ftp.example.org", "FTP_USER": "deploy", "FTP_PASSWORD": "pw"}


class RecordingFTP:
    def __init__(self, fail=False):
        self.stored = []
        self.fail = fail

    def connect(self, host, port):
        pass

    def login(self, user, password):
        pass

    def mkd(self, path):
        pass

    def storbinary(self, command, fh):
        if self.fail:
            raise OSError("connection reset")
        self.stored.append(command)

    def close(self):
        pass


@pytest.fixture
def builds(monkeypatch, tmp_path):
    root = tmp_path / "builds"
    (root / "stage").mkdir(parents=True)
    (root / "stage" / "index.html").write_text("<html></html>", encoding="utf-8")
    monkeypatch.setattr(app_config, "BUILDS_DIR", root)
    return root


def run(argv, ftp=None, settings=None, monkeypatch=None):
    out = io.StringIO()
    if monkeypatch is not None:
        monkeypatch.setattr(cli, "load_environ", lambda environment: dict(settings or {}))
    factory = (lambda secure: ftp) if ftp is not None else (lambda secure: pytest.fail("network used"))
    code = cli.main(argv, console=Console(file=out, width=200), ftp_factory=factory)
    return code, out.getvalue()


def test_invalid_environment(builds):
    code, _ = run(["bogus"])
    assert code == 1


def test_missing_build_directory(builds, monkeypatch):
    code, _ = run(["prod"], settings=FTP_SETTINGS, monkeypatch=monkeypatch)
    assert code == 1


def test_missing_ftp_settings(builds, monkeypatch):
    code, _ = run(["stage", "--dry-run"], settings={"FTP_HOST": "h"}, monkeypatch=monkeypatch)
    assert code == 1


def test_dry_run_lists_files_without_network(builds, monkeypatch):
    code, output = run(["stage", "-d"], settings=FTP_SETTINGS, monkeypatch=monkeypatch)
    assert code == 0
    assert "Total files: 1" in output
    assert "/index.html" in output


def test_upload_success(builds, monkeypatch):
    ftp = RecordingFTP()
    code, _ = run(["stage", "--verbose"], ftp=ftp, settings=FTP_SETTINGS, monkeypatch=monkeypatch)
    assert code == 0
    assert ftp.stored == ["STOR /index.html"]


def test_upload_failure_exits_nonzero(builds, monkeypatch):
    code, _ = run(["stage"], ftp=RecordingFTP(fail=True), settings=FTP_SETTINGS, monkeypatch=monkeypatch)
    assert code == 1
