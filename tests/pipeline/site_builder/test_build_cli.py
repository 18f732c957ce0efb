"""Tests for the ``ssg-build`` command-line entrypoint."""

import pytest

from therapytips_ssg import config as app_config
from therapytips_ssg.exceptions import RenderError
from therapytips_ssg.pipeline.site_builder import cli


@pytest.fixture
def isolated_dirs(monkeypatch, tmp_path):
    builds = tmp_path / "builds"
    logs = tmp_path / "logs"
    monkeypatch.setattr(app_config, "BUILDS_DIR", builds)
    monkeypatch.setattr(app_config, "LOG_DIR", logs)
    return builds, logs


def test_invalid_env_exits_nonzero_without_writing(isolated_dirs, monkeypatch):
    called = []

    async def fake_run_builds(*args, **kwargs):
        called.append(args)
        return {}

    monkeypatch.setattr(cli, "run_builds", fake_run_builds)
    assert cli.main(["--env=bogus"]) == 1
    builds, logs = isolated_dirs
    assert not builds.exists()
    assert not logs.exists()
    assert called == []


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--help"])
    assert excinfo.value.code == 0
    assert "--copy-photos" in capsys.readouterr().out


def test_explicit_env_and_photos_flag_are_forwarded(monkeypatch):
    seen = {}

    async def fake_run_builds(targets, copy_photos_flag=False):
        seen["targets"] = targets
        seen["copy_photos"] = copy_photos_flag
        return {"stage": 9}

    monkeypatch.setattr(cli, "run_builds", fake_run_builds)
    assert cli.main(["--env", "stage", "--include-photos"]) == 0
    assert seen == {"targets": ["stage"], "copy_photos": True}


def test_node_env_selects_target(monkeypatch):
    seen = {}

    async def fake_run_builds(targets, copy_photos_flag=False):
        seen["targets"] = targets
        return {}

    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setattr(cli, "run_builds", fake_run_builds)
    assert cli.main([]) == 0
    assert seen["targets"] == ["prod"]


def test_build_failure_exits_nonzero(monkeypatch):
    async def failing_run_builds(targets, copy_photos_flag=False):
        raise RenderError("articles.html", "boom")

    monkeypatch.setattr(cli, "run_builds", failing_run_builds)
    assert cli.main(["--env=dev"]) == 1


def test_unexpected_error_exits_nonzero(monkeypatch):
    async def broken_run_builds(targets, copy_photos_flag=False):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(cli, "run_builds", broken_run_builds)
    assert cli.main(["--env=dev"]) == 1
