"""The program launchers expose the CLI entrypoints."""

import runpy

import pytest

from therapytips_ssg import program1_build_site, program2_upload_site
from therapytips_ssg.pipeline.deploy import cli as upload_cli
from therapytips_ssg.pipeline.site_builder import cli as build_cli


def test_launchers_point_at_cli_main():
    assert program1_build_site.main is build_cli.main
    assert program2_upload_site.main is upload_cli.main


def test_program2_as_script_exits_with_main_status(monkeypatch):
    monkeypatch.setattr("sys.argv", ["program2_upload_site", "bogus"])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("therapytips_ssg.program2_upload_site", run_name="__main__")
    assert excinfo.value.code == 1
