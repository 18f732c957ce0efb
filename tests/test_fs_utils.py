"""Tests for guarded removal of build output directories."""

import pytest

from therapytips_ssg.exceptions import FilesystemError
from therapytips_ssg.fs_utils import create_safe_path, reset_directory, safe_rmtree


def test_create_safe_path_accepts_child_of_builds_root(tmp_path):
    root = tmp_path / "builds"
    target = root / "dev"
    assert create_safe_path(target, root) == target.resolve()


@pytest.mark.parametrize("relative", ["", "..", "../other"])
def test_create_safe_path_rejects_root_and_outside(tmp_path, relative):
    root = tmp_path / "builds"
    root.mkdir()
    with pytest.raises(FilesystemError):
        create_safe_path(root / relative if relative else root, root)


def test_safe_rmtree_missing_directory_is_noop(tmp_path):
    safe_rmtree(tmp_path / "builds" / "dev", tmp_path / "builds")


def test_reset_directory_wipes_contents(tmp_path):
    root = tmp_path / "builds"
    out = root / "prod"
    (out / "articles").mkdir(parents=True)
    (out / "articles" / "stale.html").write_text("old", encoding="utf-8")
    result = reset_directory(out, root)
    assert result == out
    assert out.is_dir()
    assert list(out.iterdir()) == []


def test_reset_directory_refuses_outside_root(tmp_path):
    outside = tmp_path / "src"
    outside.mkdir()
    (outside / "keep.py").write_text("x", encoding="utf-8")
    with pytest.raises(FilesystemError):
        reset_directory(outside, tmp_path / "builds")
    assert (outside / "keep.py").exists()
