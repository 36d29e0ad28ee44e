from __future__ import annotations

import os

import pytest

from fivem_util.common.errors import ResourceDirectoryError
from fivem_util.core.resources import detect_resources, diff_resources, is_category


def _make_dirs(root, *names):
    for name in names:
        (root / name).mkdir(parents=True)


def test_detects_plain_and_category_resources(tmp_path):
    _make_dirs(tmp_path, "chat", "[gameplay]/mapmanager", "[gameplay]/[nested]/spawnmanager")
    (tmp_path / "README.txt").write_text("not a resource", encoding="utf-8")

    resources = detect_resources(tmp_path)

    assert resources == {
        "chat": str(tmp_path / "chat"),
        "mapmanager": str(tmp_path / "[gameplay]" / "mapmanager"),
        "spawnmanager": str(tmp_path / "[gameplay]" / "[nested]" / "spawnmanager"),
    }
    assert "[gameplay]" not in resources


def test_half_bracketed_directories_are_resources(tmp_path):
    _make_dirs(tmp_path, "[broken", "broken]")
    assert set(detect_resources(tmp_path)) == {"[broken", "broken]"}


def test_is_category():
    assert is_category("[maps]")
    assert is_category("[]")
    assert not is_category("maps")
    assert not is_category("[maps")
    assert not is_category("[")


def test_missing_directory_raises(tmp_path):
    with pytest.raises(ResourceDirectoryError):
        detect_resources(tmp_path / "missing")


def test_file_instead_of_directory_raises(tmp_path):
    path = tmp_path / "resources"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ResourceDirectoryError):
        detect_resources(path)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_directory_symlinks_are_followed(tmp_path):
    shared = tmp_path / "shared"
    _make_dirs(shared, "linked_res", "[cat]/inner")
    resources_dir = tmp_path / "resources"
    resources_dir.mkdir()
    try:
        os.symlink(shared / "linked_res", resources_dir / "linked_res", target_is_directory=True)
        os.symlink(shared / "[cat]", resources_dir / "[linked]", target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")

    resources = detect_resources(resources_dir)
    assert set(resources) == {"linked_res", "inner"}


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_category_symlink_loop_terminates(tmp_path):
    _make_dirs(tmp_path, "[loop]/res")
    try:
        os.symlink(tmp_path / "[loop]", tmp_path / "[loop]" / "[again]", target_is_directory=True)
    except OSError:
        pytest.skip("cannot create symlinks here")

    assert set(detect_resources(tmp_path)) == {"res"}


def test_diff_resources():
    available = {"chat": "/r/chat", "mapmanager": "/r/[g]/mapmanager", "unused": "/r/unused", "alpha": "/r/alpha"}

    usage = diff_resources(["mapmanager", "missing", "chat", "chat"], available)

    assert usage.found == [
        ("mapmanager", "/r/[g]/mapmanager"),
        ("chat", "/r/chat"),
        ("chat", "/r/chat"),
    ]
    assert usage.missing == ["missing"]
    assert usage.extra == [("alpha", "/r/alpha"), ("unused", "/r/unused")]
    assert usage.ok is False


def test_diff_resources_all_found():
    usage = diff_resources(["a"], {"a": "/r/a"})
    assert usage.ok is True
    assert usage.extra == []


def test_diff_resources_without_scan():
    usage = diff_resources(["a", "b"], None)
    assert usage.missing == ["a", "b"]
    assert usage.found == []
