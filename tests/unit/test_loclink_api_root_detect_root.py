"""Tests for project root detection and canonical roots."""

import os

import pytest

from loclink.api.root.canonicalize_root import canonicalize_root
from loclink.api.root.detect_root import detect_root, make_root_detector


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/a/b", "/a/b/"),
        ("/a/b/", "/a/b/"),
        ("/a/b//", "/a/b/"),
    ],
)
def test_canonicalize_root(raw, expected):
    assert canonicalize_root(raw) == expected


def test_canonicalize_root_expands_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert canonicalize_root("~/proj") == str(tmp_path / "proj") + os.sep


def test_detect_root_finds_marker(project, project_root):
    assert detect_root(str(project / "src" / "x.py")) == project_root


def test_detect_root_from_directory(project, project_root):
    assert detect_root(str(project / "src")) == project_root


def test_detect_root_nearest_marker_wins(project):
    nested = project / "src" / "pkg"
    nested.mkdir()
    (nested / "pyproject.toml").write_text("")
    target = nested / "mod.py"
    target.write_text("")
    assert detect_root(str(target)) == str(nested) + os.sep


def test_detect_root_without_markers(tmp_path):
    target = tmp_path / "loose" / "notes.txt"
    target.parent.mkdir()
    target.write_text("")
    assert detect_root(str(target), markers=("no-such-marker-file",)) is None


def test_detect_root_empty_path():
    assert detect_root("") is None


def test_make_root_detector_uses_markers(tmp_path):
    root = tmp_path / "ws"
    (root / "sub").mkdir(parents=True)
    (root / "WORKSPACE").write_text("")
    detector = make_root_detector(["WORKSPACE"])
    assert detector(str(root / "sub" / "a.c")) == str(root) + os.sep
