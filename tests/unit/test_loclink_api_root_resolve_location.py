"""Tests for resolving locations and installing metalinks."""

from pathlib import Path

import pytest

from loclink.api.decoration.TextBuffer import TextBuffer
from loclink.api.link.parse_metalink_root import parse_metalink_root
from loclink.api.location.Location import Location
from loclink.api.root.install_metalink import install_metalink
from loclink.api.root.resolve_location import resolve_location


def test_resolve_relative_against_root():
    assert resolve_location(Location(file="src/x.py", line=1, root="/a/b/")) == Path("/a/b/src/x.py")


def test_resolve_absolute_ignores_root():
    assert resolve_location(Location(file="/c/y.py", line=1, root="/a/b/")) == Path("/c/y.py")


def test_resolve_relative_without_root():
    assert resolve_location(Location(file="x.py", line=1)) == Path("x.py")


def test_resolve_expands_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_location(Location(file="~/x.py", line=1, root="/a/")) == tmp_path / "x.py"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", "#[:meta:root:/a/b/]\n"),
        ("notes\n", "notes\n#[:meta:root:/a/b/]\n"),
        ("notes", "notes\n#[:meta:root:/a/b/]\n"),
    ],
)
def test_install_metalink_appends_on_own_line(text, expected):
    buffer = TextBuffer(text)
    install_metalink(buffer, "/a/b/")
    assert buffer.text == expected
    assert parse_metalink_root(buffer.text) == "/a/b/"


def test_install_metalink_returns_appended_text():
    assert install_metalink(TextBuffer("x"), "/r/") == "\n#[:meta:root:/r/]\n"


def test_install_metalink_rejects_invalid_root():
    buffer = TextBuffer("notes\n")
    with pytest.raises(ValueError, match="Invalid metalink root"):
        install_metalink(buffer, "/a[1]/")
    assert buffer.text == "notes\n"
