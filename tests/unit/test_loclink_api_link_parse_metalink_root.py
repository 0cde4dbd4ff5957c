"""Tests for loclink.api.link.parse_metalink_root."""

from loclink.api.link.parse_metalink_root import parse_metalink_root


def test_parse_metalink_root_found():
    text = "notes\n#[x.py:L1]\n#[:meta:root:/a/b/]\n"
    assert parse_metalink_root(text) == "/a/b/"


def test_parse_metalink_root_first_wins():
    text = "#[:meta:root:/first/]\nmore\n#[:meta:root:/second/]\n"
    assert parse_metalink_root(text) == "/first/"


def test_parse_metalink_root_absent():
    assert parse_metalink_root("no links here\n#[x.py:L2]\n") is None
    assert parse_metalink_root("") is None


def test_parse_metalink_root_malformed_ignored():
    assert parse_metalink_root("#[:meta:root:/a/b/\n") is None
    assert parse_metalink_root("#[:meta:root:]") is None
    assert parse_metalink_root("#[:meta:root:/a[b]/]") is None
