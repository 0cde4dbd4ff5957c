"""Tests for auto-activation."""

import pytest

from loclink.api.activation.cmd_check import cmd_check
from loclink.api.activation.document_category import document_category
from loclink.api.activation.should_auto_activate import should_auto_activate


@pytest.mark.parametrize(
    ("path", "expected"),
    [("notes.txt", "txt"), ("README.MD", "md"), ("/a/b/TODO", "text"), ("x.tar.gz", "gz")],
)
def test_document_category(path, expected):
    assert document_category(path) == expected


def test_activates_when_link_present():
    assert should_auto_activate("txt", "see #[x.py:L1]\n") is True


def test_does_not_activate_without_link():
    assert should_auto_activate("txt", "no links [here]\n") is False


def test_unknown_link_activates():
    assert should_auto_activate("txt", "#[todo]") is True


def test_allow_list_filters_categories():
    text = "#[x.py:L1]"
    assert should_auto_activate("md", text, ["txt", "MD"]) is True
    assert should_auto_activate("org", text, ["txt", "md"]) is False


def test_cmd_check_enabled(run_cmd, tmp_path):
    note = tmp_path / "note.txt"
    note.write_text("see #[x.py:L1]\n")
    result = run_cmd(cmd_check, str(note))
    assert result.success
    assert result.output["category"] == "txt"
    assert result.output["has_link"] is True
    assert result.output["enabled"] is True


def test_cmd_check_respects_config(run_cmd, tmp_path, write_config):
    write_config({"activation": {"categories": [".org"]}})
    note = tmp_path / "note.txt"
    note.write_text("see #[x.py:L1]\n")
    result = run_cmd(cmd_check, str(note))
    assert result.success
    assert result.output["has_link"] is True
    assert result.output["enabled"] is False
    assert "disabled" in result.result


def test_cmd_check_missing_file(run_cmd, tmp_path):
    result = run_cmd(cmd_check, str(tmp_path / "nope.txt"))
    assert not result.success
    assert result.output["errors"] == ["File does not exist"]


def test_cmd_check_invalid_config(run_cmd, tmp_path, write_config):
    write_config({"bogus": {}})
    note = tmp_path / "note.txt"
    note.write_text("")
    result = run_cmd(cmd_check, str(note))
    assert not result.success
    assert "Configuration validation error" in result.output["errors"][0]
