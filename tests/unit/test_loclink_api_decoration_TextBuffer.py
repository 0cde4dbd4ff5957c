"""Tests for TextBuffer."""

import pytest

from loclink.api.decoration.TextBuffer import TextBuffer


def test_insert_delete_replace():
    buffer = TextBuffer("hello world")
    buffer.insert(5, ",")
    assert buffer.text == "hello, world"
    buffer.delete(0, 7)
    assert buffer.text == "world"
    buffer.replace(0, 1, "W")
    assert buffer.text == "World"
    assert len(buffer) == 5


def test_listeners_receive_edit_ranges():
    buffer = TextBuffer("abcdef")
    edits = []
    buffer.subscribe(lambda *edit: edits.append(edit))
    buffer.insert(2, "XY")
    buffer.delete(0, 3)
    buffer.replace(1, 2, "long")
    assert edits == [(2, 2, 4), (0, 3, 0), (1, 2, 5)]


def test_unsubscribe_stops_notifications():
    buffer = TextBuffer("abc")
    edits = []

    def listener(*edit):
        edits.append(edit)

    buffer.subscribe(listener)
    buffer.unsubscribe(listener)
    buffer.insert(0, "x")
    assert edits == []


@pytest.mark.parametrize(("start", "end"), [(-1, 0), (2, 1), (0, 10)])
def test_replace_rejects_bad_range(start, end):
    buffer = TextBuffer("abc")
    with pytest.raises(IndexError, match="outside buffer"):
        buffer.replace(start, end, "x")
    assert buffer.text == "abc"


def test_line_bounds():
    buffer = TextBuffer("one\ntwo\nthree")
    assert buffer.line_bounds(5) == (4, 7)
    assert buffer.line_bounds(1, 5) == (0, 7)
    assert buffer.line_bounds(9) == (8, 13)
    assert buffer.line_bounds(100) == (8, 13)


def test_save_and_load(tmp_path):
    path = tmp_path / "note.txt"
    buffer = TextBuffer("text\n", path=path)
    assert buffer.save() == path
    assert TextBuffer.from_file(path).text == "text\n"
    assert TextBuffer.from_file(path).path == path


def test_save_without_path():
    with pytest.raises(ValueError, match="no backing path"):
        TextBuffer("x").save()
