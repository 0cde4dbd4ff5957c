"""Tests for incremental link decoration."""

from loclink.api.decoration.Decoration import LINK_STYLE
from loclink.api.decoration.DecorationManager import DecorationManager
from loclink.api.decoration.TextBuffer import TextBuffer

TEXT = "see #[x.py:L12] here\nnext line\n"


def _spans(manager):
    return [(d.start, d.end) for d in manager.decorations()]


def _fontified(text):
    buffer = TextBuffer(text)
    manager = DecorationManager(buffer)
    manager.fontify()
    return buffer, manager


def test_fontify_decorates_links():
    _, manager = _fontified(TEXT)
    assert _spans(manager) == [(4, 15)]
    decoration = manager.decorations()[0]
    assert decoration.style == LINK_STYLE
    assert decoration.activatable


def test_fontify_decorates_unknown_and_metalinks():
    _, manager = _fontified("#[todo] and #[:meta:root:/r/]\n")
    assert _spans(manager) == [(0, 7), (12, 29)]


def test_edit_inside_link_keeps_single_decoration():
    buffer, manager = _fontified(TEXT)
    buffer.insert(7, "y")
    manager.on_region_changed(7, 8)
    assert _spans(manager) == [(4, 16)]


def test_deleting_link_text_evaporates_decoration():
    buffer, manager = _fontified(TEXT)
    buffer.delete(4, 15)
    assert manager.decorations() == []
    manager.on_region_changed(4, 4)
    assert manager.decorations() == []


def test_edit_on_earlier_line_shifts_decoration():
    buffer, manager = _fontified("top\n#[x.py:L1]\n")
    buffer.insert(0, "zz")
    assert _spans(manager) == [(6, 16)]
    manager.on_region_changed(0, 2)
    assert _spans(manager) == [(6, 16)]


def test_edit_after_link_leaves_it_alone():
    buffer, manager = _fontified(TEXT)
    buffer.insert(len(buffer), "tail")
    manager.on_region_changed(len(buffer) - 4, len(buffer))
    assert _spans(manager) == [(4, 15)]


def test_breaking_link_removes_decoration():
    buffer, manager = _fontified(TEXT)
    buffer.delete(14, 15)
    manager.on_region_changed(14, 14)
    assert manager.decorations() == []


def test_typing_a_link_adds_decoration():
    buffer, manager = _fontified("plain\nmore\n")
    buffer.insert(6, "#[a.py:L2]")
    manager.on_region_changed(6, 16)
    assert _spans(manager) == [(6, 16)]


def test_region_widened_to_whole_lines():
    buffer, manager = _fontified("ab\ncd #[x.py:L1] ef\n")
    assert manager.on_region_changed(5, 6) == (3, 19)


def test_decoration_lookup():
    _, manager = _fontified("#[a.py:L1] x #[b.py:L2]\n")
    assert manager.decoration_at(0).start == 0
    assert manager.decoration_at(10) is None
    assert manager.decoration_at(13).start == 13
    assert [d.start for d in manager.decorations_in(5, 20)] == [0, 13]


def test_close_detaches_from_buffer():
    buffer, manager = _fontified(TEXT)
    manager.close()
    assert manager.decorations() == []
    buffer.insert(0, "x")
    assert manager.decorations() == []
