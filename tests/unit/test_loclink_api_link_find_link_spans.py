"""Tests for link span scanning, presence detection and link-to-link movement."""

from loclink.api.link.classify_link import classify_link
from loclink.api.link.find_link_spans import find_link_spans
from loclink.api.link.find_next_link import find_next_link, find_previous_link
from loclink.api.link.has_link import has_link
from loclink.api.link.LinkKind import LinkKind
from loclink.api.link.LinkSpan import LinkSpan

TEXT = "a #[x.py:L1] b #[:meta:root:/r/] c #[todo]\n"


def test_find_link_spans_classifies_kinds():
    spans = find_link_spans(TEXT)
    assert [span.kind for span in spans] == [LinkKind.LOCATION, LinkKind.METALINK, LinkKind.UNKNOWN]
    assert TEXT[spans[0].start : spans[0].end] == "#[x.py:L1]"
    assert TEXT[spans[2].start : spans[2].end] == "#[todo]"


def test_find_link_spans_range_keeps_absolute_offsets():
    start = TEXT.index("b")
    spans = find_link_spans(TEXT, start, TEXT.index("c"))
    assert len(spans) == 1
    assert spans[0].kind is LinkKind.METALINK
    assert spans[0].start == TEXT.index("#[:meta")


def test_find_link_spans_never_crosses_lines():
    assert find_link_spans("#[x.py\n:L1]") == []


def test_link_span_contains():
    span = LinkSpan(start=2, end=5, kind=LinkKind.UNKNOWN)
    assert span.contains(2)
    assert span.contains(4)
    assert not span.contains(5)
    assert not span.contains(1)


def test_classify_link_zero_line_is_unknown():
    assert classify_link("#[x.py:L0]") is LinkKind.UNKNOWN


def test_has_link():
    assert has_link("text #[anything] text")
    assert not has_link("text #[ unterminated")
    assert not has_link("[[wikilink]]")
    assert not has_link("")


def test_find_next_link():
    first, second, third = find_link_spans(TEXT)
    assert find_next_link(TEXT, 0) == first
    assert find_next_link(TEXT, first.start) == second
    assert find_next_link(TEXT, third.start) is None


def test_find_previous_link():
    first, second, third = find_link_spans(TEXT)
    assert find_previous_link(TEXT, len(TEXT)) == third
    assert find_previous_link(TEXT, third.start) == second
    assert find_previous_link(TEXT, second.start + 1) == second
    assert find_previous_link(TEXT, first.start) is None
