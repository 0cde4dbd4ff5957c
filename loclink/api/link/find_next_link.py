"""Link-to-link movement helpers."""

from .classify_link import classify_link
from .find_link_spans import find_link_spans
from .LINK_PATTERN import ANY_LINK_PATTERN
from .LinkSpan import LinkSpan


def find_next_link(text: str, offset: int) -> LinkSpan | None:
    """Return the first link starting after ``offset``, or None."""
    match = ANY_LINK_PATTERN.search(text, max(offset + 1, 0))
    if match is None:
        return None
    return LinkSpan(start=match.start(), end=match.end(), kind=classify_link(match.group(0)))


def find_previous_link(text: str, offset: int) -> LinkSpan | None:
    """Return the last link starting before ``offset``, or None."""
    previous = None
    for span in find_link_spans(text):
        if span.start >= offset:
            break
        previous = span
    return previous
