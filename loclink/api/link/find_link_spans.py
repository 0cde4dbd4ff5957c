"""Link span scanner (UNO: single function)."""

from .classify_link import classify_link
from .LINK_PATTERN import ANY_LINK_PATTERN
from .LinkSpan import LinkSpan


def find_link_spans(text: str, start: int = 0, end: int | None = None) -> list[LinkSpan]:
    """Find every link span in ``text[start:end]``, in document order.

    Offsets in the returned spans are relative to ``text``, not to ``start``.
    """
    if end is None:
        end = len(text)
    return [
        LinkSpan(start=match.start(), end=match.end(), kind=classify_link(match.group(0)))
        for match in ANY_LINK_PATTERN.finditer(text, start, end)
    ]
