"""Link kind classifier (UNO: single function)."""

from .LINK_PATTERN import LOCATION_LINK_PATTERN, METALINK_PATTERN
from .LinkKind import LinkKind


def classify_link(link_text: str) -> LinkKind:
    """Classify the text of one generic ``#[...]`` match."""
    if METALINK_PATTERN.fullmatch(link_text):
        return LinkKind.METALINK
    match = LOCATION_LINK_PATTERN.fullmatch(link_text)
    if match and int(match.group("line")) >= 1:
        return LinkKind.LOCATION
    return LinkKind.UNKNOWN
