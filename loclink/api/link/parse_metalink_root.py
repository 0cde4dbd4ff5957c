"""Metalink parser (UNO: single function)."""

from .LINK_PATTERN import METALINK_PATTERN


def parse_metalink_root(document_text: str) -> str | None:
    """Return the root declared by the first metalink in the document, or None.

    Later metalinks are ignored.
    """
    match = METALINK_PATTERN.search(document_text)
    if match is None:
        return None
    return match.group("root")
