"""Decoration model (UNO: single model)."""

from dataclasses import dataclass

LINK_STYLE = "loclink-link"


@dataclass
class Decoration:
    """Visual and interactive annotation of a link span.

    Carries no parsed link data; the link under a decoration is always read
    back from the text. ``end`` is exclusive.
    """

    start: int
    end: int
    style: str = LINK_STYLE
    activatable: bool = True

    def intersects(self, start: int, end: int) -> bool:
        return self.start < end and self.end > start
