"""Incremental link decoration for one text buffer."""

import logging
from bisect import bisect_left, bisect_right

from ..link.LINK_PATTERN import ANY_LINK_PATTERN
from .Decoration import LINK_STYLE, Decoration
from .TextBuffer import TextBuffer

logger = logging.getLogger(__name__)


class DecorationManager:
    """Owns the decorations of a single buffer.

    Decorations are kept sorted by start offset and never overlap. Edits
    move them along with the text; ``on_region_changed`` must be called by
    the host after each edit to rescan the affected lines.
    """

    def __init__(self, buffer: TextBuffer, style: str = LINK_STYLE):
        self.buffer = buffer
        self.style = style
        self._decorations: list[Decoration] = []
        self._starts: list[int] = []
        buffer.subscribe(self._on_edit)

    def close(self) -> None:
        """Detach from the buffer and drop every decoration."""
        self.buffer.unsubscribe(self._on_edit)
        self.unfontify()

    def decorations(self) -> list[Decoration]:
        return list(self._decorations)

    def decoration_at(self, offset: int) -> Decoration | None:
        index = bisect_right(self._starts, offset) - 1
        if index >= 0 and self._decorations[index].end > offset:
            return self._decorations[index]
        return None

    def decorations_in(self, start: int, end: int) -> list[Decoration]:
        first, stop = self._index_range(start, end)
        return self._decorations[first:stop]

    def fontify(self) -> tuple[int, int]:
        """Decorate the whole buffer."""
        return self.on_region_changed(0, len(self.buffer))

    def unfontify(self) -> None:
        self._decorations.clear()
        self._starts.clear()

    def on_region_changed(self, start: int, end: int) -> tuple[int, int]:
        """Recompute decorations for the lines touched by ``start..end``.

        The region is widened to whole physical lines so that a link cut by
        the region boundary is still found in full. The rescan is proportional
        to the size of the widened region; moving the decorations that follow
        an edit happens in ``_on_edit``.

        Returns:
            The effective (start, end) that was rescanned.
        """
        region_start, region_end = self.buffer.line_bounds(start, end)
        first, stop = self._index_range(region_start, region_end)
        fresh = [
            Decoration(match.start(), match.end(), style=self.style)
            for match in ANY_LINK_PATTERN.finditer(self.buffer.text, region_start, region_end)
        ]
        self._decorations[first:stop] = fresh
        self._starts[first:stop] = [decoration.start for decoration in fresh]
        logger.debug("Rescanned %d..%d: %d decorations", region_start, region_end, len(fresh))
        return region_start, region_end

    def _index_range(self, start: int, end: int) -> tuple[int, int]:
        """Slice bounds of the decorations intersecting ``start..end``."""
        first = bisect_left(self._starts, start)
        # An earlier decoration may still reach into the range
        if first > 0 and self._decorations[first - 1].end > start:
            first -= 1
        stop = bisect_left(self._starts, end)
        return first, max(first, stop)

    def _on_edit(self, start: int, old_end: int, new_end: int) -> None:
        """Move decorations with the text; drop those whose text is gone."""
        # Linear in the number of decorations after the edit point, not in text size
        delta = new_end - old_end

        def move(position: int) -> int:
            if position <= start:
                return position
            if position >= old_end:
                return position + delta
            return start

        first = bisect_left(self._starts, start)
        if first > 0 and self._decorations[first - 1].end > start:
            first -= 1
        survivors: list[Decoration] = []
        for decoration in self._decorations[first:]:
            decoration.start = move(decoration.start)
            decoration.end = move(decoration.end)
            if decoration.end > decoration.start:
                survivors.append(decoration)
        self._decorations[first:] = survivors
        self._starts[first:] = [decoration.start for decoration in survivors]
