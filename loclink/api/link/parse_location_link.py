"""Location link parser (UNO: single function)."""

from ..location.Location import Location
from .LINK_PATTERN import LOCATION_LINK_PATTERN


def parse_location_link(line_text: str, query_offset: int) -> Location | None:
    """Return the location link on ``line_text`` that spans ``query_offset``.

    The first match whose span contains the offset wins. Text that does
    not form a complete link yields None; malformed links are never an error.

    Args:
        line_text: One physical line of a note
        query_offset: Character offset within the line (e.g. the cursor column)
    """
    for match in LOCATION_LINK_PATTERN.finditer(line_text):
        if not match.start() <= query_offset < match.end():
            continue
        line = int(match.group("line"))
        if line < 1:
            continue
        return Location(file=match.group("file"), line=line)
    return None
