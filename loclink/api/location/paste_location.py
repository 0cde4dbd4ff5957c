"""Paste the captured location into a document as link text."""

import logging
from collections.abc import Callable

from ..decoration.TextBuffer import TextBuffer
from ..link.parse_metalink_root import parse_metalink_root
from ..link.serialize_location import serialize_location
from ..root.install_metalink import install_metalink
from .EmptyClipboardError import EmptyClipboardError
from .LocationStore import LocationStore
from .PasteResult import PasteResult

logger = logging.getLogger(__name__)


def _decline(_root: str) -> bool:
    return False


def paste_location(
    store: LocationStore,
    buffer: TextBuffer,
    offset: int | None = None,
    confirm_metalink: Callable[[str], bool] = _decline,
) -> PasteResult:
    """Insert the clipboard's location into ``buffer`` at ``offset``.

    If the location carries a root and the document declares none,
    ``confirm_metalink(root)`` decides whether a metalink is appended
    first. The link is then written relative to the document's metalink
    root where possible.

    Args:
        store: Clipboard to read
        buffer: Destination document
        offset: Insertion offset (default: end of the buffer)
        confirm_metalink: Policy callback for installing a metalink

    Raises:
        EmptyClipboardError: If nothing has been captured; nothing is inserted
        IndexError: If ``offset`` lies outside the buffer
    """
    location = store.peek()
    if location is None:
        raise EmptyClipboardError()
    if offset is None:
        offset = len(buffer)
    if not 0 <= offset <= len(buffer):
        raise IndexError(f"Offset {offset} outside buffer of length {len(buffer)}")

    metalink_root = parse_metalink_root(buffer.text)
    installed = False
    if location.root and metalink_root is None and confirm_metalink(location.root):
        # Installation only appends, so offset stays valid
        install_metalink(buffer, location.root)
        metalink_root = location.root
        installed = True

    text = serialize_location(location, metalink_root)
    buffer.insert(offset, text)
    logger.info("Pasted %s at offset %d", text.rstrip("\n"), offset)
    return PasteResult(inserted=text, offset=offset, metalink_installed=installed, metalink_root=metalink_root)
