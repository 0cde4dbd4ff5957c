"""Append a metalink to a document."""

import logging

from ..decoration.TextBuffer import TextBuffer
from ..link.serialize_metalink import serialize_metalink

logger = logging.getLogger(__name__)


def install_metalink(buffer: TextBuffer, root: str) -> str:
    """Append a metalink declaring ``root`` at the end of ``buffer``.

    The metalink always starts on its own line. Existing metalinks are not
    inspected; callers decide whether installation is wanted.

    Returns:
        The text that was appended.
    """
    text = serialize_metalink(root)
    if buffer.text and not buffer.text.endswith("\n"):
        text = "\n" + text
    buffer.insert(len(buffer), text)
    logger.info("Installed metalink for root %s%s", root, f" in {buffer.path}" if buffer.path else "")
    return text
