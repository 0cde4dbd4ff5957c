"""Link following state machine."""

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from ..link.find_link_spans import find_link_spans
from ..link.parse_location_link import parse_location_link
from ..link.parse_metalink_root import parse_metalink_root
from ..root.resolve_location import resolve_location
from .ActivationKind import ActivationKind
from .line_to_offset import line_to_offset
from .NavigationState import NavigationState
from .NavigationTarget import NavigationTarget
from .TargetMissingError import TargetMissingError

logger = logging.getLogger(__name__)

JumpHook = Callable[[NavigationTarget], None]


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


class Navigator:
    """Follows the location link at a position in a document.

    ``Idle -> Resolving -> (Found | NotFound)``. ``open_document`` loads the
    target text (opening or focusing it in a host). Every ``on_jump`` hook
    receives the target after a successful jump.
    """

    def __init__(
        self,
        on_jump: Iterable[JumpHook] = (),
        open_document: Callable[[Path], str] = _read_text,
    ):
        self.on_jump = list(on_jump)
        self.open_document = open_document
        self.state = NavigationState.IDLE
        self.last_target: NavigationTarget | None = None

    def follow(
        self,
        document_text: str,
        offset: int,
        kind: ActivationKind = ActivationKind.KEY,
    ) -> NavigationTarget | None:
        """Follow the link at ``offset`` in ``document_text``.

        Returns:
            The target, or None when there is no location link at ``offset``.

        Raises:
            TargetMissingError: If the resolved file does not exist.
        """
        self.state = NavigationState.IDLE
        line_start = document_text.rfind("\n", 0, offset) + 1
        line_end = document_text.find("\n", offset)
        if line_end == -1:
            line_end = len(document_text)
        line_text = document_text[line_start:line_end]
        column = offset - line_start

        if kind is ActivationKind.CLICK and not self._click_on_link(line_text, column):
            return None

        location = parse_location_link(line_text, column)
        if location is None:
            return None

        self.state = NavigationState.RESOLVING
        if location.root is None:
            location = location.with_root(parse_metalink_root(document_text))
        path = resolve_location(location)

        if not path.exists():
            self.state = NavigationState.NOT_FOUND
            logger.warning("Link target missing: %s", path)
            raise TargetMissingError(path)

        text = self.open_document(path)
        target = NavigationTarget(path=path, line=location.line, offset=line_to_offset(text, location.line))
        self.state = NavigationState.FOUND
        self.last_target = target
        logger.info("Jumped to %s:%d", path, location.line)
        for hook in self.on_jump:
            hook(target)
        return target

    @staticmethod
    def _click_on_link(line_text: str, column: int) -> bool:
        # Clicks left of the opening bracket never follow
        return any(span.start <= column < span.end for span in find_link_spans(line_text))
