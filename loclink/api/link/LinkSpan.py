"""Link span model (UNO: single model)."""

from dataclasses import dataclass

from .LinkKind import LinkKind


@dataclass(frozen=True)
class LinkSpan:
    """Text range occupied by a link. ``end`` is exclusive."""

    start: int
    end: int
    kind: LinkKind

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end
