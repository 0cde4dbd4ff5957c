"""Paste result model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PasteResult:
    """What a paste changed in the destination document."""

    inserted: str
    offset: int
    metalink_installed: bool
    metalink_root: str | None
