"""Navigation target model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class NavigationTarget:
    """Where a followed link lands."""

    path: Path
    line: int
    offset: int  # character offset of the line start in the target text
