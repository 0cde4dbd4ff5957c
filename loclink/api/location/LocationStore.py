"""Single-slot location clipboard."""

from .Location import Location


class LocationStore:
    """Holds at most one captured Location.

    Each capture overwrites the slot; there is no history and no merging.
    The store is owned by the host and passed to the capture and paste
    operations explicitly.
    """

    def __init__(self, location: Location | None = None):
        self._location = location

    @property
    def is_empty(self) -> bool:
        return self.peek() is None

    def peek(self) -> Location | None:
        return self._location

    def replace(self, location: Location) -> Location | None:
        """Store ``location`` and return the value it overwrote."""
        previous = self.peek()
        self._location = location
        return previous

    def capture(self, location: Location) -> Location:
        """Overwrite the slot with ``location`` and return it."""
        self.replace(location)
        return location
