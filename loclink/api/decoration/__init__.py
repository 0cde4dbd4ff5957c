"""Decoration API domain: incremental link highlighting in live buffers."""

from .Decoration import Decoration
from .DecorationManager import DecorationManager
from .TextBuffer import TextBuffer

__all__ = ["Decoration", "DecorationManager", "TextBuffer"]
