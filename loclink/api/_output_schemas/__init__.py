"""Output schemas for API commands.

Importing this package registers every command's output schema.
"""

from . import activation, config, link, location, navigate, root
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = [
    "BaseOutputSchema",
    "activation",
    "config",
    "get_output_schema",
    "link",
    "location",
    "navigate",
    "register_output_schema",
    "root",
]
