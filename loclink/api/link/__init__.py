"""Link API domain: grammar and serialization of link text."""

from .._output_schemas.link import LinkListOutput

__all__ = ["LinkListOutput"]
