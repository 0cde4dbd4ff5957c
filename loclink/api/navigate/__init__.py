"""Navigate API domain: following location links."""

from .._output_schemas.navigate import NavigateFollowOutput

__all__ = ["NavigateFollowOutput"]
