"""Activation API domain: deciding when to decorate a document."""

from .._output_schemas.activation import ActivationCheckOutput

__all__ = ["ActivationCheckOutput"]
