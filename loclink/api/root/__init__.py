"""Root API domain: project root detection and path resolution."""

from .._output_schemas.root import RootInstallOutput, RootShowOutput

__all__ = ["RootInstallOutput", "RootShowOutput"]
