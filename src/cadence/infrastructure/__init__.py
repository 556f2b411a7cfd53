# Infrastructure Package
from .random_source import StdlibRandomSource

__all__ = ["StdlibRandomSource"]
