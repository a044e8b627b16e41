"""Abstract interfaces for infrastructure dependencies."""

from .storage import StorageClient

__all__ = ["StorageClient"]
