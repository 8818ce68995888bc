"""Local filesystem access."""

from .filestore import FileStore

__all__ = ["FileStore"]
