"""Album tree assembly."""

from .tree import AlbumFactory, AlbumIdCounter

__all__ = ["AlbumFactory", "AlbumIdCounter"]
