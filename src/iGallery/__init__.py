"""Album tree finalization for static photo galleries."""

from .library.tree import AlbumFactory, AlbumIdCounter
from .models.album import Album, AlbumLocation, FinalizedAlbum, finalize
from .models.types import PREVIEW_MISSING, AlbumStats, MediaFile, MediaMeta, MediaUrls
from .options import FinalizeOptions, load_options

__all__ = [
    "Album",
    "AlbumFactory",
    "AlbumIdCounter",
    "AlbumLocation",
    "AlbumStats",
    "FinalizeOptions",
    "FinalizedAlbum",
    "MediaFile",
    "MediaMeta",
    "MediaUrls",
    "PREVIEW_MISSING",
    "finalize",
    "load_options",
]
