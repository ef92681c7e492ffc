"""Custom exception hierarchy for iGallery."""

from __future__ import annotations


class GalleryError(Exception):
    """Base class for all custom errors raised by iGallery."""


class OptionsInvalidError(GalleryError):
    """Raised when an options document cannot be read or fails validation."""


class AlbumDefinitionError(GalleryError):
    """Raised when a serialized album tree cannot be turned into albums."""
