"""Data models used by iGallery."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Protocol, Union

from ..config import MISSING_THUMBNAIL


@dataclass(slots=True)
class MediaMeta:
    date: Optional[datetime] = None


@dataclass(slots=True, frozen=True)
class MediaUrls:
    thumbnail: Optional[str] = None


@dataclass(slots=True)
class MediaFile:
    """A photo or video as reported by the file scanner."""

    filename: str
    type: str = "image"
    meta: MediaMeta = field(default_factory=MediaMeta)
    urls: MediaUrls = field(default_factory=MediaUrls)


class MediaItem(Protocol):
    """Structural type of the media records albums hold.

    Scanners may hand over any object exposing these attributes; the
    finalizer only reads them.
    """

    type: Any
    filename: Any
    meta: Any
    urls: Any


@dataclass(slots=True, frozen=True)
class PreviewPlaceholder:
    """Stand-in preview used when an album has fewer items than preview slots."""

    urls: MediaUrls


# Compared by identity: only this instance is ever treated as a placeholder.
PREVIEW_MISSING = PreviewPlaceholder(urls=MediaUrls(thumbnail=MISSING_THUMBNAIL))

Preview = Union[MediaItem, PreviewPlaceholder]


@dataclass(slots=True, frozen=True)
class AlbumStats:
    """Counts and date range aggregated over an album and all its descendants."""

    albums: int
    photos: int
    videos: int
    from_date: Optional[Any]
    to_date: Optional[Any]
    total: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "total", self.photos + self.videos)


def is_placeholder(item: object) -> bool:
    """Return ``True`` when *item* is the shared missing-preview sentinel."""

    return item is PREVIEW_MISSING
