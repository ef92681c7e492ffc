"""Albums: virtual groupings of photos and videos, independent of disk layout.

A single photo or video can appear in several albums.  Albums are assembled by
a tree builder (see :mod:`iGallery.library.tree`) and then finalized once per
gallery run, which produces a read-only :class:`FinalizedAlbum` tree carrying
output paths, statistics, sorted contents and preview picks.
"""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, Union
from urllib.parse import urljoin, urlsplit

from ..config import ALBUM_PAGE_SUFFIX
from ..core.previews import pick_previews
from ..core.sorting import sort_albums, sort_media
from ..core.stats import calculate_stats, calculate_summary
from ..options import FinalizeOptions
from ..utils.logging import get_logger
from ..utils.text import sanitise, titleize
from .types import AlbumStats, MediaItem, Preview

LOGGER = get_logger(__name__)

OptionsLike = Union[FinalizeOptions, Mapping[str, Any], None]


@dataclass(slots=True)
class Album:
    """An album as assembled by the tree builder, before finalization."""

    id: Any
    title: str
    files: list[MediaItem] = field(default_factory=list)
    albums: list["Album"] = field(default_factory=list)
    basename: str = field(init=False)

    def __post_init__(self) -> None:
        if not self.title:
            self.title = f"Album {self.id}"
        self.basename = sanitise(self.title)

    def finalize(self, options: OptionsLike = None, parent: Optional["AlbumLocation"] = None) -> "FinalizedAlbum":
        return finalize(self, options, parent)


@dataclass(slots=True, frozen=True)
class AlbumLocation:
    """Where an album's page is written and linked from."""

    basename: str
    depth: int
    path: str
    url: str

    @property
    def home(self) -> bool:
        return self.depth == 0


@dataclass(slots=True, frozen=True)
class FinalizedAlbum:
    """Read-only album ready to be rendered."""

    id: Any
    title: str
    location: AlbumLocation
    files: tuple[MediaItem, ...]
    albums: tuple["FinalizedAlbum", ...]
    stats: AlbumStats
    summary: str
    previews: tuple[Preview, ...]

    @property
    def basename(self) -> str:
        return self.location.basename

    @property
    def depth(self) -> int:
        return self.location.depth

    @property
    def home(self) -> bool:
        return self.location.home

    @property
    def path(self) -> str:
        return self.location.path

    @property
    def url(self) -> str:
        return self.location.url

    def walk(self) -> Iterator["FinalizedAlbum"]:
        """Yield this album and every nested album, parents before children."""

        yield self
        for child in self.albums:
            yield from child.walk()

    def find(self, album_id: Any) -> Optional["FinalizedAlbum"]:
        for album in self.walk():
            if album.id == album_id:
                return album
        return None


def page_url(folder: str, page: str) -> str:
    """Return the link to *page* inside the albums output *folder*.

    Plain relative folders keep their leading ``..`` segments so the link
    points where the page is written. Folders given as absolute URLs (with a
    scheme or host) are resolved as base URLs.
    """

    parts = urlsplit(folder)
    if parts.scheme or parts.netloc:
        return urljoin(folder.rstrip("/") + "/", page)
    return posixpath.normpath(posixpath.join(folder or ".", page))


def locate(album: Album, options: FinalizeOptions, parent: Optional[AlbumLocation]) -> AlbumLocation:
    """Compute the output location of *album* below *parent*.

    The home page is always written to ``options.index``.  Albums nested deeper
    than the first level get their parent's basename as a prefix so that pages
    stay unique inside the single albums output folder.
    """

    if parent is None:
        return AlbumLocation(album.basename, 0, options.index, options.index)

    basename = album.basename
    if parent.depth > 0:
        basename = f"{parent.basename}-{basename}"
    page = basename + ALBUM_PAGE_SUFFIX
    folder = options.albums_output_folder
    return AlbumLocation(
        basename=basename,
        depth=parent.depth + 1,
        path=os.path.normpath(os.path.join(folder, page)),
        url=page_url(folder, page),
    )


def finalize(album: Album, options: OptionsLike = None, parent: Optional[AlbumLocation] = None) -> FinalizedAlbum:
    """Finalize *album* and its whole subtree.

    Locations are assigned top-down because a nested album's basename depends
    on its parent's.  Everything else (stats, summary, ordering and previews)
    is computed bottom-up once the nested albums are finalized.  *album* is
    left untouched, so finalizing the same tree again yields an equal result.
    """

    opts = FinalizeOptions.coerce(options)
    title = titleize(album.title) if opts.titleize_album_names else album.title
    location = locate(album, opts, parent)

    children = [finalize(child, opts, location) for child in album.albums]

    stats = calculate_stats(album.files, [child.stats for child in children])
    files = sort_media(album.files, opts.sort_media_by, opts.sort_media_direction)
    nested = sort_albums(
        children,
        opts.sort_albums_by,
        opts.sort_albums_direction,
        numeric_first=opts.sort_albums_numbers_first,
    )
    previews = pick_previews(files, (child.previews for child in nested), opts.preview_count)

    LOGGER.debug("Finalized album %r at %s (%d items)", title, location.path, stats.total)
    return FinalizedAlbum(
        id=album.id,
        title=title,
        location=location,
        files=tuple(files),
        albums=tuple(nested),
        stats=stats,
        summary=calculate_summary(stats),
        previews=previews,
    )


__all__ = ["Album", "AlbumLocation", "FinalizedAlbum", "finalize", "locate", "page_url"]
