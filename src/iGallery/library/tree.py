"""Tree building helpers used to assemble albums before finalization."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Union

from dateutil.parser import isoparse

from ..errors import AlbumDefinitionError
from ..models.album import Album
from ..models.types import MediaFile, MediaItem, MediaMeta, MediaUrls


@dataclass(slots=True)
class AlbumIdCounter:
    """Monotonic source of album identifiers."""

    value: int = 0

    def next(self) -> int:
        self.value += 1
        return self.value

    def reset(self) -> None:
        """Restart numbering, so test runs produce the same ids every time."""

        self.value = 0


AlbumSpec = Union[str, Mapping[str, Any]]


class AlbumFactory:
    """Create :class:`Album` instances with unique identifiers.

    One factory is used per gallery run; every album it creates without an
    explicit ``id`` receives the next number from its counter.
    """

    def __init__(self, counter: AlbumIdCounter | None = None) -> None:
        self.counter = counter or AlbumIdCounter()

    def album(
        self,
        opts: AlbumSpec,
        *,
        files: Optional[Iterable[MediaItem]] = None,
        albums: Optional[Iterable[Album]] = None,
    ) -> Album:
        """Create an album from a title or a ``{id, title, files, albums}`` mapping."""

        if isinstance(opts, str):
            opts = {"title": opts}
        album_id = opts.get("id") or self.counter.next()
        return Album(
            id=album_id,
            title=opts.get("title") or "",
            files=list(files if files is not None else opts.get("files") or []),
            albums=list(albums if albums is not None else opts.get("albums") or []),
        )

    def reset_ids(self) -> None:
        self.counter.reset()

    # Serialized trees -------------------------------------------------

    def from_dict(self, document: AlbumSpec) -> Album:
        """Build an album tree from nested mappings such as a JSON fixture.

        Nested ``albums`` entries may be titles or mappings; ``files`` entries
        are mappings with ``filename``, ``type``, an ISO-8601 ``date`` and an
        optional ``thumbnail``.
        """

        if isinstance(document, str):
            return self.album(document)
        if not isinstance(document, Mapping):
            raise AlbumDefinitionError(f"Album definition must be a title or mapping, got {type(document).__name__}")
        album_id = document.get("id") or self.counter.next()
        children = [self.from_dict(child) for child in document.get("albums") or []]
        files = [_media_from_dict(entry) for entry in document.get("files") or []]
        return self.album(
            {"id": album_id, "title": document.get("title")},
            files=files,
            albums=children,
        )


def _parse_date(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise AlbumDefinitionError(f"Unsupported media date: {value!r}")
    try:
        return isoparse(value)
    except (ValueError, TypeError) as exc:
        raise AlbumDefinitionError(f"Invalid media date: {value!r}") from exc


def _media_from_dict(entry: Any) -> MediaFile:
    if not isinstance(entry, Mapping):
        raise AlbumDefinitionError(f"Media definition must be a mapping, got {type(entry).__name__}")
    return MediaFile(
        filename=entry.get("filename"),
        type=entry.get("type", "image"),
        meta=MediaMeta(date=_parse_date(entry.get("date"))),
        urls=MediaUrls(thumbnail=entry.get("thumbnail")),
    )


__all__ = ["AlbumFactory", "AlbumIdCounter"]
