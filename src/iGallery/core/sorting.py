"""Ordering policies for album contents."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, Optional, Sequence, TypeVar

from ..config import NUMERIC_TITLE_PATTERN
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)

T = TypeVar("T")

_NUMERIC_TITLE = re.compile(NUMERIC_TITLE_PATTERN)


class MediaSortKey(str, Enum):
    FILENAME = "filename"
    DATE = "date"


class AlbumSortKey(str, Enum):
    TITLE = "title"
    START_DATE = "start-date"
    END_DATE = "end-date"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _file_date(item: Any) -> Any:
    return getattr(getattr(item, "meta", None), "date", None)


def _album_stat(name: str) -> Callable[[Any], Any]:
    def _key(album: Any) -> Any:
        return getattr(getattr(album, "stats", None), name, None)

    return _key


MEDIA_SORT_KEYS: dict[MediaSortKey, Callable[[Any], Any]] = {
    MediaSortKey.FILENAME: lambda item: getattr(item, "filename", None),
    MediaSortKey.DATE: _file_date,
}

ALBUM_SORT_KEYS: dict[AlbumSortKey, Callable[[Any], Any]] = {
    AlbumSortKey.TITLE: lambda album: getattr(album, "title", None),
    AlbumSortKey.START_DATE: _album_stat("from_date"),
    AlbumSortKey.END_DATE: _album_stat("to_date"),
}

E = TypeVar("E", bound=Enum)


def _parse(enum_type: type[E], value: object, option: str) -> Optional[E]:
    if value is None or value == "":
        return None
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        LOGGER.warning("Unrecognised %s %r; keeping existing order", option, value)
        return None


def parse_direction(value: object) -> SortDirection:
    """Return the sort direction for *value*, treating anything unknown as ascending."""

    if value is None or value == "":
        return SortDirection.ASC
    direction = _parse(SortDirection, value, "sort direction")
    return direction or SortDirection.ASC


def ordered(items: Sequence[T], key: Optional[Callable[[T], Any]], direction: SortDirection) -> list[T]:
    """Return *items* stably ordered by *key*.

    Items whose key is ``None`` come last when ascending and first when
    descending. Equal keys keep their original relative order in both
    directions. Without a *key* the original order is returned unchanged.
    """

    if key is None:
        return list(items)

    def _rank(item: T) -> tuple[bool, Any]:
        value = key(item)
        if value is None:
            return (True, 0)
        return (False, value)

    # ``reverse=True`` keeps equal elements in their original order.
    return sorted(items, key=_rank, reverse=direction is SortDirection.DESC)


def is_numeric_title(title: object) -> bool:
    return isinstance(title, str) and _NUMERIC_TITLE.fullmatch(title) is not None


def numbers_first(albums: Sequence[T]) -> list[T]:
    """Move albums titled like ``2023`` or ``2023-06`` ahead of the others.

    This is a stable partition: both groups keep their incoming order.
    """

    numeric = [album for album in albums if is_numeric_title(getattr(album, "title", None))]
    others = [album for album in albums if not is_numeric_title(getattr(album, "title", None))]
    return numeric + others


def sort_media(items: Sequence[T], sort_by: object, direction: object) -> list[T]:
    key = _parse(MediaSortKey, sort_by, "sortMediaBy")
    return ordered(items, MEDIA_SORT_KEYS.get(key) if key else None, parse_direction(direction))


def sort_albums(
    albums: Sequence[T], sort_by: object, direction: object, *, numeric_first: bool = False
) -> list[T]:
    key = _parse(AlbumSortKey, sort_by, "sortAlbumsBy")
    result = ordered(albums, ALBUM_SORT_KEYS.get(key) if key else None, parse_direction(direction))
    if numeric_first:
        result = numbers_first(result)
    return result


__all__ = [
    "AlbumSortKey",
    "MediaSortKey",
    "SortDirection",
    "is_numeric_title",
    "numbers_first",
    "ordered",
    "parse_direction",
    "sort_albums",
    "sort_media",
]
