"""Bottom-up statistics and the human readable album summary."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from ..models.types import AlbumStats, MediaItem


def _file_date(item: MediaItem) -> Optional[Any]:
    meta = getattr(item, "meta", None)
    return getattr(meta, "date", None)


def _present(values: Iterable[Optional[Any]]) -> list[Any]:
    return [value for value in values if value is not None]


def calculate_stats(files: Sequence[MediaItem], children: Sequence[AlbumStats]) -> AlbumStats:
    """Aggregate *files* with the already computed *children* statistics.

    Each file contributes its single date both as a start and an end
    candidate. Files without a date are ignored for the range, which stays
    ``None`` when no dated item exists anywhere in the subtree.
    """

    photos = sum(1 for item in files if getattr(item, "type", None) == "image")
    videos = sum(1 for item in files if getattr(item, "type", None) == "video")
    own_dates = _present(_file_date(item) for item in files)

    from_dates = _present(child.from_date for child in children) + own_dates
    to_dates = _present(child.to_date for child in children) + own_dates

    return AlbumStats(
        albums=len(children),
        photos=photos + sum(child.photos for child in children),
        videos=videos + sum(child.videos for child in children),
        from_date=min(from_dates) if from_dates else None,
        to_date=max(to_dates) if to_dates else None,
    )


def _item_count(count: int, noun: str) -> str:
    if count == 0:
        return ""
    plural = "s" if count > 1 else ""
    return f"{count} {noun}{plural}"


def calculate_summary(stats: AlbumStats) -> str:
    """Return text such as ``"2 albums, 3 photos, 1 video"`` for *stats*."""

    items = [
        _item_count(stats.albums, "album"),
        _item_count(stats.photos, "photo"),
        _item_count(stats.videos, "video"),
    ]
    return ", ".join(item for item in items if item)


__all__ = ["calculate_stats", "calculate_summary"]
