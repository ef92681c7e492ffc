from __future__ import annotations

from datetime import datetime
from typing import Optional

from iGallery.models.types import MediaFile, MediaMeta, MediaUrls


def photo(filename: str, date: Optional[datetime] = None) -> MediaFile:
    return MediaFile(
        filename=filename,
        type="image",
        meta=MediaMeta(date=date),
        urls=MediaUrls(thumbnail=f"media/thumbs/{filename}"),
    )


def video(filename: str, date: Optional[datetime] = None) -> MediaFile:
    return MediaFile(
        filename=filename,
        type="video",
        meta=MediaMeta(date=date),
        urls=MediaUrls(thumbnail=f"media/thumbs/{filename}.jpg"),
    )
