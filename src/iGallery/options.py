"""Options controlling how an album tree is finalized."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config import DEFAULT_ALBUMS_OUTPUT_FOLDER, DEFAULT_INDEX, DEFAULT_SORT_DIRECTION, PREVIEW_COUNT
from .schemas import validate_options
from .utils.jsonio import read_json

# Document keys mapped onto ``FinalizeOptions`` attributes.  The misspelled
# ``sortAlmbumsNumbersFirst`` is the key existing gallery configs use.
_OPTION_KEYS: dict[str, str] = {
    "albumsOutputFolder": "albums_output_folder",
    "index": "index",
    "titleizeAlbumNames": "titleize_album_names",
    "sortMediaBy": "sort_media_by",
    "sortMediaDirection": "sort_media_direction",
    "sortAlbumsBy": "sort_albums_by",
    "sortAlbumsDirection": "sort_albums_direction",
    "sortAlmbumsNumbersFirst": "sort_albums_numbers_first",
    "sortAlbumsNumbersFirst": "sort_albums_numbers_first",
    "previewCount": "preview_count",
}


@dataclass(slots=True, frozen=True)
class FinalizeOptions:
    """Settings applied to every album while the tree is finalized."""

    albums_output_folder: str = DEFAULT_ALBUMS_OUTPUT_FOLDER
    index: str = DEFAULT_INDEX
    titleize_album_names: bool = False
    sort_media_by: Optional[str] = None
    sort_media_direction: str = DEFAULT_SORT_DIRECTION
    sort_albums_by: Optional[str] = None
    sort_albums_direction: str = DEFAULT_SORT_DIRECTION
    sort_albums_numbers_first: bool = False
    preview_count: int = PREVIEW_COUNT

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "FinalizeOptions":
        """Build options from camelCase keys, ignoring keys it does not know.

        Empty values fall back to the defaults, so ``{"index": ""}`` still
        renders the home page as ``index.html``.
        """

        known = {field.name for field in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = _OPTION_KEYS.get(key, key if key in known else None)
            if name is None or value is None or value == "":
                continue
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def coerce(cls, value: Union["FinalizeOptions", Mapping[str, Any], None]) -> "FinalizeOptions":
        if value is None:
            return cls()
        if isinstance(value, FinalizeOptions):
            return value
        return cls.from_mapping(value)


def load_options(path: Path) -> FinalizeOptions:
    """Read, validate and return the options stored in the JSON file at *path*."""

    document = read_json(path)
    validate_options(document)
    return FinalizeOptions.from_mapping(document)


__all__ = ["FinalizeOptions", "load_options"]
