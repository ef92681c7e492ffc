"""Default configuration values for iGallery."""

from __future__ import annotations

from pathlib import Path
from typing import Final

# Number of images shown in the album preview grid.
PREVIEW_COUNT: Final[int] = 10

DEFAULT_INDEX: Final[str] = "index.html"
DEFAULT_ALBUMS_OUTPUT_FOLDER: Final[str] = "."
DEFAULT_SORT_DIRECTION: Final[str] = "asc"
ALBUM_PAGE_SUFFIX: Final[str] = ".html"

MISSING_THUMBNAIL: Final[str] = "public/missing.png"

# Titles made only of digits and dashes (years, dates) for numbers-first ordering.
NUMERIC_TITLE_PATTERN: Final[str] = r"[0-9-]+"

SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parent / "schemas"
