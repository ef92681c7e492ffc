"""Helpers for reading JSON documents used to configure a gallery run."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import OptionsInvalidError


def read_json(path: Path) -> dict[str, Any]:
    """Read JSON from *path* and return a dictionary."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise OptionsInvalidError(f"JSON file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise OptionsInvalidError(f"Invalid JSON data in {path}") from exc
    if not isinstance(data, dict):
        raise OptionsInvalidError(f"Expected a JSON object in {path}")
    return data
