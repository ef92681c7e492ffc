"""Validation of gallery options documents.

``options.schema.json`` checks the value types of every recognised option and
rejects unknown keys, catching typos such as ``sortAlbumBy`` before a run.
Sort-key values are not enumerated: unrecognised ones reach the
finalizer, which keeps the existing order for them.
"""

from __future__ import annotations

import json
from typing import Any

from jsonschema import Draft202012Validator

from ..config import SCHEMA_DIR
from ..errors import OptionsInvalidError

_OPTIONS_VALIDATOR: Draft202012Validator | None = None


def _options_validator() -> Draft202012Validator:
    global _OPTIONS_VALIDATOR
    if _OPTIONS_VALIDATOR is None:
        schema_path = SCHEMA_DIR / "options.schema.json"
        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        _OPTIONS_VALIDATOR = Draft202012Validator(schema)
    return _OPTIONS_VALIDATOR


def _describe(error: Any) -> str:
    option = ".".join(str(part) for part in error.path)
    return f"{option}: {error.message}" if option else error.message


def validate_options(document: dict[str, Any]) -> None:
    """Raise :class:`OptionsInvalidError` listing every problem in *document*.

    Messages name the offending option, e.g. ``previewCount: -1 is less than
    the minimum of 0``, ordered by option name.
    """

    errors = sorted(_options_validator().iter_errors(document), key=lambda err: [str(part) for part in err.path])
    if errors:
        raise OptionsInvalidError("; ".join(_describe(error) for error in errors))
