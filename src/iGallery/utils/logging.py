"""Logger access shared by the iGallery modules."""

from __future__ import annotations

import logging

_ROOT_LOGGER_NAME = "iGallery"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child logger when *name* is given.

    Module names such as ``iGallery.models.album`` are mapped onto the same
    hierarchy so a single ``logging.getLogger("iGallery")`` configuration
    controls every message the package emits.
    """

    if not name or name == _ROOT_LOGGER_NAME:
        return logging.getLogger(_ROOT_LOGGER_NAME)
    if name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


logging.getLogger(_ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
