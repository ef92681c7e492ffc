"""String helpers turning album titles into slugs and display names."""

from __future__ import annotations

import re

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])", re.ASCII)
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])", re.ASCII)
# ASCII only: non-ASCII digits never split words, accented letters count as separators.
_FIRST_LETTER = re.compile(r"^\W*[a-z]", re.ASCII)


def sanitise(title: str) -> str:
    """Return *title* with every character unsafe for file names and URLs removed."""

    return _UNSAFE_CHARS.sub("", title)


def _capitalize(word: str) -> str:
    return _FIRST_LETTER.sub(lambda match: match.group(0).upper(), word, count=1)


def titleize(title: str) -> str:
    """Turn ``"summerHolidays_2023"`` style names into ``"Summer Holidays 2023"``.

    CamelCase boundaries and underscores become spaces, the whole string is
    lower-cased, and the first letter of each whitespace separated word is
    upper-cased. Leading punctuation such as quotes or brackets is skipped when
    looking for that letter.
    """

    spaced = _ACRONYM_BOUNDARY.sub(r"\1 \2", title)
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", spaced)
    words = spaced.replace("_", " ").lower().split()
    return " ".join(_capitalize(word) for word in words)
