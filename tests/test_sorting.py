from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pytest

from iGallery.core.sorting import (
    SortDirection,
    is_numeric_title,
    numbers_first,
    ordered,
    parse_direction,
    sort_albums,
    sort_media,
)
from iGallery.models.types import AlbumStats

from helpers import photo


@dataclass
class _Album:
    title: str
    stats: Optional[AlbumStats] = None


def _titles(albums: list[_Album]) -> list[str]:
    return [album.title for album in albums]


def test_ordered_is_stable_in_both_directions() -> None:
    items = [("b", 1), ("a", 2), ("b", 3), ("a", 4)]
    ascending = ordered(items, lambda item: item[0], SortDirection.ASC)
    descending = ordered(items, lambda item: item[0], SortDirection.DESC)
    assert ascending == [("a", 2), ("a", 4), ("b", 1), ("b", 3)]
    assert descending == [("b", 1), ("b", 3), ("a", 2), ("a", 4)]


def test_missing_keys_sort_last_ascending_and_first_descending() -> None:
    items = [photo("b.jpg", datetime(2020, 1, 2)), photo("none.jpg"), photo("a.jpg", datetime(2020, 1, 1))]
    ascending = sort_media(items, "date", "asc")
    descending = sort_media(items, "date", "desc")
    assert [item.filename for item in ascending] == ["a.jpg", "b.jpg", "none.jpg"]
    assert [item.filename for item in descending] == ["none.jpg", "b.jpg", "a.jpg"]


def test_unknown_sort_key_keeps_order(caplog: pytest.LogCaptureFixture) -> None:
    albums = [_Album("b"), _Album("c"), _Album("a")]
    with caplog.at_level(logging.WARNING, logger="iGallery"):
        result = sort_albums(albums, "popularity", "asc")
    assert _titles(result) == ["b", "c", "a"]
    assert "popularity" in caplog.text


def test_missing_sort_key_keeps_order_silently(caplog: pytest.LogCaptureFixture) -> None:
    items = [photo("b.jpg"), photo("a.jpg")]
    with caplog.at_level(logging.WARNING, logger="iGallery"):
        result = sort_media(items, None, None)
    assert [item.filename for item in result] == ["b.jpg", "a.jpg"]
    assert caplog.records == []


def test_unknown_direction_means_ascending() -> None:
    assert parse_direction("sideways") is SortDirection.ASC
    assert parse_direction(None) is SortDirection.ASC
    assert parse_direction("desc") is SortDirection.DESC
    albums = [_Album("b"), _Album("a")]
    assert _titles(sort_albums(albums, "title", "sideways")) == ["a", "b"]


def test_albums_sorted_by_start_date() -> None:
    early = _Album("early", AlbumStats(0, 1, 0, datetime(2021, 1, 1), datetime(2021, 1, 5)))
    late = _Album("late", AlbumStats(0, 1, 0, datetime(2022, 1, 1), datetime(2022, 1, 5)))
    empty = _Album("empty", AlbumStats(0, 0, 0, None, None))
    assert _titles(sort_albums([late, empty, early], "start-date", "asc")) == ["early", "late", "empty"]


@pytest.mark.parametrize(
    ("title", "expected"),
    [("2023", True), ("2023-06-01", True), ("-", True), ("2023 trip", False), ("", False), ("Apple", False)],
)
def test_is_numeric_title(title: str, expected: bool) -> None:
    assert is_numeric_title(title) is expected


def test_numbers_first_is_a_stable_partition() -> None:
    albums = [_Album("Zebra"), _Album("2023"), _Album("Apple"), _Album("1999")]
    assert _titles(numbers_first(albums)) == ["2023", "1999", "Zebra", "Apple"]


def test_numbers_first_applies_after_sorting() -> None:
    albums = [_Album("Zebra"), _Album("2023"), _Album("Apple"), _Album("1999")]
    result = sort_albums(albums, "title", "desc", numeric_first=True)
    assert _titles(result) == ["2023", "1999", "Zebra", "Apple"]
