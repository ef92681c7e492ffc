from __future__ import annotations

import pytest

from iGallery.utils.text import sanitise, titleize


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("My Trip!", "MyTrip"),
        ("2023-06_beach", "2023-06_beach"),
        ("Café & Bar", "CafBar"),
        ("", ""),
    ],
)
def test_sanitise(title: str, expected: str) -> None:
    assert sanitise(title) == expected


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("summerHolidays", "Summer Holidays"),
        ("my_trip_2023", "My Trip 2023"),
        ("HTMLParser", "Html Parser"),
        ("iPhone", "I Phone"),
        ("Vacation2023", "Vacation2023"),
        ("  spaced   out ", "Spaced Out"),
        ("'quoted word", "'Quoted Word"),
        ("ALL CAPS", "All Caps"),
        ("day٣Two", "Day٣two"),
        ("day3Two", "Day3 Two"),
        ("", ""),
    ],
)
def test_titleize(title: str, expected: str) -> None:
    assert titleize(title) == expected
