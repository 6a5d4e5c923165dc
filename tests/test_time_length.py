"""
Tests for `domain/time_length.py`.

Covers contract rules:
- Precision is identified by the Zulu string length (without 'Z') and a 'T' at index 10.
- Truncation cuts to the target length; expansion pads from the zero template.
"""

from __future__ import annotations

from typing import Optional

import pytest

from domain.time_length import TimeLength


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2022-07-27T16Z", TimeLength.HOUR),
        ("2022-07-27T16:38Z", TimeLength.MINUTE),
        ("2022-07-27T16:38:34Z", TimeLength.SECOND),
        ("2022-07-27T16:38:34.123Z", TimeLength.MILLIS),
        ("2022-07-27T16:38:34.123456Z", TimeLength.MICROS),
        ("2022-07-27T16:38:34.123456789Z", TimeLength.NANOS),
        ("2022-07-27T16:38:3Z", None),
        ("2022-07-27X16:38Z", None),
        ("2022-07-27T16:38", None),
        ("2022Z", None),
        ("", None),
        (None, None),
    ],
)
def test_from_value(value: Optional[str], expected: Optional[TimeLength]) -> None:
    """Verify precision detection by exact length at the known breakpoints."""

    assert TimeLength.from_value(value) is expected


@pytest.mark.parametrize(
    "time_length, expected",
    [
        (TimeLength.HOUR, "2022-07-27T16Z"),
        (TimeLength.MINUTE, "2022-07-27T16:38Z"),
        (TimeLength.SECOND, "2022-07-27T16:38:34Z"),
        (TimeLength.MILLIS, "2022-07-27T16:38:34.123Z"),
        (TimeLength.MICROS, "2022-07-27T16:38:34.123456Z"),
    ],
)
def test_adjust_truncates(time_length: TimeLength, expected: str) -> None:
    """Verify truncation keeps the leading characters and re-appends 'Z'."""

    assert time_length.adjust("2022-07-27T16:38:34.123456789Z") == expected


@pytest.mark.parametrize(
    "time_length, expected",
    [
        (TimeLength.MINUTE, "2022-07-27T16:00Z"),
        (TimeLength.SECOND, "2022-07-27T16:00:00Z"),
        (TimeLength.MILLIS, "2022-07-27T16:00:00.000Z"),
        (TimeLength.MICROS, "2022-07-27T16:00:00.000000Z"),
        (TimeLength.NANOS, "2022-07-27T16:00:00.000000000Z"),
    ],
)
def test_adjust_expands_with_zero_padding(time_length: TimeLength, expected: str) -> None:
    """Verify expansion copies the prefix and pads with zeros and separators."""

    assert time_length.adjust("2022-07-27T16Z") == expected


@pytest.mark.parametrize("name", ["minute", "MINUTE", " Minute "])
def test_from_name_is_case_insensitive(name: str) -> None:
    """Verify precision names resolve regardless of case and surrounding whitespace."""

    assert TimeLength.from_name(name) is TimeLength.MINUTE


def test_from_name_unknown_raises() -> None:
    """Verify unknown precision names are rejected."""

    with pytest.raises(ValueError, match="unknown precision 'fortnight'"):
        TimeLength.from_name("fortnight")
