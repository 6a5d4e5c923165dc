"""
Domain: the date portion (`YYYY-MM-DD`) of a Zulu timestamp.

Contract excerpts implemented here:
- Exactly 3 dash-separated fields: year [0, 9999], month [1, 12],
  day [1, days_in_month(year, month)].
- Leap years follow the proleptic Gregorian rule:
  year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
- Day arithmetic carries into month and year; a year leaving [0, 9999]
  is an error.

Values are immutable; the carry operations return new instances.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .fields import TimestampParseError, parse_field, pad_digits

MIN_YEAR = 0
MAX_YEAR = 9999

# Index 0 is unused so months map directly (1 = January).
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Gregorian day count for (year, month)."""

    if month < 1 or month > 12:
        raise ValueError(f"month must be in [1, 12], got {month}")
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


@dataclass(frozen=True, slots=True)
class DateFields:
    year: int
    month: int
    day: int

    def max_day_of_month(self) -> int:
        return days_in_month(self.year, self.month)

    def __str__(self) -> str:
        return f"{pad_digits(self.year, 4)}-{pad_digits(self.month, 2)}-{pad_digits(self.day, 2)}"


def parse_date(text: str) -> DateFields:
    """
    Parse the text to the left of the 'T' separator.

    Raises:
        TimestampParseError: on the first malformed or out-of-range field.
    """

    fields = text.split("-")
    if len(fields) != 3:
        raise TimestampParseError(f"incorrect number of date fields, expected 3, but got {len(fields)}")

    year = parse_field(fields[0], "year", "date field", MIN_YEAR, MAX_YEAR)
    month = parse_field(fields[1], "month", "date field", 1, 12)
    day = parse_field(fields[2], "day", "date field", 1, days_in_month(year, month))
    return DateFields(year=year, month=month, day=day)


def _increment_year(date: DateFields) -> DateFields:
    if date.year + 1 > MAX_YEAR:
        raise TimestampParseError("year not allowed to exceed 4 digits")
    return replace(date, year=date.year + 1)


def _decrement_year(date: DateFields) -> DateFields:
    if date.year - 1 < MIN_YEAR:
        raise TimestampParseError("year not allowed to be negative")
    return replace(date, year=date.year - 1)


def _increment_month(date: DateFields) -> DateFields:
    if date.month == 12:
        return replace(_increment_year(date), month=1)
    return replace(date, month=date.month + 1)


def _decrement_month(date: DateFields) -> DateFields:
    if date.month == 1:
        return replace(_decrement_year(date), month=12)
    return replace(date, month=date.month - 1)


def increment_day(date: DateFields) -> DateFields:
    """Next calendar day; the day resets to 1 when the month rolls over."""

    if date.day < date.max_day_of_month():
        return replace(date, day=date.day + 1)
    return replace(_increment_month(date), day=1)


def decrement_day(date: DateFields) -> DateFields:
    """Previous calendar day; the day becomes the last day of the new month on rollover."""

    if date.day > 1:
        return replace(date, day=date.day - 1)
    previous = replace(_decrement_month(date), day=1)
    return replace(previous, day=previous.max_day_of_month())
