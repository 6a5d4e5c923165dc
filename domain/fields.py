"""
Domain: numeric timestamp fields.

Shared helpers for the date and time sub-parsers:
- bounded integer parsing with field-identifying diagnostics
- fixed-width zero-padded rendering

Diagnostics are part of the observable behavior of `ZuluTimestamp.error` and
must remain stable.
"""

from __future__ import annotations

import re
from typing import Optional

_INTEGER = re.compile(r"[+-]?[0-9]+")


class TimestampParseError(ValueError):
    """Raised by the sub-parsers on the first problem found in the input."""
    pass


def parse_field(text: Optional[str], what: str, kind: str, min_value: int, max_value: int) -> int:
    """
    Parse a single numeric field and enforce its inclusive bounds.

    Surrounding whitespace is ignored; anything other than an optionally signed
    run of ASCII digits is a parse error.

    Examples:
        parse_field(" 07 ", "month", "date field", 1, 12) -> 7
        parse_field("13", "month", "date field", 1, 12)
        # raises "month date field of '13' -- exceeded max value of 12"
    """

    stripped = (text or "").strip()
    if not _INTEGER.fullmatch(stripped):
        raise TimestampParseError(f"{what} {kind} of '{stripped}' -- parse error")

    try:
        value = int(stripped)
    except ValueError:
        # Digit runs beyond the interpreter's int conversion limit.
        raise TimestampParseError(f"{what} {kind} of '{stripped}' -- parse error") from None
    if value < min_value:
        raise TimestampParseError(f"{what} {kind} of '{stripped}' -- less than min value of {min_value}")
    if value > max_value:
        raise TimestampParseError(f"{what} {kind} of '{stripped}' -- exceeded max value of {max_value}")
    return value


def pad_digits(value: int, width: int) -> str:
    """Render a non-negative integer zero-padded to `width` digits."""

    return str(value).zfill(width)
