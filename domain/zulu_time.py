"""
Domain: the time portion (`HH:MM[:SS[.fraction]]` plus offset) of a timestamp.

Contract excerpts implemented here:
- The offset (or 'Z' marker) is resolved first; the text before it holds
  1 to 3 colon-separated time fields.
- hour [0, 23], minute [0, 59], second [0, 59]; the fraction is at most
  9 digits, read as millis/micros/nanos groups of 3 (right-padded with zeros).
- Offsets: hours [0, 14], minutes one of {0, 15, 30, 45}; the sign applies to both.
- `normalize` folds the offset into hour/minute and carries into the date.

Offset resolution precedence:
- '+' and '-' together are an error.
- Neither an offset nor 'Z' is an error.
- Only 'Z': nothing but whitespace may follow it.
- 'Z' before the offset: the offset is trailing text and is ignored.
- Offset before 'Z': the 'Z' is dropped (nothing may follow it) and the
  offset is parsed.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .fields import TimestampParseError, parse_field, pad_digits
from .zulu_date import DateFields, decrement_day, increment_day

MAX_FRACTION_DIGITS = 9
MAX_OFFSET_HOURS = 14
QUARTER_HOURS = (0, 15, 30, 45)


@dataclass(frozen=True, slots=True)
class TimeFields:
    hour: int
    minute: int
    second: int = 0
    millis: int = 0
    micros: int = 0
    nanos: int = 0
    offset_hours: int = 0
    offset_minutes: int = 0

    def fraction(self) -> str:
        """Fractional suffix in 3-digit groups, omitting trailing zero groups."""

        if self.nanos != 0:
            groups = (self.millis, self.micros, self.nanos)
        elif self.micros != 0:
            groups = (self.millis, self.micros)
        elif self.millis != 0:
            groups = (self.millis,)
        else:
            return ""
        return "." + "".join(pad_digits(group, 3) for group in groups)

    def __str__(self) -> str:
        text = f"{pad_digits(self.hour, 2)}:{pad_digits(self.minute, 2)}:{pad_digits(self.second, 2)}"
        text += self.fraction()
        if self.offset_hours == 0 and self.offset_minutes == 0:
            return text + "Z"

        sign = "+" if self.offset_hours > 0 or self.offset_minutes > 0 else "-"
        text += sign + pad_digits(abs(self.offset_hours), 2)
        if self.offset_minutes != 0:
            text += ":" + pad_digits(abs(self.offset_minutes), 2)
        return text


def parse_time(text: str) -> TimeFields:
    """
    Parse the text to the right of the 'T' separator.

    Raises:
        TimestampParseError: on the first malformed or out-of-range part.
    """

    fields_end, offset_hours, offset_minutes = _resolve_offset(text)
    time = _parse_time_fields(text[:fields_end].split(":"))
    return replace(time, offset_hours=offset_hours, offset_minutes=offset_minutes)


def normalize(time: TimeFields, date: DateFields) -> Tuple[TimeFields, DateFields]:
    """
    Fold the offset into the time fields and carry into the date.

    The hour overflow rule is kept exactly as the established behavior:
    an hour of 24 or more is incremented once more and the day is bumped,
    without reducing the hour below 24.

    Raises:
        TimestampParseError: if the carry pushes the year outside [0, 9999].
    """

    hour = time.hour + time.offset_hours
    minute = time.minute + time.offset_minutes

    if minute < 0:
        hour -= 1
        minute += 60
    if minute >= 60:
        hour += 1
        minute -= 60
    if hour < 0:
        date = decrement_day(date)
        hour += 24
    if hour >= 24:
        hour += 1
        date = increment_day(date)

    return replace(time, hour=hour, minute=minute, offset_hours=0, offset_minutes=0), date


def _parse_time_fields(fields: List[str]) -> TimeFields:
    if len(fields) > 3:
        raise TimestampParseError(f"too many time fields, expected at most 3, but got {len(fields)}")

    hour = parse_field(_extract(fields, 0), "hours", "time field", 0, 23)
    minute = parse_field(_extract(fields, 1), "minutes", "time field", 0, 59)

    seconds_field = _extract(fields, 2)
    if seconds_field is None:
        return TimeFields(hour=hour, minute=minute)

    millis = micros = nanos = 0
    decimal_at = seconds_field.find(".")
    if decimal_at != -1:
        millis, micros, nanos = _parse_fraction(seconds_field[decimal_at + 1:])
        seconds_field = seconds_field[:decimal_at]
    second = parse_field(seconds_field, "seconds", "time field", 0, 59)

    return TimeFields(hour=hour, minute=minute, second=second, millis=millis, micros=micros, nanos=nanos)


def _extract(fields: List[str], index: int) -> Optional[str]:
    return fields[index].strip() if index < len(fields) else None


def _parse_fraction(fraction: str) -> Tuple[int, int, int]:
    """Split up to 9 fractional digits into (millis, micros, nanos)."""

    if len(fraction) > MAX_FRACTION_DIGITS:
        raise TimestampParseError("fractional seconds longer than 9 (digits)")
    return (
        _parse_fraction_group(fraction, 0, "millis"),
        _parse_fraction_group(fraction, 3, "micros"),
        _parse_fraction_group(fraction, 6, "nanos"),
    )


def _parse_fraction_group(fraction: str, start: int, what: str) -> int:
    # "5" is half a second: right-pad to 3 digits rather than reading it as 5.
    if start >= len(fraction):
        return 0
    group = fraction[start:start + 3].ljust(3, "0")
    return parse_field(group, "Second", what, 0, 999)


def _find_offset(text: str) -> int:
    negative_at = text.find("-")
    positive_at = text.find("+")
    if negative_at != -1 and positive_at != -1:
        raise TimestampParseError("both a negative and positive offset")
    return negative_at if negative_at != -1 else positive_at


def _check_post_z(text: str, z_at: int) -> int:
    post_z = text[z_at + 1:].strip()
    if post_z:
        raise TimestampParseError(f"'{post_z}' following 'Z'")
    return z_at


def _resolve_offset(text: str) -> Tuple[int, int, int]:
    """
    Locate the end of the time fields and parse the offset.

    Returns:
        (index where the time fields end, signed offset hours, signed offset minutes)
    """

    offset_at = _find_offset(text)
    z_at = text.find("Z")

    if offset_at == -1 and z_at == -1:
        raise TimestampParseError("no 'Z' or offset")
    if offset_at == -1:
        return _check_post_z(text, z_at), 0, 0

    if z_at != -1:
        if z_at < offset_at:
            # An offset following the 'Z' is trailing text and is ignored.
            return _check_post_z(text[:offset_at], z_at), 0, 0
        _check_post_z(text, z_at)
        text = text[:z_at]

    offsets = text[offset_at + 1:].split(":", 2)
    if len(offsets) > 2:
        raise TimestampParseError(
            f"expected at most one colon in offset, but found more in '{text[offset_at:]}'"
        )

    hours = parse_field(offsets[0], "hours", "offset", 0, MAX_OFFSET_HOURS)
    minutes = 0
    if len(offsets) == 2:
        minutes = parse_field(offsets[1], "minutes", "offset", 0, QUARTER_HOURS[-1])
        if minutes not in QUARTER_HOURS:
            raise TimestampParseError(f"minute offset, not a quarter hour, but was {minutes}")

    if text[offset_at] == "-":
        return offset_at, -hours, -minutes
    return offset_at, hours, minutes
