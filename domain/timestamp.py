"""
Domain: ZuluTimestamp value object.

Accepts an ISO-8601(ish) timestamp and maps it to Zulu/UTC:
- only non-negative years, including the century, not exceeding 9999
- dashes, '-', separate the date fields
- colons, ':', separate the time fields
- a 'T' separates the date from the time

Date validation uses the proleptic Gregorian leap day rules; leap seconds are
not accepted.

Contract excerpts implemented here:
- A value is either valid (value is `YYYY-MM-DDTHH:MM:SS[.fraction]Z`) or
  carries an error (value is the offending input). Never both.
- Parsing never raises; the first problem found becomes the error.
- Values are immutable; precision changes produce new instances.

Some accepted forms:
    2022-07-27T16:38Z
    2022-07-27T16:38+00:00Z
    2022-07-27T16:38Z-07
    2022-07-27T16:38:34.123456789-01:45
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Union

from .fields import TimestampParseError
from .time_length import TimeLength
from .zulu_date import parse_date
from .zulu_time import normalize, parse_time

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

EpochMillis = Union[int, Callable[[], int]]


@dataclass(frozen=True, slots=True)
class ZuluTimestamp:
    """
    Immutable result of parsing (or building) a Zulu timestamp.

    value: the normalized Zulu timestamp, or the offending input on error
    error: diagnostic message; None on success
    """

    value: Optional[str]
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.error is not None and not self.error:
            raise ValueError("error must be non-empty when present")

    def __str__(self) -> str:
        return self.value if self.value is not None else ""

    def has_error(self) -> bool:
        return self.error is not None

    @classmethod
    def parse(cls, text: Optional[str]) -> "ZuluTimestamp":
        """
        Map an ISO-8601(ish) string into its Zulu form.

        The input is trimmed and upper-cased first. Date errors take precedence
        over time errors.

        Examples:
            ZuluTimestamp.parse("2022-07-27t16:38:00.5z").value
            # "2022-07-27T16:38:00.500Z"

            ZuluTimestamp.parse("2022-13-01T00:00Z").error
            # "month date field of '13' -- exceeded max value of 12"
        """

        if text is None:
            return cls(None, "null")
        text = text.strip().upper()
        if not text:
            return cls(text, "empty")

        at = text.find("T")
        if at == -1:
            return cls(text, "no date time seperator 'T'")

        try:
            date = parse_date(text[:at])
            time_fields, date = normalize(parse_time(text[at + 1:]), date)
        except TimestampParseError as e:
            return cls(text, str(e))

        return cls(f"{date}T{time_fields}")

    @classmethod
    def from_string(cls, text: Optional[str]) -> "ZuluTimestamp":
        return cls.parse(text)

    @classmethod
    def from_epoch_millis(cls, millis: EpochMillis) -> "ZuluTimestamp":
        """
        Build a millisecond precision Zulu timestamp from epoch milliseconds.

        Accepts either the millis or a zero-argument callable supplying them.
        """

        if callable(millis):
            millis = millis()
        try:
            instant = _EPOCH + timedelta(milliseconds=millis)
        except OverflowError:
            return cls(str(millis), "epoch millis out of range")

        return cls(instant.isoformat(timespec="milliseconds").replace("+00:00", "Z"))

    @classmethod
    def now(cls) -> "ZuluTimestamp":
        return cls.from_epoch_millis(time.time_ns() // 1_000_000)

    def adjust_to(self, time_length: TimeLength) -> "ZuluTimestamp":
        """
        Truncate or zero-pad to the requested precision.

        Error values, and values already at the requested precision, are
        returned unchanged.
        """

        if self.has_error():
            return self
        current = TimeLength.from_value(self.value)
        if current is time_length:
            return self
        if current is None:
            return ZuluTimestamp(self.value, "no matching TimeLength")
        return ZuluTimestamp(time_length.adjust(self.value))

    def to_hour(self) -> "ZuluTimestamp":
        return self.adjust_to(TimeLength.HOUR)

    def to_minute(self) -> "ZuluTimestamp":
        return self.adjust_to(TimeLength.MINUTE)

    def to_second(self) -> "ZuluTimestamp":
        return self.adjust_to(TimeLength.SECOND)

    def to_millis(self) -> "ZuluTimestamp":
        return self.adjust_to(TimeLength.MILLIS)

    def to_micros(self) -> "ZuluTimestamp":
        return self.adjust_to(TimeLength.MICROS)

    def to_nanos(self) -> "ZuluTimestamp":
        return self.adjust_to(TimeLength.NANOS)
