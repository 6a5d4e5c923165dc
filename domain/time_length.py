"""
Domain: precision (TimeLength) of a rendered Zulu timestamp.

Contract excerpts implemented here:
- The precision of a Zulu string is identified purely by its length
  (excluding the trailing 'Z'), with the 'T' at index 10:
  - HOUR:   13  2022-07-27T16
  - MINUTE: 16  2022-07-27T16:38
  - SECOND: 19  2022-07-27T16:38:00
  - MILLIS: 23  2022-07-27T16:38:00.000
  - MICROS: 26  2022-07-27T16:38:00.000000
  - NANOS:  29  2022-07-27T16:38:00.000000000
- Truncation cuts the string; expansion pads from a zero template and never
  recomputes values.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

_ZERO_TEMPLATE = "yyyy-mm-ddT00:00:00.000000000Z"


class TimeLength(Enum):
    HOUR = 13
    MINUTE = 16
    SECOND = 19
    MILLIS = 23
    MICROS = 26
    NANOS = 29

    @staticmethod
    def from_value(iso8601z: Optional[str]) -> Optional["TimeLength"]:
        """
        Resolve the precision of a Zulu string.

        Returns None if the string is not a Zulu string of a known length.
        """

        if not iso8601z or not iso8601z.endswith("Z"):
            return None
        z_less_length = len(iso8601z) - 1
        if z_less_length < TimeLength.HOUR.value or iso8601z[10] != "T":
            return None
        for time_length in TimeLength:
            if time_length.value == z_less_length:
                return time_length
        return None

    @staticmethod
    def from_name(name: str) -> "TimeLength":
        """Case-insensitive lookup by name (e.g. "minute"); raises ValueError if unknown."""

        try:
            return TimeLength[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown precision '{name}'") from None

    def adjust(self, iso8601z: str) -> str:
        """Truncate or zero-pad a Zulu string to this precision."""

        z_less_length = len(iso8601z) - 1
        if self.value < z_less_length:
            base = iso8601z[:self.value]
        else:
            base = iso8601z[:z_less_length] + _ZERO_TEMPLATE[z_less_length:self.value]
        return base + "Z"
