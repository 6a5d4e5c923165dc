"""
Domain: application version descriptor.

The version file body is "<tagVersion> <releaseTimestamp>", e.g.
"v22.7.1 2022-07-27T16:38-07:00".

Contract excerpts implemented here:
- The release timestamp is normalized to minute precision Zulu.
- Any problem yields a version whose tag is the composed error
  "<errorType>(<details>)@<path>" and whose timestamp is the current time
  (minute precision Zulu) from the supplied clock.
- str(version) is "<releaseTimestamp> <tagVersion>".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .timestamp import ZuluTimestamp

Clock = Callable[[], int]


@dataclass(frozen=True, slots=True)
class AppVersion:
    tag_version: str
    release_timestamp: str

    def __str__(self) -> str:
        return f"{self.release_timestamp} {self.tag_version}"

    @staticmethod
    def from_file_body(body: Optional[str], path: str, clock: Clock) -> "AppVersion":
        """
        Build the version from the raw version file text.

        body: None when there is no file, "" when it could not be read
        clock: supplies epoch millis, only consulted for error versions
        """

        if body is None:
            return AppVersion.error(clock, path, "noFile")
        if body == "":
            return AppVersion.error(clock, path, "fileLoadError")

        parts = body.strip().split(" ", 2)
        if len(parts) < 2:
            return AppVersion.error(clock, path, "fileErrorParts", str(len(parts)))

        tag_version, raw_timestamp = parts[0], parts[1]
        problem = validate_tag_version(tag_version)
        if problem is not None:
            return AppVersion.error(clock, path, "fileErrorTagVersion", problem, " from '", tag_version, "'")

        release = ZuluTimestamp.parse(raw_timestamp).to_minute()
        if release.has_error():
            return AppVersion.error(
                clock, path, "fileErrorReleaseTimestamp", release.error, " from '", raw_timestamp, "'"
            )
        return AppVersion(tag_version=tag_version, release_timestamp=release.value)

    @staticmethod
    def error(clock: Clock, path: str, error_type: str, *details: str) -> "AppVersion":
        """Version carrying the composed error string, stamped with the current minute."""

        return AppVersion(
            tag_version=compose_error(error_type, path, *details),
            release_timestamp=ZuluTimestamp.from_epoch_millis(clock).to_minute().value,
        )


def compose_error(error_type: str, path: str, *details: str) -> str:
    """
    "<errorType>(<details>)@<path>"; the parentheses are omitted without details.

    Example:
        compose_error("fileErrorParts", "version.txt", "1")
        # "fileErrorParts(1)@version.txt"
    """

    text = error_type
    if details:
        text += "(" + "".join(details) + ")"
    return f"{text}@{path}"


def validate_tag_version(tag_version: str) -> Optional[str]:
    """
    Validate "v<MAJOR>.<MINOR>.<PATCH>".

    MAJOR: exactly 2 digits
    MINOR: 1-2 digits, 1..12
    PATCH: 1-5 digits

    Returns None when valid, otherwise the reason.
    """

    if not tag_version.startswith("v"):
        return "did not start with a 'v'"
    parts = tag_version[1:].split(".", 3)
    if len(parts) != 3:
        return "not 3 parts"
    return (
        _check_digits("MAJOR", parts[0], 2, 2)
        or _check_digits("MINOR", parts[1], 1, 2, 1, 12)
        or _check_digits("PATCH", parts[2], 1, 5)
    )


def _check_digits(
    level: str,
    value: str,
    min_digits: int,
    max_digits: int,
    min_value: int = 0,
    max_value: Optional[int] = None,
) -> Optional[str]:
    if not value.isascii() or not value.isdigit():
        return f"{level} of '{value}' is not all digits"
    if not min_digits <= len(value) <= max_digits:
        if min_digits == max_digits:
            return f"{level} of '{value}' is not {min_digits} digits"
        return f"{level} of '{value}' is not {min_digits}-{max_digits} digits"
    number = int(value)
    if number < min_value or (max_value is not None and number > max_value):
        return f"{level} of '{value}' is not in the range {min_value}-{max_value}"
    return None
