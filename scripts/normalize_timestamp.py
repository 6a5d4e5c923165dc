#!/usr/bin/env python3
"""
Timestamp Normalization Script

Normalizes ISO-8601(ish) timestamps to their Zulu (UTC) form, optionally
adjusting the sub-second precision.

Usage:
    python normalize_timestamp.py 2022-07-27T16:38-07:00
    python normalize_timestamp.py 2022-07-27T16:38:00.5Z --precision nanos
    python normalize_timestamp.py --now --precision minute
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.time_length import TimeLength
from domain.timestamp import ZuluTimestamp

PRECISION_CHOICES = [time_length.name.lower() for time_length in TimeLength]


def normalize(text: Optional[str], precision: Optional[str] = None) -> ZuluTimestamp:
    """
    Parse (or, for None, take the current time) and adjust to a precision.

    Args:
        text: Timestamp text, or None for the current time
        precision: Optional precision name (e.g., "minute")

    Returns:
        ZuluTimestamp, possibly carrying an error
    """
    timestamp = ZuluTimestamp.now() if text is None else ZuluTimestamp.parse(text)
    if precision:
        timestamp = timestamp.adjust_to(TimeLength.from_name(precision))
    return timestamp


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Normalize ISO-8601 timestamps to Zulu (UTC)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fold an offset into UTC
  python normalize_timestamp.py 2022-07-27T16:38-07:00

  # Expand to nanosecond precision
  python normalize_timestamp.py 2022-07-27T16:38Z --precision nanos

  # Current time to the minute
  python normalize_timestamp.py --now --precision minute
        """
    )

    parser.add_argument(
        "values",
        nargs="*",
        help="Timestamps to normalize"
    )

    parser.add_argument(
        "--precision",
        "-p",
        choices=PRECISION_CHOICES,
        help="Target precision"
    )

    parser.add_argument(
        "--now",
        action="store_true",
        help="Normalize the current time"
    )

    args = parser.parse_args(argv)

    if not args.values and not args.now:
        parser.error("at least one timestamp (or --now) is required")

    inputs: List[Optional[str]] = list(args.values)
    if args.now:
        inputs.append(None)

    failures = 0
    for text in inputs:
        timestamp = normalize(text, args.precision)
        if timestamp.has_error():
            failures += 1
            print(f"ERROR {text}: {timestamp.error}")
        else:
            print(timestamp.value)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
