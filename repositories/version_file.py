"""
Version file access.

This module provides *only* the file read for the application version. It does
not interpret the contents; see `domain.version.AppVersion`.

Environment variables (optional):
- APP_VERSION_FILE: path of the version file (defaults to `version.txt` in the
  project root)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables from the project's .env file, if present.
_PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

DEFAULT_VERSION_FILE: str = str(_PROJECT_ROOT / "version.txt")


def version_file_path() -> str:
    """Configured version file path (read on each call so tests can override it)."""

    return os.getenv("APP_VERSION_FILE", DEFAULT_VERSION_FILE)


def load_version_file(path: str) -> Optional[str]:
    """
    Read the version file.

    Returns:
        None if the file does not exist or is empty,
        "" if the file exists but could not be read,
        otherwise the file text with each line newline-terminated.
    """

    file_path = Path(path)
    if not file_path.is_file():
        return None

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            text = "".join(line.rstrip("\r\n") + "\n" for line in f)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            f"Unable to read {path}",
            extra={"path": path, "error": str(e)},
        )
        return ""

    return text or None
