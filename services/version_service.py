"""
Application version service.

Resolves the application version once per process and caches it:
- the version file is read on first use only
- concurrent first calls initialize exactly once
- a missing or malformed file still yields a version (an error version
  stamped with the current minute), logged as a warning
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Optional

from domain.version import AppVersion
from repositories.version_file import load_version_file, version_file_path

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_cached: Optional[AppVersion] = None


def _current_millis() -> int:
    return time.time_ns() // 1_000_000


def resolve_app_version(path: str) -> AppVersion:
    """Read and interpret the version file at `path` (no caching)."""

    version = AppVersion.from_file_body(load_version_file(path), path, _current_millis)
    if "@" in version.tag_version:
        logger.warning(
            "Application version file missing or invalid",
            extra={"path": path, "version_error": version.tag_version},
        )
    return version


def get_app_version() -> str:
    """
    Process-wide application version string, "<releaseTimestamp> <tagVersion>".
    """

    global _cached
    version = _cached
    if version is None:
        with _lock:
            version = _cached
            if version is None:
                version = resolve_app_version(version_file_path())
                _cached = version
                logger.info(f"Version: {version}", extra={"app_version": str(version)})
    return str(version)


def reset_app_version() -> None:
    """Forget the cached version (used by tests)."""

    global _cached
    with _lock:
        _cached = None
