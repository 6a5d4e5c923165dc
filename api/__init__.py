"""Zulu timestamp service API."""

__version__ = "0.1.0"
