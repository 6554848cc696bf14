"""Timestamp display formats.

A format is either one of the named styles or a user-supplied custom pair of
strftime-style patterns, one for old files and an optional one for recent
files.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StandardTimeFormat(Enum):
    DEFAULT = "default"
    RELATIVE = "relative"
    ISO = "iso"
    LONG_ISO = "long-iso"
    FULL_ISO = "full-iso"


@dataclass(frozen=True)
class CustomTimeFormat:
    """Custom ``+FORMAT[\\nRECENT]`` style with an optional recent-file line."""

    non_recent: str
    recent: str | None = None


TimeFormat = StandardTimeFormat | CustomTimeFormat


__all__ = [
    "StandardTimeFormat",
    "CustomTimeFormat",
    "TimeFormat",
]
