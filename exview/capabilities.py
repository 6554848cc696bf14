"""Process-wide platform capabilities consulted during option deduction.

Deductions never probe the platform themselves; they receive a
``Capabilities`` value so both states can be simulated in tests.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Capabilities:
    """Read-only facts about the running platform."""

    xattr: bool = True
    stdout_is_tty: bool = True


def detect_capabilities() -> Capabilities:
    """Inspect the current process once and return its capabilities."""
    try:
        is_tty = sys.stdout.isatty()
    except (AttributeError, ValueError):
        is_tty = False
    return Capabilities(xattr=hasattr(os, "listxattr"), stdout_is_tty=is_tty)
