"""Public package surface for exview.

Exports ``deduce_view`` for turning a flag record and an environment into a
fully-resolved view configuration. Value types live under ``exview.output``.
"""

from __future__ import annotations

from .capabilities import Capabilities, detect_capabilities
from .options.config import load_vars
from .options.errors import OptionsError
from .options.flags import Opts
from .options.view import deduce_strict, deduce_view

__all__ = [
    "Capabilities",
    "OptionsError",
    "Opts",
    "deduce_strict",
    "deduce_view",
    "detect_capabilities",
    "load_vars",
]
