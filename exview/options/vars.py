"""Environment lookup abstraction.

Deductions read the environment only through ``Vars`` so tests can pass an
in-memory mapping. Settings that were renamed keep both names: the current
key is consulted first, then the legacy one.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping

log = logging.getLogger(__name__)

COLUMNS = "COLUMNS"
TIME_STYLE = "TIME_STYLE"

EZA_GRID_ROWS = "EZA_GRID_ROWS"
EXA_GRID_ROWS = "EXA_GRID_ROWS"

EZA_OVERRIDE_GIT = "EZA_OVERRIDE_GIT"
EXA_OVERRIDE_GIT = "EXA_OVERRIDE_GIT"

EZA_MIN_LUMINANCE = "EZA_MIN_LUMINANCE"
EXA_MIN_LUMINANCE = "EXA_MIN_LUMINANCE"

EZA_ICON_SPACING = "EZA_ICON_SPACING"
EXA_ICON_SPACING = "EXA_ICON_SPACING"

EZA_STRICT = "EZA_STRICT"
EXA_STRICT = "EXA_STRICT"

EZA_WINDOWS_ATTRIBUTES = "EZA_WINDOWS_ATTRIBUTES"

EZA_CONFIG_DIR = "EZA_CONFIG_DIR"


class Vars(ABC):
    """Read-only key/value environment."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value for ``key`` or ``None`` when unset."""

    def get_with_fallback(self, primary: str, secondary: str) -> str | None:
        """Return ``primary``'s value, else ``secondary``'s."""
        value = self.get(primary)
        if value is not None:
            return value
        return self.get(secondary)

    def source(self, primary: str, secondary: str) -> str | None:
        """Name the key ``get_with_fallback`` would take its value from."""
        if self.get(primary) is not None:
            return primary
        if self.get(secondary) is not None:
            return secondary
        return None


class EnvironVars(Vars):
    """Process environment (or any injected string mapping)."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> str | None:
        value = self._environ.get(key)
        log.debug("environment %s is %s", key, "unset" if value is None else "set")
        return value


class MappingVars(Vars):
    """In-memory environment, mutable only through ``set``/``unset``."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)


class ChainedVars(Vars):
    """Layered environment: the first layer holding a key wins."""

    def __init__(self, *layers: Vars) -> None:
        self.layers = layers

    def get(self, key: str) -> str | None:
        for layer in self.layers:
            value = layer.get(key)
            if value is not None:
                return value
        return None
