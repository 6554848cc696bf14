"""Declarative precedence chains for settings with several sources.

A setting lists its sources in priority order, for example
``first_match(flag("time-style", opts.time_style), env(vars, TIME_STYLE))``;
the first source that yields a value wins and remembers where it came from,
so parse errors can name the flag or variable responsible.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from dataclasses import dataclass

from .errors import FailedParse
from .vars import Vars

_UNSIGNED_RE = re.compile(r"\+?[0-9]+", re.ASCII)
_SIGNED_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


@dataclass(frozen=True)
class FlagSource:
    name: str

    def __str__(self) -> str:
        return f"option --{self.name}"


@dataclass(frozen=True)
class EnvSource:
    key: str

    def __str__(self) -> str:
        return f"environment variable {self.key}"


NumberSource = FlagSource | EnvSource


@dataclass(frozen=True)
class Lookup:
    """A raw setting value and the source that supplied it."""

    value: str
    source: NumberSource


Strategy = Callable[[], "Lookup | None"]


def flag(name: str, value: str | None) -> Strategy:
    """Source backed by a valued command-line flag."""

    def lookup() -> Lookup | None:
        if value is None:
            return None
        return Lookup(value, FlagSource(name))

    return lookup


def env(vars: Vars, key: str, *, skip_empty: bool = False) -> Strategy:
    """Source backed by one environment key.

    With ``skip_empty`` an empty value counts as unset.
    """

    def lookup() -> Lookup | None:
        value = vars.get(key)
        if value is None or (skip_empty and value == ""):
            return None
        return Lookup(value, EnvSource(key))

    return lookup


def env_pair(vars: Vars, primary: str, legacy: str) -> Strategy:
    """Source backed by a current key and its legacy alias."""

    def lookup() -> Lookup | None:
        value = vars.get_with_fallback(primary, legacy)
        if value is None:
            return None
        return Lookup(value, EnvSource(vars.source(primary, legacy) or primary))

    return lookup


def first_match(*strategies: Strategy) -> Lookup | None:
    """Evaluate ``strategies`` in order and return the first hit."""
    for strategy in strategies:
        found = strategy()
        if found is not None:
            return found
    return None


def _invalid_digits(text: str) -> ValueError:
    if not text:
        return ValueError("cannot parse integer from empty string")
    return ValueError(f"invalid digit found in {text!r}")


def _bounded(value: int) -> int:
    if value > sys.maxsize:
        raise ValueError("number too large to fit in target type")
    if value < -sys.maxsize - 1:
        raise ValueError("number too small to fit in target type")
    return value


def parse_unsigned(text: str) -> int:
    """Parse a non-negative decimal integer no larger than ``sys.maxsize``.

    Stricter than ``int()``: no surrounding whitespace, no underscores and
    ASCII digits only.
    """
    if not _UNSIGNED_RE.fullmatch(text):
        raise _invalid_digits(text)
    return _bounded(int(text))


def parse_signed(text: str) -> int:
    if not _SIGNED_RE.fullmatch(text):
        raise _invalid_digits(text)
    return _bounded(int(text))


def parse_count(found: Lookup) -> int:
    """Parse ``found`` as an unsigned count, attributing failures to its source."""
    try:
        return parse_unsigned(found.value)
    except ValueError as exc:
        raise FailedParse(found.value, found.source, exc) from exc
