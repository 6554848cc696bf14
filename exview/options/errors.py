"""Errors raised while deducing options.

Every error is final for the resolution call: nothing inside the engine
recovers from one. Instances compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lookup import NumberSource


class OptionsError(Exception):
    """Base class for option-resolution failures."""


@dataclass(eq=True, unsafe_hash=True)
class Useless(OptionsError):
    """A flag that has no effect in the chosen mode.

    ``given=False``: the flag needs ``context`` to do anything.
    ``given=True``: the flag does nothing when ``context`` is also present.
    """

    flag: str
    given: bool
    context: str

    def __str__(self) -> str:
        relation = "given" if self.given else "without"
        return f"Option --{self.flag} is useless {relation} option --{self.context}"


@dataclass(eq=True, unsafe_hash=True)
class Useless2(OptionsError):
    """A flag that needs one of two other flags to have any effect."""

    flag: str
    required_a: str
    required_b: str

    def __str__(self) -> str:
        return (
            f"Option --{self.flag} is useless without options "
            f"--{self.required_a} or --{self.required_b}"
        )


@dataclass(eq=True, unsafe_hash=True)
class BadArgument(OptionsError):
    option: str
    value: str

    def __str__(self) -> str:
        return f"Option --{self.option} has no {self.value!r} setting"


@dataclass(eq=True)
class FailedParse(OptionsError):
    """A numeric value that did not parse.

    ``source`` says where the text came from (a flag or an environment key).
    """

    value: str
    source: NumberSource
    error: ValueError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FailedParse):
            return NotImplemented
        return (
            self.value == other.value
            and self.source == other.source
            and str(self.error) == str(other.error)
        )

    def __hash__(self) -> int:
        return hash((self.value, self.source, str(self.error)))

    def __str__(self) -> str:
        return f"Value {self.value!r} not valid for {self.source}: {self.error}"


EMPTY_NON_RECENT_FORMAT_MSG = (
    "Custom timestamp format is empty, "
    "please supply a chrono format string after the plus sign."
)
EMPTY_RECENT_FORMAT_MSG = (
    "Custom timestamp format for recent files is empty, "
    "please supply a chrono format string at the second line."
)


@dataclass(eq=True, unsafe_hash=True)
class EmptyCustomFormat(OptionsError):
    """A ``+FORMAT`` time style with an empty segment."""

    recent: bool

    def __str__(self) -> str:
        return EMPTY_RECENT_FORMAT_MSG if self.recent else EMPTY_NON_RECENT_FORMAT_MSG
