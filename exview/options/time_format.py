"""Timestamp style deduction and the ``+FORMAT`` custom-style parser.

The style comes from ``--time-style``, else a non-empty ``TIME_STYLE``
environment variable, else the default. A style starting with ``+`` is a
custom format: the first line formats old files, an optional second line
formats recent ones.
"""

from __future__ import annotations

from ..output.time import CustomTimeFormat, StandardTimeFormat, TimeFormat
from . import vars as keys
from .errors import BadArgument, EmptyCustomFormat
from .flags import Opts
from .lookup import env, first_match, flag
from .vars import Vars

_NAMED_STYLES = {style.value: style for style in StandardTimeFormat}


def deduce_time_format(opts: Opts, vars: Vars) -> TimeFormat:
    found = first_match(
        flag("time-style", opts.time_style),
        env(vars, keys.TIME_STYLE, skip_empty=True),
    )
    if found is None:
        return StandardTimeFormat.DEFAULT

    word = found.value
    named = _NAMED_STYLES.get(word)
    if named is not None:
        return named
    if word.startswith("+"):
        return parse_custom_format(word[1:])
    raise BadArgument("time-style", word)


def _split_lines(text: str) -> list[str]:
    """Split on ``\\n`` dropping one trailing terminator and any ``\\r`` before it."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_custom_format(text: str) -> CustomTimeFormat:
    """Parse the text after ``+`` into a custom format.

    Lines past the second are ignored. Raises ``EmptyCustomFormat`` when the
    first line is missing or empty, or when a second line exists but is empty.
    """
    lines = _split_lines(text)
    if not lines or not lines[0]:
        raise EmptyCustomFormat(recent=False)

    recent = lines[1] if len(lines) > 1 else None
    if recent == "":
        raise EmptyCustomFormat(recent=True)

    return CustomTimeFormat(non_recent=lines[0], recent=recent)
