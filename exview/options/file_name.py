"""File-name style deduction: classify indicators, icons, quoting, hyperlinks."""

from __future__ import annotations

from ..output.file_name import (
    DEFAULT_ICON_SPACING,
    Classify,
    EmbedHyperlinks,
    FileStyle,
    QuoteStyle,
    ShowIcons,
)
from . import vars as keys
from .errors import BadArgument
from .flags import Opts
from .lookup import env_pair, first_match, parse_count
from .vars import Vars

_ALWAYS = "always"
_NEVER = "never"
_AUTO_WORDS = frozenset({"auto", "automatic"})


def _when(option: str, word: str | None, is_tty: bool) -> bool:
    """Resolve an ``always|auto|never`` switch; absent means never."""
    if word is None or word == _NEVER:
        return False
    if word == _ALWAYS:
        return True
    if word in _AUTO_WORDS:
        return is_tty
    raise BadArgument(option, word)


def deduce_icon_spacing(vars: Vars) -> int:
    found = first_match(env_pair(vars, keys.EZA_ICON_SPACING, keys.EXA_ICON_SPACING))
    if found is None:
        return DEFAULT_ICON_SPACING
    return parse_count(found)


def deduce_file_style(opts: Opts, vars: Vars, is_tty: bool) -> FileStyle:
    classify = _when("classify", opts.classify, is_tty)
    show_icons = _when("icons", opts.icons, is_tty)
    hyperlinks = _when("hyperlink", opts.hyperlink, is_tty)

    return FileStyle(
        classify=Classify.ADD_FILE_INDICATORS if classify else Classify.JUST_FILENAMES,
        show_icons=ShowIcons(enabled=True, spacing=deduce_icon_spacing(vars)) if show_icons else ShowIcons(),
        quote_style=QuoteStyle.NO_QUOTES if opts.no_quotes > 0 else QuoteStyle.QUOTE_SPACES,
        embed_hyperlinks=EmbedHyperlinks.ON if hyperlinks else EmbedHyperlinks.OFF,
    )
