"""File-name styling options: indicators, icons, quoting and hyperlinks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_ICON_SPACING = 1


class Classify(Enum):
    JUST_FILENAMES = "just-filenames"
    ADD_FILE_INDICATORS = "add-file-indicators"


class QuoteStyle(Enum):
    QUOTE_SPACES = "quote-spaces"
    NO_QUOTES = "no-quotes"


class EmbedHyperlinks(Enum):
    OFF = "off"
    ON = "on"


@dataclass(frozen=True)
class ShowIcons:
    """Icon display; ``spacing`` is the number of spaces after an icon."""

    enabled: bool = False
    spacing: int = DEFAULT_ICON_SPACING


@dataclass(frozen=True)
class FileStyle:
    classify: Classify = Classify.JUST_FILENAMES
    show_icons: ShowIcons = ShowIcons()
    quote_style: QuoteStyle = QuoteStyle.QUOTE_SPACES
    embed_hyperlinks: EmbedHyperlinks = EmbedHyperlinks.OFF
