"""View-mode value types.

``Mode`` is a closed union: exactly one of ``Grid``, ``Details``,
``GridDetails`` or ``Lines``. Illegal combinations (a lines view carrying a
table, say) cannot be constructed.
"""

from __future__ import annotations

from dataclasses import dataclass

from .color_scale import ColorScaleOptions
from .file_name import FileStyle
from .table import TableOptions


@dataclass(frozen=True)
class GridOptions:
    """Grid layout; ``across`` fills rows first instead of columns."""

    across: bool = False


@dataclass(frozen=True)
class DetailsOptions:
    """Long/tree view options. ``table`` is ``None`` for a plain tree view."""

    table: TableOptions | None
    header: bool
    xattr: bool
    secattr: bool
    mounts: bool
    color_scale: ColorScaleOptions


@dataclass(frozen=True)
class AlwaysGrid:
    """Always use the grid-details layout regardless of row count."""


@dataclass(frozen=True)
class MinimumRows:
    """Only switch to grid-details once a column would hold ``rows`` rows."""

    rows: int


RowThreshold = AlwaysGrid | MinimumRows


@dataclass(frozen=True)
class SetWidth:
    width: int

    def actual_terminal_width(self) -> int | None:
        return self.width


@dataclass(frozen=True)
class AutomaticWidth:
    """Width left to the renderer, which asks the terminal."""

    def actual_terminal_width(self) -> int | None:
        return None


TerminalWidth = SetWidth | AutomaticWidth


@dataclass(frozen=True)
class Grid:
    grid: GridOptions


@dataclass(frozen=True)
class Details:
    details: DetailsOptions


@dataclass(frozen=True)
class GridDetails:
    details: DetailsOptions
    row_threshold: RowThreshold


@dataclass(frozen=True)
class Lines:
    """One file name per line."""


Mode = Grid | Details | GridDetails | Lines


@dataclass(frozen=True)
class View:
    """Everything the renderer needs to lay out a listing."""

    mode: Mode
    width: TerminalWidth
    file_style: FileStyle
    deref_links: bool = False
    total_size: bool = False


__all__ = [
    "GridOptions",
    "DetailsOptions",
    "AlwaysGrid",
    "MinimumRows",
    "RowThreshold",
    "SetWidth",
    "AutomaticWidth",
    "TerminalWidth",
    "Grid",
    "Details",
    "GridDetails",
    "Lines",
    "Mode",
    "View",
]
