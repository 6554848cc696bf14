"""Top-level view deduction: mode selection, strict checks and terminal width.

Mode flags are resolved by priority rather than rejected as conflicts:
``--long`` wins and may combine with ``--grid``; otherwise ``--tree``, then
``--oneline``, then the grid fallback. Under strict mode, flags that would
silently do nothing in the chosen mode are reported as errors.
"""

from __future__ import annotations

import logging

from ..capabilities import Capabilities
from ..output.view import (
    AlwaysGrid,
    AutomaticWidth,
    Details,
    DetailsOptions,
    Grid,
    GridDetails,
    GridOptions,
    Lines,
    MinimumRows,
    Mode,
    RowThreshold,
    SetWidth,
    TerminalWidth,
    View,
)
from . import vars as keys
from .color_scale import deduce_color_scale
from .errors import Useless, Useless2
from .file_name import deduce_file_style
from .flags import Opts
from .lookup import env, env_pair, first_match, parse_count
from .table import deduce_table
from .vars import Vars

log = logging.getLogger(__name__)


def deduce_view(
    opts: Opts,
    vars: Vars,
    strict: bool = False,
    capabilities: Capabilities = Capabilities(),
) -> View:
    """Resolve the complete view configuration for one listing."""
    mode = deduce_mode(opts, vars, strict, capabilities)
    width = deduce_terminal_width(opts, vars)
    is_tty = width.actual_terminal_width() is not None or capabilities.stdout_is_tty
    view = View(
        mode=mode,
        width=width,
        file_style=deduce_file_style(opts, vars, is_tty),
        deref_links=opts.dereference > 0,
        total_size=opts.total_size > 0,
    )
    log.debug("resolved view: %r", view)
    return view


def deduce_strict(vars: Vars) -> bool:
    """Strict mode is on when either strict variable is set to anything."""
    return vars.get_with_fallback(keys.EZA_STRICT, keys.EXA_STRICT) is not None


def deduce_mode(
    opts: Opts,
    vars: Vars,
    strict: bool = False,
    capabilities: Capabilities = Capabilities(),
) -> Mode:
    """Choose between the grid, details, grid-details and lines views.

    As with other options, the last mode flag given should win, so
    ``--oneline --long`` gives details and ``--long --oneline`` gives lines.
    ``--grid`` and ``--tree`` can also combine with ``--long``; a long tree is
    handled by the directory walker rather than here.
    """
    if not (opts.long > 0 or opts.oneline > 0 or opts.grid > 0 or opts.tree > 0):
        if strict:
            check_long_only_flags(opts)
        return Grid(deduce_grid(opts))

    if opts.long > 0:
        details = deduce_details_long(opts, vars, strict, capabilities)
        if opts.grid > 0:
            return GridDetails(details=details, row_threshold=deduce_row_threshold(vars))
        return Details(details)

    if strict:
        check_long_only_flags(opts)

    if opts.tree > 0:
        return Details(deduce_details_tree(opts, vars, capabilities))

    if opts.oneline > 0:
        return Lines()

    return Grid(deduce_grid(opts))


def check_long_only_flags(opts: Opts) -> None:
    """Reject flags that only affect the long view when it is not in use."""
    long_only = (
        (opts.binary > 0, "binary"),
        (opts.bytes > 0, "bytes"),
        (opts.inode > 0, "inode"),
        (opts.links > 0, "links"),
        (opts.header > 0, "header"),
        (opts.blocksize > 0, "blocksize"),
        (opts.time is not None, "time"),
        (opts.group > 0, "group"),
        (opts.numeric > 0, "numeric"),
        (opts.mounts > 0, "mounts"),
    )
    for is_set, name in long_only:
        if is_set:
            raise Useless(name, False, "long")

    if opts.git > 0 and opts.no_git == 0:
        raise Useless("git", False, "long")
    if opts.level is not None and opts.recurse == 0 and opts.tree == 0:
        raise Useless2("level", "recurse", "tree")


def deduce_grid(opts: Opts) -> GridOptions:
    return GridOptions(across=opts.across > 0)


def deduce_details_long(
    opts: Opts,
    vars: Vars,
    strict: bool = False,
    capabilities: Capabilities = Capabilities(),
) -> DetailsOptions:
    if strict:
        if opts.across > 0 and opts.grid == 0:
            raise Useless("across", True, "long")
        if opts.oneline > 0:
            raise Useless("one-line", True, "long")

    return DetailsOptions(
        table=deduce_table(opts, vars, capabilities),
        header=opts.header > 0,
        xattr=capabilities.xattr and opts.extended > 0,
        secattr=capabilities.xattr and opts.security_context > 0,
        mounts=opts.mounts > 0,
        color_scale=deduce_color_scale(opts, vars),
    )


def deduce_details_tree(
    opts: Opts,
    vars: Vars,
    capabilities: Capabilities = Capabilities(),
) -> DetailsOptions:
    """Details options for a plain tree: no table and no header."""
    return DetailsOptions(
        table=None,
        header=False,
        xattr=capabilities.xattr and opts.extended > 0,
        secattr=capabilities.xattr and opts.security_context > 0,
        mounts=opts.mounts > 0,
        color_scale=deduce_color_scale(opts, vars),
    )


def deduce_terminal_width(opts: Opts, vars: Vars) -> TerminalWidth:
    """Explicit ``--width`` first, then ``COLUMNS``, else automatic.

    A width below 1 means automatic rather than an error.
    """
    if opts.width is not None:
        return SetWidth(opts.width) if opts.width >= 1 else AutomaticWidth()

    found = first_match(env(vars, keys.COLUMNS))
    if found is None:
        return AutomaticWidth()
    return SetWidth(parse_count(found))


def deduce_row_threshold(vars: Vars) -> RowThreshold:
    found = first_match(env_pair(vars, keys.EZA_GRID_ROWS, keys.EXA_GRID_ROWS))
    if found is None:
        return AlwaysGrid()
    return MinimumRows(parse_count(found))
