"""Deductions for the long-view table: columns, time columns and formats."""

from __future__ import annotations

from ..capabilities import Capabilities
from ..output.table import (
    Columns,
    FlagsFormat,
    GroupFormat,
    SizeFormat,
    TableOptions,
    TimeTypes,
    UserFormat,
)
from . import vars as keys
from .errors import BadArgument, Useless
from .flags import Opts
from .time_format import deduce_time_format
from .vars import Vars

_TIME_WORDS = {
    "mod": TimeTypes(modified=True),
    "modified": TimeTypes(modified=True),
    "ch": TimeTypes(modified=False, changed=True),
    "changed": TimeTypes(modified=False, changed=True),
    "acc": TimeTypes(modified=False, accessed=True),
    "accessed": TimeTypes(modified=False, accessed=True),
    "cr": TimeTypes(modified=False, created=True),
    "created": TimeTypes(modified=False, created=True),
}


def deduce_table(opts: Opts, vars: Vars, capabilities: Capabilities = Capabilities()) -> TableOptions:
    """Assemble table options from independently resolved leaves."""
    return TableOptions(
        size_format=deduce_size_format(opts),
        time_format=deduce_time_format(opts, vars),
        user_format=deduce_user_format(opts),
        group_format=deduce_group_format(opts),
        flags_format=deduce_flags_format(vars),
        columns=deduce_columns(opts, vars, capabilities),
    )


def deduce_columns(opts: Opts, vars: Vars, capabilities: Capabilities = Capabilities()) -> Columns:
    """Resolve column toggles.

    Setting either git-override variable hides every git column no matter
    which flags were given. ``--git-repos`` wins over ``--git-repos-no-status``.
    """
    time_types = deduce_time_types(opts)

    git_allowed = (
        opts.no_git == 0
        and vars.get_with_fallback(keys.EZA_OVERRIDE_GIT, keys.EXA_OVERRIDE_GIT) is None
    )
    subdir_git_repos = git_allowed and opts.git_repos > 0

    return Columns(
        time_types=time_types,
        inode=opts.inode > 0,
        links=opts.links > 0,
        blocksize=opts.blocksize > 0,
        group=opts.group > 0,
        git=git_allowed and opts.git > 0,
        subdir_git_repos=subdir_git_repos,
        subdir_git_repos_no_stat=git_allowed and not subdir_git_repos and opts.git_repos_no_status > 0,
        octal=opts.octal > 0,
        security_context=capabilities.xattr and opts.security_context > 0,
        file_flags=opts.file_flags > 0,
        permissions=opts.no_permissions == 0,
        filesize=opts.no_filesize == 0,
        user=opts.no_user == 0,
    )


def deduce_time_types(opts: Opts) -> TimeTypes:
    """Pick the timestamp columns to show.

    Columns are chosen either with individual flags (``--modified``,
    ``--accessed``...) or with one ``--time=WORD``; using both at once is an
    error. Several individual flags may be combined. ``--no-time`` hides every
    timestamp and overrides everything else.
    """
    if opts.no_time > 0:
        return TimeTypes.none()

    individual = (
        ("modified", opts.modified > 0),
        ("changed", opts.changed > 0),
        ("accessed", opts.accessed > 0),
        ("created", opts.created > 0),
    )

    if opts.time is not None:
        for name, is_set in individual:
            if is_set:
                raise Useless(name, True, "time")
        try:
            return _TIME_WORDS[opts.time]
        except KeyError:
            raise BadArgument("time", opts.time) from None

    if any(is_set for _, is_set in individual):
        return TimeTypes(**{name: is_set for name, is_set in individual})

    return TimeTypes()


def deduce_size_format(opts: Opts) -> SizeFormat:
    """Choose the size column format.

    Decimal prefixes are the default since they are the most widely
    understood. ``--binary`` beats ``--bytes`` when both are given.
    """
    if opts.binary > 0:
        return SizeFormat.BINARY_BYTES
    if opts.bytes > 0:
        return SizeFormat.JUST_BYTES
    return SizeFormat.DECIMAL_BYTES


def deduce_user_format(opts: Opts) -> UserFormat:
    return UserFormat.NUMERIC if opts.numeric > 0 else UserFormat.NAME


def deduce_group_format(opts: Opts) -> GroupFormat:
    return GroupFormat.SMART if opts.smart_group > 0 else GroupFormat.REGULAR


def deduce_flags_format(vars: Vars) -> FlagsFormat:
    # Unknown values fall back to the short form.
    if vars.get(keys.EZA_WINDOWS_ATTRIBUTES) == "long":
        return FlagsFormat.LONG
    return FlagsFormat.SHORT
