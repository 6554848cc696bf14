"""Value types describing the long-view table: columns and their formats."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .time import StandardTimeFormat, TimeFormat


class SizeFormat(Enum):
    """How file sizes are shown in the size column."""

    DECIMAL_BYTES = "decimal"
    BINARY_BYTES = "binary"
    JUST_BYTES = "bytes"


class UserFormat(Enum):
    NAME = "name"
    NUMERIC = "numeric"


class GroupFormat(Enum):
    REGULAR = "regular"
    SMART = "smart"


class FlagsFormat(Enum):
    """Rendering of the file-flags column."""

    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class TimeTypes:
    """Which timestamp columns to show. Defaults to the modified time only."""

    modified: bool = True
    changed: bool = False
    accessed: bool = False
    created: bool = False

    @classmethod
    def none(cls) -> TimeTypes:
        return cls(modified=False, changed=False, accessed=False, created=False)


@dataclass(frozen=True)
class Columns:
    """Independent column toggles for the details table."""

    time_types: TimeTypes = field(default_factory=TimeTypes)
    inode: bool = False
    links: bool = False
    blocksize: bool = False
    group: bool = False
    git: bool = False
    subdir_git_repos: bool = False
    subdir_git_repos_no_stat: bool = False
    octal: bool = False
    security_context: bool = False
    file_flags: bool = False
    permissions: bool = True
    filesize: bool = True
    user: bool = True


@dataclass(frozen=True)
class TableOptions:
    size_format: SizeFormat = SizeFormat.DECIMAL_BYTES
    time_format: TimeFormat = StandardTimeFormat.DEFAULT
    user_format: UserFormat = UserFormat.NAME
    group_format: GroupFormat = GroupFormat.REGULAR
    flags_format: FlagsFormat = FlagsFormat.SHORT
    columns: Columns = field(default_factory=Columns)
