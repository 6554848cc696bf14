"""Flag record consumed by the deductions.

Counting flags hold how many times they were given (``> 0`` means set);
valued flags hold the raw string, or ``None`` when absent. The command-line
parser that fills this record lives outside the package.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorScaleModeArg(Enum):
    FIXED = "fixed"
    GRADIENT = "gradient"


@dataclass(frozen=True)
class Opts:
    # view modes
    oneline: int = 0
    long: int = 0
    grid: int = 0
    across: int = 0
    tree: int = 0
    recurse: int = 0
    level: int | None = None
    width: int | None = None

    # display
    classify: str | None = None
    icons: str | None = None
    hyperlink: str | None = None
    no_quotes: int = 0
    color_scale: str | None = None
    color_scale_mode: ColorScaleModeArg = ColorScaleModeArg.GRADIENT
    dereference: int = 0
    total_size: int = 0

    # long view
    binary: int = 0
    bytes: int = 0
    group: int = 0
    smart_group: int = 0
    header: int = 0
    links: int = 0
    inode: int = 0
    blocksize: int = 0
    numeric: int = 0
    octal: int = 0
    mounts: int = 0
    extended: int = 0
    security_context: int = 0
    file_flags: int = 0

    # timestamps
    time: str | None = None
    time_style: str | None = None
    modified: int = 0
    changed: int = 0
    accessed: int = 0
    created: int = 0
    no_time: int = 0

    # git
    git: int = 0
    no_git: int = 0
    git_repos: int = 0
    git_repos_no_status: int = 0

    # hidden columns
    no_permissions: int = 0
    no_filesize: int = 0
    no_user: int = 0
