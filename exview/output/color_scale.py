"""Color-scale policy for coloring size and age columns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_MIN_LUMINANCE = 40
MIN_LUMINANCE_RANGE = range(-100, 101)


class ColorScaleMode(Enum):
    FIXED = "fixed"
    GRADIENT = "gradient"


@dataclass(frozen=True)
class ColorScaleOptions:
    """Which dimensions are color-scaled, and how dark the scale may go.

    ``min_luminance`` always lies within ``[-100, 100]``.
    """

    mode: ColorScaleMode = ColorScaleMode.GRADIENT
    min_luminance: int = DEFAULT_MIN_LUMINANCE
    size: bool = False
    age: bool = False
