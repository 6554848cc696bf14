"""Color-scale deduction.

The minimum luminance is read leniently: an unparsable or out-of-range value
falls back to the default instead of failing, unlike the width and row
settings.
"""

from __future__ import annotations

import logging

from ..output.color_scale import (
    DEFAULT_MIN_LUMINANCE,
    MIN_LUMINANCE_RANGE,
    ColorScaleMode,
    ColorScaleOptions,
)
from . import vars as keys
from .errors import BadArgument
from .flags import ColorScaleModeArg, Opts
from .lookup import env_pair, first_match, parse_signed
from .vars import Vars

log = logging.getLogger(__name__)

_MODES = {
    ColorScaleModeArg.FIXED: ColorScaleMode.FIXED,
    ColorScaleModeArg.GRADIENT: ColorScaleMode.GRADIENT,
}


def deduce_min_luminance(vars: Vars) -> int:
    found = first_match(env_pair(vars, keys.EZA_MIN_LUMINANCE, keys.EXA_MIN_LUMINANCE))
    if found is None:
        return DEFAULT_MIN_LUMINANCE
    try:
        luminance = parse_signed(found.value)
    except ValueError:
        log.debug("ignoring unparsable %s=%r", found.source.key, found.value)
        return DEFAULT_MIN_LUMINANCE
    if luminance not in MIN_LUMINANCE_RANGE:
        log.debug("ignoring out-of-range %s=%r", found.source.key, found.value)
        return DEFAULT_MIN_LUMINANCE
    return luminance


def deduce_color_scale(opts: Opts, vars: Vars) -> ColorScaleOptions:
    """Resolve the color-scale mode, luminance and scaled dimensions.

    ``--color-scale`` takes a comma-separated list of ``size``, ``age`` and
    ``all``. Tokens only ever switch dimensions on.
    """
    size = age = False
    if opts.color_scale is not None:
        for word in opts.color_scale.split(","):
            if word == "all":
                size = age = True
            elif word == "age":
                age = True
            elif word == "size":
                size = True
            else:
                raise BadArgument("color-scale", word)

    return ColorScaleOptions(
        mode=_MODES[opts.color_scale_mode],
        min_luminance=deduce_min_luminance(vars),
        size=size,
        age=age,
    )
