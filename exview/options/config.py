"""Read-only variable defaults file.

``defaults.json`` in the config directory maps environment keys such as
``TIME_STYLE`` or ``EZA_GRID_ROWS`` to string values. It is only ever read,
and a real environment variable always beats an entry in it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from . import vars as keys
from .vars import ChainedVars, EnvironVars, MappingVars, Vars

log = logging.getLogger(__name__)

APP_NAME = "exview"
DEFAULTS_FILENAME = "defaults.json"


def config_dir(vars: Vars) -> Path:
    """``EZA_CONFIG_DIR`` when set and non-empty, else the platform config dir."""
    override = vars.get(keys.EZA_CONFIG_DIR)
    if override:
        return Path(override)
    return Path(user_config_dir(APP_NAME, appauthor=False))


def read_env_defaults(path: Path) -> dict[str, str]:
    """Read string defaults from ``path``.

    A missing, unreadable or malformed file gives no defaults, as does any
    top-level value other than an object. Non-string entries are skipped.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        log.debug("ignoring defaults file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.debug("ignoring defaults file %s: not an object", path)
        return {}
    return {key: value for key, value in data.items() if isinstance(value, str)}


def load_vars() -> Vars:
    """Process environment layered over the defaults file."""
    environ = EnvironVars()
    defaults = read_env_defaults(config_dir(environ) / DEFAULTS_FILENAME)
    return ChainedVars(environ, MappingVars(defaults))
