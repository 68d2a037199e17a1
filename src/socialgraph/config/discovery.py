"""Locate socialgraph.toml.

``SOCIALGRAPH_CONFIG`` wins when set; otherwise the nearest
``socialgraph.toml`` in the starting directory or any parent is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "socialgraph.toml"
CONFIG_ENV_VAR = "SOCIALGRAPH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``SOCIALGRAPH_CONFIG`` pointing at a missing file means "no config",
    not "keep searching".
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
