"""Locate ``layers.toml``.

An explicit path in ``LAYERS_CONFIG`` wins; otherwise the nearest
``layers.toml`` in the start directory or any of its ancestors is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "layers.toml"
CONFIG_ENV_VAR = "LAYERS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None.

    A ``LAYERS_CONFIG`` pointing at a missing file yields None rather than
    falling back to the walk-up.
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
