"""Locate mokareads.toml.

Walks up from the working directory until a ``mokareads.toml`` is found.
``MOKAREADS_CONFIG`` pins an explicit file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "mokareads.toml"
CONFIG_ENV_VAR = "MOKAREADS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest config file above *start* (default: cwd), or None.

    When ``MOKAREADS_CONFIG`` is set it wins, and a missing file there
    means no config at all rather than a fallback to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
