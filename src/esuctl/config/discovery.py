"""Config file discovery.

Walks up from the working directory looking for ``esuctl.toml``.
``ESUCTL_CONFIG`` pins an explicit file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "esuctl.toml"
CONFIG_ENV_VAR = "ESUCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``esuctl.toml`` at or above *start*, or None.

    An ``ESUCTL_CONFIG`` pointing at a missing file disables discovery.
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

