"""Config file discovery.

Walk-up finder locates objfacade.toml the way git finds .git/.
The OBJFACADE_CONFIG env var and the --config CLI flag override discovery.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "objfacade.toml"
CONFIG_ENV_VAR = "OBJFACADE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for objfacade.toml.

    Returns the path to the config file, or None if not found.
    Checks OBJFACADE_CONFIG first; a dangling env path means no config.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent
