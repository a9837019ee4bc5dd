"""Config file discovery.

lsbctl reads at most one TOML file: the ``LSBCTL_CONFIG`` env var wins,
otherwise the system-wide ``/etc/lsbctl.toml`` is used when it exists.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_ENV_VAR = "LSBCTL_CONFIG"
DEFAULT_CONFIG_PATH = Path("/etc/lsbctl.toml")


def find_config(default: Path = DEFAULT_CONFIG_PATH) -> Path | None:
    """Return the config file to load, or None if there is none.

    An ``LSBCTL_CONFIG`` pointing at a missing file yields None rather
    than falling back to *default*.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    if default.is_file():
        return default
    return None
