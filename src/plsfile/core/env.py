"""Environment overrides for the settings location."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "plsfile.yaml"
CONFIG_PATH_ENV = "PLSFILE_CONFIG_PATH"
CONFIG_DIR_ENV = "PLSFILE_CONFIG_DIR"


def resolve_config_path(default_path: Path) -> Path:
    """Return the settings file location, honoring environment overrides.

    ``PLSFILE_CONFIG_PATH`` names the file itself and wins over
    ``PLSFILE_CONFIG_DIR``, the directory holding ``plsfile.yaml``.
    """

    env_path = os.environ.get(CONFIG_PATH_ENV, "").strip()
    if env_path:
        return Path(env_path).expanduser()
    env_dir = os.environ.get(CONFIG_DIR_ENV, "").strip()
    if env_dir:
        return Path(env_dir).expanduser() / CONFIG_FILENAME
    return default_path
