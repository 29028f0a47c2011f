"""
Platform utilities for duallistbox.

- Paths for config and state/logs
"""

from __future__ import annotations

import os
from pathlib import Path


APP_NAME = "duallistbox"
SETTINGS_FILENAME = "settings.ini"
LOG_FILENAME = "duallistbox.log"


def xdg_config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def xdg_state_dir() -> Path:
    base = os.environ.get("XDG_STATE_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".local" / "state" / APP_NAME


def settings_path() -> Path:
    return xdg_config_dir() / SETTINGS_FILENAME
