"""Infrastructure: locate the per-user application data directory.

Mirrors the platform convention for *local* (non-roaming) data:

* Windows — ``%LOCALAPPDATA%``
* macOS — ``~/Library/Application Support``
* elsewhere — ``$XDG_DATA_HOME`` or ``~/.local/share``
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_DIR_NAME: str = "tuido"


def local_data_root() -> Path:
    """Return the platform's per-user local data directory."""
    if sys.platform.startswith("win"):
        local_app_data = os.environ.get("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"


def default_data_dir() -> Path:
    """Return the directory holding tuido's credentials and cache."""
    return local_data_root() / APP_DIR_NAME
