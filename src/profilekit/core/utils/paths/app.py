"""Application data directory resolution.

The slicer keeps its profile libraries under a per-platform application data
directory:

- Windows: ``%APPDATA%/<app>``
- macOS:   ``~/Library/Application Support/<app>``
- Other:   ``$XDG_CONFIG_HOME/<app>`` (default ``~/.config/<app>``)

This is only a default. The locator never calls it directly; the resolved
root is carried in ``ProfileSettings.data_root``.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional


def get_app_data_dir(
    app_dir_name: str,
    *,
    platform: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Return the platform application data directory for ``app_dir_name``."""
    platform = platform or sys.platform
    env = os.environ if environ is None else environ

    if platform.startswith("win"):
        appdata = env.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    elif platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        xdg = env.get("XDG_CONFIG_HOME")
        base = Path(xdg) if xdg else Path.home() / ".config"
    return base / app_dir_name


__all__ = ["get_app_data_dir"]
