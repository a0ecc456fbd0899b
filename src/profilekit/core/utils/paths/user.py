"""User configuration path resolution.

Detects the user-level profilekit configuration directory (default:
``~/.profilekit``).

Precedence (highest to lowest):
1. Environment variable: PROFILEKIT_USER_CONFIG_DIR
2. Hardcoded fallback: ".profilekit"

Relative values are resolved against the user's home directory.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_USER_CONFIG_PRIMARY = ".profilekit"
USER_CONFIG_DIR_ENV = "PROFILEKIT_USER_CONFIG_DIR"


def get_user_config_dir() -> Path:
    """Return the user config directory resolved via env/fallback."""
    raw = os.environ.get(USER_CONFIG_DIR_ENV, "").strip() or DEFAULT_USER_CONFIG_PRIMARY
    p = Path(raw).expanduser()
    if not p.is_absolute():
        p = Path.home() / p

    return p.resolve()


__all__ = ["DEFAULT_USER_CONFIG_PRIMARY", "USER_CONFIG_DIR_ENV", "get_user_config_dir"]
