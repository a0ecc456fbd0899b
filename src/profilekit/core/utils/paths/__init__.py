"""Path resolution helpers for profilekit."""
from __future__ import annotations

from .app import get_app_data_dir
from .user import DEFAULT_USER_CONFIG_PRIMARY, USER_CONFIG_DIR_ENV, get_user_config_dir

__all__ = [
    "get_app_data_dir",
    "get_user_config_dir",
    "DEFAULT_USER_CONFIG_PRIMARY",
    "USER_CONFIG_DIR_ENV",
]
