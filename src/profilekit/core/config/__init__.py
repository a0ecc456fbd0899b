"""Configuration loading for profilekit."""
from __future__ import annotations

from .manager import ConfigManager
from .settings import SEARCH_MODES, ProfileSettings, load_settings

__all__ = ["ConfigManager", "ProfileSettings", "SEARCH_MODES", "load_settings"]
