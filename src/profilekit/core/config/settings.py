"""Resolved, immutable settings handed to the profile engine.

The engine never looks up configuration or the application data root on its
own; callers build a ``ProfileSettings`` (usually via ``load_settings``) and
pass it in.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from profilekit.core.exceptions import ConfigError
from profilekit.core.utils.paths import get_app_data_dir

SEARCH_MODES = ("tiered", "recursive")


@dataclass(frozen=True)
class ProfileSettings:
    data_root: Path
    category: str = "filament"
    extension: str = ".json"
    system_library: str = "OrcaFilamentLibrary"
    base_dir_name: str = "base"
    search_mode: str = "tiered"
    default_from: str = "User"
    default_type: str = "filament"
    instantiation: str = "true"
    indent: int = 4

    def __post_init__(self) -> None:
        if self.search_mode not in SEARCH_MODES:
            raise ConfigError(
                f"Unknown search mode '{self.search_mode}' (expected one of {', '.join(SEARCH_MODES)})",
                context={"search_mode": self.search_mode},
            )
        object.__setattr__(self, "data_root", Path(self.data_root))

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "ProfileSettings":
        """Build settings from a merged configuration tree."""
        profiles = cfg.get("profiles") or {}
        defaults = profiles.get("defaults") or {}
        output = cfg.get("output") or {}

        raw_root = profiles.get("data_root")
        if raw_root:
            data_root = Path(str(raw_root)).expanduser()
        else:
            data_root = get_app_data_dir(str(profiles.get("app_dir_name", "OrcaSlicer")))

        return cls(
            data_root=data_root,
            category=str(profiles.get("category", cls.category)),
            extension=str(profiles.get("extension", cls.extension)),
            system_library=str(profiles.get("system_library", cls.system_library)),
            base_dir_name=str(profiles.get("base_dir_name", cls.base_dir_name)),
            search_mode=str(profiles.get("search_mode", cls.search_mode)),
            default_from=str(defaults.get("from", cls.default_from)),
            default_type=str(defaults.get("type", cls.default_type)),
            instantiation=str(defaults.get("instantiation", cls.instantiation)),
            indent=int(output.get("indent", cls.indent)),
        )

    def replace(self, **changes: Any) -> "ProfileSettings":
        """Return a copy with ``changes`` applied; ``None`` values are ignored."""
        return dataclasses.replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(
    *,
    data_root: Optional[Path | str] = None,
    search_mode: Optional[str] = None,
    user_config_dir: Optional[Path] = None,
) -> ProfileSettings:
    """Load layered configuration and apply explicit caller overrides."""
    from .manager import ConfigManager

    cfg = ConfigManager(user_config_dir).load_config()
    settings = ProfileSettings.from_config(cfg)
    return settings.replace(
        data_root=Path(data_root).expanduser() if data_root else None,
        search_mode=search_mode,
    )


__all__ = ["ProfileSettings", "SEARCH_MODES", "load_settings"]
