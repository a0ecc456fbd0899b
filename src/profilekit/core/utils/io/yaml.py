"""YAML I/O utilities for configuration files."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def parse_yaml_string(text: str, default: Any = None) -> Any:
    """Parse YAML text; empty documents yield ``default``."""
    data = yaml.safe_load(text)
    return default if data is None else data


def read_yaml(path: Path, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.

    Args:
        path: YAML file path to read
        default: Value to return if file missing or invalid (default: None)
        raise_on_error: If True, propagate exceptions instead of returning default.

    Examples:
        >>> config = read_yaml(Path("config.yaml"), default={})
        >>> assert isinstance(config, dict)
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_yaml_string(f.read(), default=default)
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


__all__ = ["read_yaml", "parse_yaml_string"]
