"""I/O utilities for profilekit.

- Core: atomic writes and text I/O
- JSON: strict profile document reads and pretty-printed dumps
- YAML: configuration file reads
"""
from __future__ import annotations

from .core import (
    PathLike,
    atomic_write,
    ensure_parent_dir,
    read_text,
    write_text,
)
from .json import (
    dump_json_string,
    read_json,
)
from .yaml import (
    read_yaml,
    parse_yaml_string,
)

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "atomic_write",
    "read_text",
    "write_text",
    # json
    "read_json",
    "dump_json_string",
    # yaml
    "read_yaml",
    "parse_yaml_string",
]
