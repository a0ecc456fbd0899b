"""JSON I/O utilities for profile documents."""
from __future__ import annotations

import json
from typing import Any, Dict

from .core import PathLike, read_text

# Profile documents keep their key order and non-ASCII text.
DEFAULT_JSON_CONFIG: Dict[str, Any] = {
    "indent": 4,
    "sort_keys": False,
    "ensure_ascii": False,
}


def read_json(file_path: PathLike) -> Any:
    """Read and parse a JSON file.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the file is not UTF-8 text
        json.JSONDecodeError: If the content is not valid JSON
    """
    return json.loads(read_text(file_path))


def dump_json_string(data: Any, *, indent: int | None = None) -> str:
    """Serialize ``data`` as pretty-printed JSON text."""
    cfg = dict(DEFAULT_JSON_CONFIG)
    if indent is not None:
        cfg["indent"] = indent
    return json.dumps(
        data,
        indent=cfg["indent"],
        sort_keys=cfg["sort_keys"],
        ensure_ascii=cfg["ensure_ascii"],
    )


__all__ = ["read_json", "dump_json_string"]
