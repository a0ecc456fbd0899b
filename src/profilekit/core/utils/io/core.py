"""Text file primitives shared by the JSON and YAML helpers.

Writes go through ``atomic_write``: the content lands in a sibling temp file
that replaces the target only once it is fully flushed to disk.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

PathLike = Union[str, Path]


def ensure_parent_dir(path: PathLike) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def atomic_write(
    path: PathLike,
    write_fn: Callable[[TextIO], None],
    *,
    encoding: str = "utf-8",
) -> None:
    """Write ``path`` through a temp file in the same directory.

    Missing parent directories are created. On any failure the temp file is
    removed and an existing file at ``path`` keeps its old content.
    """
    target = Path(path)
    ensure_parent_dir(target)

    staged: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=str(target.parent),
            prefix=f".{target.name}.",
            delete=False,
        ) as handle:
            staged = Path(handle.name)
            write_fn(handle)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(staged, target)
        staged = None
    finally:
        if staged is not None:
            staged.unlink(missing_ok=True)


def read_text(path: PathLike) -> str:
    """Return the UTF-8 content of ``path``; OS and decode errors propagate."""
    return Path(path).read_text(encoding="utf-8")


def write_text(path: PathLike, content: str) -> None:
    atomic_write(path, lambda handle: handle.write(content))


__all__ = ["PathLike", "ensure_parent_dir", "atomic_write", "read_text", "write_text"]
