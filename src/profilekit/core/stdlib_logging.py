from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from profilekit.core.utils.io import ensure_parent_dir

_HANDLER_MARKER = "_profilekit_handler"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Configure stdlib logging for CLI use.

    Installs a stderr handler (stdout stays reserved for command output) and,
    when ``log_path`` is given, a file handler. Idempotent per-process: handlers
    installed by an earlier call are replaced.
    """
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    for h in list(root.handlers):
        if getattr(h, _HANDLER_MARKER, False):
            root.removeHandler(h)
            h.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_path is not None:
        ensure_parent_dir(Path(log_path))
        handlers.append(logging.FileHandler(Path(log_path), encoding="utf-8"))

    fmt = logging.Formatter(_FORMAT)
    for h in handlers:
        h.setLevel(_level_from_name(level))
        h.setFormatter(fmt)
        setattr(h, _HANDLER_MARKER, True)
        root.addHandler(h)


def reset_logging_for_tests() -> None:
    """Test-only: remove handlers installed by ``configure_logging``."""
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, _HANDLER_MARKER, False):
            root.removeHandler(h)
            h.close()


__all__ = ["configure_logging", "reset_logging_for_tests"]
