"""Profile document loading."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from profilekit.core.exceptions import ProfileIOError, ProfileParseError
from profilekit.core.utils.io import read_json


def load_document(path: Path) -> Any:
    """Read ``path`` and parse it as JSON.

    Raises:
        ProfileIOError: If the file cannot be opened or read.
        ProfileParseError: If the content is not valid UTF-8 JSON.
    """
    try:
        return read_json(path)
    except json.JSONDecodeError as exc:
        raise ProfileParseError(path, str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise ProfileParseError(path, f"not UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        raise ProfileIOError(path, exc.strerror or str(exc)) from exc


__all__ = ["load_document"]
