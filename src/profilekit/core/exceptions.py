from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Sequence


class ProfileKitError(Exception):
    """Base exception for profilekit."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ProfileNotFoundError(ProfileKitError, FileNotFoundError):
    """Raised when no search tier holds a file for a lookup key."""

    def __init__(self, name: str, *, searched: Sequence[Path] = ()) -> None:
        message = f"Profile '{name}' not found"
        ctx: Dict[str, Any] = {"name": name}
        if searched:
            ctx["searched"] = [str(p) for p in searched]
        ProfileKitError.__init__(self, message, context=ctx)
        FileNotFoundError.__init__(self, message)
        self.name = name


class ProfileCycleError(ProfileKitError, ValueError):
    """Raised when a lookup key recurs while walking an inherits chain."""

    def __init__(self, name: str, *, chain: Sequence[str] = ()) -> None:
        walked = list(chain)
        message = f"Inheritance cycle detected at profile '{name}'"
        if walked:
            message += f": {' -> '.join([*walked, name])}"
        ProfileKitError.__init__(self, message, context={"name": name, "chain": walked})
        ValueError.__init__(self, message)
        self.name = name
        self.chain = walked


class ProfileParseError(ProfileKitError, ValueError):
    """Raised when a profile file is not a valid JSON document."""

    def __init__(self, path: Path | str, detail: str) -> None:
        message = f"Failed to parse {path}: {detail}"
        ProfileKitError.__init__(self, message, context={"path": str(path), "detail": detail})
        ValueError.__init__(self, message)
        self.path = Path(path)
        self.detail = detail


class ProfileIOError(ProfileKitError, OSError):
    """Raised when a profile or output file cannot be read or written."""

    def __init__(self, path: Path | str, detail: str) -> None:
        message = f"I/O error on {path}: {detail}"
        ProfileKitError.__init__(self, message, context={"path": str(path), "detail": detail})
        OSError.__init__(self, message)
        self.path = Path(path)
        self.detail = detail


class ConfigError(ProfileKitError, ValueError):
    """Raised when the layered configuration is invalid."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ProfileKitError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "ProfileKitError",
    "ProfileNotFoundError",
    "ProfileCycleError",
    "ProfileParseError",
    "ProfileIOError",
    "ConfigError",
]
