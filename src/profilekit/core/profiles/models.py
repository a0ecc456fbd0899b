"""Value types shared by the profile resolution pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SearchTier:
    """One directory the locator probes, tagged with its priority class."""

    kind: str
    path: Path
    recursive: bool = False


@dataclass(frozen=True)
class ChainEntry:
    """One link of an ancestry chain.

    ``key`` is the lookup key that located the file; ``name`` is the display
    name (the document's own ``name``, falling back to ``key``).
    """

    key: str
    name: str
    path: Path
    document: Dict[str, Any]

    @property
    def parent(self) -> Optional[str]:
        return parent_key(self.document)


@dataclass(frozen=True)
class ScanOutcome:
    """Result of inspecting one candidate file during enumeration."""

    path: Path
    name: Optional[str] = None
    skipped: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.name is not None


def parent_key(document: Dict[str, Any]) -> Optional[str]:
    """Return the ``inherits`` lookup key, or None when there is no parent.

    Empty strings are how slicers mark a profile without a parent.
    """
    value = document.get("inherits")
    if isinstance(value, str) and value:
        return value
    return None


def display_name(document: Any, fallback: str) -> str:
    if isinstance(document, dict):
        value = document.get("name")
        if isinstance(value, str) and value:
            return value
    return fallback


__all__ = ["SearchTier", "ChainEntry", "ScanOutcome", "parent_key", "display_name"]
