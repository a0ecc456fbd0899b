"""
Inheritance chain resolution.

Follows ``inherits`` references from a leaf profile up to its root ancestor and
returns the ancestry root-first.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, List, Set

from profilekit.core.exceptions import ProfileCycleError, ProfileParseError

from .loader import load_document
from .locator import ProfileLocator
from .models import ChainEntry, display_name, parent_key

logger = logging.getLogger(__name__)


class ChainResolver:
    """Resolves a profile's single-parent ancestry."""

    def __init__(
        self,
        locator: ProfileLocator,
        loader: Callable[[Path], Any] = load_document,
    ) -> None:
        self.locator = locator
        self.loader = loader

    def resolve(self, start_name: str) -> List[ChainEntry]:
        """Return the ancestry of ``start_name`` ordered root first.

        Raises:
            ProfileCycleError: If a lookup key recurs.
            ProfileNotFoundError: If any key in the chain has no file.
            ProfileIOError, ProfileParseError: Propagated from loading.
        """
        visited: Set[str] = set()
        walked: List[str] = []
        leaf_first: List[ChainEntry] = []

        cursor = start_name
        while True:
            if cursor in visited:
                raise ProfileCycleError(cursor, chain=walked)
            visited.add(cursor)
            walked.append(cursor)

            path = self.locator.require_profile(cursor)
            document = self.loader(path)
            if not isinstance(document, dict):
                raise ProfileParseError(path, f"expected a JSON object, got {type(document).__name__}")

            leaf_first.append(ChainEntry(cursor, display_name(document, cursor), path, document))

            parent = parent_key(document)
            if parent is None:
                break
            cursor = parent

        chain = list(reversed(leaf_first))
        logger.debug("Chain for %s: %s", start_name, " -> ".join(e.key for e in chain))
        return chain


__all__ = ["ChainResolver"]
