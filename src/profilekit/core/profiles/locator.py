"""
Profile locator for finding profile documents across layered storage.

Storage layout under the application data root::

    <data_root>/user/<profile-set>/<category>/<name>.json    user tiers
    <data_root>/system/<library>/<category>/<name>.json      system library
    <data_root>/system/<library>/<category>/base/<name>.json base profiles

User tiers always take precedence over system tiers. In ``recursive`` search
mode the two fixed system tiers are replaced by a depth-first walk of the whole
``system/`` tree.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Set

from profilekit.core.config.settings import ProfileSettings
from profilekit.core.exceptions import ProfileIOError, ProfileNotFoundError

from .models import SearchTier

logger = logging.getLogger(__name__)


class ProfileLocator:
    """Locates profile files in user and system directories."""

    USER_DIR = "user"
    SYSTEM_DIR = "system"

    def __init__(self, settings: ProfileSettings) -> None:
        self.settings = settings

    @property
    def user_root(self) -> Path:
        return self.settings.data_root / self.USER_DIR

    @property
    def system_root(self) -> Path:
        return self.settings.data_root / self.SYSTEM_DIR

    def user_directories(self) -> List[Path]:
        """Return every ``user/<profile-set>/<category>`` directory, sorted by profile set.

        Raises:
            ProfileIOError: If the user root exists but cannot be listed.
        """
        try:
            if not self.user_root.is_dir():
                return []
            profile_sets = sorted(self.user_root.iterdir(), key=lambda p: p.name)
            return [
                p / self.settings.category
                for p in profile_sets
                if (p / self.settings.category).is_dir()
            ]
        except OSError as exc:
            raise ProfileIOError(self.user_root, exc.strerror or str(exc)) from exc

    def search_tiers(self) -> List[SearchTier]:
        """Return the tiers to probe in precedence order."""
        tiers = [SearchTier("user", d) for d in self.user_directories()]
        if self.settings.search_mode == "recursive":
            tiers.append(SearchTier("system", self.system_root, recursive=True))
        else:
            library = self.system_root / self.settings.system_library / self.settings.category
            tiers.append(SearchTier("system", library))
            tiers.append(SearchTier("base", library / self.settings.base_dir_name))
        return tiers

    def filename_for(self, name: str) -> str:
        """Append the profile extension unless ``name`` already carries it."""
        ext = self.settings.extension
        return name if name.endswith(ext) else f"{name}{ext}"

    def is_lookup_key(self, name: str) -> bool:
        """True when ``name`` is a bare file name that stays inside a tier directory."""
        if not name or name in (".", ".."):
            return False
        if "/" in name or "\\" in name:
            return False
        return Path(name).name == name and not Path(name).is_absolute()

    def find_profile(self, name: str) -> Optional[Path]:
        """Find a profile file by lookup key; None when no tier holds it.

        Keys carrying directory parts (absolute paths, separators, ``..``) never
        match.

        Raises:
            ProfileIOError: If a tier directory cannot be read.
        """
        if not self.is_lookup_key(name):
            logger.debug("Rejecting lookup key %r: not a plain file name", name)
            return None

        filename = self.filename_for(name)
        for tier in self.search_tiers():
            try:
                found = self._probe(tier, filename)
            except OSError as exc:
                raise ProfileIOError(tier.path, exc.strerror or str(exc)) from exc
            if found is not None:
                logger.debug("Resolved %s -> %s", name, found)
                return found
        return None

    def require_profile(self, name: str) -> Path:
        """Like ``find_profile`` but raises ``ProfileNotFoundError`` on a miss."""
        path = self.find_profile(name)
        if path is None:
            raise ProfileNotFoundError(name, searched=[t.path for t in self.search_tiers()])
        return path

    def _probe(self, tier: SearchTier, filename: str) -> Optional[Path]:
        if tier.recursive:
            return self._search_tree(tier.path, filename)
        logger.debug("Probing %s tier %s for %s", tier.kind, tier.path, filename)
        candidate = tier.path / filename
        return candidate if candidate.is_file() else None

    def _search_tree(self, root: Path, filename: str) -> Optional[Path]:
        """Depth-first search of ``root`` for ``filename``; first match wins."""
        for directory in self._walk_directories(root):
            logger.debug("Probing system tree directory %s for %s", directory, filename)
            candidate = directory / filename
            if candidate.is_file():
                return candidate
        return None

    def _walk_directories(self, root: Path) -> Iterator[Path]:
        """Yield ``root`` and its subdirectories in pre-order.

        Uses an explicit stack; directories already seen (by resolved path) are
        skipped so symlink loops terminate. Children are visited in name order.
        """
        if not root.is_dir():
            return

        stack: List[Path] = [root]
        seen: Set[Path] = set()
        while stack:
            directory = stack.pop()
            real = directory.resolve()
            if real in seen:
                continue
            seen.add(real)
            yield directory

            try:
                children = [p for p in directory.iterdir() if p.is_dir()]
            except OSError as exc:
                logger.debug("Cannot list %s: %s", directory, exc)
                continue
            stack.extend(sorted(children, key=lambda p: p.name, reverse=True))


__all__ = ["ProfileLocator"]
