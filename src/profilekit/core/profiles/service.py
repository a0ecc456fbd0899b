"""
Profile operations exposed to application shells.

Each call builds its own locator, visited set, chain and accumulator; nothing
is cached between calls.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from profilekit.core.config.settings import ProfileSettings, load_settings
from profilekit.core.exceptions import ProfileIOError
from profilekit.core.utils.io import PathLike, dump_json_string, write_text

from .chain import ChainResolver
from .enumerator import ProfileEnumerator
from .finalize import finalize
from .locator import ProfileLocator
from .models import ChainEntry

logger = logging.getLogger(__name__)


def _settings(settings: Optional[ProfileSettings]) -> ProfileSettings:
    return settings if settings is not None else load_settings()


def resolve_chain(name: str, settings: Optional[ProfileSettings] = None) -> List[ChainEntry]:
    """Return the root-first ancestry chain of ``name``."""
    return ChainResolver(ProfileLocator(_settings(settings))).resolve(name)


def resolve_profile(name: str, settings: Optional[ProfileSettings] = None) -> Dict[str, Any]:
    """Resolve ``name`` into a fully merged profile document."""
    settings = _settings(settings)
    chain = ChainResolver(ProfileLocator(settings)).resolve(name)
    return finalize(
        chain,
        chain[-1].name,
        default_from=settings.default_from,
        default_type=settings.default_type,
        instantiation=settings.instantiation,
    )


def build_profile(name: str, settings: Optional[ProfileSettings] = None) -> str:
    """Return the merged profile for ``name`` as pretty-printed JSON text."""
    settings = _settings(settings)
    return dump_json_string(resolve_profile(name, settings), indent=settings.indent)


def save_text(path: PathLike, contents: str) -> None:
    """Write ``contents`` to ``path`` in one whole-file write.

    Raises:
        ProfileIOError: If the file cannot be written.
    """
    try:
        write_text(path, contents)
    except OSError as exc:
        raise ProfileIOError(path, exc.strerror or str(exc)) from exc


def export_profile(
    name: str,
    output_path: PathLike,
    settings: Optional[ProfileSettings] = None,
) -> Path:
    """Resolve ``name`` and write the JSON text to ``output_path``."""
    text = build_profile(name, settings)
    save_text(output_path, text + "\n")
    logger.info("Exported %s to %s", name, output_path)
    return Path(output_path)


def list_user_profiles(settings: Optional[ProfileSettings] = None) -> List[str]:
    """Return sorted profile names found in the user tiers (best effort)."""
    return ProfileEnumerator(ProfileLocator(_settings(settings))).list_names()


__all__ = [
    "resolve_chain",
    "resolve_profile",
    "build_profile",
    "export_profile",
    "list_user_profiles",
    "save_text",
]
