"""Profile resolution: locate -> load -> chain -> merge -> finalize."""
from __future__ import annotations

from .chain import ChainResolver
from .enumerator import ProfileEnumerator
from .finalize import finalize, fold_chain
from .loader import load_document
from .locator import ProfileLocator
from .models import ChainEntry, ScanOutcome, SearchTier
from .service import (
    build_profile,
    export_profile,
    list_user_profiles,
    resolve_chain,
    resolve_profile,
    save_text,
)

__all__ = [
    "ChainEntry",
    "ChainResolver",
    "ProfileEnumerator",
    "ProfileLocator",
    "ScanOutcome",
    "SearchTier",
    "build_profile",
    "export_profile",
    "finalize",
    "fold_chain",
    "list_user_profiles",
    "load_document",
    "resolve_chain",
    "resolve_profile",
    "save_text",
]
