"""Flattening of a resolved chain into one instantiated profile."""
from __future__ import annotations

import copy
from typing import Any, Dict, Sequence

from profilekit.core.utils.merge import deep_merge_into

from .models import ChainEntry

DEFAULT_FROM = "User"
DEFAULT_TYPE = "filament"
INSTANTIATION_MARKER = "true"


def fold_chain(chain: Sequence[ChainEntry]) -> Dict[str, Any]:
    """Deep-merge ``chain`` root to leaf into a fresh object."""
    merged: Dict[str, Any] = {}
    for entry in chain:
        merged = deep_merge_into(merged, copy.deepcopy(entry.document))
    return merged


def finalize(
    chain: Sequence[ChainEntry],
    final_name: str,
    *,
    default_from: str = DEFAULT_FROM,
    default_type: str = DEFAULT_TYPE,
    instantiation: str = INSTANTIATION_MARKER,
) -> Dict[str, Any]:
    """Merge ``chain`` and stamp the bookkeeping fields of an instance.

    The leaf's own fields win over every ancestor. ``inherits`` is dropped,
    ``name`` becomes ``final_name``, ``from`` comes from the leaf (or
    ``default_from``), ``instantiation`` is set, and ``type`` is defaulted
    only when no link in the chain sets it.
    """
    merged = fold_chain(chain)
    merged.pop("inherits", None)

    merged["name"] = final_name

    leaf = chain[-1].document if chain else {}
    merged["from"] = leaf["from"] if "from" in leaf else default_from
    merged["instantiation"] = instantiation
    if "type" not in merged:
        merged["type"] = default_type
    return merged


__all__ = ["fold_chain", "finalize", "DEFAULT_FROM", "DEFAULT_TYPE", "INSTANTIATION_MARKER"]
