"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from typing import Callable

from profilekit.core.config.settings import ProfileSettings, load_settings
from profilekit.core.exceptions import ProfileKitError

from ._output import OutputFormatter


def get_settings(args: argparse.Namespace) -> ProfileSettings:
    """Load settings, applying --data-root/--search-mode when given."""
    return load_settings(
        data_root=getattr(args, "data_root", None),
        search_mode=getattr(args, "search_mode", None),
    )


def run_cli_command(
    args: argparse.Namespace,
    body: Callable[[OutputFormatter], int],
    *,
    error_code: str,
) -> int:
    """Run ``body`` with a formatter, reporting profilekit errors uniformly.

    Errors outside ``ProfileKitError`` propagate to the dispatcher.
    """
    formatter = OutputFormatter(json_mode=bool(getattr(args, "json", False)))
    try:
        return body(formatter)
    except ProfileKitError as e:
        formatter.error(e, error_code=error_code)
        return 1


__all__ = ["get_settings", "run_cli_command"]
