"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse

from profilekit.core.config.settings import SEARCH_MODES


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_data_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --data-root flag overriding the application data root."""
    parser.add_argument(
        "--data-root",
        type=str,
        help="Application data root holding user/ and system/ (overrides config)",
    )


def add_search_mode_flag(parser: argparse.ArgumentParser) -> None:
    """Add --search-mode flag selecting the system tier policy."""
    parser.add_argument(
        "--search-mode",
        choices=SEARCH_MODES,
        help="System search policy: fixed library tiers or the whole system tree",
    )


def add_profile_name_arg(
    parser: argparse.ArgumentParser,
    help_text: str = "Profile lookup key (file name without extension)",
) -> None:
    """Add the positional profile name argument."""
    parser.add_argument("name", help=help_text)


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add the flags shared by every profile command."""
    add_json_flag(parser)
    add_data_root_flag(parser)
    add_search_mode_flag(parser)


__all__ = [
    "add_json_flag",
    "add_data_root_flag",
    "add_search_mode_flag",
    "add_profile_name_arg",
    "add_standard_flags",
]
