"""
profilekit profile chain command.

SUMMARY: Show a profile's inheritance chain, root first
"""

from __future__ import annotations

import argparse
import sys

from profilekit.cli import OutputFormatter, add_profile_name_arg, add_standard_flags, get_settings, run_cli_command
from profilekit.core.profiles import resolve_chain

SUMMARY = "Show a profile's inheritance chain, root first"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_profile_name_arg(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    def _run(formatter: OutputFormatter) -> int:
        chain = resolve_chain(args.name, get_settings(args))
        if formatter.json_mode:
            formatter.json_output(
                [{"key": e.key, "name": e.name, "path": str(e.path), "inherits": e.parent} for e in chain]
            )
            return 0

        for depth, entry in enumerate(chain):
            label = entry.key if entry.name == entry.key else f"{entry.key} ({entry.name})"
            formatter.text(f"{'  ' * depth}{label}")
            formatter.text(f"{'  ' * depth}  {entry.path}")
        return 0

    return run_cli_command(args, _run, error_code="profile_chain_error")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
