"""
profilekit profile export command.

SUMMARY: Resolve a profile and write the merged JSON to a file
"""

from __future__ import annotations

import argparse
import sys

from profilekit.cli import OutputFormatter, add_profile_name_arg, add_standard_flags, get_settings, run_cli_command
from profilekit.core.profiles import export_profile

SUMMARY = "Resolve a profile and write the merged JSON to a file"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_profile_name_arg(parser)
    parser.add_argument("output", help="Destination file for the merged profile")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    def _run(formatter: OutputFormatter) -> int:
        path = export_profile(args.name, args.output, get_settings(args))
        formatter.success(
            {"name": args.name, "path": str(path)},
            f"Exported {args.name} to {path}",
        )
        return 0

    return run_cli_command(args, _run, error_code="profile_export_error")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
