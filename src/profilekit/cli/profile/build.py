"""
profilekit profile build command.

SUMMARY: Resolve a profile and print the merged JSON

Walks the profile's inherits chain across user and system libraries and
prints the flattened, instantiated profile. With --json the profile is wrapped
in the standard result envelope ({"status", "name", "profile"}).
"""

from __future__ import annotations

import argparse
import sys

from profilekit.cli import OutputFormatter, add_profile_name_arg, add_standard_flags, get_settings, run_cli_command
from profilekit.core.profiles import build_profile, resolve_profile

SUMMARY = "Resolve a profile and print the merged JSON"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_profile_name_arg(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    def _run(formatter: OutputFormatter) -> int:
        settings = get_settings(args)
        if formatter.json_mode:
            profile = resolve_profile(args.name, settings)
            formatter.success({"name": args.name, "profile": profile}, profile["name"])
            return 0
        formatter.text(build_profile(args.name, settings))
        return 0

    return run_cli_command(args, _run, error_code="profile_build_error")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
