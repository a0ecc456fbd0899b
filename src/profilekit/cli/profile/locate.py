"""
profilekit profile locate command.

SUMMARY: Show which file a profile name resolves to
"""

from __future__ import annotations

import argparse
import sys

from profilekit.cli import OutputFormatter, add_profile_name_arg, add_standard_flags, get_settings, run_cli_command
from profilekit.core.profiles import ProfileLocator

SUMMARY = "Show which file a profile name resolves to"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_profile_name_arg(parser)
    parser.add_argument(
        "--tiers",
        action="store_true",
        help="Also list the search tiers in precedence order",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    def _run(formatter: OutputFormatter) -> int:
        locator = ProfileLocator(get_settings(args))
        tiers = locator.search_tiers()
        path = locator.require_profile(args.name)

        if formatter.json_mode:
            payload = {"name": args.name, "path": str(path)}
            if args.tiers:
                payload["tiers"] = [
                    {"kind": t.kind, "path": str(t.path), "recursive": t.recursive} for t in tiers
                ]
            formatter.json_output(payload)
            return 0

        formatter.text(str(path))
        if args.tiers:
            for t in tiers:
                suffix = " (recursive)" if t.recursive else ""
                formatter.text_kv(t.kind, f"{t.path}{suffix}")
        return 0

    return run_cli_command(args, _run, error_code="profile_locate_error")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
