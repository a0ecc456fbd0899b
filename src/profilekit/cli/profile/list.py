"""
profilekit profile list command.

SUMMARY: List profiles stored in the user libraries

Only user profile sets are scanned. Unreadable files are skipped; pass
--show-skipped to see them.
"""

from __future__ import annotations

import argparse
import sys

from profilekit.cli import OutputFormatter, add_standard_flags, get_settings, run_cli_command
from profilekit.core.profiles import ProfileEnumerator, ProfileLocator

SUMMARY = "List profiles stored in the user libraries"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--show-skipped",
        action="store_true",
        help="Also report files that could not be read or parsed",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    def _run(formatter: OutputFormatter) -> int:
        enumerator = ProfileEnumerator(ProfileLocator(get_settings(args)))
        outcomes = list(enumerator.scan())
        names = sorted({o.name for o in outcomes if o.name is not None})
        skipped = [o for o in outcomes if not o.ok]

        if formatter.json_mode:
            payload = {"profiles": names}
            if args.show_skipped:
                payload["skipped"] = [{"path": str(o.path), "reason": o.skipped} for o in skipped]
            formatter.json_output(payload)
            return 0

        for name in names:
            formatter.text(name)
        if args.show_skipped:
            for o in skipped:
                formatter.text(f"skipped: {o.path} ({o.skipped})")
        return 0

    return run_cli_command(args, _run, error_code="profile_list_error")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
