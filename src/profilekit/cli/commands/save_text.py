"""
profilekit save-text command.

SUMMARY: Write text from stdin (or --input) to a file
"""

from __future__ import annotations

import argparse
import sys

from profilekit.cli import OutputFormatter, add_json_flag, run_cli_command
from profilekit.core.exceptions import ProfileIOError
from profilekit.core.profiles import save_text
from profilekit.core.utils.io import read_text

SUMMARY = "Write text from stdin (or --input) to a file"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("path", help="Destination file")
    parser.add_argument("--input", help="Read contents from this file instead of stdin")
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    def _run(formatter: OutputFormatter) -> int:
        if args.input:
            try:
                contents = read_text(args.input)
            except OSError as exc:
                raise ProfileIOError(args.input, exc.strerror or str(exc)) from exc
        else:
            contents = sys.stdin.read()
        save_text(args.path, contents)
        formatter.success({"path": args.path, "bytes": len(contents.encode("utf-8"))}, f"Wrote {args.path}")
        return 0

    return run_cli_command(args, _run, error_code="save_text_error")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
