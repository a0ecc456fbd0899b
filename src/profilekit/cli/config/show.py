"""
profilekit config show command.

SUMMARY: Show current configuration

Displays the merged configuration from bundled defaults, the user config file,
and environment variables.
"""

from __future__ import annotations

import argparse
import sys

import yaml

from profilekit.cli import OutputFormatter, add_json_flag, run_cli_command
from profilekit.core.config import ConfigManager

SUMMARY = "Show current configuration"


def _nest_key(key: str, value):
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    parts = [p for p in str(key).split(".") if p]
    out = value
    for part in reversed(parts):
        out = {part: out}
    return out


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'profiles.search_mode')",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="yaml",
        help="Output format (default: yaml)",
    )
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    def _run(formatter: OutputFormatter) -> int:
        manager = ConfigManager()
        output_format = "json" if args.json else args.format

        if args.key:
            missing = object()
            value = manager.get(args.key, missing)
            if value is missing:
                formatter.text(f"Key not found: {args.key}")
                return 1
            data = _nest_key(args.key, value)
        else:
            data = manager.get_all()

        if output_format == "json":
            formatter.json_output(data)
        else:
            formatter.text(
                yaml.safe_dump(
                    data,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                ).rstrip()
            )
        return 0

    return run_cli_command(args, _run, error_code="config_show_error")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
