"""
profilekit CLI package.

Provides the command-line interface with auto-discovery of commands
from subfolders (profile/, config/) and root commands (commands/).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_data_root_flag,
    add_search_mode_flag,
    add_profile_name_arg,
    add_standard_flags,
)
from ._utils import get_settings, run_cli_command

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_data_root_flag",
    "add_search_mode_flag",
    "add_profile_name_arg",
    "add_standard_flags",
    # Utilities
    "get_settings",
    "run_cli_command",
]
