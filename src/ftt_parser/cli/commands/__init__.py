"""
CLI command modules for ftt_parser.

Each command module defines a single Typer-compatible command function.
"""

from ftt_parser.cli.commands.export import export_command
from ftt_parser.cli.commands.stats import stats_command
from ftt_parser.cli.commands.validate import validate_command

__all__ = [
    "export_command",
    "stats_command",
    "validate_command",
]
