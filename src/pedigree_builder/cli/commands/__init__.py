
"""
CLI command modules for pedigree_builder.

Each command module defines a single Typer-compatible command function.
"""

from pedigree_builder.cli.commands.build import build_command
from pedigree_builder.cli.commands.stats import stats_command

__all__ = [
    "build_command",
    "stats_command",
]
