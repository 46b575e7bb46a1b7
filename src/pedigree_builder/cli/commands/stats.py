
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from pedigree_builder.cli.utils import load_pedigree
from pedigree_builder.exporter.pedigree_writer import build_label, quadrant_flags

console = Console()


def stats_command(
    facts: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show the members of the pedigree built from a fact-record export.
    """
    result = load_pedigree(facts, verbose=verbose)

    table = Table(title="Pedigree Members")
    table.add_column("ID", justify="right")
    table.add_column("Name", style="bold")
    table.add_column("Sex", justify="right")
    table.add_column("Dad", justify="right")
    table.add_column("Mom", justify="right")
    table.add_column("Unknown")
    table.add_column("Quadrants")
    table.add_column("Label", overflow="fold")

    for member in result.family:
        table.add_row(
            str(member.id),
            member.name,
            str(member.sex),
            str(member.dad_id),
            str(member.mom_id),
            "yes" if member.unknown else "",
            " ".join(quadrant_flags(member)),
            build_label(member),
        )

    console.print(table)
    console.print(f"Skipped steps: {len(result.skipped_steps)}")
    console.print(f"Multiple cancers reported: {'yes' if result.has_multiple_cancers else 'no'}")
