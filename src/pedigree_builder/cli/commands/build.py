from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from pedigree_builder.cli.utils import load_pedigree, write_text
from pedigree_builder.exporter.json_exporter import serialize_family_to_json_string
from pedigree_builder.report import legend_notes

console = Console(stderr=True)


def build_command(
    facts: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Emit the JSON member view instead of pedigree text",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Build the pedigree document for a fact-record export (stdout by default).
    """
    result = load_pedigree(facts, verbose=verbose)

    if as_json:
        payload = serialize_family_to_json_string(result.family) + "\n"
    else:
        payload = result.document

    write_text(payload, out=out)

    if verbose:
        for note in legend_notes(result.has_multiple_cancers):
            console.log(note)
        console.log("Build complete")
