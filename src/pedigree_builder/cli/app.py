
from __future__ import annotations

import typer

from pedigree_builder.cli.commands.build import build_command
from pedigree_builder.cli.commands.stats import stats_command

app = typer.Typer(
    name="pedigree",
    help="Build, inspect and export family pedigrees from survey fact records",
    add_completion=False,
)

app.command("build")(build_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
