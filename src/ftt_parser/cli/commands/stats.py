from __future__ import annotations

from collections import Counter
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ftt_parser.cli.utils import load_ftt
from ftt_parser.models import RecordType

console = Console()


def stats_command(
    ftt: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for an FTT file.
    """
    result = load_ftt(ftt, verbose=verbose)

    by_type = Counter(rec.type for rec in result.records.values())
    fields = implicit = 0
    for rec in result.records.values():
        for _, fld in rec.iter_fields():
            fields += 1
            implicit += fld.is_implicit

    table = Table(title="FTT Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    for rtype in RecordType:
        table.add_row(f"{rtype.value.title()} records", str(by_type[rtype]))
    table.add_row("Fields", str(fields))
    table.add_row("Implicit fields", str(implicit))
    table.add_row("Fatal", str(len(result.fatal)))
    table.add_row("Errors", str(len(result.errors)))
    table.add_row("Warnings", str(len(result.warnings)))

    console.print(table)
