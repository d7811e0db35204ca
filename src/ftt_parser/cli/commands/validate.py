from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ftt_parser.cli.utils import load_ftt
from ftt_parser.core.diagnostics import Severity

console = Console()

_STYLES = {
    Severity.FATAL: "bold red",
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
}


def validate_command(
    ftt: Path = typer.Argument(..., exists=True, readable=True),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Also fail on recoverable errors",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Validate an FTT file and list its diagnostics.
    """
    result = load_ftt(ftt, verbose=verbose)

    diagnostics = result.diagnostics
    if diagnostics:
        table = Table(title=f"Diagnostics for {ftt.name}")
        table.add_column("Severity", style="bold", no_wrap=True)
        table.add_column("Code", no_wrap=True)
        table.add_column("Line", justify="right")
        table.add_column("Message")

        for diag in diagnostics:
            table.add_row(
                f"[{_STYLES[diag.severity]}]{diag.severity.value}[/]",
                diag.code,
                "" if diag.line is None else str(diag.line),
                diag.message,
            )
        console.print(table)

    if not result.ok:
        console.print(f"[bold red]INVALID[/] {ftt}")
        raise typer.Exit(code=1)

    if strict and result.errors:
        console.print(f"[red]FAILED[/] {ftt}: {len(result.errors)} error(s) in strict mode")
        raise typer.Exit(code=1)

    console.print(
        f"[green]OK[/] {ftt}: {len(result.records)} records, "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )
