from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ftt_parser.cli.utils import load_ftt, write_json
from ftt_parser.exporter import build_result_dict

console = Console()


def export_command(
    ftt: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Export parsed FTT data to JSON (stdout by default).
    """
    result = load_ftt(ftt, verbose=verbose)

    if verbose:
        console.log("Exporting JSON")

    write_json(build_result_dict(result), out=out, pretty=pretty)

    if verbose:
        console.log("Export complete")

    if not result.ok:
        raise typer.Exit(code=1)
