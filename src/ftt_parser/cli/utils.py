from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict

from rich.console import Console

from ftt_parser.models import ParseResult
from ftt_parser.parser_core import FTTParser

console = Console()


def load_ftt(path: Path, *, verbose: bool = False) -> ParseResult:
    """
    Read, build, post-process and validate one FTT file.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    result = FTTParser().parse_file(path)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded FTT in {elapsed:.2f}s ({len(result.records)} records)")

    return result


def write_json(
    data: Dict[str, Any],
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
