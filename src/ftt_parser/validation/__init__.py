"""
Post-parse graph validation.

Checks run in a fixed order and stop at the first fatal diagnostic:

    1. format header / version
    2. dangling references and citations
    3. ghost children
    4. lineage cycles
    5. vocabulary
    6. date grammar
"""

from __future__ import annotations

from typing import Dict, Optional

from ftt_parser.core.diagnostics import ErrorReporter
from ftt_parser.core.result import Fatal
from ftt_parser.models import RecordArena

from .headers import check_format_header, parse_version
from .lineage import check_lineage, find_cycle
from .references import check_ghost_children, check_references
from .temporal import check_dates
from .vocabulary import check_vocabulary


def validate_graph(
    arena: RecordArena,
    headers: Dict[str, str],
    reporter: ErrorReporter,
    supported_version: str,
) -> Optional[Fatal]:
    checks = (
        lambda: check_format_header(headers, supported_version, reporter),
        lambda: check_references(arena, reporter),
        lambda: check_ghost_children(arena, reporter),
        lambda: check_lineage(arena, reporter),
        lambda: check_vocabulary(arena, reporter),
        lambda: check_dates(arena, headers, reporter),
    )
    for check in checks:
        fatal = check()
        if fatal is not None:
            return fatal
    return None


__all__ = [
    "check_dates",
    "check_format_header",
    "check_ghost_children",
    "check_lineage",
    "check_references",
    "check_vocabulary",
    "find_cycle",
    "parse_version",
    "validate_graph",
]
