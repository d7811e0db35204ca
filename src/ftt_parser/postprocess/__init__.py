"""
Post-parse passes over the sealed record graph.

The passes must run in this order:

    1. inject_implicit_unions   reciprocal UNION fields
    2. reconcile_children       forgotten CHILD fields
    3. extract_places           place display / geocoding metadata

They only add implicit fields or rewrite place slots in place; nothing
authored is removed or reassigned.
"""

from __future__ import annotations

from typing import Dict

from ftt_parser.core.diagnostics import ErrorReporter
from ftt_parser.models import RecordArena

from .children import birth_sort_key, reconcile_children
from .places import PlaceParts, extract_places, parse_place
from .unions import inject_implicit_unions


def run_postprocess(arena: RecordArena, reporter: ErrorReporter) -> Dict[str, Dict[str, int]]:
    return {
        "unions": inject_implicit_unions(arena, reporter),
        "children": reconcile_children(arena),
        "places": extract_places(arena),
    }


__all__ = [
    "PlaceParts",
    "birth_sort_key",
    "extract_places",
    "inject_implicit_unions",
    "parse_place",
    "reconcile_children",
    "run_postprocess",
]
