"""
Lineage cycle detection.

Nodes are non-placeholder INDIVIDUAL records; edges follow PARENT slot 0.
The traversal is an iterative depth-first search with an explicit stack
that carries the current path:

* a parent already on the path closes a cycle, reported as
  ``A -> B -> A``;
* a node whose ancestors were all expanded without a cycle is marked safe,
  and later traversals stop at it;
* placeholders and non-individual targets are leaves.

Pedigree collapse (two paths to the same ancestor) is not a cycle.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set, Tuple

from ftt_parser.core import diagnostics as codes
from ftt_parser.core.diagnostics import ErrorReporter
from ftt_parser.core.result import Fatal
from ftt_parser.models import RecordArena, RecordType
from ftt_parser.schema import PARENT_KEY

PATH_SEPARATOR = " -> "


def _parent_edges(arena: RecordArena) -> Dict[str, List[str]]:
    """Adjacency: individual id -> parent ids that are themselves individuals."""
    individuals = {r.id for r in arena if r.type is RecordType.INDIVIDUAL}
    edges: Dict[str, List[str]] = {}
    for record in arena:
        if record.id not in individuals:
            continue
        edges[record.id] = [
            fld.target for fld in record.get(PARENT_KEY) if fld.target in individuals
        ]
    return edges


def find_cycle(arena: RecordArena) -> Optional[List[str]]:
    """Return the first lineage cycle as a closed path, or None."""
    edges = _parent_edges(arena)
    safe: Set[str] = set()

    for start in edges:
        if start in safe:
            continue

        path: List[str] = [start]
        on_path: Set[str] = {start}
        stack: List[Tuple[str, Iterator[str]]] = [(start, iter(edges[start]))]

        while stack:
            node, parents = stack[-1]
            parent = next(parents, None)

            if parent is None:
                stack.pop()
                path.pop()
                on_path.discard(node)
                safe.add(node)
                continue

            if parent in on_path:
                return path[path.index(parent):] + [parent]
            if parent in safe:
                continue

            path.append(parent)
            on_path.add(parent)
            stack.append((parent, iter(edges[parent])))

    return None


def check_lineage(arena: RecordArena, reporter: ErrorReporter) -> Optional[Fatal]:
    cycle = find_cycle(arena)
    if cycle is None:
        return None

    first = arena.get(cycle[0])
    return reporter.emit(
        codes.CIRCULAR_LINEAGE,
        f"Circular Lineage: {PATH_SEPARATOR.join(cycle)}",
        first.line if first else None,
    )
