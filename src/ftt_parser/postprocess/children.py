"""
Child-list reconciliation.

A parent's CHILD fields are the authored child order. The ground truth is
every record whose PARENT field names that parent. Children found only
through their own PARENT declaration are appended after the authored ones,
sorted by birth year, and marked implicit.
"""

from __future__ import annotations

from typing import Dict, List

from ftt_parser.loader.values import join_values
from ftt_parser.logger import get_logger
from ftt_parser.models import Field, Record, RecordArena
from ftt_parser.schema import BORN_KEY, CHILD_KEY, PARENT_KEY

log = get_logger("postprocess.children")

UNKNOWN_BIRTH_YEAR = 9999


def birth_sort_key(record: Record) -> int:
    """
    Leading 4-digit year of the first BORN date, or UNKNOWN_BIRTH_YEAR.

        "1980-05-12" -> 1980
        "[1900..1910]" -> 1900
        "?" / missing -> 9999
    """
    born = record.get(BORN_KEY)
    if not born:
        return UNKNOWN_BIRTH_YEAR

    date = born[0].slot(0).lstrip("[")
    year = date[:4]
    if len(year) == 4 and year.isdigit():
        return int(year)
    return UNKNOWN_BIRTH_YEAR


def _children_by_parent(arena: RecordArena) -> Dict[str, List[Record]]:
    """Map parent id -> records declaring that parent, in record order."""
    index: Dict[str, List[Record]] = {}
    for record in arena:
        seen = set()
        for fld in record.get(PARENT_KEY):
            parent_id = fld.target
            if parent_id and parent_id not in seen:
                seen.add(parent_id)
                index.setdefault(parent_id, []).append(record)
    return index


def reconcile_children(arena: RecordArena) -> Dict[str, int]:
    """
    Append forgotten children to every parent's CHILD list.

    Returns counts: ``{"parents": n, "implicit": m}``.
    """
    parents_touched = 0
    implicit = 0

    for parent_id, actual in _children_by_parent(arena).items():
        parent = arena.get(parent_id)
        if parent is None:
            continue

        listed = {fld.target for fld in parent.get(CHILD_KEY)}
        missing = [child for child in actual if child.id not in listed]
        if not missing:
            continue

        # sorted() is stable, so equal years keep record order.
        for child in sorted(missing, key=birth_sort_key):
            parent.add_field(
                CHILD_KEY,
                Field(raw=join_values([child.id]), parsed=[child.id], is_implicit=True, line=child.line),
            )
            implicit += 1

        parents_touched += 1
        log.debug(f"{parent_id}: appended {len(missing)} implicit CHILD field(s)")

    return {"parents": parents_touched, "implicit": implicit}
