"""
Reciprocal union inference.

A UNION on A naming B is expected to be mirrored by a UNION on B naming A.
When the mirror exists, the relationship metadata (type, start, end, end
reason) is compared and each disagreement becomes a DATA_CONSISTENCY
warning; both sides are kept as authored. When it is missing, an implicit
UNION is appended to B with the same metadata and slot 0 rewritten to A.
"""

from __future__ import annotations

from typing import Dict, Set, Tuple

from ftt_parser.core import diagnostics as codes
from ftt_parser.core.diagnostics import ErrorReporter
from ftt_parser.loader.values import join_values
from ftt_parser.logger import get_logger
from ftt_parser.models import Field, RecordArena
from ftt_parser.schema import UNION_KEY, UNION_METADATA_SLOTS

log = get_logger("postprocess.unions")


def _find_reciprocal(arena: RecordArena, partner_id: str, record_id: str) -> Field | None:
    partner = arena.get(partner_id)
    for fld in partner.get(UNION_KEY):
        if fld.target == record_id:
            return fld
    return None


def _implicit_union(source: Field, record_id: str) -> Field:
    parsed = list(source.parsed)
    parsed[0] = record_id
    return Field(
        raw=join_values(parsed),
        parsed=parsed,
        is_implicit=True,
        line=source.line,
    )


def inject_implicit_unions(arena: RecordArena, reporter: ErrorReporter) -> Dict[str, int]:
    """
    Close every union reference over the arena.

    Returns counts: ``{"implicit": n, "mismatches": m}``.
    """
    compared: Set[Tuple[str, str]] = set()
    implicit = 0
    mismatches = 0

    for record in arena:
        # Snapshot: implicit fields appended to this record later must not
        # be revisited while iterating it.
        for fld in list(record.get(UNION_KEY)):
            partner_id = fld.target
            if not partner_id or partner_id == record.id or partner_id not in arena:
                continue

            reciprocal = _find_reciprocal(arena, partner_id, record.id)

            if reciprocal is None:
                arena.get(partner_id).add_field(UNION_KEY, _implicit_union(fld, record.id))
                implicit += 1
                log.debug(f"Implicit UNION {partner_id} -> {record.id}")
                continue

            # A synthesized mirror copies another authored field; nothing to compare.
            if reciprocal.is_implicit and not fld.is_implicit:
                continue

            pair = tuple(sorted((record.id, partner_id)))
            if pair in compared:
                continue
            compared.add(pair)

            for idx in UNION_METADATA_SLOTS:
                mine, theirs = fld.slot(idx), reciprocal.slot(idx)
                if mine != theirs:
                    mismatches += 1
                    reporter.emit(
                        codes.DATA_CONSISTENCY,
                        f'Union between {record.id} and {partner_id} conflicts at index {idx} '
                        f'("{mine}" vs "{theirs}").',
                        fld.line,
                    )

    return {"implicit": implicit, "mismatches": mismatches}
