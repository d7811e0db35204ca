"""Dangling references, dangling citations and ghost children."""

from __future__ import annotations

from typing import Optional

from ftt_parser.core import diagnostics as codes
from ftt_parser.core.diagnostics import ErrorReporter
from ftt_parser.core.result import Fatal
from ftt_parser.models import RecordArena, is_placeholder
from ftt_parser.schema import CHILD_KEY, PARENT_KEY, REFERENCE_KEYS, is_citation


def check_references(arena: RecordArena, reporter: ErrorReporter) -> Optional[Fatal]:
    """Every reference slot must name an existing record or a placeholder."""
    for record in arena:
        for key in REFERENCE_KEYS:
            for fld in record.get(key):
                target = fld.target
                if target and not arena.resolves(target):
                    return reporter.emit(
                        codes.DANGLING_REF,
                        f"Dangling Reference: {record.id} -> {target} ({key}).",
                        fld.line,
                    )

        for _, fld in record.iter_fields():
            for mod_key, modifiers in fld.modifiers.items():
                if not is_citation(mod_key):
                    continue
                for mod in modifiers:
                    source_id = mod.parsed[0] if mod.parsed else ""
                    if source_id and not arena.resolves(source_id):
                        return reporter.emit(
                            codes.DANGLING_CITATION,
                            f"Dangling Citation: {record.id} -> {source_id} ({mod_key}).",
                            mod.line,
                        )
    return None


def check_ghost_children(arena: RecordArena, reporter: ErrorReporter) -> Optional[Fatal]:
    """A listed child must name the listing parent in one of its PARENT fields."""
    for parent in arena:
        for fld in parent.get(CHILD_KEY):
            child_id = fld.target
            if not child_id or is_placeholder(child_id):
                continue

            child = arena.get(child_id)
            if child is None:
                continue

            if not child.references(PARENT_KEY, parent.id):
                return reporter.emit(
                    codes.GHOST_CHILD,
                    f"Ghost Child Error: {parent.id} -> {child_id} (Missing PARENT link).",
                    fld.line,
                )
    return None
