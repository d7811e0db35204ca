"""
Place-string extraction.

Place slots may carry two kinds of inline markup:

    Berlin {=Kitchener}; Ontario      geocoding override for one level
    City <51.5, -0.1>                 coordinates

A place slot that contains a live (unescaped) marker is rewritten to its
display form and the markup is hoisted into ``Field.metadata``:

    "Berlin {=Kitchener}; Ontario"  -> display "Berlin; Ontario"
                                       geo     "Kitchener; Ontario"
    "City <51.5, -0.1>"             -> display "City"
                                       coords  "51.5, -0.1"

Escaped markers (``\\{=...\\}``, ``\\<...\\>``) are plain text and never
trigger extraction. Because ``Field.parsed`` is already unescaped, the
escaped form of the slot is re-derived from ``Field.raw``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ftt_parser.loader.values import nfc, scan_escapes, split_values
from ftt_parser.logger import get_logger
from ftt_parser.models import PlaceMetadata, RecordArena
from ftt_parser.schema import PLACE_SLOTS

log = get_logger("postprocess.places")

COORDS_PATTERN = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*$")

OVERRIDE_OPEN = "{="
OVERRIDE_CLOSE = "}"
COORDS_OPEN = "<"
COORDS_CLOSE = ">"
LEVEL_SEPARATOR = ";"

Chars = List[Tuple[str, bool]]


@dataclass(frozen=True)
class PlaceParts:
    display: str
    geo: Optional[str] = None
    coords: Optional[str] = None


# ---------------------------------------------------------------------------
# Escape-aware helpers
# ---------------------------------------------------------------------------

def _render(chars: Chars) -> str:
    return "".join(ch for ch, _ in chars)


def _find(chars: Chars, needle: str, start: int = 0) -> int:
    """Index of the first unescaped occurrence of ``needle``, or -1."""
    width = len(needle)
    for i in range(start, len(chars) - width + 1):
        if all(not chars[i + k][1] and chars[i + k][0] == needle[k] for k in range(width)):
            return i
    return -1


def _split_levels(chars: Chars) -> List[Chars]:
    levels: List[Chars] = [[]]
    for ch, escaped in chars:
        if ch == LEVEL_SEPARATOR and not escaped:
            levels.append([])
        else:
            levels[-1].append((ch, escaped))
    return levels


def _take_coords(chars: Chars) -> Tuple[Chars, Optional[str]]:
    """Remove the first well-formed ``<lat, lon>`` marker."""
    start = 0
    while True:
        opening = _find(chars, COORDS_OPEN, start)
        if opening == -1:
            return chars, None
        closing = _find(chars, COORDS_CLOSE, opening + 1)
        if closing == -1:
            return chars, None

        match = COORDS_PATTERN.match(_render(chars[opening + 1 : closing]))
        if match:
            remaining = chars[:opening] + chars[closing + 1 :]
            return remaining, f"{match.group(1)}, {match.group(2)}"
        start = opening + 1


def _take_override(level: Chars) -> Tuple[Chars, Chars, bool]:
    """Split one hierarchy level into (display, geo, had_override)."""
    opening = _find(level, OVERRIDE_OPEN)
    if opening == -1:
        return level, level, False
    closing = _find(level, OVERRIDE_CLOSE, opening + len(OVERRIDE_OPEN))
    if closing == -1:
        return level, level, False

    override = level[opening + len(OVERRIDE_OPEN) : closing]
    rest = level[closing + 1 :]

    # "Berlin {=Kitchener} West" displays as "Berlin West"
    head = level[:opening]
    while head and head[-1][0].isspace() and not head[-1][1]:
        head = head[:-1]
    return head + rest, override + rest, True


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_place(escaped: str) -> Optional[PlaceParts]:
    """
    Parse a place slot that still carries its backslash escapes.

    Returns None when the slot has no live override or coordinate marker,
    in which case the slot must be left untouched.
    """
    chars, coords = _take_coords(scan_escapes(escaped))

    displays: List[str] = []
    geos: List[str] = []
    overridden = False

    for level in _split_levels(chars):
        display, geo, found = _take_override(level)
        overridden = overridden or found
        displays.append(_render(display).strip())
        geos.append(_render(geo).strip())

    if not overridden and coords is None:
        return None

    return PlaceParts(
        display=nfc("; ".join(displays)),
        geo=nfc("; ".join(geos)) if overridden else None,
        coords=coords,
    )


def extract_places(arena: RecordArena) -> Dict[str, int]:
    """
    Rewrite every marked-up place slot in the arena.

    Returns counts: ``{"rewritten": n}``.
    """
    rewritten = 0

    for record in arena:
        for key, idx in PLACE_SLOTS.items():
            for fld in record.get(key):
                if idx >= len(fld.parsed):
                    continue
                slot = fld.parsed[idx]
                if "{" not in slot and COORDS_OPEN not in slot:
                    continue

                escaped_slots = split_values(fld.raw, unescape=False)
                if idx >= len(escaped_slots):
                    continue

                parts = parse_place(escaped_slots[idx])
                if parts is None:
                    continue

                fld.parsed[idx] = parts.display
                if fld.metadata is None:
                    fld.metadata = PlaceMetadata()
                if parts.geo:
                    fld.metadata.geo = parts.geo
                if parts.coords:
                    fld.metadata.coords = parts.coords

                rewritten += 1
                log.debug(f"{record.id} {key}[{idx}]: place rewritten to {parts.display!r}")

    return {"rewritten": rewritten}
