# src/ftt_parser/loader/values.py

"""
Escape-aware value splitting.

A field's joined text is split on unescaped '|' into positional slots.
A backslash escapes the character that follows it, so authors can write a
literal pipe (``\\|``), backslash (``\\\\``) or any character that place
parsing treats as syntax (``\\{ \\} \\< \\> \\;``).

Examples:
    "John ||| PREF"                 -> ["John", "", "", "PREF"]
    "This is a pipe \\| character"  -> ["This is a pipe | character"]
    "B | MARR"                      -> ["B", "MARR"]
"""

from __future__ import annotations

import unicodedata
from typing import Iterable, List, Tuple

DELIMITER = "|"
ESCAPE = "\\"

# Characters written back with a backslash by join_values().
SPECIAL_CHARS = frozenset("|\\{}<>;")


def nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text)


def scan_escapes(text: str) -> List[Tuple[str, bool]]:
    """
    Return ``(char, escaped)`` pairs for ``text``.

    ``escaped`` is True for a character that followed a backslash. A lone
    trailing backslash is kept as a literal, unescaped backslash.
    """
    out: List[Tuple[str, bool]] = []
    escaped = False

    for ch in text:
        if escaped:
            out.append((ch, True))
            escaped = False
        elif ch == ESCAPE:
            escaped = True
        else:
            out.append((ch, False))

    if escaped:
        out.append((ESCAPE, False))
    return out


def split_values(text: str, *, unescape: bool = True) -> List[str]:
    """
    Split ``text`` on unescaped pipes; trim and NFC-normalize every slot.

    With ``unescape=False`` the backslash escapes are left in each slot so a
    later pass (place extraction) can still tell escaped syntax characters
    from live ones. Escaped pipes are always significant only as text.
    """
    values: List[str] = []
    current: List[str] = []
    escaped = False

    for ch in text:
        if escaped:
            if not unescape:
                current.append(ESCAPE)
            current.append(ch)
            escaped = False
        elif ch == ESCAPE:
            escaped = True
        elif ch == DELIMITER:
            values.append(nfc("".join(current).strip()))
            current = []
        else:
            current.append(ch)

    if escaped:
        current.append(ESCAPE)

    values.append(nfc("".join(current).strip()))
    return values


def escape_value(value: str) -> str:
    return "".join(ESCAPE + ch if ch in SPECIAL_CHARS else ch for ch in value)


def join_values(values: Iterable[str]) -> str:
    """Inverse of split_values(): escape each slot and join with ' | '."""
    return " | ".join(escape_value(v) for v in values)
