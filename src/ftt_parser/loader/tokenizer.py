# src/ftt_parser/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

COMMENT_MARKER = "#"
SEPARATOR_MARKER = "---"
INDENT = "  "

KEY_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_")


class LineKind(str, Enum):
    COMMENT = "comment"
    SEPARATOR = "separator"
    CONTINUATION = "continuation"
    BLANK = "blank"
    KEY = "key"
    INVALID = "invalid"


@dataclass(frozen=True)
class LineToken:
    """
    A single classified FTT line.

    Attributes:
        lineno: 1-based line number in the original document.
        kind: Which grammar rule the line matched.
        raw: The original line content without line terminators.
        key: Key name for KEY lines (e.g. "NAME", "BORN_SRC"), else None.
        value: Inline value for KEY lines (leading whitespace removed),
            the continuation text (two-space indent removed) for
            CONTINUATION lines, "" otherwise.
    """
    lineno: int
    kind: LineKind
    raw: str
    key: Optional[str] = None
    value: str = ""


def split_key(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a column-0 ``KEY: value`` line.

    The key must be non-empty and consist of uppercase ASCII letters,
    digits and underscores. The colon must be followed by the end of the
    line or by whitespace; the inline value is what follows that
    whitespace.

    Returns ``(key, value)`` or None when the line is not a key line.

    Examples:
        "ID: A"          -> ("ID", "A")
        "SEX:  M"        -> ("SEX", "M")
        "NOTES:"         -> ("NOTES", "")
        "NOTE:x"         -> None
        "name: John"     -> None
    """
    colon = line.find(":")
    if colon <= 0:
        return None

    key = line[:colon]
    if any(ch not in KEY_CHARS for ch in key):
        return None

    rest = line[colon + 1 :]
    if rest and not rest[0].isspace():
        return None

    return key, rest.lstrip()


def classify_line(line: str, lineno: int = 0) -> LineToken:
    """
    Classify one FTT line. First match wins:

        1. '#' at column 0                 -> COMMENT
        2. '---' at column 0               -> SEPARATOR
        3. two+ leading spaces and text    -> CONTINUATION
        4. empty or whitespace-only        -> BLANK
        5. 'KEY:' at column 0              -> KEY
        6. anything else                   -> INVALID

    Whitespace-only lines are BLANK even when they start with two spaces,
    so an indented "empty" line inside a block reads as a paragraph break.
    """
    raw = line.rstrip("\r\n")

    if raw.startswith(COMMENT_MARKER):
        return LineToken(lineno=lineno, kind=LineKind.COMMENT, raw=raw)

    if raw.startswith(SEPARATOR_MARKER):
        return LineToken(lineno=lineno, kind=LineKind.SEPARATOR, raw=raw)

    blank = not raw.strip()

    if raw.startswith(INDENT) and not blank:
        return LineToken(
            lineno=lineno,
            kind=LineKind.CONTINUATION,
            raw=raw,
            value=raw[len(INDENT):],
        )

    if blank:
        return LineToken(lineno=lineno, kind=LineKind.BLANK, raw=raw)

    parts = split_key(raw)
    if parts is not None:
        key, value = parts
        return LineToken(
            lineno=lineno, kind=LineKind.KEY, raw=raw, key=key, value=value
        )

    return LineToken(lineno=lineno, kind=LineKind.INVALID, raw=raw)
