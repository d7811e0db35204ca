# src/ftt_parser/loader/accumulator.py

"""
The line-processing accumulator.

``Accumulator`` is an immutable value holding everything the state machine
needs between lines: the open key and its text parts, where that text goes
on flush, the open record and the last field created in it. Every
transition returns a new value; nothing is hidden on the session.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple, Union

from ftt_parser.loader.values import nfc, split_values
from ftt_parser.models import Field, Modifier

PARAGRAPH = "\n"


@dataclass(frozen=True)
class HeaderTarget:
    key: str


# Where the open key's text is written at flush time. None discards it
# (the ID line itself, or keys inside a skipped duplicate block).
FlushTarget = Union[HeaderTarget, Field, Modifier, None]


@dataclass(frozen=True)
class LastField:
    """The most recently created field; the only legal modifier target."""
    key: str
    field: Field


@dataclass(frozen=True)
class Accumulator:
    key: Optional[str] = None
    parts: Tuple[str, ...] = ()
    target: FlushTarget = None
    record_id: Optional[str] = None
    last_field: Optional[LastField] = None
    discarding: bool = False

    @property
    def in_record(self) -> bool:
        return self.record_id is not None or self.discarding

    def open(self, key: str, inline_value: str, target: FlushTarget = None) -> "Accumulator":
        parts = (inline_value,) if inline_value else ()
        return replace(self, key=key, parts=parts, target=target)

    def append(self, content: str) -> "Accumulator":
        """Add a continuation line, folding it onto the previous one with a space."""
        parts = self.parts
        if parts and parts[-1] != PARAGRAPH:
            parts = parts + (" ",)
        return replace(self, parts=parts + (content,))

    def paragraph(self) -> "Accumulator":
        return replace(self, parts=self.parts + (PARAGRAPH,))

    def text(self) -> str:
        return "".join(self.parts).strip()

    def close_record(self) -> "Accumulator":
        return replace(self, record_id=None, last_field=None, discarding=False)


def flush(acc: Accumulator, headers: Dict[str, str]) -> Accumulator:
    """
    Write the open key's buffered text to its target and clear the buffer.

    Header values are NFC-normalized strings; fields and modifiers get the
    trimmed joined text as ``raw`` and its split slots as ``parsed``.
    """
    if acc.key is None:
        return replace(acc, parts=(), target=None)

    text = acc.text()
    target = acc.target

    if isinstance(target, HeaderTarget):
        headers[target.key] = nfc(text)
    elif isinstance(target, (Field, Modifier)):
        target.raw = text
        target.parsed = split_values(text) if text else []

    return replace(acc, key=None, parts=(), target=None)
