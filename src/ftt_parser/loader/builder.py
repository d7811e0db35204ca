# src/ftt_parser/loader/builder.py

"""
Key, field and modifier construction.

``advance()`` is the state machine's transition function: given the build
context (record arena, headers, reporter), the current accumulator and one
classified line, it returns ``Ok(next_accumulator)`` or ``Fatal``.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, replace
from typing import Dict, Optional

from ftt_parser.core import diagnostics as codes
from ftt_parser.core.diagnostics import ErrorReporter, Severity
from ftt_parser.core.result import Fatal, Ok, Outcome
from ftt_parser.loader.accumulator import Accumulator, HeaderTarget, LastField, flush
from ftt_parser.loader.tokenizer import LineKind, LineToken
from ftt_parser.loader.values import nfc
from ftt_parser.models import (
    EVENT_SIGIL,
    PLACEHOLDER_SIGIL,
    SOURCE_SIGIL,
    Field,
    Modifier,
    Record,
    RecordArena,
    RecordType,
)
from ftt_parser.schema import ID_KEY, is_field_key, is_header_key, modifier_base

SIGILS = (SOURCE_SIGIL, EVENT_SIGIL, PLACEHOLDER_SIGIL)
FORBIDDEN_ID_CHARS = frozenset("|;")


@dataclass
class BuildContext:
    arena: RecordArena
    headers: Dict[str, str]
    reporter: ErrorReporter
    duplicate_policy: str = "fatal"


# ---------------------------------------------------------------------------
# Identity helpers
# ---------------------------------------------------------------------------

def id_problem(record_id: str) -> Optional[str]:
    """
    Return why ``record_id`` is not a legal id, or None if it is.

    Ids may not contain whitespace, '|', ';' or control/format characters.
    Ids without a sigil must start with a letter or digit and contain only
    letters, digits and '-'.
    """
    if not record_id:
        return "ID is empty"

    for ch in record_id:
        if ch.isspace() or ch in FORBIDDEN_ID_CHARS or unicodedata.category(ch).startswith("C"):
            return f'ID "{record_id}" contains forbidden characters'

    if record_id.startswith(SIGILS):
        if len(record_id) == 1:
            return f'ID "{record_id}" has a sigil but no name'
        return None

    if unicodedata.category(record_id[0])[0] not in ("L", "N"):
        return f'Invalid standard ID "{record_id}"'
    for ch in record_id[1:]:
        if ch != "-" and unicodedata.category(ch)[0] not in ("L", "N"):
            return f'Invalid standard ID "{record_id}"'
    return None


def resolve_duplicate_id(ctx: BuildContext, acc: Accumulator, record_id: str, lineno: int) -> Outcome[Accumulator]:
    """
    Single decision point for a second definition of an existing id.

    ``fatal`` (default): abort the session.
    ``lenient``: record a recoverable error, keep the original record and
    skip every key of the duplicate block.
    """
    original = ctx.arena.get(record_id)
    message = f'Duplicate Record ID "{record_id}" (first defined on line {original.line}).'

    if ctx.duplicate_policy == "lenient":
        ctx.reporter.emit(codes.ID_DUPLICATE, message + " Ignoring definition.", lineno, Severity.ERROR)
        return Ok(replace(acc, record_id=None, last_field=None, discarding=True))

    return ctx.reporter.emit(codes.ID_DUPLICATE, message, lineno)


# ---------------------------------------------------------------------------
# Key handlers
# ---------------------------------------------------------------------------

def _start_record(ctx: BuildContext, acc: Accumulator, token: LineToken) -> Outcome[Accumulator]:
    record_id = nfc(token.value.strip())
    acc = acc.close_record()

    problem = id_problem(record_id)
    if problem:
        return ctx.reporter.emit(codes.ID_INVALID, problem + ".", token.lineno)

    if record_id in ctx.arena:
        return resolve_duplicate_id(ctx, acc, record_id, token.lineno)

    ctx.arena.add(Record(id=record_id, type=RecordType.from_id(record_id), line=token.lineno))
    return Ok(replace(acc, record_id=record_id))


def _attach_modifier(acc: Accumulator, key: str, base: str, token: LineToken) -> Optional[Modifier]:
    """Bind a modifier to the field created immediately before it, if it matches."""
    last = acc.last_field
    if last is None or last.key != base:
        return None

    modifier = Modifier(line=token.lineno)
    last.field.modifiers.setdefault(key, []).append(modifier)
    return modifier


def handle_key(ctx: BuildContext, acc: Accumulator, token: LineToken) -> Outcome[Accumulator]:
    key = token.key
    lineno = token.lineno

    if is_header_key(key):
        if acc.in_record:
            return ctx.reporter.emit(
                codes.CTX_HEADER, f"Header {key} found inside a record block.", lineno
            )
        ctx.headers[key] = nfc(token.value.strip())
        return Ok(acc.open(key, token.value, HeaderTarget(key)))

    if key == ID_KEY:
        outcome = _start_record(ctx, acc, token)
        if isinstance(outcome, Fatal):
            return outcome
        return Ok(outcome.value.open(key, token.value))

    if acc.discarding:
        return Ok(acc.open(key, token.value))

    if acc.record_id is None:
        return ctx.reporter.emit(
            codes.CTX_ORPHAN, f"Key {key} found outside of a record block.", lineno
        )

    base = modifier_base(key)
    if base is not None:
        modifier = _attach_modifier(acc, key, base, token)
        if modifier is None:
            return ctx.reporter.emit(
                codes.CTX_MODIFIER,
                f"Modifier {key} does not immediately follow a {base} field.",
                lineno,
            )
        return Ok(acc.open(key, token.value, modifier))

    if not is_field_key(key):
        return ctx.reporter.emit(
            codes.SYNTAX_INVALID,
            f"Unknown key {key}. Extension keys must start with '_'.",
            lineno,
        )

    record = ctx.arena.get(acc.record_id)
    field = record.add_field(key, Field(line=lineno))
    opened = acc.open(key, token.value, field)
    return Ok(replace(opened, last_field=LastField(key=key, field=field)))


# ---------------------------------------------------------------------------
# Transition function
# ---------------------------------------------------------------------------

def advance(ctx: BuildContext, acc: Accumulator, token: LineToken) -> Outcome[Accumulator]:
    kind = token.kind

    if kind is LineKind.COMMENT:
        return Ok(acc)

    if kind is LineKind.SEPARATOR:
        return Ok(flush(acc, ctx.headers).close_record())

    if kind is LineKind.CONTINUATION:
        if acc.key is None:
            return ctx.reporter.emit(
                codes.SYNTAX_INVALID, "Indented content without a preceding key.", token.lineno
            )
        return Ok(acc.append(token.value))

    if kind is LineKind.BLANK:
        return Ok(acc.paragraph() if acc.key is not None else acc)

    if kind is LineKind.KEY:
        return handle_key(ctx, flush(acc, ctx.headers), token)

    return ctx.reporter.emit(
        codes.SYNTAX_INVALID,
        "Invalid syntax at column 0. Expected a key or indentation.",
        token.lineno,
    )
