# tests/test_builder.py

from __future__ import annotations

from ftt_parser.core.diagnostics import ErrorReporter
from ftt_parser.core.result import Fatal, Ok
from ftt_parser.loader import Accumulator, BuildContext, advance, classify_line, flush
from ftt_parser.loader.accumulator import PARAGRAPH, HeaderTarget
from ftt_parser.models import Field, RecordArena


def _ctx() -> BuildContext:
    return BuildContext(arena=RecordArena(), headers={}, reporter=ErrorReporter())


def _feed(ctx: BuildContext, lines):
    acc = Accumulator()
    for lineno, line in enumerate(lines, start=1):
        outcome = advance(ctx, acc, classify_line(line, lineno))
        if isinstance(outcome, Fatal):
            return outcome
        acc = outcome.value
    return Ok(flush(acc, ctx.headers))


def test_accumulator_is_immutable() -> None:
    acc = Accumulator().open("NOTES", "one", Field())
    appended = acc.append("two")

    assert acc.parts == ("one",)
    assert appended.parts == ("one", " ", "two")
    assert appended.text() == "one two"


def test_paragraph_marker_suppresses_fold_space() -> None:
    acc = Accumulator().open("NOTES", "one").paragraph().append("two")
    assert acc.parts == ("one", PARAGRAPH, "two")


def test_flush_writes_header_target() -> None:
    headers = {}
    acc = Accumulator().open("HEAD_TITLE", "A", HeaderTarget("HEAD_TITLE")).append("Title")
    cleared = flush(acc, headers)

    assert headers == {"HEAD_TITLE": "A Title"}
    assert cleared.key is None
    assert cleared.parts == ()


def test_flush_empty_field_has_no_slots() -> None:
    fld = Field()
    flush(Accumulator().open("NOTES", "", fld), {})
    assert fld.raw == ""
    assert fld.parsed == []


def test_comment_leaves_accumulator_unchanged() -> None:
    ctx = _ctx()
    acc = Accumulator().open("NOTES", "x")
    outcome = advance(ctx, acc, classify_line("# hi", 1))
    assert outcome.value is acc


def test_feed_builds_records_and_tracks_last_field() -> None:
    ctx = _ctx()
    outcome = _feed(ctx, ["HEAD_FORMAT: FTT v0.1", "ID: A", "BORN: 1980", "BORN_SRC: ^S"])

    assert isinstance(outcome, Ok)
    acc = outcome.value
    assert acc.record_id == "A"
    assert acc.last_field.key == "BORN"

    record = ctx.arena.get("A")
    assert record.fields["BORN"][0].modifiers["BORN_SRC"][0].raw == "^S"
    assert ctx.headers == {"HEAD_FORMAT": "FTT v0.1"}


def test_separator_closes_record() -> None:
    ctx = _ctx()
    outcome = _feed(ctx, ["ID: A", "NAME: x", "---"])
    assert outcome.value.record_id is None
    assert outcome.value.last_field is None


def test_fatal_short_circuits() -> None:
    ctx = _ctx()
    outcome = _feed(ctx, ["ID: A", "WHAT: x", "NAME: never reached"])

    assert isinstance(outcome, Fatal)
    assert outcome.diagnostic.code == "SYNTAX_INVALID"
    assert "NAME" not in ctx.arena.get("A").fields
