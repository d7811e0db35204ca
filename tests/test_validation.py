# tests/test_validation.py

from __future__ import annotations

import pytest

from ftt_parser import Severity, parse
from ftt_parser.validation import parse_version

HEAD = "HEAD_FORMAT: FTT v0.1\n\n"


def _fatal_code(result):
    assert len(result.fatal) == 1, result.fatal
    return result.fatal[0].code


# ---------------------------------------------------------
# Header / version
# ---------------------------------------------------------
def test_missing_format_header() -> None:
    result = parse("ID: A\nNAME: Somebody\n")
    assert _fatal_code(result) == "HEADER_MISSING"


def test_newer_version_is_incompatible() -> None:
    result = parse("HEAD_FORMAT: FTT v9.0\nID: A\n")
    assert _fatal_code(result) == "VERSION_INCOMPATIBLE"
    assert result.headers["HEAD_FORMAT"] == "FTT v9.0"
    assert result.records == {}


def test_format_header_without_version_is_incompatible() -> None:
    result = parse("HEAD_FORMAT: FTT\n")
    assert _fatal_code(result) == "VERSION_INCOMPATIBLE"


def test_older_or_equal_versions_are_accepted() -> None:
    assert parse("HEAD_FORMAT: FTT v0.1\n").ok
    assert parse("HEAD_FORMAT: FTT v0\n").ok


def test_version_token_glued_to_format_name() -> None:
    assert parse("HEAD_FORMAT: FTTv0.1\n").ok


@pytest.mark.parametrize(
    "text, expected",
    [
        ("FTT v0.1", (0, 1)),
        ("FTT v2", (2, 0)),
        ("FTT v1.12 draft", (1, 12)),
        ("FTTv0.1", (0, 1)),
        ("FTT", None),
    ],
)
def test_parse_version(text, expected) -> None:
    assert parse_version(text) == expected


# ---------------------------------------------------------
# References
# ---------------------------------------------------------
def test_dangling_reference() -> None:
    result = parse(HEAD + "ID: A\nPARENT: MISSING | BIO\n")
    assert _fatal_code(result) == "DANGLING_REF"
    assert "A -> MISSING" in result.fatal[0].message


def test_placeholder_references_are_allowed() -> None:
    result = parse(HEAD + "ID: A\nPARENT: ?UNK-FATHER | BIO\n")
    assert result.ok
    assert result.errors == []


def test_dangling_event_reference() -> None:
    result = parse(HEAD + "ID: A\nEVENT_REF: &NOWHERE | WITN\n")
    assert _fatal_code(result) == "DANGLING_REF"


def test_dangling_citation() -> None:
    result = parse(HEAD + "ID: A\nBORN: 1980\nBORN_SRC: ^MISSING\n")
    assert _fatal_code(result) == "DANGLING_CITATION"
    assert result.fatal[0].line == 5


def test_ghost_child() -> None:
    result = parse(
        HEAD
        + """ID: PARENT
CHILD: KID

ID: KID
# Missing PARENT: PARENT
"""
    )
    assert _fatal_code(result) == "GHOST_CHILD"


def test_checks_stop_at_first_fatal() -> None:
    # dangling reference is checked before dates
    result = parse(HEAD + "ID: A\nBORN: May 12, 1980\nPARENT: MISSING | BIO\n")
    assert _fatal_code(result) == "DANGLING_REF"


# ---------------------------------------------------------
# Lineage
# ---------------------------------------------------------
def test_circular_lineage() -> None:
    result = parse(
        HEAD
        + """ID: A
PARENT: B | BIO

ID: B
PARENT: A | BIO
"""
    )
    assert _fatal_code(result) == "CIRCULAR_LINEAGE"
    assert result.fatal[0].message == "Circular Lineage: A -> B -> A"


def test_self_parent_is_a_cycle() -> None:
    result = parse(HEAD + "ID: A\nPARENT: A | BIO\n")
    assert _fatal_code(result) == "CIRCULAR_LINEAGE"


def test_longer_cycle_reports_only_the_loop() -> None:
    result = parse(
        HEAD
        + "ID: ROOT\nPARENT: X | BIO\n"
        + "ID: X\nPARENT: Y | BIO\n"
        + "ID: Y\nPARENT: Z | BIO\n"
        + "ID: Z\nPARENT: X | BIO\n"
    )
    assert result.fatal[0].message == "Circular Lineage: X -> Y -> Z -> X"


def test_pedigree_collapse_is_not_a_cycle() -> None:
    # cousins marry; their child reaches the same grandparents twice
    result = parse(
        HEAD
        + """ID: GP
ID: P1
PARENT: GP | BIO
ID: P2
PARENT: GP | BIO
ID: C1
PARENT: P1 | BIO
ID: C2
PARENT: P2 | BIO
ID: KID
PARENT: C1 | BIO
PARENT: C2 | BIO
"""
    )
    assert result.ok, result.fatal


def test_placeholders_end_lineage_paths() -> None:
    result = parse(
        HEAD
        + """ID: A
PARENT: B | BIO

ID: B
PARENT: ?C | BIO

ID: ?C
PARENT: A | BIO
"""
    )
    assert result.ok, result.fatal


def test_deep_lineage_does_not_recurse() -> None:
    lines = [HEAD]
    for i in range(3000):
        lines.append(f"ID: P{i}\nPARENT: P{i + 1} | BIO\n")
    lines.append("ID: P3000\n")
    result = parse("".join(lines))
    assert result.ok, result.fatal


# ---------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------
@pytest.mark.parametrize(
    "body",
    [
        "ID: A\nPARENT: ?P | XYZ\n",
        "ID: A\nUNION: ?P | FRIENDS\n",
        "ID: A\nUNION: ?P | MARR ||| ELOPED\n",
        "ID: A\nNAME: Ann ||| MAIN\n",
    ],
)
def test_strict_vocabulary_is_fatal(body: str) -> None:
    assert _fatal_code(parse(HEAD + body)) == "INVALID_VOCAB"


def test_invalid_sex_is_recoverable() -> None:
    result = parse(HEAD + "ID: A\nSEX: Q\n")
    assert result.ok
    assert [e.code for e in result.errors] == ["INVALID_VOCAB"]
    assert result.errors[0].severity is Severity.ERROR


def test_non_standard_codes_are_notices() -> None:
    result = parse(
        HEAD
        + "ID: A\n"
        + "NAME: Ann | Ann | NICKNAME\n"
        + "EVENT: HUNT | 1900\n"
        + "ASSOC: ?B | FRIEND\n"
    )
    assert result.ok
    assert [w.code for w in result.warnings] == ["VOCAB_NOTICE"] * 3


def test_extension_codes_are_not_flagged() -> None:
    result = parse(HEAD + "ID: A\nEVENT: _HUNT | 1900\nASSOC: ?B | _FRIEND\n")
    assert result.ok
    assert result.warnings == []


# ---------------------------------------------------------
# Dates
# ---------------------------------------------------------
def test_valid_dates() -> None:
    result = parse(
        HEAD
        + """ID: A
BORN: 1980-05-12
DIED: 2020?
EVENT: OCC | [1900..1910] || Work
"""
    )
    assert result.ok, result.fatal
    assert result.errors == []


def test_invalid_date_is_fatal() -> None:
    result = parse(HEAD + "ID: A\nBORN: May 12, 1980\n")
    assert _fatal_code(result) == "INVALID_DATE"


def test_medieval_birth_year_is_accepted() -> None:
    result = parse(HEAD + "ID: A\nBORN: 850~ | Aachen\n")
    assert result.ok, result.fatal
    assert result.records["A"].fields["BORN"][0].slot(0) == "850~"


def test_invalid_union_date_is_fatal() -> None:
    result = parse(HEAD + "ID: A\nUNION: ?B | MARR | sometime\n")
    assert _fatal_code(result) == "INVALID_DATE"


def test_invalid_file_date_is_recoverable() -> None:
    result = parse("HEAD_FORMAT: FTT v0.1\nHEAD_DATE: yesterday\n")
    assert result.ok
    assert [e.code for e in result.errors] == ["INVALID_DATE"]
