# tests/test_values.py

from __future__ import annotations

from ftt_parser.loader import join_values, split_values
from ftt_parser.loader.values import scan_escapes


def test_split_on_pipes_keeps_empty_slots() -> None:
    assert split_values("John ||| PREF") == ["John", "", "", "PREF"]


def test_slots_are_trimmed() -> None:
    assert split_values("  B  |  MARR ") == ["B", "MARR"]


def test_escaped_pipe_is_literal() -> None:
    assert split_values(r"This is a pipe \| character") == ["This is a pipe | character"]


def test_escaped_backslash() -> None:
    assert split_values(r"C:\\temp | x") == ["C:\\temp", "x"]


def test_lone_trailing_backslash_is_kept() -> None:
    assert split_values("ends with \\") == ["ends with \\"]


def test_split_without_unescaping_keeps_escapes() -> None:
    raw = r"1980 | City \| Name; \<Old\>"
    assert split_values(raw, unescape=False) == ["1980", r"City \| Name; \<Old\>"]


def test_slots_are_nfc_normalized() -> None:
    assert split_values("MU\u0308LLER-1890 | BIO") == ["M\u00dcLLER-1890", "BIO"]


def test_scan_escapes_marks_escaped_characters() -> None:
    assert scan_escapes(r"a\{b") == [("a", False), ("{", True), ("b", False)]


def test_join_values_escapes_syntax_characters() -> None:
    joined = join_values(["A", "x|y", "{=z}"])
    assert joined == r"A | x\|y | \{=z\}"
    assert split_values(joined) == ["A", "x|y", "{=z}"]
