# tests/test_line_source.py

from __future__ import annotations

import pytest

from ftt_parser.loader import iter_lines, read_source


def test_iter_lines_mixed_line_endings() -> None:
    lines = list(iter_lines("a\r\nb\rc\nd"))
    assert lines == [("a", 1), ("b", 2), ("c", 3), ("d", 4)]


def test_iter_lines_trailing_newline_yields_empty_last_line() -> None:
    assert list(iter_lines("ID: A\n")) == [("ID: A", 1), ("", 2)]


def test_iter_lines_drops_bom() -> None:
    lines = list(iter_lines("\ufeffHEAD_FORMAT: FTT v0.1\nID: A"))
    assert lines[0] == ("HEAD_FORMAT: FTT v0.1", 1)
    assert lines[1] == ("ID: A", 2)


def test_iter_lines_is_lazy() -> None:
    gen = iter_lines("one\ntwo\nthree")
    assert next(gen) == ("one", 1)
    assert next(gen) == ("two", 2)


def test_iter_lines_empty_text() -> None:
    assert list(iter_lines("")) == [("", 1)]


def test_read_source_keeps_crlf(tmp_path) -> None:
    path = tmp_path / "crlf.ftt"
    path.write_bytes(b"HEAD_FORMAT: FTT v0.1\r\nID: A\r\n")

    text = read_source(path)
    assert "\r\n" in text
    assert [line for line, _ in iter_lines(text)] == ["HEAD_FORMAT: FTT v0.1", "ID: A", ""]


def test_read_source_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        read_source(tmp_path / "nope.ftt")
