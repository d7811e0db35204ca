# src/ftt_parser/loader/line_source.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Tuple, Union

BOM = "\ufeff"


def iter_lines(text: str) -> Iterator[Tuple[str, int]]:
    """
    Yield ``(line, lineno)`` pairs from an in-memory document.

    Line endings (CRLF, CR, LF) are normalized and stripped. Lines are
    produced one at a time by scanning the string, so no list of lines is
    ever built. A UTF-8 BOM on the first line is dropped.

    A trailing newline yields a final empty line, matching a plain split on
    ``\\n``; empty lines are harmless to the parser.
    """
    pos = 0
    lineno = 1
    length = len(text)

    if text.startswith(BOM):
        pos = len(BOM)

    # Next known terminator positions; -1 means none left in the text.
    nl = text.find("\n", pos)
    cr = text.find("\r", pos)

    while True:
        if nl != -1 and nl < pos:
            nl = text.find("\n", pos)
        if cr != -1 and cr < pos:
            cr = text.find("\r", pos)

        if cr != -1 and (nl == -1 or cr < nl):
            end = cr
            step = 2 if text.startswith("\r\n", cr) else 1
        elif nl != -1:
            end = nl
            step = 1
        else:
            yield text[pos:length], lineno
            return

        yield text[pos:end], lineno
        pos = end + step
        lineno += 1


def read_source(path: Union[str, Path]) -> str:
    """
    Load an FTT document from disk as UTF-8.

    Raises:
        FileNotFoundError: if ``path`` does not exist or is not a file.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"FTT file not found: {file_path}")

    # newline="" keeps CR/CRLF intact; iter_lines normalizes them itself.
    with file_path.open("r", encoding="utf-8", newline="") as f:
        return f.read()
