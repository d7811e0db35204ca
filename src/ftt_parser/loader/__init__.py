# src/ftt_parser/loader/__init__.py

"""
Public interface for the FTT loader stack.

Intended usage from other parts of the project and tests:

    from ftt_parser.loader import (
        LineKind,
        LineToken,
        Accumulator,
        BuildContext,
        iter_lines,
        read_source,
        classify_line,
        split_key,
        split_values,
        join_values,
        advance,
        flush,
    )
"""

from __future__ import annotations
from .line_source import iter_lines, read_source
from .tokenizer import LineKind, LineToken, classify_line, split_key
from .values import join_values, split_values
from .accumulator import Accumulator, flush
from .builder import BuildContext, advance, id_problem


__all__ = [
    "LineKind",
    "LineToken",
    "Accumulator",
    "BuildContext",
    "iter_lines",
    "read_source",
    "classify_line",
    "split_key",
    "split_values",
    "join_values",
    "advance",
    "flush",
    "id_problem",
]
