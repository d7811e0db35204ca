"""
exporter.py
High-level JSON export entry point.

This module provides a stable API used by ftt_parser.core.pipeline:

    export_result_to_json(result, output_path)

It delegates the actual JSON construction to json_exporter.export_result_json.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from ftt_parser.logger import get_logger

from .json_exporter import export_result_json

log = get_logger("exporter")


def export_result_to_json(
    result: Any,
    output_path: Union[str, Path],
    **kwargs: Any,
) -> Path:
    """
    Export a ParseResult to ``output_path``.

    Keyword arguments (``indent``, ``include_timestamps``) are forwarded to
    json_exporter.export_result_json.
    """
    if result is None:
        raise TypeError("export_result_to_json requires a ParseResult, got None")

    path = Path(output_path)
    if not result.ok:
        log.warning(f"Exporting a failed parse ({result.fatal[0].code}) to {path}")

    return export_result_json(result, path, **kwargs)
