"""
json_exporter.py
Structured JSON exporter for ParseResult objects.

This exporter:
- Converts dataclasses and enums to plain JSON values (NOT strings of reprs)
- Preserves field order and slot positions for downstream consumers
- Is deterministic: the same input document yields the same records block
"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from ftt_parser.core.diagnostics import Diagnostic
from ftt_parser.logger import get_logger

log = get_logger("json_exporter")


def _to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - Enums -> their value
    - Diagnostics -> their to_dict() form
    - dataclasses -> dict (recursively, slots-aware)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Anything else -> str(obj)
    """
    # str-based enums (Severity) must be checked before the primitive case
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if isinstance(obj, Diagnostic):
        return obj.to_dict()

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _to_json_compatible(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, dict):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [_to_json_compatible(v) for v in obj]

    # Last resort
    return str(obj)


def build_result_dict(result: Any, *, include_timestamps: bool = True) -> Dict[str, Any]:
    """
    Convert a ParseResult into a JSON-safe dict.

    ``include_timestamps=False`` drops diagnostic timestamps so two exports
    of the same document compare equal.
    """

    def _diags(items):
        out = [_to_json_compatible(d) for d in items]
        if not include_timestamps:
            for d in out:
                d.pop("timestamp", None)
        return out

    return {
        "headers": dict(result.headers),
        "records": {
            rid: _to_json_compatible(rec) for rid, rec in result.records.items()
        },
        "fatal": _diags(result.fatal),
        "errors": _diags(result.errors),
        "warnings": _diags(result.warnings),
    }


def export_result_json(
    result: Any,
    output_path: Path,
    *,
    indent: int = 2,
    include_timestamps: bool = True,
) -> Path:
    """
    Write the result as UTF-8 JSON to ``output_path`` (parents are created).
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = build_result_dict(result, include_timestamps=include_timestamps)

    with output_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)

    log.info(
        f"Exported {len(data['records'])} records to {output_path}"
    )
    return output_path
