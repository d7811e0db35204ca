"""
Exporter package.

Re-exports the JSON export entry points used by the pipeline and the CLI.
"""

from __future__ import annotations

from .exporter import export_result_to_json
from .json_exporter import build_result_dict, export_result_json

__all__ = ["build_result_dict", "export_result_json", "export_result_to_json"]
