# src/ftt_parser/utils/__init__.py

from .pathing import (
    project_root,
    resolve_project_path,
    mock_file_path,
    outputs_path,
)

__all__ = [
    "project_root",
    "resolve_project_path",
    "mock_file_path",
    "outputs_path",
]
