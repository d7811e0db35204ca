# src/ftt_parser/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at <project_root>/src/ftt_parser/utils/pathing.py,
# so the project root is three levels above its directory.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory
    (the one holding src/, tests/, config/ and mock_files/).
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Example:
        resolve_project_path("mock_files/family_1.ftt")
    """
    return project_root() / Path(relative)


def mock_file_path(filename: Union[str, Path]) -> Path:
    """Absolute path to a sample document under mock_files/."""
    return resolve_project_path(Path("mock_files") / filename)


def outputs_path(*parts: Union[str, Path]) -> Path:
    """Absolute path under the configured outputs directory."""
    from ftt_parser.config import get_config

    outputs_dir = get_config().paths.get("outputs_dir", "outputs")
    return resolve_project_path(Path(outputs_dir) / Path(*parts))
