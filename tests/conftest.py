import sys
from pathlib import Path

import pytest

# Make src/ importable without installing the package
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def family_1_path() -> Path:
    """The valid sample document shipped in mock_files/."""
    from ftt_parser.utils import mock_file_path

    return mock_file_path("family_1.ftt")
