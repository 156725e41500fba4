import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom_codec.identity import sequential_ids  # noqa: E402


@pytest.fixture
def ids():
    """Deterministic id factory: id-1, id-2, ..."""
    return sequential_ids("id")
