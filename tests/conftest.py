import pytest
import sys
from pathlib import Path

# Add the repository root to sys.path so the engine modules import
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def diagonal_stroke():
    """Ten evenly spaced points from (0, 0) to (100, 100)."""
    return [(i * 100.0 / 9, i * 100.0 / 9) for i in range(10)]


@pytest.fixture
def horizontal_stroke():
    """Ten evenly spaced points from (0, 0) to (100, 0)."""
    return [(i * 100.0 / 9, 0.0) for i in range(10)]


@pytest.fixture
def zigzag_stroke():
    return [(0, 0), (20, 40), (40, 0), (60, 40), (80, 0), (100, 40)]
