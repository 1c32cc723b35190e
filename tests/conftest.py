import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import nametape
sys.path.insert(0, str(Path(__file__).parent.parent))

from nametape import NameTapeGenerator


@pytest.fixture(scope="session")
def generator():
    """Shared generator; it holds no mutable state."""
    return NameTapeGenerator()
