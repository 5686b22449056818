import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from gedcom_records.config import reset_config  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_config():
    """Each test starts from the shipped config file."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def ctx():
    from gedcom_records.registry.utils import MaterializeContext

    return MaterializeContext()
