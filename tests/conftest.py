import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from anki_interface import connection as anki_connection  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_global_connection():
    anki_connection.reset()
    yield
    anki_connection.reset()
