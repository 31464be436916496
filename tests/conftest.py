import io
import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parent.parent


def pytest_sessionstart(session):
    if str(BASE_DIR) not in sys.path:
        sys.path.insert(0, str(BASE_DIR))


@pytest.fixture
def feed():
    def _feed(*lines):
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return _feed


@pytest.fixture
def sink():
    return io.StringIO()
