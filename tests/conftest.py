import os
import sys

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def sample_log() -> str:
    return (
        "2024-01-01T10:00:00 [ERROR] disk full\n"
        "2024-01-01T10:00:05 [ERROR] disk full\n"
        "2024-01-01T10:00:10 [INFO] ok"
    )
