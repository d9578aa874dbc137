import os
import tempfile

import pytest
from fastapi.testclient import TestClient

_DATA_DIR = tempfile.mkdtemp(prefix="talent-flow-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DATA_DIR}/test.db"
os.environ["DATA_DIRECTORY"] = _DATA_DIR

from app.main import create_app  # noqa: E402


@pytest.fixture(scope="session")
def client():
    # One client for the whole run keeps the async engine on a single event loop.
    with TestClient(create_app()) as test_client:
        yield test_client
