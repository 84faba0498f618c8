from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from chatbot_server.app import app


@pytest.fixture
def client() -> Iterator[TestClient]:
    # unexpected errors should come back as 500 responses, not be re-raised into the test
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture
def log_records() -> Iterator[list[dict]]:
    """Collect loguru records emitted during the test."""
    records: list[dict] = []
    handler_id = logger.add(lambda msg: records.append(msg.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
