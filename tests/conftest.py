import os

# must be set before pizzeria loads its configuration
os.environ["APP_ENV"] = "testing"

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from pizzeria.main import create_app


@pytest.fixture(scope="session")
def app():
    return create_app()


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    """A client over a fresh in-memory database."""
    with TestClient(app) as c:
        yield c
