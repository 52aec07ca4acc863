"""Shared fixtures: an app wired to an in-memory store and store doubles."""

import pytest
from fastapi.testclient import TestClient

from cinema_api.app.core.db import MemoryStore, PersistenceError, get_document_store
from cinema_api.app.main import app


class FailingStore(MemoryStore):
    """Store whose reads work but whose writes always fail."""

    def write(self, document):
        raise PersistenceError("disk full", OSError(28, "No space left on device"))


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def failing_store():
    return FailingStore(
        {"books": [{"id": "keep0001", "title": "Dune", "author": "Frank Herbert"}]}
    )


@pytest.fixture
def client(store):
    """Create test client backed by ``store``."""
    app.dependency_overrides[get_document_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides = {}


@pytest.fixture
def failing_client(failing_store):
    app.dependency_overrides[get_document_store] = lambda: failing_store
    yield TestClient(app)
    app.dependency_overrides = {}
