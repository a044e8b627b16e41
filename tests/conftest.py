"""Shared fixtures for the storage gateway tests."""

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from storage_gateway.dependencies import get_existence_cache, get_storage
from storage_gateway.domain import ErrorCollector, ExistenceCache
from storage_gateway.domain.operations import StorageGateway
from storage_gateway.interfaces import StorageClient
from storage_gateway.main import app


@pytest.fixture
def storage() -> MagicMock:
    """Storage client double; every method is a blocking MagicMock."""
    return MagicMock(spec=StorageClient)


@pytest.fixture
def cache() -> ExistenceCache:
    return ExistenceCache()


@pytest.fixture
def errors() -> ErrorCollector:
    return ErrorCollector()


@pytest.fixture
def gateway(storage, cache, errors) -> StorageGateway:
    return StorageGateway(storage, cache, errors, presign_expires_in=900)


@pytest.fixture
def client(storage, cache) -> Iterator[TestClient]:
    """API client wired to the storage double and a fresh existence cache."""
    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_existence_cache] = lambda: cache
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
