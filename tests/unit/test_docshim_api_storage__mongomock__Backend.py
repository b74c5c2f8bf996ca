"""Unit tests for the mongomock backend."""

import pytest

from docshim.api.storage._mongomock._Backend import _Backend, _get_mongomock_client
from docshim.api.storage.StorageConfig import StorageConfig

pytestmark = pytest.mark.storage


def _config() -> StorageConfig:
    return StorageConfig.model_validate({"type": "mongomock", "database": "files", "data": {}})


def test_mongomock_backend_init_error():
    cfg = StorageConfig.model_construct(type="mongomock", database="files", data=None)
    with pytest.raises(ValueError, match="MongoMock config data is required"):
        _Backend(cfg)


def test_mongomock_backend_shares_client():
    with _Backend(_config()) as first, _Backend(_config()) as second:
        assert first.client is second.client
        assert first.client is _get_mongomock_client()


def test_mongomock_backend_exit_drops_reference():
    backend = _Backend(_config()).__enter__()
    backend.ping()
    assert backend.__exit__(None, None, None) is False
    with pytest.raises(RuntimeError, match="not connected"):
        backend.ping()
