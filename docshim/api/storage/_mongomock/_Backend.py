"""Mock MongoDB storage backend using mongomock."""

import mongomock

from .._AbstractBackend import _AbstractBackend
from ..StorageConfig import StorageConfig
from ._Data import _Data

# Shared mongomock client for all instances (singleton pattern)
_shared_mongomock_client: mongomock.MongoClient | None = None


def _get_mongomock_client() -> mongomock.MongoClient:
    """Get or create shared mongomock client."""
    global _shared_mongomock_client
    if _shared_mongomock_client is None:
        _shared_mongomock_client = mongomock.MongoClient()
    return _shared_mongomock_client


class _Backend(_AbstractBackend):
    def __init__(self, storage_config: StorageConfig):
        if not isinstance(storage_config.data, _Data):
            raise ValueError("MongoMock config data is required")
        self._client: mongomock.MongoClient | None = None

    def __enter__(self):
        self._client = _get_mongomock_client()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Shared client is reused across instances; only drop the reference
        self._client = None
        return False
