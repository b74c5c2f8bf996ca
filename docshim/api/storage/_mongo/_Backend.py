"""MongoDB storage backend."""

import logging
from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .._AbstractBackend import _AbstractBackend
from ..errors import ConnectivityError
from ..StorageConfig import StorageConfig
from ._Data import _Data

logger = logging.getLogger(__name__)


class _Backend(_AbstractBackend):
    def __init__(self, storage_config: StorageConfig):
        if not isinstance(storage_config.data, _Data):
            raise ValueError("MongoDB config data is required")
        self.uri = storage_config.data.uri
        self.connect_timeout_secs = storage_config.data.connect_timeout_secs
        self._client: MongoClient[Any] | None = None

    def __enter__(self):
        timeout_ms = int(self.connect_timeout_secs * 1000)
        try:
            self._client = MongoClient(self.uri, connectTimeoutMS=timeout_ms, serverSelectionTimeoutMS=timeout_ms)
            self._client.admin.command("ping")  # Test connection
        except PyMongoError as e:
            if self._client is not None:
                self._client.close()
                self._client = None
            logger.error(f"MongoDB connection failed: {self.uri} - {e}")
            raise ConnectivityError(f"Couldn't connect to MongoDB at {self.uri}: {e}", uri=self.uri) from e
        logger.info(f"Connected to MongoDB at {self.uri}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info(f"Closed MongoDB client for {self.uri}")
        return False
