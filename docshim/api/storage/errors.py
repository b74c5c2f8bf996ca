"""Storage error taxonomy.

Driver failures that are not listed here propagate unchanged; ``ClientError``
names their common base so callers can catch them without importing pymongo.
"""

from typing import Any

from pymongo.errors import PyMongoError

ClientError = PyMongoError


class StorageError(Exception):
    """Base class for errors raised by the storage facade itself."""


class ConnectivityError(StorageError):
    """Raised when the database cannot be reached (connect or ping)."""

    def __init__(self, message: str, uri: str | None = None):
        self.uri = uri
        super().__init__(message)


class NotFoundError(StorageError, LookupError):
    """Raised when a single-document lookup matches nothing."""

    def __init__(self, collection: str, filter: dict[str, Any] | None):
        self.collection = collection
        self.filter = filter
        super().__init__(f"No document in {collection!r} matches {filter!r}")


class DecodeError(StorageError):
    """Raised when a stored document does not fit the requested model."""

    def __init__(self, collection: str, model: type, detail: str):
        self.collection = collection
        self.model = model
        super().__init__(f"Cannot decode document from {collection!r} as {model.__name__}: {detail}")


class InvalidArgumentError(StorageError, ValueError):
    """Raised before reaching the driver when arguments are unusable."""


__all__ = [
    "ClientError",
    "ConnectivityError",
    "DecodeError",
    "InvalidArgumentError",
    "NotFoundError",
    "StorageError",
]
