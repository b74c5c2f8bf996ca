"""Storage API module.

Collection-scoped CRUD over a document database, with the driver kept behind
``Storage`` so callers never touch its native API directly.
"""

from .errors import (
    ClientError,
    ConnectivityError,
    DecodeError,
    InvalidArgumentError,
    NotFoundError,
    StorageError,
)
from .QueryOptions import QueryOptions
from .Storage import Storage
from .StorageConfig import StorageConfig

__all__ = [
    "ClientError",
    "ConnectivityError",
    "DecodeError",
    "InvalidArgumentError",
    "NotFoundError",
    "QueryOptions",
    "Storage",
    "StorageConfig",
    "StorageError",
]
