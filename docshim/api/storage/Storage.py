"""Storage public API: collection-scoped CRUD over a document database."""

import logging
from collections.abc import Iterable, Mapping
from contextlib import AbstractContextManager, nullcontext
from typing import Any, Union

import pymongo
from pydantic import BaseModel, ValidationError
from pymongo.errors import PyMongoError
from pymongo.results import UpdateResult

from ...constants import DEFAULT_CONNECT_TIMEOUT_SECS
from ._AbstractBackend import _AbstractBackend
from .errors import ConnectivityError, DecodeError, InvalidArgumentError, NotFoundError
from .QueryOptions import QueryOptions
from .StorageConfig import _BACKEND_REGISTRY, StorageConfig

logger = logging.getLogger(__name__)

Options = Union[Mapping[str, Any], QueryOptions, None]
Document = Union[Mapping[str, Any], BaseModel]


class Storage:
    """Public API for storage operations.

    Use as a context manager; entering connects the configured backend and
    binds the database named by ``storage_config.database``:

        with Storage(config) as storage:
            storage.insert_one("files", {"name": "a.csv"})
            doc = storage.find_one("files", {"name": "a.csv"})

    Every operation takes an optional ``timeout`` in seconds that bounds the
    driver call. Without it, ``storage_config.operation_timeout_secs`` applies
    when set.
    """

    def __init__(self, storage_config: StorageConfig):
        self.storage_config = storage_config
        self.database_name = storage_config.database
        self._backend: _AbstractBackend | None = None
        self._database: Any = None

    def __enter__(self):
        backend_type = self.storage_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import backend class directly from backend _Backend module
        module = __import__(f"docshim.api.storage._{backend_type}._Backend", fromlist=[""])
        backend = module._Backend(self.storage_config)
        backend.__enter__()
        self._backend = backend
        self._database = backend.client[self.database_name]
        logger.debug(f"Storage opened: backend={backend_type} database={self.database_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    @classmethod
    def connect(
        cls, uri: str, database_name: str, connect_timeout_secs: float = DEFAULT_CONNECT_TIMEOUT_SECS
    ) -> "Storage":
        """Connect to MongoDB at ``uri`` and return an open ``Storage``.

        The caller owns the result and must ``close()`` it.

        Raises:
            ConnectivityError: If the server cannot be reached within the timeout
        """
        storage_config = StorageConfig.model_validate(
            {
                "type": "mongo",
                "database": database_name,
                "data": {"uri": uri, "connect_timeout_secs": connect_timeout_secs},
            }
        )
        return cls(storage_config).__enter__()

    def close(self) -> None:
        if self._backend is not None:
            self._backend.__exit__(None, None, None)
        self._backend = None
        self._database = None

    def get_client(self) -> Any:
        """Get the underlying database client (for code that needs direct access)."""
        if self._backend is None:
            raise RuntimeError("Storage not initialized. Use as context manager first.")
        return self._backend.client

    def get_database(self) -> Any:
        """Get the underlying database object (for code that needs direct access)."""
        if self._database is None:
            raise RuntimeError("Storage not initialized. Use as context manager first.")
        return self._database

    def health_check(self, timeout: float | None = None) -> None:
        """Ping the database server.

        Raises:
            ConnectivityError: If the ping fails
        """
        if self._backend is None:
            raise RuntimeError("Storage not initialized. Use as context manager first.")
        try:
            with self._deadline(timeout):
                self._backend.ping()
        except PyMongoError as e:
            logger.warning(f"Health check failed for database {self.database_name}: {e}")
            raise ConnectivityError(f"Database ping failed: {e}") from e

    def find_one(
        self,
        collection: str,
        filter: Mapping[str, Any] | None = None,
        opts: Options = None,
        model: type[BaseModel] | None = None,
        timeout: float | None = None,
    ) -> Any:
        """Return the first document matching ``filter``.

        ``opts`` may carry ``sort`` and ``skip``; ``limit`` is ignored for a
        single lookup. When ``model`` is given the document is validated into
        an instance of it.

        Raises:
            NotFoundError: If no document matches
            DecodeError: If the document does not fit ``model``
        """
        options = QueryOptions.from_mapping(opts)
        query = dict(filter or {})
        logger.debug(f"find_one {collection}: filter={query} opts={options}")
        with self._deadline(timeout):
            document = self._collection(collection).find_one(query, **options.find_one_kwargs())
        if document is None:
            raise NotFoundError(collection, query)
        return self._decode(collection, document, model)

    def find_many(
        self,
        collection: str,
        filter: Mapping[str, Any] | None = None,
        opts: Options = None,
        model: type[BaseModel] | None = None,
        timeout: float | None = None,
    ) -> list[Any]:
        """Return all documents matching ``filter`` as a list.

        ``opts`` may carry ``sort``, ``skip`` and ``limit``. The cursor is
        drained and closed before returning.

        Raises:
            DecodeError: If a document does not fit ``model``
        """
        options = QueryOptions.from_mapping(opts)
        query = dict(filter or {})
        logger.debug(f"find_many {collection}: filter={query} opts={options}")
        with self._deadline(timeout):
            cursor = self._collection(collection).find(query, **options.find_kwargs())
            try:
                documents = list(cursor)
            finally:
                cursor.close()
        return [self._decode(collection, document, model) for document in documents]

    def insert_one(self, collection: str, document: Document, timeout: float | None = None) -> Any:
        """Insert a single document and return its ``_id``."""
        logger.debug(f"insert_one {collection}")
        with self._deadline(timeout):
            result = self._collection(collection).insert_one(self._as_document(document))
        return result.inserted_id

    def insert_many(self, collection: str, documents: Iterable[Document], timeout: float | None = None) -> list[Any]:
        """Insert documents in order and return their ``_id`` values in input order."""
        batch = [self._as_document(document) for document in documents]
        logger.debug(f"insert_many {collection}: {len(batch)} document(s)")
        with self._deadline(timeout):
            result = self._collection(collection).insert_many(batch, ordered=True)
        return list(result.inserted_ids)

    def upsert(
        self, collection: str, filter: Mapping[str, Any], document: Document, timeout: float | None = None
    ) -> UpdateResult:
        """Set the fields of ``document`` on the first match, inserting when nothing matches.

        Fields not named in ``document`` are left as they are on an existing match.
        """
        query = dict(filter)
        logger.debug(f"upsert {collection}: filter={query}")
        with self._deadline(timeout):
            return self._collection(collection).update_one(
                query, {"$set": self._as_document(document)}, upsert=True
            )

    def delete(self, collection: str, filter: Mapping[str, Any] | None, timeout: float | None = None) -> int:
        """Delete every document matching ``filter`` and return how many were removed.

        Raises:
            InvalidArgumentError: If ``filter`` is empty; nothing is deleted
        """
        if not filter:
            raise InvalidArgumentError("filter cannot be empty")
        query = dict(filter)
        logger.debug(f"delete {collection}: filter={query}")
        with self._deadline(timeout):
            deleted_count = self._collection(collection).delete_many(query).deleted_count
        logger.debug(f"delete {collection}: removed {deleted_count} document(s)")
        return deleted_count

    # Internal helpers
    def _collection(self, name: str) -> Any:
        return self.get_database()[name]

    def _deadline(self, timeout: float | None) -> AbstractContextManager[Any]:
        seconds = timeout if timeout is not None else self.storage_config.operation_timeout_secs
        if seconds is None:
            return nullcontext()
        return pymongo.timeout(seconds)

    @staticmethod
    def _as_document(document: Document) -> Any:
        if isinstance(document, BaseModel):
            dumped = document.model_dump(by_alias=True)
            # An unset _id must be left out so the driver generates one
            if "_id" in dumped and dumped["_id"] is None:
                del dumped["_id"]
            return dumped
        return document

    @staticmethod
    def _decode(collection: str, document: dict[str, Any], model: type[BaseModel] | None) -> Any:
        if model is None:
            return document
        try:
            return model.model_validate(document)
        except ValidationError as e:
            raise DecodeError(collection, model, str(e)) from e
