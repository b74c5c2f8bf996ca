"""Abstract base class for storage backends."""

from abc import ABC, abstractmethod
from typing import Any


class _AbstractBackend(ABC):
    """Owns the driver client for one ``Storage`` instance."""

    _client: Any = None

    @abstractmethod
    def __enter__(self):
        pass

    @abstractmethod
    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    @property
    def client(self) -> Any:
        if self._client is None:
            raise RuntimeError("Storage backend not connected. Use as context manager first.")
        return self._client

    def ping(self) -> None:
        """Round-trip a ``ping`` command; driver errors propagate."""
        self.client.admin.command("ping")
