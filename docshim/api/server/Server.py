"""Background HTTP server for an ASGI application."""

import logging
import threading
import time
from typing import Any

import uvicorn

from ...constants import DEFAULT_STARTUP_TIMEOUT_SECS
from .ServerConfig import ServerConfig

logger = logging.getLogger(__name__)


class Server:
    """Run ``app`` under uvicorn in a daemon thread.

    ``start()`` returns once the listener accepts connections; ``close()``
    asks uvicorn to shut down and joins the thread.
    """

    def __init__(
        self,
        app: Any,
        port: int,
        host: str = "127.0.0.1",
        startup_timeout_secs: float = DEFAULT_STARTUP_TIMEOUT_SECS,
    ):
        self.app = app
        self.host = host
        self.port = port
        self.startup_timeout_secs = startup_timeout_secs
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @classmethod
    def from_config(cls, app: Any, server_config: ServerConfig) -> "Server":
        return cls(app, server_config.port, server_config.host, server_config.startup_timeout_secs)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start serving in the background.

        Raises:
            RuntimeError: If already started, or the listener does not come up
                within ``startup_timeout_secs``
        """
        if self._server is not None:
            raise RuntimeError("Server already started")

        # log_config=None leaves logging configuration to the application
        config = uvicorn.Config(self.app, host=self.host, port=self.port, log_config=None)
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(target=self._server.run, name=f"docshim-server-{self.port}", daemon=True)
        self._thread.start()

        deadline = time.monotonic() + self.startup_timeout_secs
        while not self._server.started:
            if not self._thread.is_alive():
                self._server = None
                self._thread = None
                raise RuntimeError(f"Server failed to start on {self.host}:{self.port}")
            if time.monotonic() > deadline:
                self.close()
                raise RuntimeError(
                    f"Server did not start on {self.host}:{self.port} within {self.startup_timeout_secs}s"
                )
            time.sleep(0.05)
        logger.info(f"Server listening on {self.host}:{self.port}")

    def close(self) -> None:
        """Stop the server. Safe to call when it is not running."""
        if self._server is None:
            return
        self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout=self.startup_timeout_secs)
        self._server = None
        self._thread = None
        logger.info(f"Server on {self.host}:{self.port} closed")
