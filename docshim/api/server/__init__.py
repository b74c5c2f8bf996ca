"""HTTP server bootstrap."""

from .health_app import health_app
from .Server import Server
from .ServerConfig import ServerConfig

__all__ = ["Server", "ServerConfig", "health_app"]
