"""Top-level docshim configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from ..server.ServerConfig import ServerConfig
from ..storage.StorageConfig import StorageConfig
from .get_config_path import get_config_path


class DocshimConfig(BaseModel):
    """Top-level configuration: storage backend and HTTP server."""

    model_config = ConfigDict(extra="forbid")

    storage: StorageConfig
    server: ServerConfig

    @classmethod
    def load(cls, path: Path | None = None) -> "DocshimConfig":
        """Load and validate config from file (``get_config_path()`` by default).

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = path or get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "storage": self.storage.model_dump(),
            "server": self.server.model_dump(),
        }

    def save(self, path: Path | None = None) -> None:
        """Save the configuration as JSON.

        Writes to a temp file and renames it over the target, so an existing
        config is never left half-written.
        """
        path = path or get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
