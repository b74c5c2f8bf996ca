"""HTTP server configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_STARTUP_TIMEOUT_SECS


class ServerConfig(BaseModel):
    """Where the HTTP server listens."""

    model_config = ConfigDict(extra="forbid")

    host: str = Field(default="127.0.0.1", description="Interface to bind")
    port: int = Field(..., ge=0, le=65535, description="TCP port to bind")
    startup_timeout_secs: float = Field(
        default=DEFAULT_STARTUP_TIMEOUT_SECS, gt=0, description="Seconds to wait for the listener to come up"
    )
