"""MongoDB-specific configuration data."""

from pydantic import BaseModel, Field, model_validator

from ....constants import DEFAULT_CONNECT_TIMEOUT_SECS


class _Data(BaseModel):
    uri: str = Field(..., description="MongoDB connection URI (required).")
    connect_timeout_secs: float = Field(
        default=DEFAULT_CONNECT_TIMEOUT_SECS,
        gt=0,
        description="Bound on the initial connection handshake, in seconds.",
    )

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def validate_fields(self) -> "_Data":
        if not self.uri.startswith("mongodb"):
            raise ValueError(f"storage.uri must start with 'mongodb://' (found: {self.uri!r})")
        return self
