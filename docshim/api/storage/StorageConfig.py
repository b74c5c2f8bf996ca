"""Storage configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._mongo._Data import _Data as _MongoData
from ._mongomock._Data import _Data as _MongomockData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "mongo": _MongoData,
    "mongomock": _MongomockData,
}


class StorageConfig(BaseModel):
    type: str = Field(..., description="Storage backend type")
    database: str = Field(..., min_length=1, description="Name of the database holding the collections")
    operation_timeout_secs: float | None = Field(
        default=None, gt=0, description="Default per-call deadline in seconds (none when unset)"
    )
    data: BaseModel = Field(..., description="Backend-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"storage config must be a dict, got {type(values).__name__}")
        storage_type = values.get("type")
        if not storage_type:
            raise ValueError("storage.type is required")
        config_data_class = _BACKEND_REGISTRY.get(storage_type)
        if not config_data_class:
            raise ValueError(f"Unknown backend type: {storage_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            raise ValueError("storage.data is required")
        if not isinstance(data, config_data_class):
            values = {**values, "data": config_data_class(**data)}
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        # data is typed as BaseModel, so the subclass fields need an explicit dump
        result["data"] = self.data.model_dump(**kwargs)
        return result
