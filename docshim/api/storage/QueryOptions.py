"""Typed query options and their translation from a generic mapping."""

from collections.abc import Mapping
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..convert import to_int
from ._normalize_sort import _normalize_sort
from .errors import InvalidArgumentError


class QueryOptions(BaseModel):
    """Sort, skip and limit for find operations.

    ``limit`` only applies to multi-document queries; single-document lookups
    use ``sort`` and ``skip`` alone.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    sort: list[tuple[str, Any]] | None = Field(default=None, description="Ordered (field, direction) pairs")
    skip: int | None = Field(default=None, ge=0, description="Number of documents to skip")
    limit: int | None = Field(default=None, ge=0, description="Maximum number of documents (0 means no limit)")

    @classmethod
    def from_mapping(cls, opts: Union[Mapping[str, Any], "QueryOptions", None]) -> "QueryOptions":
        """Build options from a mapping such as ``{"sort": {"name": 1}, "skip": 0, "limit": 10}``.

        Keys are matched case-insensitively and unknown keys are ignored.
        ``skip`` and ``limit`` accept strings or floats and are coerced with
        ``to_int``, so an unparseable value becomes 0. Negative values are
        rejected.

        Raises:
            InvalidArgumentError: If the sort specification is malformed or
                skip/limit is negative after coercion
        """
        if opts is None:
            return cls()
        if isinstance(opts, cls):
            return opts

        values: dict[str, Any] = {}
        for key, value in opts.items():
            name = str(key).lower()
            if name == "sort":
                values["sort"] = _normalize_sort(value) or None
            elif name in ("skip", "limit"):
                values[name] = to_int(value)

        try:
            return cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(x) for x in first.get("loc", ()))
            raise InvalidArgumentError(f"Invalid query option {field}: {first.get('msg', str(e))}") from e

    def find_one_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``Collection.find_one`` (sort and skip)."""
        kwargs: dict[str, Any] = {}
        if self.sort:
            kwargs["sort"] = list(self.sort)
        if self.skip is not None:
            kwargs["skip"] = self.skip
        return kwargs

    def find_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``Collection.find`` (sort, skip and limit)."""
        kwargs = self.find_one_kwargs()
        if self.limit is not None:
            kwargs["limit"] = self.limit
        return kwargs
