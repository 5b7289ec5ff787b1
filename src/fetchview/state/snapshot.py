"""Immutable fetch lifecycle snapshot."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from fetchview.models.item import Item, ensure_unique_ids


class FetchState(BaseModel):
    """What the view renders: items, lifecycle flags and the last message.

    ``loading`` and ``error`` are never both truthy; ``error`` is only set
    once a cycle has completed with a failure.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    items: tuple[Item, ...] = ()
    loading: bool = False
    error: str | None = None
    message: str | None = None

    @field_validator("items")
    @classmethod
    def _unique_ids(cls, value: tuple[Item, ...]) -> tuple[Item, ...]:
        return ensure_unique_ids(value)

    @model_validator(mode="after")
    def _loading_excludes_error(self) -> FetchState:
        if self.loading and self.error:
            raise ValueError("state cannot be loading and failed at the same time")
        return self

    @classmethod
    def from_wire(cls, value: Mapping[str, Any]) -> FetchState:
        """Build a state from a plain dict.

        Accepts both the flat shape ``{"items": [...], "loading": ...}``
        and the nested store shape ``{"data": {"items": [...]}, ...}``.
        """
        working = dict(value)
        data = working.pop("data", None)
        if isinstance(data, Mapping) and "items" not in working:
            working["items"] = data.get("items") or ()
        return cls.model_validate(working)
