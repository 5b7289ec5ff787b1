"""Success payload returned by the data endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator

from fetchview.models._base import FetchViewBaseModel
from fetchview.models.item import Item, ensure_unique_ids


class PayloadData(FetchViewBaseModel):
    """Inner ``data`` object of a response body.

    Both fields are optional: the service may answer with just a
    message, just items, or both.
    """

    message: str | None = None
    items: tuple[Item, ...] = ()

    @field_validator("items")
    @classmethod
    def _unique_ids(cls, value: tuple[Item, ...]) -> tuple[Item, ...]:
        return ensure_unique_ids(value)


class ApiPayload(FetchViewBaseModel):
    """Success payload: a message and/or items under ``data``.

    The service answers with a bare object such as
    ``{"message": "Hello from API"}``; bodies already wrapped as
    ``{"data": {...}}`` are accepted unchanged.
    """

    data: PayloadData
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)
    """Response dict as received, kept for debugging."""

    @classmethod
    def from_response(cls, body: dict[str, Any]) -> ApiPayload:
        """Validate a decoded JSON body and stash it in ``raw``."""
        if isinstance(body.get("data"), Mapping):
            return cls.model_validate({**body, "raw": body})
        return cls.model_validate({"data": body, "raw": body})
