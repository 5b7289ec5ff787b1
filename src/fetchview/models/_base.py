"""Base model for fetchview data types.

Every model inherits from :class:`FetchViewBaseModel` which provides:

* frozen instances, so reducer outputs can be shared and compared
  without defensive copies.
* ``extra="ignore"`` so servers may add fields without breaking parsing.
* A ``model_validator(mode="before")`` that drops explicit ``null``
  values so the field default is used instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class FetchViewBaseModel(BaseModel):
    """Base for payload and state models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        """Drop ``None`` values so the field default applies."""
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if value is not None}
