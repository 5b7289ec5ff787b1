"""Typed actions for the fetch lifecycle.

Every state transition is requested by exactly one of these values.
Their ``model_dump()`` is the wire shape external dispatchers use,
e.g. ``{"type": "FETCH_DATA_REQUEST"}``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from fetchview.exceptions import FetchViewActionError
from fetchview.models.payload import ApiPayload


class ActionType(StrEnum):
    FETCH_DATA_REQUEST = "FETCH_DATA_REQUEST"
    FETCH_DATA_SUCCESS = "FETCH_DATA_SUCCESS"
    FETCH_DATA_FAILURE = "FETCH_DATA_FAILURE"


class RequestStarted(BaseModel):
    """A fetch cycle began; emitted before any network activity."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["FETCH_DATA_REQUEST"] = "FETCH_DATA_REQUEST"


class RequestSucceeded(BaseModel):
    """The endpoint answered with *payload*."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["FETCH_DATA_SUCCESS"] = "FETCH_DATA_SUCCESS"
    payload: ApiPayload


class RequestFailed(BaseModel):
    """The cycle failed; *message* is the user-facing text."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["FETCH_DATA_FAILURE"] = "FETCH_DATA_FAILURE"
    message: str = Field(..., min_length=1)


Action = Annotated[RequestStarted | RequestSucceeded | RequestFailed, Field(discriminator="type")]

_ACTION_ADAPTER: TypeAdapter[Action] = TypeAdapter(Action)


def parse_action(value: Action | Mapping[str, Any]) -> Action:
    """Return *value* as a typed action.

    Typed actions pass through unchanged; mappings are validated against
    the ``type`` discriminator.

    Raises :class:`FetchViewActionError` for anything else.
    """
    if isinstance(value, (RequestStarted, RequestSucceeded, RequestFailed)):
        return value
    if not isinstance(value, Mapping):
        raise FetchViewActionError(f"Expected an action or mapping, got {type(value).__name__}")
    try:
        return _ACTION_ADAPTER.validate_python(dict(value))
    except ValidationError as exc:
        raise FetchViewActionError(f"Invalid action {value.get('type')!r}: {exc}") from exc
