"""Two-outcome result of a single GET against the data endpoint."""

from __future__ import annotations

from typing import Literal

from fetchview.models._base import FetchViewBaseModel
from fetchview.models.payload import ApiPayload


class FetchSuccess(FetchViewBaseModel):
    """The endpoint answered with a valid payload."""

    ok: Literal[True] = True
    payload: ApiPayload
    status_code: int | None = None


class FetchFailure(FetchViewBaseModel):
    """Any non-success outcome.

    ``reason`` holds the underlying detail for logs; it is never shown
    to the user.
    """

    ok: Literal[False] = False
    reason: str
    status_code: int | None = None


FetchResult = FetchSuccess | FetchFailure
