"""Data models for fetchview."""

from fetchview.models._base import FetchViewBaseModel
from fetchview.models.item import Item
from fetchview.models.payload import ApiPayload, PayloadData
from fetchview.models.result import FetchFailure, FetchResult, FetchSuccess

__all__ = [
    "ApiPayload",
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "FetchViewBaseModel",
    "Item",
    "PayloadData",
]
