"""fetchview - Async fetch lifecycle state machine with a text view."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fetchview")
except PackageNotFoundError:
    __version__ = "0+local"
from fetchview._transport import AiohttpClient, HttpClient
from fetchview.config import FetchViewConfig
from fetchview.exceptions import (
    FetchFailedError,
    FetchViewActionError,
    FetchViewConfigError,
    FetchViewError,
    FetchViewTransportError,
)
from fetchview.models import ApiPayload, FetchFailure, FetchResult, FetchSuccess, Item, PayloadData
from fetchview.orchestrator import FetchOrchestrator
from fetchview.state import (
    Action,
    ActionType,
    FetchState,
    RequestFailed,
    RequestStarted,
    RequestSucceeded,
    Store,
    StoreProtocol,
    parse_action,
    reduce,
)
from fetchview.view import RenderedView, View, ViewStatus, render

__all__ = [
    "__version__",
    "Action",
    "ActionType",
    "AiohttpClient",
    "ApiPayload",
    "FetchFailedError",
    "FetchFailure",
    "FetchOrchestrator",
    "FetchResult",
    "FetchState",
    "FetchSuccess",
    "FetchViewActionError",
    "FetchViewConfig",
    "FetchViewConfigError",
    "FetchViewError",
    "FetchViewTransportError",
    "HttpClient",
    "Item",
    "PayloadData",
    "RenderedView",
    "RequestFailed",
    "RequestStarted",
    "RequestSucceeded",
    "Store",
    "StoreProtocol",
    "View",
    "ViewStatus",
    "parse_action",
    "reduce",
    "render",
]
