"""State/store layer.

This package is the single source of truth for the fetch lifecycle:
typed actions, the pure reducer that folds them into a
:class:`FetchState`, and the in-memory store that holds the current
snapshot and notifies subscribers.
"""

from fetchview.state.actions import (
    Action,
    ActionType,
    RequestFailed,
    RequestStarted,
    RequestSucceeded,
    parse_action,
)
from fetchview.state.reducer import reduce
from fetchview.state.snapshot import FetchState
from fetchview.state.store import Listener, ObservableStore, Store, StoreProtocol

__all__ = [
    "Action",
    "ActionType",
    "FetchState",
    "Listener",
    "ObservableStore",
    "RequestFailed",
    "RequestStarted",
    "RequestSucceeded",
    "Store",
    "StoreProtocol",
    "parse_action",
    "reduce",
]
