"""Deterministic in-memory state store.

This is the only component allowed to replace the current
:class:`FetchState`; every replacement goes through the reducer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol

from fetchview.exceptions import FetchViewError
from fetchview.state.actions import Action, parse_action
from fetchview.state.reducer import reduce
from fetchview.state.snapshot import FetchState

_logger = logging.getLogger(__name__)

Listener = Callable[[FetchState], None]
Reducer = Callable[[FetchState, Action], FetchState]


class StoreProtocol(Protocol):
    """Structural ``{state, dispatch}`` capability used by the orchestrator and view.

    Having a protocol here makes it easy to pass recording stores in tests
    while keeping the production implementation (`Store`) concrete.
    """

    @property
    def state(self) -> FetchState: ...

    def dispatch(self, action: Action | Mapping[str, Any]) -> Action: ...


class Store:
    """In-memory store for the fetch lifecycle state.

    Given the same sequence of dispatched actions, the store always ends
    in the same state.
    """

    def __init__(
        self,
        initial: FetchState | None = None,
        *,
        reducer: Reducer = reduce,
    ) -> None:
        self._state = initial if initial is not None else FetchState()
        self._reducer = reducer
        self._listeners: list[Listener] = []
        self._reducing = False
        self._revision = 0

    @property
    def state(self) -> FetchState:
        """Current snapshot."""
        return self._state

    def dispatch(self, action: Action | Mapping[str, Any]) -> Action:
        """Reduce *action* into the state and notify subscribers.

        Mappings are validated first; the typed action is returned.
        """
        parsed = parse_action(action)
        if self._reducing:
            raise FetchViewError("Reducers may not dispatch actions")

        self._reducing = True
        try:
            next_state = self._reducer(self._state, parsed)
        finally:
            self._reducing = False

        _logger.debug("Dispatched %s (loading=%s)", parsed.type, next_state.loading)
        self._state = next_state
        self._revision += 1
        revision = self._revision

        # Snapshot the list so listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            if self._revision != revision:
                # A listener dispatched; that dispatch already notified everyone
                # with the newer state.
                break
            try:
                listener(next_state)
            except Exception:
                _logger.exception("Store listener %r failed", listener)
        return parsed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe


class ObservableStore(StoreProtocol, Protocol):
    """A store the view can subscribe to."""

    def subscribe(self, listener: Listener) -> Callable[[], None]: ...
