"""Pure fetch lifecycle reducer.

This module intentionally contains no I/O and no mutation: the same
``(state, action)`` pair always yields an equal state.
"""

from __future__ import annotations

from fetchview.exceptions import FetchViewActionError
from fetchview.state.actions import Action, RequestFailed, RequestStarted, RequestSucceeded
from fetchview.state.snapshot import FetchState


def reduce(state: FetchState, action: Action) -> FetchState:
    """Return the state that follows *state* once *action* is applied.

    Policy:
    - started: enter loading and clear any previous error.
    - succeeded: the payload becomes the sole displayed content.
    - failed: record the error but keep stale items on screen.
    """
    if isinstance(action, RequestStarted):
        if state.loading and state.error is None:
            return state
        return state.model_copy(update={"loading": True, "error": None})

    if isinstance(action, RequestSucceeded):
        data = action.payload.data
        return state.model_copy(
            update={
                "loading": False,
                "error": None,
                "items": data.items,
                "message": data.message,
            }
        )

    if isinstance(action, RequestFailed):
        return state.model_copy(update={"loading": False, "error": action.message})

    raise FetchViewActionError(f"Unknown action {action!r}")
