"""Fetch orchestration: one trigger, one fetch cycle."""

from __future__ import annotations

import asyncio
import logging

from fetchview._constants import FETCH_FAILED_MESSAGE
from fetchview._transport import HttpClient
from fetchview.exceptions import FetchViewError
from fetchview.models.result import FetchFailure, FetchResult, FetchSuccess
from fetchview.state.actions import Action, RequestFailed, RequestStarted, RequestSucceeded
from fetchview.state.store import StoreProtocol

_logger = logging.getLogger(__name__)


class FetchOrchestrator:
    """Drives a fetch cycle through the store.

    Every cycle dispatches ``RequestStarted`` before the client is
    awaited, then exactly one of ``RequestSucceeded`` or
    ``RequestFailed``. Overlapping cycles are independent; whichever
    resolves last determines the final state.

    Usage::

        async with AiohttpClient(config) as client:
            orchestrator = FetchOrchestrator(store, client)
            orchestrator.trigger()
            await orchestrator.wait_idle()
    """

    def __init__(self, store: StoreProtocol, client: HttpClient) -> None:
        self._store = store
        self._client = client
        self._tasks: set[asyncio.Task[Action]] = set()

    @property
    def pending(self) -> int:
        """Number of triggered cycles that have not resolved yet."""
        return len(self._tasks)

    def trigger(self) -> None:
        """Start a cycle without waiting for it.

        ``RequestStarted`` is dispatched before this method returns; the
        network step runs as a task on the running event loop.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as exc:
            raise FetchViewError("trigger() must be called from a running event loop") from exc

        self._store.dispatch(RequestStarted())
        task = loop.create_task(self._complete())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def fetch(self) -> Action:
        """Run a full cycle in the current task and return its terminal action."""
        self._store.dispatch(RequestStarted())
        return await self._complete()

    async def wait_idle(self) -> None:
        """Wait until every triggered cycle has dispatched its terminal action."""
        while self._tasks:
            await asyncio.gather(*self._tasks)

    async def _complete(self) -> Action:
        try:
            result: FetchResult = await self._client.get()
        except Exception as exc:
            result = FetchFailure(reason=f"{type(exc).__name__}: {exc}")

        action: Action
        if isinstance(result, FetchSuccess):
            action = RequestSucceeded(payload=result.payload)
        else:
            reason = result.reason if isinstance(result, FetchFailure) else f"unexpected result {result!r}"
            _logger.warning("Fetch failed: %s", reason)
            action = RequestFailed(message=FETCH_FAILED_MESSAGE)

        self._store.dispatch(action)
        return action
