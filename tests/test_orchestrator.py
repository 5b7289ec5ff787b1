from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import pytest

from fetchview._constants import FETCH_FAILED_MESSAGE
from fetchview.exceptions import FetchViewError
from fetchview.models.item import Item
from fetchview.models.payload import ApiPayload
from fetchview.models.result import FetchFailure, FetchResult, FetchSuccess
from fetchview.orchestrator import FetchOrchestrator
from fetchview.state.actions import Action, RequestFailed, RequestSucceeded
from fetchview.state.snapshot import FetchState
from fetchview.state.store import Store


def _success(message: str | None = None, items: list[dict[str, Any]] | None = None) -> FetchSuccess:
    data: dict[str, Any] = {}
    if message is not None:
        data["message"] = message
    if items is not None:
        data["items"] = items
    return FetchSuccess(payload=ApiPayload.from_response({"data": data}), status_code=200)


class _RecordingStore:
    """Store double that keeps a wire-shaped log of every dispatch."""

    def __init__(self, initial: FetchState | None = None) -> None:
        self._inner = Store(initial)
        self.log: list[dict[str, Any]] = []

    @property
    def state(self) -> FetchState:
        return self._inner.state

    def dispatch(self, action: Action | Mapping[str, Any]) -> Action:
        parsed = self._inner.dispatch(action)
        self.log.append(parsed.model_dump())
        return parsed


class _StaticClient:
    def __init__(self, result: FetchResult) -> None:
        self._result = result
        self.calls = 0

    async def get(self) -> FetchResult:
        self.calls += 1
        await asyncio.sleep(0)
        return self._result


class _RaisingClient:
    async def get(self) -> FetchResult:
        await asyncio.sleep(0)
        raise RuntimeError("API Error")


class _ControlledClient:
    """Each call waits on a future the test resolves explicitly."""

    def __init__(self) -> None:
        self.pending: list[asyncio.Future[FetchResult]] = []

    async def get(self) -> FetchResult:
        future: asyncio.Future[FetchResult] = asyncio.get_running_loop().create_future()
        self.pending.append(future)
        return await future


async def _settle() -> None:
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_trigger_dispatches_request_first_and_synchronously() -> None:
    store = _RecordingStore()
    client = _StaticClient(_success("Hello from API"))
    orchestrator = FetchOrchestrator(store, client)

    result = orchestrator.trigger()

    assert result is None
    assert store.log == [{"type": "FETCH_DATA_REQUEST"}]
    assert store.state.loading is True
    assert client.calls == 0
    assert orchestrator.pending == 1

    await orchestrator.wait_idle()

    assert store.log[0] == {"type": "FETCH_DATA_REQUEST"}
    assert store.log[1]["type"] == "FETCH_DATA_SUCCESS"
    assert len(store.log) == 2
    assert orchestrator.pending == 0


@pytest.mark.asyncio
async def test_success_dispatches_payload() -> None:
    store = Store()
    orchestrator = FetchOrchestrator(store, _StaticClient(_success("Hello from API", [{"id": 1, "name": "Item 1"}])))

    orchestrator.trigger()
    await orchestrator.wait_idle()

    assert store.state.loading is False
    assert store.state.error is None
    assert store.state.message == "Hello from API"
    assert store.state.items == (Item(id=1, name="Item 1"),)


@pytest.mark.asyncio
async def test_failure_result_dispatches_fixed_message(caplog: pytest.LogCaptureFixture) -> None:
    store = Store(FetchState(items=(Item(id=1, name="Item 1"),)))
    client = _StaticClient(FetchFailure(reason="HTTP 503 from /api/data: upstream down", status_code=503))
    orchestrator = FetchOrchestrator(store, client)

    with caplog.at_level(logging.WARNING, logger="fetchview.orchestrator"):
        action = await orchestrator.fetch()

    assert action == RequestFailed(message=FETCH_FAILED_MESSAGE)
    assert store.state.error == FETCH_FAILED_MESSAGE
    assert store.state.items == (Item(id=1, name="Item 1"),)
    assert "upstream down" in caplog.text


@pytest.mark.asyncio
async def test_raising_client_is_translated_to_failure(caplog: pytest.LogCaptureFixture) -> None:
    store = _RecordingStore()
    orchestrator = FetchOrchestrator(store, _RaisingClient())

    with caplog.at_level(logging.WARNING, logger="fetchview.orchestrator"):
        orchestrator.trigger()
        await orchestrator.wait_idle()

    assert store.log == [
        {"type": "FETCH_DATA_REQUEST"},
        {"type": "FETCH_DATA_FAILURE", "message": FETCH_FAILED_MESSAGE},
    ]
    assert "API Error" not in (store.state.error or "")
    assert "API Error" in caplog.text


@pytest.mark.asyncio
async def test_unexpected_result_is_a_failure() -> None:
    store = Store()
    orchestrator = FetchOrchestrator(store, _StaticClient({"data": {"message": "hi"}}))  # type: ignore[arg-type]

    action = await orchestrator.fetch()

    assert isinstance(action, RequestFailed)
    assert store.state.error == FETCH_FAILED_MESSAGE


@pytest.mark.asyncio
async def test_fetch_returns_terminal_action() -> None:
    store = Store()
    orchestrator = FetchOrchestrator(store, _StaticClient(_success("Hello from API")))

    action = await orchestrator.fetch()

    assert isinstance(action, RequestSucceeded)
    assert action.payload.data.message == "Hello from API"


@pytest.mark.asyncio
async def test_new_trigger_recovers_from_error_state() -> None:
    store = Store(FetchState(error=FETCH_FAILED_MESSAGE))
    orchestrator = FetchOrchestrator(store, _StaticClient(_success("Hello from API")))

    orchestrator.trigger()
    assert store.state.loading is True
    assert store.state.error is None

    await orchestrator.wait_idle()
    assert store.state.error is None
    assert store.state.message == "Hello from API"


@pytest.mark.asyncio
async def test_overlapping_cycles_last_resolved_wins() -> None:
    store = Store()
    client = _ControlledClient()
    orchestrator = FetchOrchestrator(store, client)

    orchestrator.trigger()
    orchestrator.trigger()
    await _settle()
    assert len(client.pending) == 2
    assert orchestrator.pending == 2

    # Second request resolves first.
    client.pending[1].set_result(_success("second", [{"id": 2, "name": "Item 2"}]))
    await _settle()
    assert store.state.loading is False
    assert store.state.message == "second"

    # First request resolves last with a failure; stale items stay.
    client.pending[0].set_result(FetchFailure(reason="timeout"))
    await orchestrator.wait_idle()

    assert store.state.error == FETCH_FAILED_MESSAGE
    assert store.state.items == (Item(id=2, name="Item 2"),)
    assert orchestrator.pending == 0


def test_trigger_without_running_loop_raises() -> None:
    store = _RecordingStore()
    orchestrator = FetchOrchestrator(store, _StaticClient(_success("x")))

    with pytest.raises(FetchViewError):
        orchestrator.trigger()

    assert store.log == []


@pytest.mark.asyncio
async def test_wait_idle_without_pending_returns_immediately() -> None:
    orchestrator = FetchOrchestrator(Store(), _StaticClient(_success("x")))
    await asyncio.wait_for(orchestrator.wait_idle(), timeout=0.5)
