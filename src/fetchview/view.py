"""Text view over the fetch lifecycle state.

:func:`render` maps a :class:`FetchState` to a :class:`RenderedView`;
:class:`View` keeps the latest rendering in sync with a store and routes
clicks on the trigger control to the orchestrator.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from fetchview._constants import BUTTON_LABEL, LOADING_TEXT, TITLE_TEXT
from fetchview.exceptions import FetchViewError
from fetchview.orchestrator import FetchOrchestrator
from fetchview.state.snapshot import FetchState
from fetchview.state.store import ObservableStore

_logger = logging.getLogger(__name__)


class ViewStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


class RenderedView(BaseModel):
    """Everything the component shows for one state.

    The title and trigger control are present in every status; the
    body holds exactly one of loading text, error text, or items plus
    message.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: ViewStatus
    title: str = TITLE_TEXT
    button_label: str = BUTTON_LABEL
    loading_text: str | None = None
    items: tuple[str, ...] = ()
    message: str | None = None
    error: str | None = None

    def lines(self) -> list[str]:
        result = [self.title, f"[{self.button_label}]"]
        if self.status == ViewStatus.LOADING:
            result.append(self.loading_text or LOADING_TEXT)
        elif self.status == ViewStatus.ERROR:
            result.append(self.error or "")
        else:
            if self.message:
                result.append(self.message)
            result.extend(f"- {name}" for name in self.items)
        return result

    def to_text(self) -> str:
        return "\n".join(self.lines())

    def contains(self, text: str) -> bool:
        """Case-insensitive search over the rendered text."""
        return text.lower() in self.to_text().lower()


def render(state: FetchState) -> RenderedView:
    """Render *state*; loading wins over everything, then error."""
    if state.loading:
        return RenderedView(status=ViewStatus.LOADING, loading_text=LOADING_TEXT)
    if state.error:
        return RenderedView(status=ViewStatus.ERROR, error=state.error)
    return RenderedView(
        status=ViewStatus.IDLE,
        items=tuple(item.name for item in state.items),
        message=state.message,
    )


class View:
    """Mounted component: re-renders on every store update.

    The trigger control stays enabled while loading; each click starts
    an independent fetch cycle.
    """

    def __init__(self, store: ObservableStore, orchestrator: FetchOrchestrator | None = None) -> None:
        self._store = store
        self._orchestrator = orchestrator
        self._current = render(store.state)
        self._render_count = 1
        self._unsubscribe = store.subscribe(self._on_state)

    @property
    def current(self) -> RenderedView:
        return self._current

    @property
    def render_count(self) -> int:
        return self._render_count

    def _on_state(self, state: FetchState) -> None:
        self._current = render(state)
        self._render_count += 1
        _logger.debug("Rendered %s view", self._current.status)

    def click(self) -> None:
        """Activate the trigger control."""
        if self._orchestrator is None:
            raise FetchViewError("View has no orchestrator to trigger")
        self._orchestrator.trigger()

    def close(self) -> None:
        """Unmount: stop following the store."""
        self._unsubscribe()
