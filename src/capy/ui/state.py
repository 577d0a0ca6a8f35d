"""Application state and the message-driven update loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Tuple

from ..errors import HistoryIndexError
from ..search import SearchBackend
from ..theme.manager import theme_from_toggle
from ..theme.models import ThemeKind
from .messages import (
    Message,
    QueryChanged,
    RemoveSearch,
    SetSearch,
    SubmitPressed,
    TagSelected,
    ThemeToggled,
)

_LOGGER = logging.getLogger(__name__)

StateListener = Callable[["ApplicationState"], None]


@dataclass(frozen=True, slots=True)
class ApplicationState:
    """Everything the view needs to draw the window.

    Attributes:
        theme: Active theme.
        toggler: Position of the light-mode toggle.
        query: Current search box text, verbatim.
        history: Submitted queries, most recent first.
    """

    theme: ThemeKind = ThemeKind.DARK
    toggler: bool = False
    query: str = ""
    history: Tuple[str, ...] = ()

    @property
    def has_query(self) -> bool:
        return bool(self.query.strip())


def initial_state(theme: ThemeKind | str = ThemeKind.DARK) -> ApplicationState:
    resolved = ThemeKind.parse(theme)
    return ApplicationState(theme=resolved, toggler=resolved is ThemeKind.LIGHT)


def update(
    state: ApplicationState,
    message: Message,
    *,
    backend: SearchBackend | None = None,
) -> ApplicationState:
    """Apply ``message`` to ``state`` and return the resulting state."""

    if isinstance(message, SubmitPressed):
        query = state.query.strip()
        if not query:
            return state
        if backend is not None:
            backend.query_submitted(query)
        return replace(state, history=(query, *state.history))

    if isinstance(message, ThemeToggled):
        enabled = bool(message.enabled)
        return replace(state, toggler=enabled, theme=theme_from_toggle(enabled))

    if isinstance(message, (QueryChanged, SetSearch)):
        return replace(state, query=message.text)

    if isinstance(message, TagSelected):
        if backend is not None:
            backend.tag_selected(message.name)
        return state

    if isinstance(message, RemoveSearch):
        index = message.index
        if not 0 <= index < len(state.history):
            raise HistoryIndexError(index, len(state.history))
        _LOGGER.info("Removing history entry %d: %s", index, state.history[index])
        history = state.history[:index] + state.history[index + 1 :]
        return replace(state, history=history)

    raise TypeError(f"Unsupported message: {message!r}")


class Store:
    """Owns the current :class:`ApplicationState` and notifies listeners on change."""

    def __init__(
        self,
        state: ApplicationState | None = None,
        *,
        backend: SearchBackend | None = None,
    ) -> None:
        self._state = state or initial_state()
        self._backend = backend
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> ApplicationState:
        return self._state

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, message: Message) -> ApplicationState:
        """Apply ``message`` and re-emit the new state to every listener.

        Listeners run even when the message left the state unchanged so the
        window always redraws after an interaction.
        """

        _LOGGER.debug("Dispatching %s", type(message).__name__)
        try:
            new_state = update(self._state, message, backend=self._backend)
        except Exception:
            _LOGGER.exception("Failed to apply %r", message)
            raise
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state


__all__ = ["ApplicationState", "StateListener", "Store", "initial_state", "update"]
