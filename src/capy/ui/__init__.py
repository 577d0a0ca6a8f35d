"""UI layer: messages, state machine, view builder and the Qt window."""

from .messages import (
    Message,
    QueryChanged,
    RemoveSearch,
    SetSearch,
    SubmitPressed,
    TagSelected,
    ThemeToggled,
)
from .state import ApplicationState, Store, initial_state, update
from .view import Widget, WidgetKind, render

__all__ = [
    "ApplicationState",
    "Message",
    "QueryChanged",
    "RemoveSearch",
    "SetSearch",
    "Store",
    "SubmitPressed",
    "TagSelected",
    "ThemeToggled",
    "Widget",
    "WidgetKind",
    "initial_state",
    "render",
    "update",
]
