"""Messages raised by the window and consumed by the state machine.

Each message is a small immutable record. Widgets construct them at the
interaction boundary and hand them to :class:`~capy.ui.state.Store`, which
applies them immediately; nothing keeps a message around afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Message:
    """Base class for every interaction message."""


@dataclass(frozen=True, slots=True)
class SubmitPressed(Message):
    """The submit button next to the search box was pressed."""


@dataclass(frozen=True, slots=True)
class TagSelected(Message):
    """A category tag button was pressed.

    Attributes:
        name: The tag identifier (``"overflow"``, ``"exchange"``, ...).
    """

    name: str


@dataclass(frozen=True, slots=True)
class QueryChanged(Message):
    """The search box text was edited."""

    text: str


@dataclass(frozen=True, slots=True)
class ThemeToggled(Message):
    """The light-mode toggle changed.

    Attributes:
        enabled: ``True`` selects the light theme, ``False`` the dark one.
    """

    enabled: bool


@dataclass(frozen=True, slots=True)
class SetSearch(Message):
    """Replace the search box text, e.g. when recalling a history entry."""

    text: str


@dataclass(frozen=True, slots=True)
class RemoveSearch(Message):
    """Drop the history entry at ``index`` (0 is the most recent)."""

    index: int


__all__ = [
    "Message",
    "QueryChanged",
    "RemoveSearch",
    "SetSearch",
    "SubmitPressed",
    "TagSelected",
    "ThemeToggled",
]
