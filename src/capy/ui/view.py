"""Toolkit-neutral description of the window contents.

:func:`render` turns an :class:`~capy.ui.state.ApplicationState` into a tree of
:class:`Widget` nodes. The tree is plain data so it can be inspected in tests;
:mod:`capy.ui.renderer` turns it into Qt widgets.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, Mapping, Sequence, Tuple

from ..theme import styles
from ..theme.models import RGBColor, ThemeKind
from .messages import (
    Message,
    QueryChanged,
    RemoveSearch,
    SetSearch,
    SubmitPressed,
    TagSelected,
    ThemeToggled,
)
from .state import ApplicationState

WINDOW_TITLE = "Capy search"
APP_NAME = "Capy"
SUBTITLE = "Programmer search engine"
EMPTY_HISTORY_MESSAGE = "You didn't search anything yet..."
TOGGLE_LABEL = "Light mode"

PLACEHOLDERS: Tuple[str, ...] = (
    "Search anything...",
    "Give me your question...",
    "Let step on that errors...",
)

SUBMIT_ICON = "→"
REMOVE_ICON = "×"

HISTORY_TEXT_COLOR: RGBColor = (160, 160, 160)
EMPTY_MESSAGE_COLOR: RGBColor = (82, 81, 90)
_ACCENTS: Mapping[ThemeKind, RGBColor] = {
    ThemeKind.DARK: (252, 187, 150),
    ThemeKind.LIGHT: (51, 88, 219),
}

PANEL_WIDTH = 610
PANEL_HEIGHT = 200
# Fixed so pill radii can be clamped to half the height.
INPUT_HEIGHT = 44
INPUT_BOX_HEIGHT = 60


class WidgetKind(str, Enum):
    COLUMN = "column"
    ROW = "row"
    CONTAINER = "container"
    TEXT = "text"
    BUTTON = "button"
    TEXT_INPUT = "text_input"
    SCROLLABLE = "scrollable"
    RULE = "rule"
    TOGGLER = "toggler"
    IMAGE = "image"
    SPACE = "space"


@dataclass(frozen=True, slots=True)
class CategoryTag:
    name: str
    image: str
    color: RGBColor


TAGS: Tuple[CategoryTag, ...] = (
    CategoryTag("overflow", "stack-overflow.png", (252, 187, 150)),
    CategoryTag("exchange", "stack-exchange.png", (175, 197, 226)),
    CategoryTag("geeks", "geek-for-geeks.png", (96, 177, 121)),
)


@dataclass(frozen=True, slots=True)
class Widget:
    """One node of the rendered tree.

    ``style`` holds the variant understood by the matching resolver in
    :mod:`capy.theme.styles`. ``props`` carries layout hints (size, spacing,
    padding, font) that do not affect colors.
    """

    kind: WidgetKind
    key: str = ""
    text: str = ""
    style: Any = None
    props: Mapping[str, Any] = field(default_factory=dict)
    children: Tuple["Widget", ...] = ()
    on_press: Message | None = None
    on_input: Callable[[str], Message] | None = None
    on_toggle: Callable[[bool], Message] | None = None

    def walk(self) -> Iterator["Widget"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, key: str) -> "Widget | None":
        for node in self.walk():
            if node.key == key:
                return node
        return None


def _column(*children: Widget, key: str = "", **props: Any) -> Widget:
    return Widget(WidgetKind.COLUMN, key=key, props=props, children=tuple(children))


def _row(*children: Widget, key: str = "", **props: Any) -> Widget:
    return Widget(WidgetKind.ROW, key=key, props=props, children=tuple(children))


def _container(
    child: Widget, *, key: str, style: styles.ContainerStyle = styles.ContainerStyle.DEFAULT, **props: Any
) -> Widget:
    return Widget(WidgetKind.CONTAINER, key=key, style=style, props=props, children=(child,))


def _text(text: str, *, key: str = "", style: styles.TextStyle = styles.DefaultText(), **props: Any) -> Widget:
    return Widget(WidgetKind.TEXT, key=key, text=text, style=style, props=props)


def pick_placeholder(rng: random.Random | None = None) -> str:
    chooser = rng or random
    return chooser.choice(PLACEHOLDERS)


def accent_for(theme: ThemeKind) -> RGBColor:
    return _ACCENTS[ThemeKind.parse(theme)]


def theme_toggle(state: ApplicationState) -> Widget:
    toggler = Widget(
        WidgetKind.TOGGLER,
        key="theme-toggle",
        text=TOGGLE_LABEL,
        props={"checked": state.toggler},
        on_toggle=ThemeToggled,
    )
    return _row(Widget(WidgetKind.SPACE, props={"fill": True}), toggler, key="toolbar")


def title_block(theme: ThemeKind) -> Widget:
    return _container(
        _column(
            _text(APP_NAME, key="title", style=styles.CustomText(accent_for(theme)), size=75, font="bold"),
            _text(SUBTITLE, key="subtitle", size=18),
            spacing=15,
            align="center",
        ),
        key="title-block",
    )


def tag_button(tag: CategoryTag) -> Widget:
    image = Widget(WidgetKind.IMAGE, props={"source": tag.image, "width": 24, "height": 24})
    return Widget(
        WidgetKind.BUTTON,
        key=f"tag-{tag.name}",
        text=tag.name,
        style=styles.Tag(tag.color),
        props={"height": 30, "padding": (0, 10)},
        children=(image,),
        on_press=TagSelected(tag.name),
    )


def tag_row(tags: Sequence[CategoryTag] = TAGS) -> Widget:
    return _row(*(tag_button(tag) for tag in tags), key="tags", spacing=10)


def search_input(state: ApplicationState, placeholder: str) -> Widget:
    text_input = Widget(
        WidgetKind.TEXT_INPUT,
        key="query",
        text=state.query,
        props={"placeholder": placeholder, "padding": (12, 20), "height": INPUT_HEIGHT},
        on_input=QueryChanged,
    )
    submit = Widget(
        WidgetKind.BUTTON,
        key="submit",
        text=SUBMIT_ICON,
        style=styles.Principal() if state.has_query else styles.Secondary(),
        props={"width": 30, "height": 30, "font": "icons", "size": 16},
        on_press=SubmitPressed(),
    )
    return _container(
        _row(text_input, submit, width=595, align="center"),
        key="input-box",
        style=styles.ContainerStyle.INPUT,
        width=PANEL_WIDTH,
        height=INPUT_BOX_HEIGHT,
    )


def history_row(query: str, index: int) -> Widget:
    text = query.strip()
    label = Widget(
        WidgetKind.BUTTON,
        key=f"history-{index}",
        text=text,
        style=styles.TextButton(),
        props={"size": 18, "text_style": styles.CustomText(HISTORY_TEXT_COLOR)},
        on_press=SetSearch(text),
    )
    remove = Widget(
        WidgetKind.BUTTON,
        key=f"remove-{index}",
        text=REMOVE_ICON,
        style=styles.TextButton(),
        props={"font": "icons", "size": 18, "text_style": styles.CustomText(HISTORY_TEXT_COLOR)},
        on_press=RemoveSearch(index),
    )
    return _row(label, Widget(WidgetKind.SPACE, props={"width": 10}), remove, key=f"history-row-{index}", align="center")


def history_panel(history: Sequence[str]) -> Widget:
    if not history:
        body = _text(
            EMPTY_HISTORY_MESSAGE,
            key="history-empty",
            style=styles.CustomText(EMPTY_MESSAGE_COLOR),
            size=20,
            align="center",
        )
    else:
        rows = _column(
            *(history_row(query, index) for index, query in enumerate(history)),
            key="history-list",
            spacing=5,
            padding=(20, 30),
        )
        body = Widget(WidgetKind.SCROLLABLE, key="history-scroll", props={"width": 580}, children=(rows,))
    return _container(
        body,
        key="history",
        style=styles.ContainerStyle.HISTORIAL,
        width=PANEL_WIDTH,
        height=PANEL_HEIGHT,
    )


def render(state: ApplicationState, *, rng: random.Random | None = None) -> Widget:
    """Build the complete widget tree for ``state``."""

    placeholder = pick_placeholder(rng)
    header = _column(title_block(state.theme), search_input(state, placeholder), spacing=30, align="center")
    body = _column(
        header,
        tag_row(),
        Widget(WidgetKind.RULE, key="divider", props={"height": 1}),
        history_panel(state.history),
        key="body",
        spacing=15,
        align="center",
    )
    return _column(theme_toggle(state), body, key="root", padding=10)


__all__ = [
    "CategoryTag",
    "EMPTY_HISTORY_MESSAGE",
    "PLACEHOLDERS",
    "TAGS",
    "WINDOW_TITLE",
    "Widget",
    "WidgetKind",
    "accent_for",
    "history_panel",
    "pick_placeholder",
    "render",
]
