"""Render resolved appearances as Qt style sheet fragments."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from . import styles
from .models import Color, ThemeKind


def rgba(color: Color | None) -> str:
    if color is None:
        return "transparent"
    r, g, b, a = color.to_rgba8()
    return f"rgba({r}, {g}, {b}, {a})"


def _radius(radius: float, height: float | None) -> int:
    if height is not None and height > 0:
        radius = min(radius, height / 2.0)
    return int(round(radius))


def _rule(selector: str, declarations: Iterable[str]) -> str:
    body = "\n".join(f"    {line};" for line in declarations)
    return f"{selector} {{\n{body}\n}}"


def _button_block(selector: str, appearance: styles.ButtonAppearance, height: float | None) -> str:
    return _rule(
        selector,
        (
            f"background-color: {rgba(appearance.background)}",
            f"color: {rgba(appearance.text_color)}",
            f"border: {int(appearance.border_width)}px solid {rgba(appearance.border_color)}",
            f"border-radius: {_radius(appearance.border_radius, height)}px",
        ),
    )


def button_qss(
    theme: ThemeKind,
    style: styles.ButtonStyle,
    *,
    object_name: str,
    height: float | None = None,
    text_style: styles.TextStyle | None = None,
) -> str:
    """Style sheet covering the normal, hover and pressed states of one button.

    A ``text_style`` with its own color fixes the label color in every state.
    """

    selector = f"QPushButton#{object_name}"
    text_color = styles.text_appearance(theme, text_style).color if text_style is not None else None
    states = (
        (selector, styles.button_active(theme, style)),
        (f"{selector}:hover", styles.button_hovered(theme, style)),
        (f"{selector}:pressed", styles.button_pressed(theme, style)),
    )
    blocks = []
    for state_selector, appearance in states:
        if text_color is not None:
            appearance = replace(appearance, text_color=text_color)
        blocks.append(_button_block(state_selector, appearance, height))
    return "\n".join(blocks)


def container_qss(
    theme: ThemeKind,
    style: styles.ContainerStyle,
    *,
    object_name: str,
    height: float | None = None,
) -> str:
    appearance = styles.container_appearance(theme, style)
    declarations = [
        f"background-color: {rgba(appearance.background)}",
        f"border: {int(appearance.border_width)}px solid {rgba(appearance.border_color)}",
        f"border-radius: {_radius(appearance.border_radius, height)}px",
    ]
    if appearance.text_color is not None:
        declarations.append(f"color: {rgba(appearance.text_color)}")
    return _rule(f"QFrame#{object_name}", declarations)


def text_qss(theme: ThemeKind, style: styles.TextStyle, *, object_name: str) -> str:
    appearance = styles.text_appearance(theme, style)
    declarations = ["background: transparent"]
    if appearance.color is not None:
        declarations.append(f"color: {rgba(appearance.color)}")
    return _rule(f"QLabel#{object_name}", declarations)


def _input_block(selector: str, appearance: styles.TextInputAppearance, height: float | None) -> str:
    return _rule(
        selector,
        (
            f"background-color: {rgba(appearance.background)}",
            f"border: {int(appearance.border_width)}px solid {rgba(appearance.border_color)}",
            f"border-radius: {_radius(appearance.border_radius, height)}px",
        ),
    )


def text_input_qss(theme: ThemeKind, *, object_name: str, height: float | None = None) -> str:
    selector = f"QLineEdit#{object_name}"
    colors = styles.text_input_colors(theme)
    active = styles.text_input_active(theme)
    base = _rule(
        selector,
        (
            f"background-color: {rgba(active.background)}",
            f"color: {rgba(colors.value)}",
            f"selection-background-color: {rgba(colors.selection)}",
            f"border: {int(active.border_width)}px solid {rgba(active.border_color)}",
            f"border-radius: {_radius(active.border_radius, height)}px",
        ),
    )
    return "\n".join(
        (
            base,
            _input_block(f"{selector}:focus", styles.text_input_focused(theme), height),
            _input_block(f"{selector}:disabled", styles.text_input_disabled(theme), height),
            _rule(f"{selector}:disabled", (f"color: {rgba(colors.disabled)}",)),
        )
    )


def toggler_qss(theme: ThemeKind, *, object_name: str) -> str:
    selector = f"QCheckBox#{object_name}"
    active = styles.toggler_active(theme)
    hovered = styles.toggler_hovered(theme)
    text = styles.application_appearance(theme).text_color
    return "\n".join(
        (
            _rule(selector, ("background: transparent", f"color: {rgba(text)}", "spacing: 8px")),
            _rule(
                f"{selector}::indicator",
                (
                    "width: 36px",
                    "height: 18px",
                    "border-radius: 9px",
                    f"background-color: {rgba(active.background)}",
                    f"border: 2px solid {rgba(active.foreground)}",
                ),
            ),
            _rule(
                f"{selector}::indicator:checked",
                (f"background-color: {rgba(active.foreground)}",),
            ),
            _rule(
                f"{selector}::indicator:hover",
                (
                    f"background-color: {rgba(hovered.background)}",
                    f"border: 2px solid {rgba(hovered.foreground)}",
                ),
            ),
        )
    )


def rule_qss(theme: ThemeKind, *, object_name: str) -> str:
    appearance = styles.rule_appearance(theme)
    return _rule(
        f"QFrame#{object_name}",
        (
            f"background-color: {rgba(appearance.color)}",
            "border: none",
            f"border-radius: {_radius(appearance.radius, appearance.width)}px",
            f"min-height: {appearance.width}px",
            f"max-height: {appearance.width}px",
        ),
    )


def _scrollbar_blocks(selector: str, appearance: styles.ScrollbarAppearance) -> list[str]:
    scroller = appearance.scroller
    return [
        _rule(
            selector,
            (
                f"background: {rgba(appearance.background)}",
                f"border: {int(appearance.border_width)}px solid {rgba(appearance.border_color)}",
                f"border-radius: {_radius(appearance.border_radius, 10)}px",
                "width: 10px",
                "margin: 0px",
            ),
        ),
        _rule(
            f"{selector}::handle:vertical",
            (
                f"background: {rgba(scroller.color)}",
                f"border: {int(scroller.border_width)}px solid {rgba(scroller.border_color)}",
                f"border-radius: {_radius(scroller.border_radius, 10)}px",
                "min-height: 24px",
            ),
        ),
    ]


def scrollable_qss(theme: ThemeKind, *, object_name: str) -> str:
    """Scroll area and scrollbar styling; hover swaps track and thumb colors."""

    area = _rule(f"QScrollArea#{object_name}", ("background: transparent", "border: none"))
    viewport = _rule(f"QScrollArea#{object_name} > QWidget > QWidget", ("background: transparent",))
    bar = f"QScrollArea#{object_name} QScrollBar:vertical"
    blocks = [area, viewport]
    blocks.extend(_scrollbar_blocks(bar, styles.scrollable_active(theme)))
    blocks.extend(_scrollbar_blocks(f"{bar}:hover", styles.scrollable_hovered(theme)))
    blocks.append(
        _rule(
            f"{bar}::add-line:vertical, {bar}::sub-line:vertical",
            ("height: 0px", "border: none", "background: none"),
        )
    )
    return "\n".join(blocks)


def application_qss(theme: ThemeKind) -> str:
    appearance = styles.application_appearance(theme)
    return _rule(
        "QWidget#capy-root",
        (
            f"background-color: {rgba(appearance.background_color)}",
            f"color: {rgba(appearance.text_color)}",
        ),
    )


__all__ = [
    "application_qss",
    "button_qss",
    "container_qss",
    "rgba",
    "rule_qss",
    "scrollable_qss",
    "text_input_qss",
    "text_qss",
    "toggler_qss",
]
