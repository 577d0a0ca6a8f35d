"""Style variants and the resolvers that turn them into appearances.

Every widget kind gets one pure function per interaction state. The functions
take the active :class:`~capy.theme.models.ThemeKind` and, where the widget
kind has more than one look, a style variant. Variants are plain data; all of
the policy lives here.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple, Union

from .manager import palette_for
from .models import TRANSPARENT, Color, RGBColor, ThemeKind, resolve_color, resolve_rgb

PILL_RADIUS = 100.0
PANEL_RADIUS = 35.0
DEFAULT_RADIUS = 6.0
SCROLLBAR_RADIUS = 90.0
PRESSED_FACTOR = 0.7

_PRINCIPAL_LABEL = Color.from_rgb8(255, 110, 1)
_SELECTION = Color.from_rgb8(70, 70, 70, 0.6)


# ----------------------------------------------------------------------
# Variants
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Principal:
    """Call-to-action button."""


@dataclass(frozen=True, slots=True)
class Secondary:
    """Muted button that lights up like :class:`Principal` on hover."""


@dataclass(frozen=True, slots=True)
class TextButton:
    """Button without a background, used for inline icons."""


@dataclass(frozen=True, slots=True)
class Tag:
    """Category button painted with its own accent color."""

    color: RGBColor


ButtonStyle = Union[Principal, Secondary, TextButton, Tag]


class ContainerStyle(str, Enum):
    DEFAULT = "default"
    HISTORIAL = "historial"
    INPUT = "input"
    LINE = "line"


@dataclass(frozen=True, slots=True)
class DefaultText:
    """Text that inherits the application text color."""


@dataclass(frozen=True, slots=True)
class CustomText:
    color: RGBColor


TextStyle = Union[DefaultText, CustomText]


# ----------------------------------------------------------------------
# Appearances
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ApplicationAppearance:
    background_color: Color
    text_color: Color


@dataclass(frozen=True, slots=True)
class TextAppearance:
    color: Color | None = None


@dataclass(frozen=True, slots=True)
class ButtonAppearance:
    background: Color | None = None
    text_color: Color = Color(0.0, 0.0, 0.0, 1.0)
    border_radius: float = 0.0
    border_width: float = 0.0
    border_color: Color = TRANSPARENT
    shadow_offset: Tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True, slots=True)
class ContainerAppearance:
    text_color: Color | None = None
    background: Color | None = None
    border_radius: float = 0.0
    border_width: float = 0.0
    border_color: Color = TRANSPARENT


@dataclass(frozen=True, slots=True)
class TogglerAppearance:
    background: Color
    foreground: Color
    background_border: Color | None = None
    foreground_border: Color | None = None


@dataclass(frozen=True, slots=True)
class TextInputAppearance:
    background: Color
    border_radius: float
    border_width: float
    border_color: Color
    icon_color: Color


@dataclass(frozen=True, slots=True)
class TextInputColors:
    placeholder: Color
    value: Color
    selection: Color
    disabled: Color


@dataclass(frozen=True, slots=True)
class RuleAppearance:
    color: Color
    width: int
    radius: float
    fill_percent: float


@dataclass(frozen=True, slots=True)
class Scroller:
    color: Color
    border_radius: float
    border_width: float
    border_color: Color


@dataclass(frozen=True, slots=True)
class ScrollbarAppearance:
    background: Color | None
    border_radius: float
    border_width: float
    border_color: Color
    scroller: Scroller


# ----------------------------------------------------------------------
# Resolvers
# ----------------------------------------------------------------------


def application_appearance(theme: ThemeKind) -> ApplicationAppearance:
    app = palette_for(theme).app
    return ApplicationAppearance(background_color=app.background_color(), text_color=app.text_color())


def text_appearance(theme: ThemeKind, style: TextStyle = DefaultText()) -> TextAppearance:
    """Resolve a text style; custom colors are always fully opaque."""

    del theme
    if isinstance(style, CustomText):
        r, g, b = style.color
        return TextAppearance(color=resolve_color(r, g, b, 100.0))
    if isinstance(style, DefaultText):
        return TextAppearance()
    raise TypeError(f"Unsupported text style: {style!r}")


def button_active(theme: ThemeKind, style: ButtonStyle) -> ButtonAppearance:
    buttons = palette_for(theme).buttons
    if isinstance(style, Principal):
        return ButtonAppearance(
            background=buttons.primary(),
            text_color=_PRINCIPAL_LABEL,
            border_radius=PILL_RADIUS,
        )
    if isinstance(style, Secondary):
        return ButtonAppearance(
            background=buttons.secondary_color(),
            text_color=buttons.label(),
            border_radius=PILL_RADIUS,
        )
    if isinstance(style, Tag):
        return ButtonAppearance(
            background=resolve_rgb(*style.color),
            text_color=buttons.label(),
            border_radius=PILL_RADIUS,
        )
    if isinstance(style, TextButton):
        return ButtonAppearance(
            background=TRANSPARENT,
            text_color=buttons.label(),
            border_radius=PILL_RADIUS,
        )
    raise TypeError(f"Unsupported button style: {style!r}")


def button_hovered(theme: ThemeKind, style: ButtonStyle) -> ButtonAppearance:
    if isinstance(style, Secondary):
        return button_active(theme, Principal())
    return button_active(theme, style)


def button_pressed(theme: ThemeKind, style: ButtonStyle) -> ButtonAppearance:
    """Darken the hover look by :data:`PRESSED_FACTOR`, keeping alpha."""

    active = button_hovered(theme, style)
    background = active.background.scaled(PRESSED_FACTOR) if active.background is not None else None
    return replace(
        active,
        background=background,
        text_color=active.text_color.scaled(PRESSED_FACTOR),
        shadow_offset=(0.0, 0.0),
    )


def container_appearance(theme: ThemeKind, style: ContainerStyle = ContainerStyle.DEFAULT) -> ContainerAppearance:
    inputs = palette_for(theme).inputs
    style = ContainerStyle(style)
    if style is ContainerStyle.DEFAULT:
        return ContainerAppearance()
    if style is ContainerStyle.INPUT:
        return ContainerAppearance(background=inputs.background_color(), border_radius=PILL_RADIUS)
    if style is ContainerStyle.HISTORIAL:
        return ContainerAppearance(background=inputs.background_color(), border_radius=PANEL_RADIUS)
    return ContainerAppearance(background=inputs.placeholder(), border_radius=PANEL_RADIUS)


def toggler_active(theme: ThemeKind, is_active: bool = False) -> TogglerAppearance:
    del is_active
    toggler = palette_for(theme).toggler
    return TogglerAppearance(background=toggler.background_color(), foreground=toggler.foreground_color())


def toggler_hovered(theme: ThemeKind, is_active: bool = False) -> TogglerAppearance:
    # Same look as the active state; there is no dedicated hover color.
    return toggler_active(theme, is_active)


def text_input_active(theme: ThemeKind) -> TextInputAppearance:
    inputs = palette_for(theme).inputs
    return TextInputAppearance(
        background=inputs.background_color(),
        border_radius=PILL_RADIUS,
        border_width=0.0,
        border_color=inputs.border(),
        icon_color=inputs.icon(),
    )


def text_input_focused(theme: ThemeKind) -> TextInputAppearance:
    return text_input_active(theme)


def text_input_disabled(theme: ThemeKind) -> TextInputAppearance:
    return replace(text_input_active(theme), border_radius=DEFAULT_RADIUS, border_width=2.0)


def text_input_colors(theme: ThemeKind) -> TextInputColors:
    inputs = palette_for(theme).inputs
    return TextInputColors(
        placeholder=inputs.placeholder(),
        value=inputs.value(),
        selection=_SELECTION,
        disabled=inputs.disabled_text(),
    )


def rule_appearance(theme: ThemeKind) -> RuleAppearance:
    return RuleAppearance(
        color=palette_for(theme).inputs.placeholder(),
        width=2,
        radius=SCROLLBAR_RADIUS,
        fill_percent=20.0,
    )


def _scrollbar(track: Color, thumb: Color) -> ScrollbarAppearance:
    return ScrollbarAppearance(
        background=track,
        border_radius=SCROLLBAR_RADIUS,
        border_width=2.0,
        border_color=TRANSPARENT,
        scroller=Scroller(
            color=thumb,
            border_radius=SCROLLBAR_RADIUS,
            border_width=2.0,
            border_color=TRANSPARENT,
        ),
    )


def scrollable_active(theme: ThemeKind) -> ScrollbarAppearance:
    palette = palette_for(theme)
    return _scrollbar(palette.buttons.secondary_color(), palette.inputs.placeholder())


def scrollable_hovered(theme: ThemeKind, is_mouse_over_scrollbar: bool = True) -> ScrollbarAppearance:
    """Swap track and thumb roles while the pointer is over the list."""

    del is_mouse_over_scrollbar
    palette = palette_for(theme)
    return _scrollbar(palette.inputs.placeholder(), palette.buttons.primary())


__all__ = [
    "ApplicationAppearance",
    "ButtonAppearance",
    "ButtonStyle",
    "ContainerAppearance",
    "ContainerStyle",
    "CustomText",
    "DefaultText",
    "Principal",
    "RuleAppearance",
    "ScrollbarAppearance",
    "Scroller",
    "Secondary",
    "Tag",
    "TextAppearance",
    "TextButton",
    "TextInputAppearance",
    "TextInputColors",
    "TextStyle",
    "TogglerAppearance",
    "application_appearance",
    "button_active",
    "button_hovered",
    "button_pressed",
    "container_appearance",
    "rule_appearance",
    "scrollable_active",
    "scrollable_hovered",
    "text_appearance",
    "text_input_active",
    "text_input_colors",
    "text_input_disabled",
    "text_input_focused",
    "toggler_active",
    "toggler_hovered",
]
