"""Color primitives and palette records used by the Capy themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

RGBColor = Tuple[float, float, float]
RGBAColor = Tuple[float, float, float, float]


class ThemeKind(str, Enum):
    """The two themes the window can be switched between."""

    DARK = "dark"
    LIGHT = "light"

    @classmethod
    def parse(cls, value: "ThemeKind | str") -> "ThemeKind":
        if isinstance(value, ThemeKind):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unknown theme '{value}'")


@dataclass(frozen=True, slots=True)
class Color:
    """Normalized RGBA color with every channel in ``[0, 1]``."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgba(cls, r: float, g: float, b: float, a: float) -> "Color":
        """Build a color from 0-255 channels and a 0-100 alpha."""

        return cls(r / 255.0, g / 255.0, b / 255.0, a / 100.0)

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0, 1.0)

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int, a: float = 1.0) -> "Color":
        """Build a color from 0-255 channels and an already normalized alpha."""

        return cls(r / 255.0, g / 255.0, b / 255.0, a)

    def scaled(self, factor: float) -> "Color":
        """Return a copy with the RGB channels multiplied by ``factor``."""

        return Color(self.r * factor, self.g * factor, self.b * factor, self.a)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        return tuple(_to_byte(channel) for channel in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)


def _to_byte(channel: float) -> int:
    value = int(round(channel * 255))
    if value < 0:
        return 0
    if value > 255:
        return 255
    return value


def resolve_color(r: float, g: float, b: float, a: float) -> Color:
    """Convert a human readable RGBA tuple into a normalized :class:`Color`.

    Channels are given in ``0..255`` and alpha in ``0..100``; for example
    ``(255, 255, 255, 100)`` becomes ``Color(1, 1, 1, 1)``.
    """

    return Color.from_rgba(r, g, b, a)


def resolve_rgb(r: float, g: float, b: float) -> Color:
    """Convert a human readable RGB tuple into an opaque :class:`Color`."""

    return Color.from_rgb(r, g, b)


def _resolve(value: RGBAColor) -> Color:
    return resolve_color(*value)


@dataclass(frozen=True, slots=True)
class ButtonsPalette:
    text: RGBAColor
    principal: RGBAColor
    secondary: RGBAColor
    tag: RGBAColor

    def label(self) -> Color:
        return _resolve(self.text)

    def primary(self) -> Color:
        return _resolve(self.principal)

    def secondary_color(self) -> Color:
        return _resolve(self.secondary)

    def tag_color(self) -> Color:
        return _resolve(self.tag)


@dataclass(frozen=True, slots=True)
class InputPalette:
    background: RGBAColor
    border_color: RGBAColor
    icon_color: RGBAColor
    placeholder_text: RGBAColor
    text: RGBAColor
    disabled_color: RGBAColor
    disabled: RGBAColor

    def background_color(self) -> Color:
        return _resolve(self.background)

    def border(self) -> Color:
        return _resolve(self.border_color)

    def icon(self) -> Color:
        return _resolve(self.icon_color)

    def placeholder(self) -> Color:
        return _resolve(self.placeholder_text)

    def value(self) -> Color:
        return _resolve(self.text)

    def disabled_text(self) -> Color:
        return _resolve(self.disabled_color)

    def disabled_background(self) -> Color:
        return _resolve(self.disabled)


@dataclass(frozen=True, slots=True)
class ContainerPalette:
    text: RGBAColor
    border_radius: float
    border_width: float
    border_color: RGBAColor | None
    background: RGBAColor | None

    def text_color(self) -> Color:
        return _resolve(self.text)

    def border(self) -> Color | None:
        return _resolve(self.border_color) if self.border_color is not None else None

    def background_color(self) -> Color | None:
        return _resolve(self.background) if self.background is not None else None


@dataclass(frozen=True, slots=True)
class TogglerPalette:
    background: RGBAColor
    foreground: RGBAColor

    def background_color(self) -> Color:
        return _resolve(self.background)

    def foreground_color(self) -> Color:
        return _resolve(self.foreground)


@dataclass(frozen=True, slots=True)
class ApplicationPalette:
    background: RGBAColor
    text: RGBAColor

    def background_color(self) -> Color:
        return _resolve(self.background)

    def text_color(self) -> Color:
        return _resolve(self.text)


@dataclass(frozen=True, slots=True)
class Palette:
    """Complete color table for one theme."""

    name: str
    buttons: ButtonsPalette
    inputs: InputPalette
    container: ContainerPalette
    toggler: TogglerPalette
    app: ApplicationPalette


__all__ = [
    "ApplicationPalette",
    "BLACK",
    "ButtonsPalette",
    "Color",
    "ContainerPalette",
    "InputPalette",
    "Palette",
    "RGBAColor",
    "RGBColor",
    "TRANSPARENT",
    "ThemeKind",
    "TogglerPalette",
    "WHITE",
    "resolve_color",
    "resolve_rgb",
]
