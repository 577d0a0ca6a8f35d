"""Built-in palettes and Qt integration helpers."""

from __future__ import annotations

import logging
from typing import Any, Dict, cast

from .models import (
    ApplicationPalette,
    ButtonsPalette,
    Color,
    ContainerPalette,
    InputPalette,
    Palette,
    ThemeKind,
    TogglerPalette,
)

_LOGGER = logging.getLogger(__name__)

DARK_PALETTE = Palette(
    name=ThemeKind.DARK.value,
    buttons=ButtonsPalette(
        text=(255, 255, 255, 100),
        principal=(253, 213, 193, 100),
        secondary=(82, 89, 96, 100),
        tag=(82, 89, 96, 100),
    ),
    inputs=InputPalette(
        background=(39, 38, 47, 100),
        border_color=(60, 60, 60, 30),
        icon_color=(90, 90, 90, 100),
        placeholder_text=(100, 100, 100, 60),
        text=(233, 233, 233, 100),
        disabled_color=(60, 60, 60, 60),
        disabled=(60, 60, 60, 60),
    ),
    container=ContainerPalette(
        text=(90, 90, 90, 100),
        border_radius=6.0,
        border_width=0.0,
        border_color=None,
        background=(60, 60, 60, 30),
    ),
    toggler=TogglerPalette(
        background=(33, 35, 37, 100),
        foreground=(60, 60, 60, 100),
    ),
    app=ApplicationPalette(
        background=(31, 30, 37, 100),
        text=(250, 250, 242, 100),
    ),
)

LIGHT_PALETTE = Palette(
    name=ThemeKind.LIGHT.value,
    buttons=ButtonsPalette(
        text=(255, 255, 255, 100),
        principal=(51, 88, 219, 100),
        secondary=(82, 89, 96, 100),
        tag=(51, 245, 106, 100),
    ),
    inputs=InputPalette(
        background=(250, 250, 242, 100),
        border_color=(60, 60, 60, 30),
        icon_color=(90, 90, 90, 100),
        placeholder_text=(60, 60, 60, 60),
        text=(90, 90, 90, 100),
        disabled_color=(60, 60, 60, 60),
        disabled=(60, 60, 60, 60),
    ),
    container=ContainerPalette(
        text=(90, 90, 90, 100),
        border_radius=6.0,
        border_width=0.0,
        border_color=None,
        background=(60, 60, 60, 30),
    ),
    toggler=TogglerPalette(
        background=(250, 250, 250, 100),
        foreground=(60, 60, 60, 30),
    ),
    app=ApplicationPalette(
        background=(250, 250, 242, 100),
        text=(33, 35, 37, 100),
    ),
)

_PALETTES: Dict[ThemeKind, Palette] = {
    ThemeKind.DARK: DARK_PALETTE,
    ThemeKind.LIGHT: LIGHT_PALETTE,
}


def palette_for(theme: ThemeKind | str) -> Palette:
    """Return the palette backing ``theme``."""

    return _PALETTES[ThemeKind.parse(theme)]


def theme_from_toggle(enabled: bool) -> ThemeKind:
    """Map the light-mode toggle onto a theme."""

    return ThemeKind.LIGHT if enabled else ThemeKind.DARK


class ThemeManager:
    """Tracks the active theme and pushes it onto the running QApplication."""

    def __init__(self, theme: ThemeKind | str = ThemeKind.DARK) -> None:
        self._active = ThemeKind.parse(theme)

    @property
    def active(self) -> ThemeKind:
        return self._active

    @property
    def palette(self) -> Palette:
        return palette_for(self._active)

    def activate(self, theme: ThemeKind | str) -> Palette:
        resolved = ThemeKind.parse(theme)
        if resolved is not self._active:
            _LOGGER.debug("Switching theme %s -> %s", self._active.value, resolved.value)
        self._active = resolved
        return self.palette

    def apply_to_application(self, theme: ThemeKind | str | None = None, *, app: Any | None = None) -> Palette:
        palette = self.activate(theme) if theme is not None else self.palette
        try:  # pragma: no cover - Qt optional in CI
            from PySide6.QtGui import QColor, QPalette  # type: ignore
            from PySide6.QtWidgets import QApplication  # type: ignore
        except ImportError:  # pragma: no cover - headless fallback
            return palette

        palette_cls = cast(Any, QPalette)
        qt_app: Any = app if app is not None else QApplication.instance()
        if qt_app is None:
            return palette

        qt_palette = palette_cls()

        def _set(role: Any, color: Color) -> None:
            qt_palette.setColor(role, QColor(*color.to_rgba8()))

        background = palette.app.background_color()
        text = palette.app.text_color()
        _set(palette_cls.ColorRole.Window, background)
        _set(palette_cls.ColorRole.WindowText, text)
        _set(palette_cls.ColorRole.Base, palette.inputs.background_color())
        _set(palette_cls.ColorRole.Text, palette.inputs.value())
        _set(palette_cls.ColorRole.PlaceholderText, palette.inputs.placeholder())
        _set(palette_cls.ColorRole.Button, palette.buttons.secondary_color())
        _set(palette_cls.ColorRole.ButtonText, palette.buttons.label())
        _set(palette_cls.ColorRole.Highlight, palette.buttons.primary())
        qt_app.setStyle("Fusion")
        qt_app.setPalette(qt_palette)
        return palette


__all__ = [
    "DARK_PALETTE",
    "LIGHT_PALETTE",
    "ThemeManager",
    "palette_for",
    "theme_from_toggle",
]
