"""Theme package: palettes, style variants and their resolved appearances."""

from .models import Color, Palette, RGBAColor, RGBColor, ThemeKind, resolve_color, resolve_rgb
from .manager import DARK_PALETTE, LIGHT_PALETTE, ThemeManager, palette_for, theme_from_toggle

__all__ = [
    "Color",
    "DARK_PALETTE",
    "LIGHT_PALETTE",
    "Palette",
    "RGBAColor",
    "RGBColor",
    "ThemeKind",
    "ThemeManager",
    "palette_for",
    "resolve_color",
    "resolve_rgb",
    "theme_from_toggle",
]
