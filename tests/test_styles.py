"""Style resolver behavior for every widget kind."""

from __future__ import annotations

import pytest

from capy.theme import palette_for, resolve_color, resolve_rgb
from capy.theme.models import TRANSPARENT, Color, ThemeKind
from capy.theme import styles

THEMES = (ThemeKind.DARK, ThemeKind.LIGHT)


def _rounded(color: Color | None) -> tuple[float, ...] | None:
    if color is None:
        return None
    return tuple(round(channel, 6) for channel in color.as_tuple())


@pytest.mark.parametrize("theme", THEMES)
def test_tag_button_uses_its_own_color_in_every_theme(theme: ThemeKind) -> None:
    appearance = styles.button_active(theme, styles.Tag((96, 177, 121)))

    assert appearance.background == resolve_rgb(96, 177, 121)
    assert appearance.background != palette_for(theme).buttons.tag_color()
    assert appearance.background.a == 1.0


@pytest.mark.parametrize(
    "style",
    [styles.Principal(), styles.Secondary(), styles.TextButton(), styles.Tag((1, 2, 3))],
)
def test_every_button_is_a_pill(style: styles.ButtonStyle) -> None:
    assert styles.button_active(ThemeKind.DARK, style).border_radius == 100.0


def test_principal_button_colors() -> None:
    appearance = styles.button_active(ThemeKind.LIGHT, styles.Principal())

    assert appearance.background == resolve_color(51, 88, 219, 100)
    assert appearance.text_color.to_rgba8() == (255, 110, 1, 255)
    assert appearance.border_width == 0.0
    assert appearance.border_color == TRANSPARENT


def test_text_button_has_transparent_background() -> None:
    appearance = styles.button_active(ThemeKind.DARK, styles.TextButton())

    assert appearance.background == TRANSPARENT
    assert appearance.text_color == resolve_color(255, 255, 255, 100)


def test_secondary_button_looks_principal_on_hover() -> None:
    hovered = styles.button_hovered(ThemeKind.DARK, styles.Secondary())

    assert hovered == styles.button_active(ThemeKind.DARK, styles.Principal())
    assert styles.button_active(ThemeKind.DARK, styles.Secondary()) != hovered


@pytest.mark.parametrize("style", [styles.Principal(), styles.TextButton(), styles.Tag((10, 20, 30))])
def test_other_buttons_do_not_change_on_hover(style: styles.ButtonStyle) -> None:
    assert styles.button_hovered(ThemeKind.LIGHT, style) == styles.button_active(ThemeKind.LIGHT, style)


def test_pressed_button_darkens_background_and_text() -> None:
    active = styles.button_active(ThemeKind.DARK, styles.Tag((200, 100, 50)))
    pressed = styles.button_pressed(ThemeKind.DARK, styles.Tag((200, 100, 50)))

    assert _rounded(pressed.background) == _rounded(active.background.scaled(0.7))
    assert _rounded(pressed.text_color) == _rounded(active.text_color.scaled(0.7))
    assert pressed.background.a == active.background.a
    assert pressed.border_radius == active.border_radius
    assert pressed.shadow_offset == (0.0, 0.0)


def test_pressed_secondary_starts_from_principal() -> None:
    pressed = styles.button_pressed(ThemeKind.DARK, styles.Secondary())
    principal = styles.button_active(ThemeKind.DARK, styles.Principal())

    assert _rounded(pressed.background) == _rounded(principal.background.scaled(0.7))


def test_default_text_defers_to_ambient_color() -> None:
    assert styles.text_appearance(ThemeKind.DARK, styles.DefaultText()).color is None


def test_custom_text_is_always_opaque() -> None:
    appearance = styles.text_appearance(ThemeKind.LIGHT, styles.CustomText((160, 160, 160)))

    assert appearance.color == resolve_color(160, 160, 160, 100)
    assert appearance.color.a == 1.0


@pytest.mark.parametrize("theme", THEMES)
def test_container_variants(theme: ThemeKind) -> None:
    inputs = palette_for(theme).inputs

    default = styles.container_appearance(theme, styles.ContainerStyle.DEFAULT)
    assert default.background is None

    input_box = styles.container_appearance(theme, styles.ContainerStyle.INPUT)
    assert input_box.background == inputs.background_color()
    assert input_box.border_radius == 100.0

    history = styles.container_appearance(theme, styles.ContainerStyle.HISTORIAL)
    assert history.background == inputs.background_color()
    assert history.border_radius == 35.0

    line = styles.container_appearance(theme, styles.ContainerStyle.LINE)
    assert line.background == inputs.placeholder()
    assert line.border_radius == 35.0


def test_toggler_hover_matches_active_state() -> None:
    for theme in THEMES:
        for is_active in (True, False):
            assert styles.toggler_hovered(theme, is_active) == styles.toggler_active(theme, is_active)


def test_text_input_focus_matches_active_and_disabled_differs_in_border() -> None:
    active = styles.text_input_active(ThemeKind.DARK)
    disabled = styles.text_input_disabled(ThemeKind.DARK)

    assert styles.text_input_focused(ThemeKind.DARK) == active
    assert active.border_radius == 100.0 and active.border_width == 0.0
    assert disabled.border_radius == 6.0 and disabled.border_width == 2.0
    assert disabled.background == active.background
    assert disabled.border_color == active.border_color


def test_text_input_colors() -> None:
    colors = styles.text_input_colors(ThemeKind.LIGHT)

    assert colors.placeholder == resolve_color(60, 60, 60, 60)
    assert colors.value == resolve_color(90, 90, 90, 100)
    assert colors.selection.to_rgba8() == (70, 70, 70, 153)


def test_rule_appearance() -> None:
    rule = styles.rule_appearance(ThemeKind.DARK)

    assert (rule.width, rule.radius, rule.fill_percent) == (2, 90.0, 20.0)
    assert rule.color == resolve_color(100, 100, 100, 60)


def test_scrollable_hover_swaps_track_and_thumb_roles() -> None:
    palette = palette_for(ThemeKind.DARK)
    active = styles.scrollable_active(ThemeKind.DARK)
    hovered = styles.scrollable_hovered(ThemeKind.DARK, True)

    assert active.background == palette.buttons.secondary_color()
    assert active.scroller.color == palette.inputs.placeholder()
    assert hovered.background == palette.inputs.placeholder()
    assert hovered.scroller.color == palette.buttons.primary()


def test_application_appearance_follows_theme() -> None:
    dark = styles.application_appearance(ThemeKind.DARK)
    light = styles.application_appearance(ThemeKind.LIGHT)

    assert dark.background_color == resolve_color(31, 30, 37, 100)
    assert light.text_color == resolve_color(33, 35, 37, 100)


def test_unknown_button_style_is_rejected() -> None:
    with pytest.raises(TypeError):
        styles.button_active(ThemeKind.DARK, "principal")  # type: ignore[arg-type]
