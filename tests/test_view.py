"""Widget tree produced by the view builder."""

from __future__ import annotations

import random

from capy.theme import styles
from capy.theme.models import ThemeKind
from capy.ui.messages import QueryChanged, RemoveSearch, SetSearch, SubmitPressed, TagSelected, ThemeToggled
from capy.ui.state import ApplicationState
from capy.ui.view import (
    EMPTY_HISTORY_MESSAGE,
    INPUT_BOX_HEIGHT,
    INPUT_HEIGHT,
    PLACEHOLDERS,
    TAGS,
    Widget,
    WidgetKind,
    accent_for,
    pick_placeholder,
    render,
)


def _history_rows(tree: Widget) -> list[Widget]:
    return [node for node in tree.walk() if node.key.startswith("history-row-")]


def test_empty_history_renders_placeholder_message(rng: random.Random) -> None:
    tree = render(ApplicationState(), rng=rng)

    empty = tree.find("history-empty")
    assert empty is not None
    assert empty.text == EMPTY_HISTORY_MESSAGE
    assert empty.style == styles.CustomText((82, 81, 90))
    assert tree.find("history-scroll") is None
    assert _history_rows(tree) == []


def test_history_renders_one_row_per_entry_in_order(rng: random.Random) -> None:
    tree = render(ApplicationState(history=("newest", "middle", "oldest")), rng=rng)

    assert tree.find("history-empty") is None
    assert tree.find("history-scroll") is not None
    rows = _history_rows(tree)
    assert [row.children[0].text for row in rows] == ["newest", "middle", "oldest"]
    assert [row.children[-1].on_press for row in rows] == [RemoveSearch(0), RemoveSearch(1), RemoveSearch(2)]


def test_history_row_trims_text_and_recalls_query(rng: random.Random) -> None:
    tree = render(ApplicationState(history=("  padded  ",)), rng=rng)

    label = tree.find("history-0")
    assert label is not None
    assert label.text == "padded"
    assert label.on_press == SetSearch("padded")
    assert label.style == styles.TextButton()


def test_submit_button_style_tracks_query(rng: random.Random) -> None:
    empty = render(ApplicationState(query="   "), rng=rng).find("submit")
    filled = render(ApplicationState(query="borrow checker"), rng=rng).find("submit")

    assert empty is not None and filled is not None
    assert empty.style == styles.Secondary()
    assert filled.style == styles.Principal()
    assert filled.on_press == SubmitPressed()


def test_query_input_is_bound_to_state(rng: random.Random) -> None:
    tree = render(ApplicationState(query="abc"), rng=rng)

    query = tree.find("query")
    assert query is not None
    assert query.kind is WidgetKind.TEXT_INPUT
    assert query.text == "abc"
    assert query.props["placeholder"] in PLACEHOLDERS
    assert query.on_input is not None
    assert query.on_input("abcd") == QueryChanged("abcd")


def test_input_row_sits_in_input_container(rng: random.Random) -> None:
    box = render(ApplicationState(), rng=rng).find("input-box")

    assert box is not None
    assert box.kind is WidgetKind.CONTAINER
    assert box.style is styles.ContainerStyle.INPUT


def test_tag_buttons_carry_name_and_accent(rng: random.Random) -> None:
    tree = render(ApplicationState(), rng=rng)

    tags = [tree.find(f"tag-{tag.name}") for tag in TAGS]
    assert [node.on_press for node in tags if node] == [
        TagSelected("overflow"),
        TagSelected("exchange"),
        TagSelected("geeks"),
    ]
    assert tags[0] is not None and tags[0].style == styles.Tag((252, 187, 150))
    assert tags[2] is not None and tags[2].children[0].props["source"] == "geek-for-geeks.png"


def test_title_accent_depends_on_theme(rng: random.Random) -> None:
    dark = render(ApplicationState(theme=ThemeKind.DARK), rng=rng).find("title")
    light = render(ApplicationState(theme=ThemeKind.LIGHT, toggler=True), rng=rng).find("title")

    assert dark is not None and light is not None
    assert dark.text == "Capy"
    assert dark.style == styles.CustomText(accent_for(ThemeKind.DARK))
    assert light.style == styles.CustomText(accent_for(ThemeKind.LIGHT))
    assert dark.style != light.style


def test_theme_toggle_reflects_state(rng: random.Random) -> None:
    toggle = render(ApplicationState(theme=ThemeKind.LIGHT, toggler=True), rng=rng).find("theme-toggle")

    assert toggle is not None
    assert toggle.props["checked"] is True
    assert toggle.on_toggle is not None
    assert toggle.on_toggle(False) == ThemeToggled(False)


def test_placeholder_pick_is_deterministic_for_seeded_rng() -> None:
    first = [pick_placeholder(random.Random(7)) for _ in range(3)]
    second = [pick_placeholder(random.Random(7)) for _ in range(3)]

    assert first == second
    assert set(first) <= set(PLACEHOLDERS)


def test_placeholder_pick_covers_every_prompt() -> None:
    generator = random.Random(0)

    seen = {pick_placeholder(generator) for _ in range(200)}

    assert seen == set(PLACEHOLDERS)


def test_search_box_has_fixed_heights_for_pill_corners(rng: random.Random) -> None:
    tree = render(ApplicationState(), rng=rng)

    box = tree.find("input-box")
    query = tree.find("query")
    assert box is not None and query is not None
    assert box.props["height"] == INPUT_BOX_HEIGHT
    assert query.props["height"] == INPUT_HEIGHT
    assert INPUT_HEIGHT < INPUT_BOX_HEIGHT
