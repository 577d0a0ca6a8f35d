"""Materialize :mod:`capy.ui.view` trees as PySide6 widgets."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from PySide6.QtCore import QByteArray, QSize, Qt
from PySide6.QtGui import QFont, QFontDatabase, QIcon, QPixmap
from PySide6.QtWidgets import (
    QBoxLayout,
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from ..assets import AssetBundle
from ..errors import AssetError
from ..theme import qss
from ..theme.models import ThemeKind
from ..theme.styles import rule_appearance
from .messages import Message
from .view import PANEL_WIDTH, Widget, WidgetKind

_LOGGER = logging.getLogger(__name__)

Dispatch = Callable[[Message], Any]


def _padding(value: Any) -> tuple[int, int]:
    if value is None:
        return (0, 0)
    if isinstance(value, (int, float)):
        return (int(value), int(value))
    vertical, horizontal = value
    return (int(vertical), int(horizontal))


def register_font(data: bytes, name: str) -> str:
    """Register font bytes with Qt and return the family name it exposes."""

    font_id = QFontDatabase.addApplicationFontFromData(QByteArray(data))
    if font_id < 0:
        raise AssetError(name, "Qt rejected the font data")
    families = QFontDatabase.applicationFontFamilies(font_id)
    if not families:
        raise AssetError(name, "font exposes no families")
    return families[0]


class QtRenderer:
    """Builds a fresh Qt widget hierarchy for each rendered tree.

    Widget signals are wired straight to ``dispatch`` with the message bound
    on the tree node, so the renderer itself holds no application state.
    """

    def __init__(self, dispatch: Dispatch, assets: AssetBundle) -> None:
        self._dispatch = dispatch
        self._assets = assets
        self._text_family = register_font(assets.text_font, "text font")
        self._icon_family = register_font(assets.icon_font, "icon font")
        self._pixmaps: Dict[str, QPixmap] = {}
        self._builders: Dict[WidgetKind, Callable[[Widget, ThemeKind], QWidget]] = {
            WidgetKind.COLUMN: self._build_column,
            WidgetKind.ROW: self._build_row,
            WidgetKind.CONTAINER: self._build_container,
            WidgetKind.TEXT: self._build_text,
            WidgetKind.BUTTON: self._build_button,
            WidgetKind.TEXT_INPUT: self._build_text_input,
            WidgetKind.SCROLLABLE: self._build_scrollable,
            WidgetKind.RULE: self._build_rule,
            WidgetKind.TOGGLER: self._build_toggler,
            WidgetKind.IMAGE: self._build_image,
            WidgetKind.SPACE: self._build_space,
        }
        self._anonymous = 0

    @property
    def text_family(self) -> str:
        return self._text_family

    @property
    def icon_family(self) -> str:
        return self._icon_family

    def build(self, node: Widget, theme: ThemeKind) -> QWidget:
        self._anonymous = 0
        return self._build(node, theme)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _build(self, node: Widget, theme: ThemeKind) -> QWidget:
        widget = self._builders[node.kind](node, theme)
        props = node.props
        if "width" in props and node.kind is not WidgetKind.SPACE:
            widget.setFixedWidth(int(props["width"]))
        if "height" in props:
            widget.setFixedHeight(int(props["height"]))
        return widget

    def _object_name(self, node: Widget) -> str:
        if node.key:
            return node.key
        self._anonymous += 1
        return f"capy-{node.kind.value}-{self._anonymous}"

    def _font(self, node: Widget) -> QFont:
        family = self._icon_family if node.props.get("font") == "icons" else self._text_family
        font = QFont(family)
        if node.props.get("font") == "bold":
            font.setBold(True)
        size = node.props.get("size")
        if size:
            font.setPixelSize(int(size))
        return font

    def _layout(self, layout: QBoxLayout, node: Widget, theme: ThemeKind) -> None:
        layout.setSpacing(int(node.props.get("spacing", 0)))
        vertical, horizontal = _padding(node.props.get("padding"))
        layout.setContentsMargins(int(horizontal), int(vertical), int(horizontal), int(vertical))
        centered = node.props.get("align") == "center"
        for child in node.children:
            child_widget = self._build(child, theme)
            if centered and isinstance(layout, QVBoxLayout):
                layout.addWidget(child_widget, 0, Qt.AlignmentFlag.AlignHCenter)
            elif centered:
                layout.addWidget(child_widget, 0, Qt.AlignmentFlag.AlignVCenter)
            else:
                layout.addWidget(child_widget)

    def _build_column(self, node: Widget, theme: ThemeKind) -> QWidget:
        widget = QWidget()
        widget.setObjectName(self._object_name(node))
        self._layout(QVBoxLayout(widget), node, theme)
        return widget

    def _build_row(self, node: Widget, theme: ThemeKind) -> QWidget:
        widget = QWidget()
        widget.setObjectName(self._object_name(node))
        self._layout(QHBoxLayout(widget), node, theme)
        return widget

    def _build_container(self, node: Widget, theme: ThemeKind) -> QWidget:
        frame = QFrame()
        name = self._object_name(node)
        frame.setObjectName(name)
        height = node.props.get("height")
        frame.setStyleSheet(qss.container_qss(theme, node.style, object_name=name, height=height))
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(8, 8, 8, 8)
        for child in node.children:
            layout.addWidget(self._build(child, theme), 0, Qt.AlignmentFlag.AlignCenter)
        return frame

    def _build_text(self, node: Widget, theme: ThemeKind) -> QWidget:
        label = QLabel(node.text)
        name = self._object_name(node)
        label.setObjectName(name)
        label.setFont(self._font(node))
        if node.props.get("align") == "center":
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        if node.style is not None:
            label.setStyleSheet(qss.text_qss(theme, node.style, object_name=name))
        return label

    def _build_button(self, node: Widget, theme: ThemeKind) -> QWidget:
        button = QPushButton()
        name = self._object_name(node)
        button.setObjectName(name)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        images = [child for child in node.children if child.kind is WidgetKind.IMAGE]
        if images:
            image = images[0]
            button.setIcon(QIcon(self._pixmap(image.props["source"])))
            button.setIconSize(QSize(int(image.props.get("width", 100)), int(image.props.get("height", 30))))
        button.setText(node.text)
        button.setFont(self._font(node))
        button.setStyleSheet(
            qss.button_qss(
                theme,
                node.style,
                object_name=name,
                height=node.props.get("height"),
                text_style=node.props.get("text_style"),
            )
        )
        if node.on_press is not None:
            message = node.on_press
            button.clicked.connect(lambda _checked=False: self._dispatch(message))
        return button

    def _build_text_input(self, node: Widget, theme: ThemeKind) -> QWidget:
        line_edit = QLineEdit()
        name = self._object_name(node)
        line_edit.setObjectName(name)
        line_edit.setFont(self._font(node))
        line_edit.setText(node.text)
        line_edit.setPlaceholderText(str(node.props.get("placeholder", "")))
        vertical, horizontal = _padding(node.props.get("padding"))
        line_edit.setTextMargins(int(horizontal), int(vertical), int(horizontal), int(vertical))
        line_edit.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        line_edit.setStyleSheet(qss.text_input_qss(theme, object_name=name, height=node.props.get("height")))
        if node.on_input is not None:
            factory = node.on_input
            line_edit.textEdited.connect(lambda text: self._dispatch(factory(text)))
        return line_edit

    def _build_scrollable(self, node: Widget, theme: ThemeKind) -> QWidget:
        area = QScrollArea()
        name = self._object_name(node)
        area.setObjectName(name)
        area.setWidgetResizable(True)
        area.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        area.setFrameShape(QFrame.Shape.NoFrame)
        area.setStyleSheet(qss.scrollable_qss(theme, object_name=name))
        if node.children:
            area.setWidget(self._build(node.children[0], theme))
        return area

    def _build_rule(self, node: Widget, theme: ThemeKind) -> QWidget:
        line = QFrame()
        name = self._object_name(node)
        line.setObjectName(name)
        appearance = rule_appearance(theme)
        line.setFixedWidth(int(PANEL_WIDTH * appearance.fill_percent / 100.0))
        line.setStyleSheet(qss.rule_qss(theme, object_name=name))
        return line

    def _build_toggler(self, node: Widget, theme: ThemeKind) -> QWidget:
        checkbox = QCheckBox(node.text)
        name = self._object_name(node)
        checkbox.setObjectName(name)
        checkbox.setFont(self._font(node))
        checkbox.setChecked(bool(node.props.get("checked", False)))
        checkbox.setStyleSheet(qss.toggler_qss(theme, object_name=name))
        if node.on_toggle is not None:
            factory = node.on_toggle
            checkbox.toggled.connect(lambda checked: self._dispatch(factory(bool(checked))))
        return checkbox

    def _build_image(self, node: Widget, theme: ThemeKind) -> QWidget:
        del theme
        label = QLabel()
        label.setObjectName(self._object_name(node))
        label.setPixmap(self._pixmap(node.props["source"]))
        label.setScaledContents(True)
        return label

    def _build_space(self, node: Widget, theme: ThemeKind) -> QWidget:
        del theme
        spacer = QWidget()
        spacer.setObjectName(self._object_name(node))
        if node.props.get("fill"):
            spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        else:
            spacer.setFixedWidth(int(node.props.get("width", 0)))
        return spacer

    def _pixmap(self, source: str) -> QPixmap:
        cached = self._pixmaps.get(source)
        if cached is not None:
            return cached
        asset = self._assets.image(source)
        pixmap = QPixmap()
        if not pixmap.loadFromData(asset.data):
            raise AssetError(source, "Qt could not decode the image")
        self._pixmaps[source] = pixmap
        _LOGGER.debug("Decoded %s (%dx%d)", source, *asset.size)
        return pixmap


__all__ = ["QtRenderer", "register_font"]
