"""Top-level Qt window tying the store, view builder and renderer together."""

from __future__ import annotations

import logging
import random

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLineEdit, QMainWindow, QScrollArea, QScrollBar, QWidget

from ..assets import AssetBundle
from ..theme import qss
from ..theme.manager import ThemeManager
from .renderer import QtRenderer
from .state import ApplicationState, Store
from .view import WINDOW_TITLE, render

_LOGGER = logging.getLogger(__name__)

ROOT_OBJECT_NAME = "capy-root"


class _ScrollRestore:
    """Holds a scrollbar at a saved offset until the user scrolls it.

    A freshly built list has no range yet, so the offset is re-applied every
    time the range changes.
    """

    def __init__(self, bar: QScrollBar, offset: int) -> None:
        self._bar = bar
        self._offset: int | None = offset
        bar.rangeChanged.connect(self._on_range_changed)
        bar.actionTriggered.connect(self._on_user_action)
        self._apply()

    @property
    def offset(self) -> int | None:
        return self._offset

    def _apply(self) -> None:
        if self._offset is not None:
            self._bar.setValue(min(self._offset, self._bar.maximum()))

    def _on_range_changed(self, _minimum: int, _maximum: int) -> None:
        self._apply()

    def _on_user_action(self, _action: int) -> None:
        self._offset = None


class MainWindow(QMainWindow):
    """Re-renders the whole widget tree whenever the store emits a new state."""

    def __init__(
        self,
        store: Store,
        assets: AssetBundle,
        *,
        theme_manager: ThemeManager | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self._store = store
        self._rng = rng
        self._theme_manager = theme_manager or ThemeManager(store.state.theme)
        self._renderer = QtRenderer(store.dispatch, assets)
        self._render_count = 0
        self._scroll_restores: dict[str, _ScrollRestore] = {}
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(760, 720)
        self._theme_manager.apply_to_application(store.state.theme)
        store.subscribe(self._on_state_changed)
        self.refresh()

    @property
    def store(self) -> Store:
        return self._store

    @property
    def render_count(self) -> int:
        return self._render_count

    def refresh(self) -> None:
        state = self._store.state
        focus = self._capture_focus()
        offsets = self._capture_scroll()
        root = self._renderer.build(render(state, rng=self._rng), state.theme)
        root.setObjectName(ROOT_OBJECT_NAME)
        root.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        root.setStyleSheet(qss.application_qss(state.theme))
        # The previous central widget is deleted later by Qt, which keeps the
        # widget whose signal triggered this render alive until it returns.
        self.setCentralWidget(root)
        self._restore_focus(root, focus)
        self._restore_scroll(root, offsets)
        self._render_count += 1

    def _on_state_changed(self, state: ApplicationState) -> None:
        if state.theme is not self._theme_manager.active:
            self._theme_manager.apply_to_application(state.theme)
        self.refresh()

    def _capture_focus(self) -> tuple[str, int] | None:
        current = self.centralWidget()
        if current is None:
            return None
        focused = current.focusWidget()
        if isinstance(focused, QLineEdit) and focused.objectName():
            return focused.objectName(), focused.cursorPosition()
        return None

    def _restore_focus(self, root: QWidget, focus: tuple[str, int] | None) -> None:
        if focus is None:
            return
        name, cursor = focus
        target = root.findChild(QLineEdit, name)
        if target is None:
            return
        target.setFocus(Qt.FocusReason.OtherFocusReason)
        target.setCursorPosition(min(cursor, len(target.text())))

    def _capture_scroll(self) -> dict[str, int]:
        current = self.centralWidget()
        if current is None:
            return {}
        offsets: dict[str, int] = {}
        for area in current.findChildren(QScrollArea):
            name = area.objectName()
            if not name:
                continue
            pending = self._scroll_restores.get(name)
            if pending is not None and pending.offset is not None:
                offsets[name] = pending.offset
            else:
                offsets[name] = area.verticalScrollBar().value()
        return offsets

    def _restore_scroll(self, root: QWidget, offsets: dict[str, int]) -> None:
        self._scroll_restores = {}
        for name, offset in offsets.items():
            area = root.findChild(QScrollArea, name)
            if area is None or offset <= 0:
                continue
            self._scroll_restores[name] = _ScrollRestore(area.verticalScrollBar(), offset)


__all__ = ["MainWindow", "ROOT_OBJECT_NAME"]
