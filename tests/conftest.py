"""Shared pytest fixtures."""

from __future__ import annotations

import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def qapp():
    """Return a QApplication, skipping the test when PySide6 is unavailable."""

    qt_widgets = pytest.importorskip("PySide6.QtWidgets")
    app = qt_widgets.QApplication.instance()
    if app is None:  # pragma: no cover - depends on PySide6 availability
        app = qt_widgets.QApplication([])
    return app
