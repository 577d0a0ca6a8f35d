"""Settings defaults and override precedence."""

from __future__ import annotations

from pathlib import Path

import pytest

from capy.settings import Settings, load_settings
from capy.theme.models import ThemeKind


def test_defaults_without_environment() -> None:
    settings = load_settings(environ={})

    assert settings == Settings()
    assert settings.theme_kind is ThemeKind.DARK


def test_environment_overrides_apply() -> None:
    settings = load_settings(
        environ={
            "CAPY_THEME": "Light",
            "CAPY_DEBUG": "yes",
            "CAPY_ASSETS_DIR": "/opt/capy/assets",
            "CAPY_LOG_DIR": "/tmp/capy-logs",
        }
    )

    assert settings.theme == "light"
    assert settings.debug_logging is True
    assert settings.assets_dir == Path("/opt/capy/assets")
    assert settings.log_dir == Path("/tmp/capy-logs")


def test_false_debug_flag_disables_debug() -> None:
    assert load_settings(environ={"CAPY_DEBUG": "off"}).debug_logging is False


def test_explicit_overrides_beat_environment() -> None:
    settings = load_settings(environ={"CAPY_THEME": "light"}, overrides={"theme": "dark"})

    assert settings.theme_kind is ThemeKind.DARK


def test_none_overrides_do_not_mask_environment() -> None:
    settings = load_settings(environ={"CAPY_THEME": "light"}, overrides={"theme": None, "debug_logging": None})

    assert settings.theme == "light"
    assert settings.debug_logging is False


def test_unknown_theme_is_rejected() -> None:
    with pytest.raises(ValueError):
        load_settings(environ={"CAPY_THEME": "neon"})


def test_unknown_override_is_rejected() -> None:
    with pytest.raises(ValueError, match="font_size"):
        load_settings(environ={}, overrides={"font_size": 12})
