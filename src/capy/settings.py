"""Runtime settings assembled from defaults, environment variables and CLI flags."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

from .theme.models import ThemeKind

__all__ = ["Settings", "load_settings"]

LOGGER = logging.getLogger(__name__)
_ENV_OVERRIDES: Mapping[str, str] = {
    "CAPY_THEME": "theme",
}
_PATH_ENV_OVERRIDES: Mapping[str, str] = {
    "CAPY_ASSETS_DIR": "assets_dir",
    "CAPY_LOG_DIR": "log_dir",
}
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "CAPY_DEBUG": "debug_logging",
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}


@dataclass(slots=True)
class Settings:
    """Session settings. Nothing here is written back to disk."""

    theme: str = ThemeKind.DARK.value
    assets_dir: Path | None = None
    log_dir: Path | None = None
    debug_logging: bool = False

    @property
    def theme_kind(self) -> ThemeKind:
        return ThemeKind.parse(self.theme)


def load_settings(
    *,
    environ: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Return settings with environment values applied, then explicit ``overrides``.

    ``None`` values in ``overrides`` are ignored so unset CLI flags do not mask
    the environment.
    """

    env = os.environ if environ is None else environ
    settings = _apply_env_overrides(Settings(), env)
    if overrides:
        updates = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(updates) - set(Settings.__dataclass_fields__)  # type: ignore[attr-defined]
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        settings = replace(settings, **updates)
    # Validates the theme name early so a typo fails before the window opens.
    settings.theme = settings.theme_kind.value
    return settings


def _apply_env_overrides(settings: Settings, env: Mapping[str, str]) -> Settings:
    updates: dict[str, Any] = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        value = env.get(env_name)
        if value:
            updates[field_name] = value.strip()
    for env_name, field_name in _PATH_ENV_OVERRIDES.items():
        value = env.get(env_name)
        if value:
            updates[field_name] = Path(value.strip()).expanduser()
    for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
        value = env.get(env_name)
        if value is not None:
            updates[field_name] = value.strip().lower() in _TRUE_VALUES
    if updates:
        LOGGER.debug("Applying environment overrides: %s", sorted(updates))
        settings = replace(settings, **updates)
    return settings
