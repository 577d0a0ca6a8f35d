"""Application bootstrap helpers for the Capy desktop launcher."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Sequence, cast

from .assets import AssetBundle, load_assets
from .errors import AssetError
from .search import EchoSearchBackend, SearchBackend
from .settings import Settings, load_settings
from .theme.models import ThemeKind
from .ui.state import Store, initial_state
from .utils import logging as logging_utils

_LOGGER = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure structured logging for the application."""

    level = logging.DEBUG if settings.debug_logging else logging.INFO
    log_path = logging_utils.setup_logging(level, log_dir=settings.log_dir)
    _LOGGER.debug("Logging to %s (level=%s)", log_path, logging.getLevelName(level))
    _install_qt_message_handler()


def create_qapp() -> Any:
    """Return the running QApplication, creating one when needed."""

    from PySide6.QtWidgets import QApplication

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")
    app = cast(Any, QApplication.instance() or QApplication(sys.argv))
    app.setApplicationName("Capy")
    app.setApplicationDisplayName("Capy search")
    return app


def build_store(settings: Settings, *, backend: SearchBackend | None = None) -> Store:
    return Store(initial_state(settings.theme_kind), backend=backend or EchoSearchBackend())


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point invoked by the ``capy`` console script."""

    args, passthrough = _parse_cli_args(argv)
    _rewrite_sys_argv(passthrough)

    try:
        settings = load_settings(overrides=_cli_overrides(args))
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    configure_logging(settings)

    try:
        assets: AssetBundle = load_assets(settings.assets_dir)
    except AssetError as exc:
        _LOGGER.critical("Startup aborted: %s", exc)
        raise SystemExit(1) from exc

    app = create_qapp()

    from .ui.main_window import MainWindow

    try:
        window = MainWindow(build_store(settings), assets)
    except AssetError as exc:
        _LOGGER.critical("Startup aborted: %s", exc)
        raise SystemExit(1) from exc
    window.show()
    _LOGGER.info("Capy window ready (theme=%s)", settings.theme)
    try:
        status = app.exec()
    finally:
        logging_utils.shutdown_logging()
    raise SystemExit(status)


def _install_qt_message_handler() -> None:
    """Redirect Qt warnings to the Python logging stack."""

    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    level_map = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtWarningMsg: logging.WARNING,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _handler(mode, context, message):  # type: ignore[no-untyped-def]
        del context
        level = level_map.get(mode, logging.INFO)
        logging.getLogger("PySide6").log(level, message)

    qInstallMessageHandler(_handler)


def _parse_cli_args(argv: Sequence[str] | None) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(
        prog="capy",
        add_help=True,
        description="Launch the Capy programmer search launcher.",
    )
    parser.add_argument(
        "--theme",
        choices=[kind.value for kind in ThemeKind],
        help="Theme to start with (default: dark, or $CAPY_THEME).",
    )
    parser.add_argument(
        "--assets-dir",
        metavar="PATH",
        help="Directory holding fonts/ and images/ (default: bundled assets).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug logging.",
    )
    return parser.parse_known_args(argv)


def _cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {"theme": args.theme, "debug_logging": args.debug}
    if args.assets_dir:
        overrides["assets_dir"] = Path(args.assets_dir).expanduser()
    return overrides


def _rewrite_sys_argv(passthrough: Sequence[str]) -> None:
    program = sys.argv[0] if sys.argv else "capy"
    sys.argv = [program, *passthrough]
