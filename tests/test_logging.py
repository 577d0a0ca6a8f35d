"""Rotating log file setup."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

import pytest

from capy.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    level = root.level
    pil_level = logging.getLogger("PIL").level
    yield
    logging_utils.shutdown_logging()
    root.setLevel(level)
    logging.getLogger("PIL").setLevel(pil_level)


def _capy_file_handlers() -> list[logging.handlers.RotatingFileHandler]:
    return [
        handler
        for handler in logging.getLogger().handlers
        if isinstance(handler, logging.handlers.RotatingFileHandler)
        and Path(handler.baseFilename).name == logging_utils.LOG_FILE_NAME
    ]


def test_setup_logging_writes_rotating_file(tmp_path: Path) -> None:
    log_path = logging_utils.setup_logging(logging.DEBUG, log_dir=tmp_path, console=False)

    logging.getLogger("capy.test").info("hello log")
    for handler in _capy_file_handlers():
        handler.flush()

    assert log_path == tmp_path / "capy.log"
    assert " | INFO     | capy.test | hello log" in log_path.read_text(encoding="utf-8")


def test_log_file_defaults_to_home_directory() -> None:
    assert logging_utils.log_file_for(None) == logging_utils.DEFAULT_LOG_DIR / "capy.log"


def test_environment_does_not_pick_log_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CAPY_LOG_DIR", str(tmp_path / "ignored"))

    assert logging_utils.log_file_for(tmp_path / "chosen").parent == tmp_path / "chosen"


def test_second_setup_replaces_previous_handlers(tmp_path: Path) -> None:
    logging_utils.setup_logging(log_dir=tmp_path / "one", console=False)
    second = logging_utils.setup_logging(log_dir=tmp_path / "two", console=False)

    handlers = _capy_file_handlers()
    assert [Path(handler.baseFilename) for handler in handlers] == [second]


def test_foreign_handlers_survive_setup_and_shutdown(tmp_path: Path) -> None:
    foreign = logging.NullHandler()
    root = logging.getLogger()
    root.addHandler(foreign)
    try:
        logging_utils.setup_logging(log_dir=tmp_path, console=False)
        logging_utils.shutdown_logging()

        assert foreign in root.handlers
        assert _capy_file_handlers() == []
    finally:
        root.removeHandler(foreign)


def test_pillow_logger_stays_quiet_in_debug(tmp_path: Path) -> None:
    logging_utils.setup_logging(logging.DEBUG, log_dir=tmp_path, console=False)

    assert logging.getLogger("PIL").level == logging.WARNING
