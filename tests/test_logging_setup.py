"""Tests for logging setup."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from duallistbox.logging_setup import resolve_level, setup_logging


def _file_handlers(logger: logging.Logger) -> list[RotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


def test_setup_logging_writes_to_state_dir(isolated_xdg: Path, reset_app_logger: logging.Logger) -> None:
    logger = setup_logging()
    assert logger is reset_app_logger
    assert logger.level == logging.INFO
    assert logger.propagate is False

    handlers = _file_handlers(logger)
    assert len(handlers) == 1
    log_file = isolated_xdg / "state" / "duallistbox" / "duallistbox.log"
    assert Path(handlers[0].baseFilename) == log_file

    logging.getLogger("duallistbox.model").info("child message")
    handlers[0].flush()
    assert "[duallistbox.model] child message" in log_file.read_text(encoding="utf-8")


def test_explicit_log_file(tmp_path: Path) -> None:
    target = tmp_path / "logs" / "demo.log"
    logger = setup_logging("warning", log_file=target)
    assert logger.level == logging.WARNING
    assert Path(_file_handlers(logger)[0].baseFilename) == target


def test_console_only_creates_no_state_dir(isolated_xdg: Path, capsys: pytest.CaptureFixture[str]) -> None:
    logger = setup_logging("debug", file_logging=False)
    assert _file_handlers(logger) == []
    assert not (isolated_xdg / "state").exists()

    logging.getLogger("duallistbox.cli").debug("headless run")
    captured = capsys.readouterr()
    assert "headless run" in captured.err
    assert captured.out == ""


def test_unwritable_state_dir_falls_back_to_console(isolated_xdg: Path,
                                                    monkeypatch: pytest.MonkeyPatch,
                                                    capsys: pytest.CaptureFixture[str]) -> None:
    blocker = isolated_xdg / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv("XDG_STATE_HOME", str(blocker))

    logger = setup_logging()
    assert _file_handlers(logger) == []
    assert len(logger.handlers) == 1
    assert "File logging disabled" in capsys.readouterr().err


def test_setup_logging_is_idempotent() -> None:
    setup_logging()
    logger = setup_logging()
    assert len(logger.handlers) == 2


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DUALLISTBOX_LOG_LEVEL", "debug")
    assert setup_logging().level == logging.DEBUG
    # explicit argument wins over the environment
    assert setup_logging("error").level == logging.ERROR


@pytest.mark.parametrize(("name", "expected"), [
    (None, logging.INFO),
    ("chatty", logging.INFO),
    ("Warning", logging.WARNING),
    ("CRITICAL", logging.CRITICAL),
])
def test_resolve_level(name: str | None, expected: int) -> None:
    assert resolve_level(name) == expected
