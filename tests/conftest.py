"""Root pytest configuration for duallistbox tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config/state dirs into tmp_path so tests never touch $HOME."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.delenv("DUALLISTBOX_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture
def fruits() -> list[str]:
    return ["Apple", "Banana", "Cherry", "Date"]


@pytest.fixture(scope="session")
def gtk():
    """GTK 4 module, or skip when PyGObject/GTK 4/a display is unavailable."""
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
        from gi.repository import Gtk  # type: ignore
    except (ImportError, ValueError) as e:
        pytest.skip(f"GTK 4 not available: {e}")
    if not Gtk.init_check():
        pytest.skip("no display available for GTK")
    return Gtk


@pytest.fixture(autouse=True)
def reset_app_logger() -> Iterator[logging.Logger]:
    """Drop handlers that setup_logging() attached during a test."""
    logger = logging.getLogger("duallistbox")
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
