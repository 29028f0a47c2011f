"""
Logging setup for duallistbox.

- One "duallistbox" logger; modules log through child loggers
  (duallistbox.model, duallistbox.ui, duallistbox.cli).
- Console output goes to stderr so headless CLI output on stdout stays clean.
- The GUI also logs to a rotating file under the XDG state dir. Headless
  commands pass file_logging=False and never create that directory.
- Level: explicit argument, else DUALLISTBOX_LOG_LEVEL, else INFO.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .platform import LOG_FILENAME, xdg_state_dir


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: Optional[str] = None) -> int:
    name = (level or os.environ.get("DUALLISTBOX_LOG_LEVEL") or "INFO").upper()
    if name not in LEVEL_NAMES:
        return logging.INFO
    return getattr(logging, name)


def setup_logging(level: Optional[str] = None,
                  log_file: Optional[Path] = None,
                  file_logging: bool = True) -> logging.Logger:
    """
    Configure the "duallistbox" logger; calling it again replaces the handlers.

    log_file defaults to $XDG_STATE_HOME/duallistbox/duallistbox.log. When that
    location cannot be created the logger stays console-only and says so.
    """
    lvl = resolve_level(level)
    logger = logging.getLogger("duallistbox")
    logger.setLevel(lvl)
    logger.propagate = False

    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(lvl)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if not file_logging:
        logger.debug("Logging initialized at level %s (console only)", logging.getLevelName(lvl))
        return logger

    path = Path(log_file) if log_file is not None else xdg_state_dir() / LOG_FILENAME
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    except OSError as e:
        logger.warning("File logging disabled, cannot write %s: %s", path, e)
        return logger

    fh.setLevel(lvl)
    fh.setFormatter(fmt)
    logger.addHandler(fh)
    logger.debug("Logging initialized at level %s", logging.getLevelName(lvl))
    logger.info("Log file: %s", str(path))
    return logger
