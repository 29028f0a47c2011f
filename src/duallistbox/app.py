#!/usr/bin/env python3
"""
duallistbox-app: GTK4 demo application for the dual list box.

- One window with a DualListBox ("Used Filters" / "Available Filters")
  and an Exit button.
- Initial items and titles come from settings.ini unless the caller
  (see cli.py) passes an explicit model and titles.

Requirements:
- Python 3.10+
- PyGObject with GTK 4 (provided by system packages, e.g., python3-gi, gir1.2-gtk-4.0)

Run:
    duallistbox-app
"""

from __future__ import annotations

import configparser
import sys
from typing import Optional

try:
    import gi
    gi.require_version("Gtk", "4.0")
    gi.require_version("Gio", "2.0")
    from gi.repository import Gtk, Gio  # type: ignore
except (ImportError, ValueError) as e:
    print("Error: GTK4/PyGObject not available. Please install system packages (e.g., python3-gi, gir1.2-gtk-4.0).")
    print(f"Details: {e}")
    sys.exit(1)

from .config import Settings, initial_items, load_settings
from .logging_setup import setup_logging
from .model import ItemTransferList
from .ui.main_window import MainWindow


APPLICATION_ID = "org.duallistbox.demo"


class DualListBoxApplication(Gtk.Application):
    def __init__(self,
                 settings: Optional[Settings] = None,
                 model: Optional[ItemTransferList] = None,
                 left_title: Optional[str] = None,
                 right_title: Optional[str] = None,
                 log_level: Optional[str] = None) -> None:
        super().__init__(application_id=APPLICATION_ID,
                         flags=Gio.ApplicationFlags.FLAGS_NONE)
        self._logger = setup_logging(log_level)
        self._settings = settings if settings is not None else load_settings()
        if model is None:
            available, selected = initial_items(self._settings)
            model = ItemTransferList(available, selected)
        self._model = model
        self._left_title = left_title
        self._right_title = right_title

    @property
    def model(self) -> ItemTransferList:
        return self._model

    def do_startup(self) -> None:
        # Explicitly chain to Gtk.Application to avoid GI binding quirks
        Gtk.Application.do_startup(self)
        self._logger.info("Starting duallistbox demo (settings: %s)", self._settings.path)

    def do_shutdown(self) -> None:
        self._logger.info("Shutting down")
        Gtk.Application.do_shutdown(self)

    def do_activate(self) -> None:
        win = self.props.active_window
        if not win:
            win = MainWindow(self, self._settings, self._model,
                             left_title=self._left_title, right_title=self._right_title)
        win.present()


def main(argv=None) -> int:
    try:
        app = DualListBoxApplication()
    except configparser.Error as e:
        print(f"invalid config: {e}", file=sys.stderr)
        return 2
    # GApplication parses its own options; only the program name is passed through
    args = argv or sys.argv
    return app.run(args[:1])


if __name__ == "__main__":
    sys.exit(main())
