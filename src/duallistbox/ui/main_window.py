"""Main demo window for duallistbox.

Hosts one DualListBox plus a bottom bar with an Exit button. When
[general] remember_items is enabled the current partition is written back
to settings.ini on close.
"""

from __future__ import annotations

import gettext
import logging
from typing import Optional

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk  # type: ignore

from ..config import Settings, layout_params, save_items
from ..model import ItemTransferList
from .components.cta_bar import build_cta_bar
from .components.dual_list_box import DualListBox


# i18n init (fallback to identity if no translations installed)
try:
    _t = gettext.translation("duallistbox", localedir=None, fallback=True)
    _ = _t.gettext
except Exception:
    _ = lambda s: s

logger = logging.getLogger("duallistbox.ui")


class MainWindow(Gtk.ApplicationWindow):
    def __init__(self,
                 application: Gtk.Application,
                 settings: Settings,
                 model: ItemTransferList,
                 left_title: Optional[str] = None,
                 right_title: Optional[str] = None):
        super().__init__(application=application)
        self._settings = settings
        self.set_title(_("DualListBox Example"))
        width = settings.getint("window", "width", fallback=400)
        height = settings.getint("window", "height", fallback=300)
        self.set_default_size(width, height)

        root = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        root.set_margin_start(20)
        root.set_margin_end(20)
        root.set_margin_top(20)
        root.set_margin_bottom(20)

        # leave room for the margins and the exit bar
        self.dual_list = DualListBox(
            model,
            left_title=left_title or settings.get("general", "left_title", fallback=_("Used Filters")),
            right_title=right_title or settings.get("general", "right_title", fallback=_("Available Filters")),
            params=layout_params(settings),
            width=max(0, width - 40),
            height=max(0, height - 100),
        )
        self.dual_list.set_vexpand(True)
        self.dual_list.register_move_left_handler(
            lambda: logger.info("Used items: %s", ", ".join(model.get_selected())))
        self.dual_list.register_move_right_handler(
            lambda: logger.info("Available items: %s", ", ".join(model.get_available())))
        root.append(self.dual_list)

        exit_btn = Gtk.Button(label=_("Exit"))
        exit_btn.set_size_request(100, 40)
        exit_btn.connect("clicked", self._on_exit_clicked)
        root.append(build_cta_bar(exit_btn))

        self.set_child(root)
        self.connect("close-request", self._on_close_request)

    def _on_exit_clicked(self, _btn: Gtk.Button) -> None:
        self.close()

    def _on_close_request(self, _win: Gtk.Window) -> bool:
        try:
            if self._settings.getboolean("general", "remember_items", fallback=False):
                self.save_items()
        finally:
            self.dual_list.detach()
        return False  # let the window close

    def save_items(self) -> bool:
        """Write the current partition to settings.ini; False if the file could not be written."""
        model = self.dual_list.model
        try:
            save_items(self._settings, model.get_available(), model.get_selected())
        except OSError as e:
            logger.error("Saving items failed: %s", e)
            return False
        logger.info("Saved items to %s", self._settings.path)
        return True
