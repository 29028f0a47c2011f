# SPDX-License-Identifier: MIT
"""Dual list box component.

Composite widget for moving items between two lists:
- Left list: "used" items (model.get_selected())
- Right list: "available" items (model.get_available())
- "<--" moves the highlighted right item to the left, "-->" the other way.
  Double-click/Enter on a row moves that row.

All bookkeeping lives in ItemTransferList; the widget subscribes to model
changes and redraws both lists after every mutation.
"""

from __future__ import annotations

import gettext
import logging
import threading
from typing import Callable, Iterable, List, Optional

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk, GLib  # type: ignore

from ...layout import LayoutParams, Rect, compute_layout
from ...model import (
    MOVED_TO_AVAILABLE,
    MOVED_TO_SELECTED,
    ChangeEvent,
    ItemNotFoundError,
    ItemTransferList,
)


# i18n init (fallback to identity if no translations installed)
try:
    _t = gettext.translation("duallistbox", localedir=None, fallback=True)
    _ = _t.gettext
except Exception:
    _ = lambda s: s

logger = logging.getLogger("duallistbox.ui")

MoveHandler = Callable[[], None]


class DualListBox(Gtk.Box):
    """Two titled lists with arrow buttons, backed by an ItemTransferList."""

    def __init__(self,
                 model: Optional[ItemTransferList] = None,
                 left_title: Optional[str] = None,
                 right_title: Optional[str] = None,
                 params: LayoutParams = LayoutParams(),
                 width: int = 360,
                 height: int = 200):
        super().__init__(orientation=Gtk.Orientation.HORIZONTAL, spacing=0)
        self._model = model if model is not None else ItemTransferList()
        self._params = params
        self._on_move_left: Optional[MoveHandler] = None
        self._on_move_right: Optional[MoveHandler] = None
        self.add_css_class("dual-list-box")

        # children sit at the pixel positions computed by compute_layout()
        self._fixed = Gtk.Fixed()
        self.append(self._fixed)

        # Left column: used items
        self._left_title = self._build_title(left_title if left_title is not None else _("Used Filters"))
        self._left_list, self._left_scroller = self._build_list(self._on_left_row_activated)

        # Right column: available items
        self._right_title = self._build_title(right_title if right_title is not None else _("Available Filters"))
        self._right_list, self._right_scroller = self._build_list(self._on_right_row_activated)

        # Arrow buttons between the lists
        self._move_left_btn = Gtk.Button(label="<--")
        self._move_left_btn.set_tooltip_text(_("Move the highlighted available item to the used list"))
        self._move_left_btn.connect("clicked", self._on_move_left_clicked)
        self._move_right_btn = Gtk.Button(label="-->")
        self._move_right_btn.set_tooltip_text(_("Move the highlighted used item back to the available list"))
        self._move_right_btn.connect("clicked", self._on_move_right_clicked)

        for child in (self._left_title, self._left_scroller, self._right_title,
                      self._right_scroller, self._move_left_btn, self._move_right_btn):
            self._fixed.put(child, 0, 0)

        self._handler_id: Optional[int] = self._model.connect(self._on_model_changed)
        self.resize(width, height)
        self.refresh()

    # --- Public API ---------------------------------------------------------

    @property
    def model(self) -> ItemTransferList:
        return self._model

    def set_left_title(self, title: str) -> None:
        self._left_title.set_label(title)

    def get_left_title(self) -> str:
        return self._left_title.get_label()

    def set_right_title(self, title: str) -> None:
        self._right_title.set_label(title)

    def get_right_title(self) -> str:
        return self._right_title.get_label()

    def register_move_left_handler(self, cb: Optional[MoveHandler]) -> None:
        """Set the callback invoked after an item moved from right to left (None clears)."""
        self._on_move_left = cb

    def register_move_right_handler(self, cb: Optional[MoveHandler]) -> None:
        """Set the callback invoked after an item moved from left to right (None clears)."""
        self._on_move_right = cb

    def set_left_items(self, items: Iterable[str]) -> None:
        self._model.set_selected(items)

    def get_left_items(self) -> List[str]:
        return self._model.get_selected()

    def set_right_items(self, items: Iterable[str]) -> None:
        self._model.set_available(items)

    def get_right_items(self) -> List[str]:
        return self._model.get_available()

    def refresh(self) -> None:
        """Clear and repopulate both lists from the model, sorted."""
        self._fill(self._left_list, self._model.get_selected())
        self._fill(self._right_list, self._model.get_available())

    def resize(self, width: int, height: int) -> None:
        """Apply the pixel layout for a widget of width x height."""
        lay = compute_layout(0, 0, width, height, self._params)
        self.set_size_request(width, height)
        self._place(self._left_title, lay.left_title)
        self._place(self._left_scroller, lay.left_list)
        self._place(self._right_title, lay.right_title)
        self._place(self._right_scroller, lay.right_list)
        self._place(self._move_left_btn, lay.move_left_button)
        self._place(self._move_right_btn, lay.move_right_button)

    def detach(self) -> None:
        """Stop following the model; the lists keep their last content."""
        if self._handler_id is not None:
            self._model.disconnect(self._handler_id)
            self._handler_id = None

    # --- Internals ----------------------------------------------------------

    def _build_title(self, text: str) -> Gtk.Label:
        lbl = Gtk.Label(label=text)
        lbl.set_xalign(0.5)
        lbl.add_css_class("heading")
        return lbl

    def _build_list(self, on_activated: Callable[[Gtk.ListBox, Gtk.ListBoxRow], None]) -> tuple[Gtk.ListBox, Gtk.ScrolledWindow]:
        lb = Gtk.ListBox()
        lb.set_selection_mode(Gtk.SelectionMode.SINGLE)
        lb.connect("row-activated", on_activated)
        scrolled = Gtk.ScrolledWindow()
        scrolled.set_policy(Gtk.PolicyType.AUTOMATIC, Gtk.PolicyType.AUTOMATIC)
        scrolled.set_child(lb)
        return lb, scrolled

    def _fill(self, lb: Gtk.ListBox, items: List[str]) -> None:
        self._clear_listbox(lb)
        for item in items:
            lbl = Gtk.Label(label=item)
            lbl.set_xalign(0.0)
            row = Gtk.ListBoxRow()
            row.set_child(lbl)
            row._duallistbox_item = item  # type: ignore[attr-defined]
            lb.append(row)

    def _clear_listbox(self, lb: Gtk.ListBox) -> None:
        child = lb.get_first_child()
        while child is not None:
            lb.remove(child)
            child = lb.get_first_child()

    def _highlighted_item(self, lb: Gtk.ListBox) -> Optional[str]:
        row = lb.get_selected_row()
        if row is None:
            return None
        return getattr(row, "_duallistbox_item", None)

    def _move_item_to_selected(self, item: Optional[str]) -> None:
        if item is None:
            return
        try:
            self._model.move_to_selected(item)
        except ItemNotFoundError as e:
            logger.debug("Ignoring stale move request: %s", e)

    def _move_item_to_available(self, item: Optional[str]) -> None:
        if item is None:
            return
        try:
            self._model.move_to_available(item)
        except ItemNotFoundError as e:
            logger.debug("Ignoring stale move request: %s", e)

    def _on_move_left_clicked(self, _btn: Gtk.Button) -> None:
        self._move_item_to_selected(self._highlighted_item(self._right_list))

    def _on_move_right_clicked(self, _btn: Gtk.Button) -> None:
        self._move_item_to_available(self._highlighted_item(self._left_list))

    def _on_right_row_activated(self, _lb: Gtk.ListBox, row: Gtk.ListBoxRow) -> None:
        self._move_item_to_selected(getattr(row, "_duallistbox_item", None))

    def _on_left_row_activated(self, _lb: Gtk.ListBox, row: Gtk.ListBoxRow) -> None:
        self._move_item_to_available(getattr(row, "_duallistbox_item", None))

    def _place(self, widget: Gtk.Widget, rect: Rect) -> None:
        self._fixed.move(widget, rect.x, rect.y)
        widget.set_size_request(rect.width, rect.height)

    def _on_model_changed(self, event: ChangeEvent) -> None:
        # GTK is main-thread only; changes made by worker threads redraw via the main loop
        if threading.current_thread() is threading.main_thread():
            self._apply_change(event)
        else:
            GLib.idle_add(self._apply_change_idle, event, priority=GLib.PRIORITY_DEFAULT)

    def _apply_change_idle(self, event: ChangeEvent) -> bool:
        self._apply_change(event)
        return False  # run once

    def _apply_change(self, event: ChangeEvent) -> None:
        self.refresh()
        if event.kind == MOVED_TO_SELECTED and self._on_move_left is not None:
            self._on_move_left()
        elif event.kind == MOVED_TO_AVAILABLE and self._on_move_right is not None:
            self._on_move_right()
