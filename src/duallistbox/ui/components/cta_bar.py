# SPDX-License-Identifier: MIT
# Bottom Call-To-Action bar container.
# Places provided buttons aligned to the right, within a full-width horizontal box.

from __future__ import annotations

import gi
gi.require_version("Gtk", "4.0")
from gi.repository import Gtk  # type: ignore


def build_cta_bar(*buttons: Gtk.Widget, spacing: int = 6) -> Gtk.Box:
    """
    Build a horizontal CTA bar with right-aligned buttons.
    Usage: container.append(build_cta_bar(exit_btn))
    """
    bar = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=spacing)
    bar.set_hexpand(True)
    bar.add_css_class("cta-bar")

    spacer = Gtk.Box()
    spacer.set_hexpand(True)
    bar.append(spacer)

    for b in buttons:
        if not isinstance(b, Gtk.Widget):
            raise TypeError(f"CTA bar entries must be widgets, got {type(b).__name__}")
        bar.append(b)

    return bar
