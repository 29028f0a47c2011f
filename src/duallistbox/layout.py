"""
Pixel geometry for the dual list box.

Two titled lists sit left and right, the two arrow buttons are stacked in the
middle column. This module does not talk to GTK; the widget applies the
computed rectangles as size requests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutParams:
    title_height: int = 30
    button_width: int = 50
    button_height: int = 30
    gutter: int = 20
    right_inset: int = 10
    button_gap: int = 10


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class DualListLayout:
    left_title: Rect
    left_list: Rect
    right_title: Rect
    right_list: Rect
    move_left_button: Rect
    move_right_button: Rect


def compute_layout(x: int, y: int, width: int, height: int,
                   params: LayoutParams = LayoutParams()) -> DualListLayout:
    """
    Lay out the composite inside the box (x, y, width, height).

    Both lists get the same width, (width - button_width) // 2 - gutter.
    The "<--" button ends button_gap above the vertical middle of the list
    area and the "-->" button starts button_gap below it.
    """
    p = params
    side_w = max(0, (width - p.button_width) // 2 - p.gutter)
    list_h = max(0, height - p.title_height)
    list_y = y + p.title_height

    right_x = x + max(0, width - side_w - p.right_inset)

    btn_x = x + max(0, width // 2 - p.button_width // 2)
    middle = list_y + list_h // 2

    return DualListLayout(
        left_title=Rect(x, y, side_w, p.title_height),
        left_list=Rect(x, list_y, side_w, list_h),
        right_title=Rect(right_x, y, side_w, p.title_height),
        right_list=Rect(right_x, list_y, side_w, list_h),
        move_left_button=Rect(btn_x, max(y, middle - p.button_gap - p.button_height),
                              p.button_width, p.button_height),
        move_right_button=Rect(btn_x, middle + p.button_gap, p.button_width, p.button_height),
    )
