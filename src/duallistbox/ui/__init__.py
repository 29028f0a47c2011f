"""UI package for duallistbox.

Exports:
- DualListBox: the GTK4 composite widget (two lists, two arrow buttons).
- MainWindow: the demo application window hosting one DualListBox.
"""
from .components.dual_list_box import DualListBox
from .main_window import MainWindow

__all__ = ["DualListBox", "MainWindow"]
