"""duallistbox: two side-by-side lists with arrow buttons to move items.

Exports (GTK-free):
- ItemTransferList: the available/selected bookkeeping model.
- ItemNotFoundError: raised when a move names an item absent from its source.
- ChangeEvent: payload passed to model listeners.

The GTK4 widget lives in duallistbox.ui (requires PyGObject).
"""
from .model import ChangeEvent, ItemNotFoundError, ItemTransferList

__all__ = ["ChangeEvent", "ItemNotFoundError", "ItemTransferList"]
