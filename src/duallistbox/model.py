"""
Transfer-list model behind the dual list box.

- Two disjoint sets of unique, non-empty strings: "available" and "selected".
- Moves relocate one item between the sets as a single step.
- Getters always return items in ascending codepoint order.
- Listeners are notified synchronously after every successful mutation.

The model owns its state: items are copied in and copied out, a caller's
list is never aliased. This module does not talk to GTK; the view layer
subscribes with connect() and redraws from the getters.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple


logger = logging.getLogger("duallistbox.model")

AVAILABLE = "available"
SELECTED = "selected"

MOVED_TO_SELECTED = "moved-to-selected"
MOVED_TO_AVAILABLE = "moved-to-available"
AVAILABLE_REPLACED = "available-replaced"
SELECTED_REPLACED = "selected-replaced"

EVENT_KINDS = (MOVED_TO_SELECTED, MOVED_TO_AVAILABLE, AVAILABLE_REPLACED, SELECTED_REPLACED)


class ItemNotFoundError(LookupError):
    """A transfer was requested for an item missing from its source collection."""

    def __init__(self, item: str, collection: str) -> None:
        super().__init__(f"{item!r} is not in {collection}")
        self.item = item
        self.collection = collection


@dataclass(frozen=True)
class ChangeEvent:
    kind: str
    items: Tuple[str, ...]


Listener = Callable[[ChangeEvent], None]


def _normalize(items: Iterable[str]) -> Set[str]:
    out: Set[str] = set()
    for item in items:
        if not isinstance(item, str):
            raise ValueError(f"items must be strings, got {type(item).__name__}")
        if not item:
            raise ValueError("items must not be empty")
        out.add(item)
    return out


class ItemTransferList:
    """
    Holds the available/selected partition.

    set_available()/set_selected() enforce disjointness: every item written
    to one side is removed from the other side.
    """

    def __init__(self, available: Iterable[str] = (), selected: Iterable[str] = ()) -> None:
        sel = _normalize(selected)
        self._available: Set[str] = _normalize(available) - sel
        self._selected: Set[str] = sel
        self._lock = threading.RLock()
        self._listeners: Dict[int, Tuple[Listener, Optional[str]]] = {}
        self._next_id = 1

    # --- Queries ------------------------------------------------------------

    def get_available(self) -> List[str]:
        with self._lock:
            return sorted(self._available)

    def get_selected(self) -> List[str]:
        with self._lock:
            return sorted(self._selected)

    def location(self, item: str) -> Optional[str]:
        with self._lock:
            if item in self._available:
                return AVAILABLE
            if item in self._selected:
                return SELECTED
            return None

    def __contains__(self, item: object) -> bool:
        with self._lock:
            return item in self._available or item in self._selected

    def __len__(self) -> int:
        with self._lock:
            return len(self._available) + len(self._selected)

    def __repr__(self) -> str:
        return f"ItemTransferList(available={self.get_available()!r}, selected={self.get_selected()!r})"

    # --- Transfers ----------------------------------------------------------

    def move_to_selected(self, item: str) -> None:
        """Move item from available to selected; raises ItemNotFoundError if absent."""
        self._move(item, self._available, self._selected, AVAILABLE)
        logger.debug("Moved %r to selected", item)
        self._emit(ChangeEvent(MOVED_TO_SELECTED, (item,)))

    def move_to_available(self, item: str) -> None:
        """Move item from selected to available; raises ItemNotFoundError if absent."""
        self._move(item, self._selected, self._available, SELECTED)
        logger.debug("Moved %r to available", item)
        self._emit(ChangeEvent(MOVED_TO_AVAILABLE, (item,)))

    def _move(self, item: str, source: Set[str], target: Set[str], source_name: str) -> None:
        with self._lock:
            if item not in source:
                logger.debug("Rejected move of %r: not in %s", item, source_name)
                raise ItemNotFoundError(item, source_name)
            source.remove(item)
            target.add(item)

    # --- Bulk replace -------------------------------------------------------

    def set_available(self, items: Iterable[str]) -> None:
        new = _normalize(items)
        with self._lock:
            self._available = new
            self._selected -= new
        logger.debug("Replaced available items (%d)", len(new))
        self._emit(ChangeEvent(AVAILABLE_REPLACED, tuple(sorted(new))))

    def set_selected(self, items: Iterable[str]) -> None:
        new = _normalize(items)
        with self._lock:
            self._selected = new
            self._available -= new
        logger.debug("Replaced selected items (%d)", len(new))
        self._emit(ChangeEvent(SELECTED_REPLACED, tuple(sorted(new))))

    # --- Notifications ------------------------------------------------------

    def connect(self, callback: Listener, kind: Optional[str] = None) -> int:
        """
        Register callback(event) for every change, or only for one event kind.
        Returns a handler id for disconnect().
        """
        if kind is not None and kind not in EVENT_KINDS:
            raise ValueError(f"unknown event kind: {kind}")
        with self._lock:
            handler_id = self._next_id
            self._next_id += 1
            self._listeners[handler_id] = (callback, kind)
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        with self._lock:
            del self._listeners[handler_id]

    def _emit(self, event: ChangeEvent) -> None:
        with self._lock:
            listeners = list(self._listeners.values())
        # callback errors propagate to the caller of the mutation
        for callback, kind in listeners:
            if kind is None or kind == event.kind:
                callback(event)
