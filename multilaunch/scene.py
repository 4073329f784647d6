"""The drawing area holding every object of a context."""

from __future__ import annotations

import sys
from typing import Iterator, List, Optional

from .element import Surface
from .structures import Kind


class Scene:
    """Ordered collection of surfaces with selection and dragging."""

    def __init__(self, width: int = 730, height: int = 600) -> None:
        self.width = width
        self.height = height
        self.items: List[Surface] = []
        self.dirty = False
        self._clear_selection()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Surface]:
        return iter(self.items)

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def _clear_selection(self) -> None:
        self._start_x = 0.0
        self._start_y = 0.0
        self.grabbed: Optional[Surface] = None
        self.selected: Optional[Surface] = None

    def add(self, item: Surface) -> None:
        self.items.append(item)
        self.dirty = True

    def redraw(self, item: Surface) -> None:
        """Bring ``item`` up to date and ask for the scene to be drawn again."""
        item.refresh_connections()
        self.dirty = True

    def of_kind(self, kind: int) -> List[Surface]:
        return [item for item in self.items if item.kind == kind]

    def first_of_kind(self, kind: int) -> Optional[Surface]:
        return next((item for item in self.items if item.kind == kind), None)

    def find_at(self, x: float, y: float) -> Optional[Surface]:
        """First object, in insertion order, that contains the point."""
        return next((item for item in self.items if item.contains(x, y)), None)

    def press(self, x: float, y: float) -> None:
        """Grab the object under the pointer, if any."""
        self.grabbed = self.find_at(x, y)
        if self.grabbed is not None:
            self._start_x = x
            self._start_y = y

    def release(self, x: float, y: float) -> None:
        """Drop the grabbed object; a dropped anchor hands its line to what lies below."""
        if self.grabbed is None:
            return
        if self.grabbed.kind == Kind.ANCHOR:
            origin = self.grabbed.connected_object()
            self.remove(self.grabbed)
            target = self.find_at(x, y)
            if target is not None and origin is not None:
                origin.transfer_anchor_connection(target)
        self._clear_selection()

    def drag(self, x: float, y: float) -> None:
        if self.grabbed is None:
            return
        self.grabbed.move(x - self._start_x, y - self._start_y)
        self._start_x = x
        self._start_y = y
        self.dirty = True

    def select_at(self, x: float, y: float) -> Optional[Surface]:
        self.selected = self.find_at(x, y)
        return self.selected

    def selected_software(self) -> Optional[Surface]:
        if self.selected is not None and self.selected.is_software():
            return self.selected
        return None

    def remove(self, item: Optional[Surface]) -> None:
        """Take ``item`` (or the selection when ``None``) off the scene and deselect it."""
        self.unlist(item)
        if self.selected is not None:
            self.selected = None
            self.dirty = True

    def unlist(self, item: Optional[Surface]) -> None:
        """Make ``item`` the selection and take it out of the list, keeping it selected."""
        if item is not None:
            self.selected = item
        if self.selected is not None and self.selected in self.items:
            self.items.remove(self.selected)

    def clear(self) -> None:
        self._clear_selection()
        self.items.clear()
        self.dirty = True

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def center(self) -> None:
        """Move every object so the drawing as a whole sits in the middle of the scene."""
        bounds = (sys.float_info.max, sys.float_info.min, sys.float_info.max, sys.float_info.min)
        for item in self.items:
            bounds = item.extend_bounds(bounds)
        xmin, xmax, ymin, ymax = bounds
        for item in self.items:
            item.shift(-xmin, -ymin)
        dx = (self.width - (xmax - xmin)) / 2.0
        dy = (self.height - (ymax - ymin)) / 2.0
        for item in self.items:
            item.shift(dx, dy)
        self.dirty = True