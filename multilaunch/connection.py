"""Lines that join two objects of the scene."""

from __future__ import annotations

from typing import Optional, Tuple

from .element import Point, Surface
from .structures import Kind, LineStyle, Rectangle

NO_SIDE = 100

_ALIGNED_SIDES = {
    1: (0, 2),
    5: (0, 2),
    9: (2, 0),
    13: (2, 0),
    2: (1, 3),
    10: (1, 3),
    6: (3, 1),
    14: (3, 1),
}

# For diagonal cases: (sides when dx > dy, sides otherwise).
_DIAGONAL_SIDES = {
    0: ((1, 3), (0, 2)),
    4: ((3, 1), (0, 2)),
    8: ((1, 3), (2, 0)),
    12: ((3, 1), (2, 0)),
}


def _close(a: float, b: float, tolerance: float) -> bool:
    return abs(a - b) <= tolerance


def choose_sides(
    source_pos: Point,
    source_dim: Rectangle,
    target_pos: Point,
    target_dim: Rectangle,
) -> Tuple[int, int]:
    """Pick the contact sides of source and target for a line between them.

    Returns a pair of contact indices; ``(100, 100)`` when the two objects overlap.
    """
    xs, ys = source_pos
    xc, yc = target_pos
    case = 0
    if _close(xs, xc, target_dim.width / 1.8 + source_dim.width / 1.8):
        case = 1
    if _close(ys, yc, target_dim.height / 1.4 + source_dim.height / 1.4):
        case += 2
    if xs > xc:
        case += 4
    if ys > yc:
        case += 8
    if case in _ALIGNED_SIDES:
        return _ALIGNED_SIDES[case]
    if case in _DIAGONAL_SIDES:
        wide, tall = _DIAGONAL_SIDES[case]
        return wide if abs(xs - xc) > abs(ys - yc) else tall
    return (NO_SIDE, NO_SIDE)


class Connection(Surface):
    """A line drawn from a source object to a target object."""

    def __init__(
        self, style: Optional[LineStyle] = None, target: Optional[Surface] = None
    ) -> None:
        super().__init__(Kind.CONNECTION, "connecteur")
        self.line = style if style is not None else LineStyle()
        self.target: Optional[Surface] = target
        self.source: Optional[Surface] = None
        self.source_point: Point = (0.0, 0.0)
        self.target_point: Point = (1.0, 1.0)

    def attach(self, source: Optional[Surface], target: Optional[Surface]) -> bool:
        """Set both ends at once; only works on a connection with no end set yet."""
        if self.source is not None or self.target is not None:
            return False
        if source is None or target is None:
            return False
        self.source = source
        self.target = target
        self.refresh()
        return True

    def set_source(self, source: Optional[Surface]) -> None:
        self.source = source

    def set_target(self, target: Optional[Surface]) -> None:
        self.target = target

    def refresh(self) -> None:
        """Recompute the end points from the current positions of both ends."""
        if self.source is None or self.target is None:
            return
        source_side, target_side = choose_sides(
            self.source.position,
            self.source.dimension,
            self.target.position,
            self.target.dimension,
        )
        self.source_point = self.source.contact_point(source_side)
        self.target_point = self.target.contact_point(target_side)

    def disconnect(self) -> None:
        """Tell both ends to forget this connection."""
        if self.target is not None:
            self.target.remove_connection(self)
        if self.source is not None:
            self.source.remove_connection(self)