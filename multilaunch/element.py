"""Geometry of the objects drawn on the scene."""

from __future__ import annotations

from typing import Optional, Tuple

from .structures import Kind, LineStyle, Rectangle, SurfaceStyle, Symbol

Point = Tuple[float, float]
Bounds = Tuple[float, float, float, float]


class Element:
    """A rectangular object placed by its centre on the scene."""

    def __init__(self, kind: int = Kind.ELEMENT, name: str = "élément") -> None:
        self.kind = kind
        self.name = name
        self.dimension = Rectangle()
        self.banner_height = 0.0
        self.line = LineStyle()
        self.x = 0.0
        self.y = 0.0
        self.recompute_bounds()

    @property
    def width(self) -> int:
        return self.dimension.width

    @property
    def height(self) -> int:
        return self.dimension.height

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @property
    def bounds(self) -> Bounds:
        """Left, right, top and bottom edges."""
        return (self.left, self.right, self.top, self.bottom)

    def is_software(self) -> bool:
        return self.kind == Kind.SOFTWARE

    def place(self, x: float, y: float) -> None:
        """Put the centre at ``(x, y)``."""
        self.x = x
        self.y = y
        self.recompute_bounds()

    def shift(self, dx: float, dy: float) -> None:
        """Move the centre by ``(dx, dy)`` and recompute the edges."""
        self.x += dx
        self.y += dy
        self.recompute_bounds()

    def move(self, dx: float, dy: float) -> None:
        """Drag the element, moving centre and edges together."""
        self.x += dx
        self.y += dy
        self.left += dx
        self.right += dx
        self.top += dy
        self.bottom += dy

    def recompute_bounds(self) -> None:
        self.left = self.x - self.dimension.width // 2
        self.top = self.y - self.dimension.height // 2
        self.right = self.left + self.dimension.width
        self.bottom = self.top + self.dimension.height

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies strictly inside the rectangle."""
        return self.left < x < self.right and self.top < y < self.bottom

    def contact_point(self, index: int) -> Point:
        """Point where a line meets the element; any other index gives the centre."""
        x, y = self.x, self.y
        if index == 0:
            y += self.dimension.height // 2
        elif index == 1:
            x += self.dimension.width // 2
        elif index == 2:
            y += -self.dimension.height + self.banner_height / 2
        elif index == 3:
            x -= self.dimension.width // 2
        return (x, y)

    def extend_bounds(self, bounds: Bounds) -> Bounds:
        """Widen ``(xmin, xmax, ymin, ymax)`` so it also covers this element."""
        xmin, xmax, ymin, ymax = bounds
        return (
            min(xmin, self.left),
            max(xmax, self.right),
            min(ymin, self.top),
            max(ymax, self.bottom),
        )

    def clear_banner(self) -> None:
        self.banner_height = 0.0

    def same_dimensions(self, rectangle: Rectangle) -> bool:
        return self.dimension == rectangle


class Surface(Element):
    """An element with colours, a font and a banner above it."""

    def __init__(self, kind: int = Kind.ELEMENT, name: str = "élément") -> None:
        super().__init__(kind, name)
        self.surface = SurfaceStyle()

    @property
    def title(self) -> str:
        """Text written inside the symbol."""
        return "nom clair"

    @property
    def caption(self) -> str:
        """Text written in the banner."""
        return "nom processus"

    @property
    def background_color(self) -> str:
        return self.surface.colors.background

    @property
    def banner_color(self) -> str:
        return self.surface.colors.banner

    @property
    def font(self):
        return self.surface.font

    def apply_symbol(self, symbol: Symbol) -> None:
        """Take size and style from ``symbol``; the banner is twice the font height."""
        self.dimension = symbol.dimension
        self.surface = symbol.surface
        self.banner_height = float(self.surface.font.height * 2)

    def to_symbol(self) -> Symbol:
        return Symbol(dimension=self.dimension, surface=self.surface)

    def equals_symbol(self, symbol: Symbol) -> bool:
        return self.same_dimensions(symbol.dimension) and self.surface == symbol.surface

    def connected_object(self) -> Optional["Surface"]:
        return None

    def transfer_anchor_connection(self, target: "Surface") -> None:
        """Plain surfaces hold no connection to transfer."""

    def remove_connection(self, connection: "Surface") -> None:
        """Plain surfaces hold no connection to remove."""

    def refresh_connections(self) -> None:
        """Plain surfaces hold no connection to refresh."""