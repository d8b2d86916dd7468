"""
Geometric primitives for link-chart layout.

This module provides the Position type stored in position maps, the
Bounds rectangle used when fitting a layout to a viewport, and the ring
placement helper shared by the radial layouts.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Iterator, Optional
import math


ItemId = Hashable


class Position:
    """Top-left anchor of a node's bounding box."""

    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Position(x={self.x!r}, y={self.y!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def as_tuple(self) -> tuple[float, float]:
        """Return (x, y)."""
        return (self.x, self.y)

    def is_finite(self) -> bool:
        """Check that both coordinates are finite numbers."""
        return math.isfinite(self.x) and math.isfinite(self.y)


PositionMap = dict[ItemId, Position]


class Bounds:
    """
    Axis-aligned rectangle.

    Attributes:
        min_x: Left edge
        min_y: Top edge
        max_x: Right edge
        max_y: Bottom edge
    """

    __slots__ = ('min_x', 'min_y', 'max_x', 'max_y')

    def __init__(self, min_x: float, min_y: float, max_x: float, max_y: float):
        self.min_x = min_x
        self.min_y = min_y
        self.max_x = max_x
        self.max_y = max_y

    def __repr__(self) -> str:
        return (
            f"Bounds(min_x={self.min_x!r}, min_y={self.min_y!r}, "
            f"max_x={self.max_x!r}, max_y={self.max_y!r})"
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def cx(self) -> float:
        """Get x center."""
        return (self.min_x + self.max_x) / 2.0

    def cy(self) -> float:
        """Get y center."""
        return (self.min_y + self.max_y) / 2.0

    def inflate(self, pad: float) -> Bounds:
        """Grow the rectangle by pad on every side."""
        return Bounds(self.min_x - pad, self.min_y - pad, self.max_x + pad, self.max_y + pad)


def ring_points(
    count: int,
    radius: float,
    start_angle: float = -math.pi / 2,
    center: Optional[tuple[float, float]] = None
) -> Iterator[tuple[float, float]]:
    """
    Yield evenly spaced points on a circle.

    Point i sits at angle ``start_angle + i / count * 2pi``; the default
    start angle puts the first point at the top, following points go
    clockwise in screen coordinates.

    Args:
        count: Number of points
        radius: Circle radius
        start_angle: Angle of the first point in radians
        center: Circle center, origin if None

    Yields:
        (x, y) tuples
    """
    cx, cy = center if center is not None else (0.0, 0.0)
    step = 2 * math.pi / max(1, count)
    for i in range(count):
        angle = start_angle + i * step
        yield (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def place_on_ring(
    positions: PositionMap,
    ids: Iterable[ItemId],
    radius: float,
    start_angle: float = -math.pi / 2,
    center: Optional[tuple[float, float]] = None
) -> None:
    """Assign ids, in order, to evenly spaced points on a circle."""
    ids = list(ids)
    for item_id, (x, y) in zip(ids, ring_points(len(ids), radius, start_angle, center)):
        positions[item_id] = Position(x, y)


def positions_to_dict(positions: PositionMap) -> dict[ItemId, dict[str, float]]:
    """
    Convert a position map to plain dicts for JSON renderers.

    Args:
        positions: Map from item id to Position

    Returns:
        ``{id: {"x": x, "y": y}}`` in map order
    """
    return {item_id: {'x': pos.x, 'y': pos.y} for item_id, pos in positions.items()}
