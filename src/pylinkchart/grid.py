"""Square grid layout."""

from __future__ import annotations

from typing import Any, Iterable
import logging
import math

from .config import LayoutConfig, DEFAULT_CONFIG
from .geom import Position, PositionMap
from .graph import Graph
from .overlap import resolve_overlaps

logger = logging.getLogger(__name__)


def grid_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """
    Arrange items row by row in a near-square grid.

    The grid has ceil(sqrt(n)) columns and is centered horizontally on
    x = 0; the first row is at y = 0.

    Args:
        items: Items to place, in reading order
        links: Ignored apart from validation
        config: Layout configuration

    Returns:
        Map from item id to Position
    """
    graph = Graph(items, links)
    positions: PositionMap = {}
    if not graph.items:
        return positions

    spacing_x = config.node_spacing_x
    spacing_y = config.node_spacing_y
    cols = math.ceil(math.sqrt(len(graph.items)))
    offset_x = (cols - 1) * spacing_x / 2

    for i, item_id in enumerate(graph.ids):
        row, col = divmod(i, cols)
        positions[item_id] = Position(col * spacing_x - offset_x, row * spacing_y)

    logger.debug("grid layout: %d items in %d columns", len(graph.items), cols)
    return resolve_overlaps(positions, config)
