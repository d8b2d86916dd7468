"""
Timeline layout.

Items run left to right in time order. Vertical position cycles through
three bands so labels of neighbouring items do not sit on one line.

Ordering:
    1. items with a usable timestamp, oldest first (ties keep input order)
    2. items without one, by id when every such id is a number,
       otherwise in input order
"""

from __future__ import annotations

from typing import Any, Iterable, Optional
import datetime
import logging
import math
import numbers

from sortedcontainers import SortedKeyList

from .config import LayoutConfig, DEFAULT_CONFIG
from .geom import Position, PositionMap
from .graph import Graph, Item
from .overlap import resolve_overlaps

logger = logging.getLogger(__name__)


BANDS = 3
BAND_HEIGHT = 0.5  # fraction of node_spacing_y


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def timestamp_millis(value: Any) -> Optional[float]:
    """
    Convert a timestamp to milliseconds since the Unix epoch.

    Accepts datetime (naive values are taken as UTC), date, ISO-8601
    strings and plain numbers, which are already milliseconds.

    Args:
        value: Timestamp in one of the accepted forms

    Returns:
        Milliseconds, or None when value is missing or cannot be read
    """
    if value is None or value == '':
        return None
    if _is_number(value):
        try:
            millis = float(value)
        except OverflowError:
            logger.debug("Timestamp %r out of range, treating as missing", value)
            return None
        return millis if math.isfinite(millis) else None
    if isinstance(value, str):
        try:
            value = datetime.datetime.fromisoformat(value.strip().replace('Z', '+00:00'))
        except ValueError:
            logger.debug("Unreadable timestamp %r, treating as missing", value)
            return None
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        return value.timestamp() * 1000.0
    if isinstance(value, datetime.date):
        midnight = datetime.datetime(value.year, value.month, value.day, tzinfo=datetime.timezone.utc)
        return midnight.timestamp() * 1000.0
    logger.debug("Unsupported timestamp type %s, treating as missing", type(value).__name__)
    return None


def timeline_order(items: list[Item]) -> list[Item]:
    """
    Sort items for the timeline.

    Args:
        items: Items in input order

    Returns:
        Items in timeline order
    """
    millis = [timestamp_millis(item.timestamp) for item in items]
    undated_by_id = all(_is_number(item.id) for item, ms in zip(items, millis) if ms is None)

    def key(entry: tuple[int, Item, Optional[float]]) -> tuple:
        index, item, ms = entry
        if ms is not None:
            return (0, ms)
        return (1, item.id if undated_by_id else index)

    # SortedKeyList inserts after equal keys, so ties keep input order
    ordered = SortedKeyList(key=key)
    for index, (item, ms) in enumerate(zip(items, millis)):
        ordered.add((index, item, ms))
    return [item for _, item, _ in ordered]


def timeline_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """
    Arrange items left to right by timestamp.

    Args:
        items: Items to place
        links: Ignored apart from validation
        config: Layout configuration

    Returns:
        Map from item id to Position
    """
    graph = Graph(items, links)
    positions: PositionMap = {}
    if not graph.items:
        return positions

    band = config.node_spacing_y * BAND_HEIGHT
    for i, item in enumerate(timeline_order(graph.items)):
        positions[item.id] = Position(i * config.node_spacing_x, (i % BANDS) * band)

    logger.debug("timeline layout: %d items", len(graph.items))
    return resolve_overlaps(positions, config)
