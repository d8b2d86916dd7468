"""
Ring-based layouts.

- circular_layout: every item on one ring
- grouped_layout: one cluster per item type, clusters on an outer ring
- peacock_layout: busiest item in the middle, neighbours on an inner ring
- compact_peacock_layout: concentric tiers by link distance from the hub
- star_layout: first item in the middle, the rest on one ring

Ring and tier radii are multiplied by the config's spacing factor so they
grow and shrink with the configured node spacing.
"""

from __future__ import annotations

from typing import Any, Iterable
import logging
import math

from .config import LayoutConfig, DEFAULT_CONFIG
from .geom import ItemId, Position, PositionMap, place_on_ring, ring_points
from .graph import Graph
from .overlap import resolve_overlaps

logger = logging.getLogger(__name__)


# Radii before scaling by the spacing factor
CIRCLE_MIN_RADIUS = 200
CIRCLE_ARC_PER_ITEM = 80
GROUP_RING_MIN_RADIUS = 400
GROUP_RING_PER_GROUP = 120
GROUP_MIN_RADIUS = 100
GROUP_ARC_PER_ITEM = 60
PEACOCK_INNER_RADIUS = 250
PEACOCK_OUTER_RADIUS = 450
TIER_BASE_RADIUS = 120
TIER_STEP_RADIUS = 100
STAR_RADIUS = 300

DEFAULT_GROUP = 'other'


def circular_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """
    Place all items on a single ring, first item at the top.

    The ring grows with the item count so neighbours keep roughly
    CIRCLE_ARC_PER_ITEM of arc between them.
    """
    graph = Graph(items, links)
    positions: PositionMap = {}
    if not graph.items:
        return positions

    count = len(graph.items)
    radius = max(CIRCLE_MIN_RADIUS, count * CIRCLE_ARC_PER_ITEM / (2 * math.pi))
    place_on_ring(positions, graph.ids, radius * config.spacing_factor)

    logger.debug("circular layout: %d items", count)
    return resolve_overlaps(positions, config)


def grouped_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """
    Cluster items by type.

    Each type gets a centroid on an outer ring, in order of first
    appearance. A lone member sits on its centroid; larger groups form a
    small ring around it.

    Args:
        items: Items to place; those without a type go to the "other" group
        links: Ignored apart from validation
        config: Layout configuration

    Returns:
        Map from item id to Position
    """
    graph = Graph(items, links)
    positions: PositionMap = {}
    if not graph.items:
        return positions

    groups: dict[str, list[ItemId]] = {}
    for item in graph.items:
        groups.setdefault(item.type or DEFAULT_GROUP, []).append(item.id)

    factor = config.spacing_factor
    outer_radius = max(GROUP_RING_MIN_RADIUS, len(groups) * GROUP_RING_PER_GROUP) * factor
    centroids = ring_points(len(groups), outer_radius)

    for members, center in zip(groups.values(), centroids):
        if len(members) == 1:
            positions[members[0]] = Position(*center)
            continue
        inner_radius = max(GROUP_MIN_RADIUS, len(members) * GROUP_ARC_PER_ITEM / (2 * math.pi)) * factor
        place_on_ring(positions, members, inner_radius, start_angle=0.0, center=center)

    logger.debug("grouped layout: %d items in %d groups", len(graph.items), len(groups))
    return resolve_overlaps(positions, config)


def peacock_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """
    Put the most connected item in the middle.

    Items linked to the center (in either direction) form an inner ring,
    everything else an outer ring.
    """
    graph = Graph(items, links)
    positions: PositionMap = {}
    if not graph.items:
        return positions

    center = graph.hub()
    positions[center] = Position(0.0, 0.0)

    adjacent = graph.neighbours()[center]
    inner = [item_id for item_id in graph.ids if item_id != center and item_id in adjacent]
    outer = [item_id for item_id in graph.ids if item_id != center and item_id not in adjacent]

    factor = config.spacing_factor
    place_on_ring(positions, inner, PEACOCK_INNER_RADIUS * factor)
    place_on_ring(positions, outer, PEACOCK_OUTER_RADIUS * factor)

    logger.debug(
        "peacock layout: center %r, %d inner, %d outer",
        center, len(inner), len(outer)
    )
    return resolve_overlaps(positions, config)


def build_tiers(graph: Graph) -> list[list[ItemId]]:
    """
    Split items into rings by link distance from the hub.

    Tier 0 is the hub alone. Each following tier holds the not yet placed
    neighbours of the previous one, in discovery order. When a tier comes
    up empty while items remain (another component), all remaining items
    form one last tier.

    Args:
        graph: Normalized graph with at least one item

    Returns:
        Tiers of item ids
    """
    adjacency = graph.neighbours()
    hub = graph.hub()
    placed = {hub}
    tiers = [[hub]]

    while len(placed) < len(graph.items):
        tier: list[ItemId] = []
        for node in tiers[-1]:
            for neighbour in adjacency[node]:
                if neighbour not in placed:
                    placed.add(neighbour)
                    tier.append(neighbour)

        if not tier:
            tier = [item_id for item_id in graph.ids if item_id not in placed]
            placed.update(tier)

        tiers.append(tier)

    return tiers


def compact_peacock_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """
    Arrange items in concentric tiers around the hub.

    Within a tier, items with more links into the previous tier come
    first so they land next to each other at the top of the ring, which
    cuts down edge crossings between neighbouring tiers.

    Args:
        items: Items to place
        links: Links, treated as undirected
        config: Layout configuration

    Returns:
        Map from item id to Position
    """
    graph = Graph(items, links)
    positions: PositionMap = {}
    if not graph.items:
        return positions

    adjacency = graph.neighbours()
    tiers = build_tiers(graph)
    positions[tiers[0][0]] = Position(0.0, 0.0)

    factor = config.spacing_factor
    for index in range(1, len(tiers)):
        previous = set(tiers[index - 1])
        ordered = sorted(
            tiers[index],
            key=lambda node: sum(1 for other in adjacency[node] if other in previous),
            reverse=True
        )
        radius = (TIER_BASE_RADIUS + index * TIER_STEP_RADIUS) * factor
        place_on_ring(positions, ordered, radius)

    logger.debug(
        "compact peacock layout: %d items in %d tiers", len(graph.items), len(tiers)
    )
    return resolve_overlaps(positions, config)


def star_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """Put the first item in the middle and the rest on one ring around it."""
    graph = Graph(items, links)
    positions: PositionMap = {}
    if not graph.items:
        return positions

    center, *others = graph.ids
    positions[center] = Position(0.0, 0.0)
    place_on_ring(positions, others, STAR_RADIUS * config.spacing_factor)

    logger.debug("star layout: center %r, %d on ring", center, len(others))
    return resolve_overlaps(positions, config)
