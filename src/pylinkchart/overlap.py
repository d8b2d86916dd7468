"""
Overlap removal for laid-out node boxes.

Every layout strategy finishes with resolve_overlaps: a greedy local
relaxation that pushes colliding boxes apart along the axis needing the
smaller move. It is not guaranteed to be collision free for dense
clusters; the number of passes is capped so the cost stays bounded.
"""

from __future__ import annotations

import logging

from .config import LayoutConfig, DEFAULT_CONFIG
from .geom import ItemId, PositionMap

logger = logging.getLogger(__name__)


MAX_OVERLAP_PASSES = 10


def find_overlaps(
    positions: PositionMap,
    config: LayoutConfig = DEFAULT_CONFIG
) -> list[tuple[ItemId, ItemId]]:
    """
    List pairs of nodes whose padded boxes collide.

    Args:
        positions: Map from item id to Position
        config: Supplies node size and padding

    Returns:
        (id_a, id_b) pairs, id_a before id_b in map order
    """
    required_x = config.node_width + config.min_node_padding
    required_y = config.node_height + config.min_node_padding
    ids = list(positions)
    pairs = []
    for i, id_a in enumerate(ids):
        a = positions[id_a]
        for id_b in ids[i + 1:]:
            b = positions[id_b]
            if required_x - abs(b.x - a.x) > 0 and required_y - abs(b.y - a.y) > 0:
                pairs.append((id_a, id_b))
    return pairs


def relax_overlaps(
    positions: PositionMap,
    config: LayoutConfig = DEFAULT_CONFIG
) -> int:
    """
    Push colliding nodes apart in place.

    Each pass visits every unordered pair once. A colliding pair is
    separated along the axis with the smaller overlap, each node moving
    half the overlap plus one unit. The node that is further right (or
    down) keeps that side; at zero displacement the second node of the
    pair moves in the positive direction.

    Args:
        positions: Map from item id to Position, modified in place
        config: Supplies node size and padding

    Returns:
        Number of passes run, at most MAX_OVERLAP_PASSES
    """
    required_x = config.node_width + config.min_node_padding
    required_y = config.node_height + config.min_node_padding
    nodes = list(positions.values())
    n = len(nodes)

    passes = 0
    for _ in range(MAX_OVERLAP_PASSES):
        passes += 1
        collisions = 0

        for i in range(n):
            a = nodes[i]
            for j in range(i + 1, n):
                b = nodes[j]
                dx = b.x - a.x
                dy = b.y - a.y
                overlap_x = required_x - abs(dx)
                overlap_y = required_y - abs(dy)
                if overlap_x <= 0 or overlap_y <= 0:
                    continue

                collisions += 1
                if overlap_x < overlap_y:
                    push = overlap_x / 2 + 1
                    if dx < 0:
                        push = -push
                    a.x -= push
                    b.x += push
                else:
                    push = overlap_y / 2 + 1
                    if dy < 0:
                        push = -push
                    a.y -= push
                    b.y += push

        if collisions == 0:
            break

    if collisions:
        logger.debug(
            "Overlap removal hit the pass cap (%d) with %d collision(s) in the last pass",
            passes, collisions
        )
    else:
        logger.debug("Overlap removal converged after %d pass(es)", passes)
    return passes


def resolve_overlaps(
    positions: PositionMap,
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """
    Remove overlaps between node boxes.

    Args:
        positions: Map from item id to Position, modified in place
        config: Supplies node size and padding

    Returns:
        The same map, for chaining
    """
    relax_overlaps(positions, config)
    return positions
