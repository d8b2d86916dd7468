"""
Force-directed layout.

Items start on a jittered ring, then a fixed number of simulation steps
apply pairwise repulsion (inverse square) and linear spring attraction
along links. Velocities are damped each step.

The jitter comes from a numpy Generator the caller may pass in; seed it
to get reproducible layouts, leave it out for a fresh arrangement on
every call.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional
import logging

import numpy as np
from scipy.spatial.distance import pdist, squareform

from .config import LayoutConfig, DEFAULT_CONFIG
from .geom import Position, PositionMap
from .graph import Graph
from .overlap import resolve_overlaps

logger = logging.getLogger(__name__)


ITERATIONS = 50
INITIAL_RADIUS = 200
JITTER = 25.0
REPULSION = 5000.0
ATTRACTION = 0.1
DAMPING = 0.9
MIN_DISTANCE = 1.0


def initial_positions(
    count: int,
    radius: float,
    rng: np.random.Generator
) -> np.ndarray:
    """
    Ring start positions with random jitter.

    Args:
        count: Number of nodes
        radius: Ring radius
        rng: Source of the jitter

    Returns:
        (count, 2) array of x, y
    """
    angles = np.arange(count) * (2 * np.pi / count)
    ring = radius * np.column_stack((np.cos(angles), np.sin(angles)))
    return ring + rng.uniform(-JITTER, JITTER, size=(count, 2))


def simulate(
    pos: np.ndarray,
    edges: np.ndarray,
    repulsion: float,
    iterations: int = ITERATIONS
) -> np.ndarray:
    """
    Run the spring/charge simulation.

    Every step computes all forces from the positions at the start of the
    step, then moves every node at once.

    Args:
        pos: (n, 2) start positions, not modified
        edges: (m, 2) index pairs; each pair pulls both endpoints together
        repulsion: Charge constant
        iterations: Number of steps, capped at ITERATIONS

    Returns:
        (n, 2) final positions
    """
    pos = pos.astype(float, copy=True)
    velocity = np.zeros_like(pos)
    n = len(pos)
    if n == 0:
        return pos

    # both directions, one entry per link end
    edges = np.asarray(edges, dtype=int).reshape(-1, 2)
    src = np.concatenate((edges[:, 0], edges[:, 1]))
    dst = np.concatenate((edges[:, 1], edges[:, 0]))

    for _ in range(min(iterations, ITERATIONS)):
        dist = np.maximum(squareform(pdist(pos)), MIN_DISTANCE)
        # sum_j (p_i - p_j) * w_ij with w_ij = repulsion / d_ij^3; the
        # diagonal cancels, so only n x n arrays are needed
        weight = repulsion / (dist * dist * dist)
        force = pos * weight.sum(axis=1)[:, np.newaxis] - weight @ pos

        if len(src):
            np.add.at(force, src, (pos[dst] - pos[src]) * ATTRACTION)

        velocity = (velocity + force) * DAMPING
        pos += velocity

    return pos


def force_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None
) -> PositionMap:
    """
    Arrange items with a force-directed simulation.

    Args:
        items: Items to place
        links: Links, treated as undirected springs
        config: Layout configuration
        rng: Random source for the start jitter
        seed: Seed for a new generator when rng is not given

    Returns:
        Map from item id to Position
    """
    graph = Graph(items, links)
    positions: PositionMap = {}
    if not graph.items:
        return positions

    if rng is None:
        rng = np.random.default_rng(seed)

    factor = config.spacing_factor
    index = {item_id: i for i, item_id in enumerate(graph.ids)}
    edges = np.array(
        [(index[link.source], index[link.target]) for link in graph.links],
        dtype=int
    ).reshape(-1, 2)

    start = initial_positions(len(graph.ids), INITIAL_RADIUS * factor, rng)
    final = simulate(start, edges, REPULSION * factor * factor)

    for item_id, (x, y) in zip(graph.ids, final):
        positions[item_id] = Position(float(x), float(y))

    logger.debug(
        "force layout: %d items, %d links, %d iterations",
        len(graph.ids), len(graph.links), ITERATIONS
    )
    return resolve_overlaps(positions, config)
