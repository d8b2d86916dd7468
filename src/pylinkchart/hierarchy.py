"""
Layered layouts driven by link direction.

- hierarchy_layout: one row per depth below the roots, rows centered on x = 0
- tree_layout: parents centered over their subtrees (tidy tree)
- spread_layout: hierarchy with doubled spacing

Both traversals use explicit stacks so deep chains do not hit the
interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional
import logging

from .config import LayoutConfig, DEFAULT_CONFIG
from .geom import ItemId, Position, PositionMap
from .graph import Graph
from .overlap import resolve_overlaps

logger = logging.getLogger(__name__)


def assign_levels(
    children: dict[ItemId, list[ItemId]],
    roots: list[ItemId]
) -> dict[int, list[ItemId]]:
    """
    Group nodes by depth below the roots.

    Depth-first from each root in turn; a node reachable along several
    paths keeps the depth of the first visit.

    Args:
        children: Child lists per node
        roots: Start nodes at depth 0

    Returns:
        Depth -> node ids in visit order
    """
    levels: dict[int, list[ItemId]] = {}
    visited: set[ItemId] = set()

    for root in roots:
        stack = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            levels.setdefault(depth, []).append(node)
            # reversed so the first child is visited first
            for child in reversed(children.get(node, ())):
                stack.append((child, depth + 1))

    return levels


def hierarchy_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """
    Arrange items in rows by depth, roots at the top.

    Items no root can reach share one extra row under the deepest level.

    Args:
        items: Items to place
        links: Directed links defining parent/child relations
        config: Layout configuration

    Returns:
        Map from item id to Position
    """
    graph = Graph(items, links)
    positions: PositionMap = {}
    if not graph.items:
        return positions

    levels = assign_levels(graph.children(), graph.roots())

    placed = {node for ids in levels.values() for node in ids}
    orphans = [item_id for item_id in graph.ids if item_id not in placed]
    if orphans:
        levels[max(0, *levels) + 1] = orphans

    spacing_x = config.node_spacing_x
    for depth, ids in levels.items():
        start_x = -(len(ids) - 1) * spacing_x / 2
        for index, item_id in enumerate(ids):
            positions[item_id] = Position(start_x + index * spacing_x, depth * config.node_spacing_y)

    logger.debug(
        "hierarchy layout: %d items, %d links, %d levels, %d unreachable",
        len(graph.items), len(graph.links), len(levels), len(orphans)
    )
    return resolve_overlaps(positions, config)


class _Frame:
    """Pending work for one node of the tree traversal."""

    __slots__ = ('node', 'depth', 'pending', 'leaf', 'child_xs')

    def __init__(self, node: ItemId, depth: int, pending: list[ItemId]):
        self.node = node
        self.depth = depth
        self.pending: Iterator[ItemId] = iter(pending)
        self.leaf = not pending
        self.child_xs: list[float] = []


class _TreePlacer:
    """Post-order placement with a shared x cursor."""

    def __init__(self, children: dict[ItemId, list[ItemId]], config: LayoutConfig):
        self.children = children
        self.spacing_x = config.node_spacing_x
        self.spacing_y = config.node_spacing_y
        self.cursor = 0.0
        self.visited: set[ItemId] = set()
        self.positions: PositionMap = {}

    def _enter(self, node: ItemId, depth: int) -> _Frame:
        self.visited.add(node)
        pending = [c for c in self.children.get(node, ()) if c not in self.visited]
        return _Frame(node, depth, pending)

    def _next_child(self, frame: _Frame) -> Optional[ItemId]:
        # children claimed by an earlier sibling's subtree are skipped
        for child in frame.pending:
            if child not in self.visited:
                return child
        return None

    def advance(self) -> float:
        """Take the next free column."""
        x = self.cursor
        self.cursor += self.spacing_x
        return x

    def place_subtree(self, root: ItemId) -> None:
        if root in self.visited:
            return

        stack = [self._enter(root, 0)]
        while stack:
            frame = stack[-1]
            if frame.leaf:
                x = self.advance()
            else:
                child = self._next_child(frame)
                if child is not None:
                    stack.append(self._enter(child, frame.depth + 1))
                    continue
                x = sum(frame.child_xs) / len(frame.child_xs)

            self.positions[frame.node] = Position(x, frame.depth * self.spacing_y)
            stack.pop()
            if stack:
                stack[-1].child_xs.append(x)


def tree_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """
    Arrange items as a tidy tree.

    Leaves take successive columns from left to right; a parent sits at
    the mean x of the children laid out beneath it. Items no root reaches
    are appended on the top row after the last column.

    Args:
        items: Items to place
        links: Directed links defining parent/child relations
        config: Layout configuration

    Returns:
        Map from item id to Position
    """
    graph = Graph(items, links)
    if not graph.items:
        return {}

    placer = _TreePlacer(graph.children(), config)
    for root in graph.roots():
        placer.place_subtree(root)

    unreachable = 0
    for item_id in graph.ids:
        if item_id not in placer.visited:
            placer.positions[item_id] = Position(placer.advance(), 0.0)
            unreachable += 1

    logger.debug(
        "tree layout: %d items, %d links, %d unreachable",
        len(graph.items), len(graph.links), unreachable
    )
    return resolve_overlaps(placer.positions, config)


def spread_layout(
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG
) -> PositionMap:
    """Hierarchy layout with twice the configured node spacing."""
    return hierarchy_layout(items, links, config.scaled(2, 2))
