"""Tests for hierarchy, tree and spread layouts."""

import pytest
from pylinkchart.config import DEFAULT_CONFIG
from pylinkchart.geom import Position
from pylinkchart.graph import Item, Link
from pylinkchart.hierarchy import (
    assign_levels, hierarchy_layout, tree_layout, spread_layout
)


def items(*ids):
    return [Item(i) for i in ids]


def chain(n):
    """Items 0..n-1 linked 0 -> 1 -> ... -> n-1."""
    return items(*range(n)), [Link(i, i + 1) for i in range(n - 1)]


class TestAssignLevels:
    """Test depth assignment."""

    def test_first_visit_wins(self):
        """Test a node reachable at two depths keeps the depth-first one."""
        children = {'a': ['b', 'c'], 'b': ['c'], 'c': []}
        assert assign_levels(children, ['a']) == {0: ['a'], 1: ['b'], 2: ['c']}

    def test_diamond(self):
        """Test visit order within levels."""
        children = {'a': ['b', 'c'], 'b': ['d'], 'c': ['d'], 'd': []}
        assert assign_levels(children, ['a']) == {0: ['a'], 1: ['b', 'c'], 2: ['d']}

    def test_multiple_roots(self):
        """Test each root starts at depth 0."""
        children = {'a': ['c'], 'b': [], 'c': []}
        assert assign_levels(children, ['a', 'b']) == {0: ['a', 'b'], 1: ['c']}


class TestHierarchyLayout:
    """Test the layered layout."""

    def test_empty(self):
        """Test no items."""
        assert hierarchy_layout([], []) == {}

    def test_single_item(self):
        """Test a lone item sits at the origin."""
        assert hierarchy_layout(items('only'), []) == {'only': Position(0, 0)}

    def test_chain(self):
        """Test one node per level."""
        positions = hierarchy_layout(*chain(3))
        assert [positions[i] for i in range(3)] == [
            Position(0, 0), Position(0, 140), Position(0, 280)
        ]

    def test_siblings_centered(self):
        """Test levels are centered around x = 0."""
        positions = hierarchy_layout(items('r', 'a', 'b'), [Link('r', 'a'), Link('r', 'b')])
        assert positions['r'] == Position(0, 0)
        assert positions['a'] == Position(-110, 140)
        assert positions['b'] == Position(110, 140)

    def test_cycle_uses_first_item(self):
        """Test a graph without roots starts from the first item."""
        positions = hierarchy_layout(items('a', 'b'), [Link('a', 'b'), Link('b', 'a')])
        assert positions['a'] == Position(0, 0)
        assert positions['b'] == Position(0, 140)

    def test_unreachable_items_share_a_level(self):
        """Test items no root reaches go one level below the deepest."""
        positions = hierarchy_layout(
            items('a', 'b', 'c', 'd'),
            [Link('a', 'b'), Link('c', 'd'), Link('d', 'c')]
        )
        assert positions['c'] == Position(-110, 280)
        assert positions['d'] == Position(110, 280)

    def test_unknown_links_ignored(self):
        """Test links to missing ids do not create parents."""
        positions = hierarchy_layout(items('a'), [Link('ghost', 'a'), Link('a', 'ghost')])
        assert positions == {'a': Position(0, 0)}

    def test_deep_chain(self):
        """Test chains deeper than the recursion limit."""
        positions = hierarchy_layout(*chain(1500))
        assert len(positions) == 1500
        assert positions[1499].y == 1499 * DEFAULT_CONFIG.node_spacing_y

    def test_deterministic(self):
        """Test repeated calls agree."""
        args = (items(*'abcdef'), [Link('a', 'b'), Link('a', 'c'), Link('c', 'd')])
        assert hierarchy_layout(*args) == hierarchy_layout(*args)


class TestTreeLayout:
    """Test the tidy tree layout."""

    def test_empty(self):
        """Test no items."""
        assert tree_layout([], []) == {}

    def test_chain(self):
        """Test a single child inherits its parent's column."""
        positions = tree_layout(items('A', 'B', 'C'), [Link('A', 'B'), Link('B', 'C')])
        assert [positions[k].y for k in 'ABC'] == [0, 140, 280]
        assert positions['A'].x == positions['B'].x == positions['C'].x

    def test_parent_centered_over_children(self):
        """Test a parent sits at the mean x of its children."""
        positions = tree_layout(items('r', 'a', 'b'), [Link('r', 'a'), Link('r', 'b')])
        assert positions['a'] == Position(0, 140)
        assert positions['b'] == Position(220, 140)
        assert positions['r'] == Position(110, 0)

    def test_leaves_advance_cursor(self):
        """Test leaves of successive subtrees take successive columns."""
        positions = tree_layout(
            items('r', 'a', 'b', 'a1', 'a2', 'b1'),
            [Link('r', 'a'), Link('r', 'b'), Link('a', 'a1'), Link('a', 'a2'), Link('b', 'b1')]
        )
        assert positions['a1'].x == 0
        assert positions['a2'].x == 220
        assert positions['b1'].x == 440
        assert positions['a'].x == 110
        assert positions['b'].x == 440
        assert positions['r'].x == pytest.approx(275)

    def test_child_claimed_by_sibling(self):
        """Test a child laid out under an earlier sibling is not averaged in."""
        positions = tree_layout(
            items('a', 'b', 'c', 'd'),
            [Link('a', 'b'), Link('a', 'c'), Link('b', 'c'), Link('a', 'd')]
        )
        # c is placed under b; a averages b and d only
        assert positions['c'] == Position(0, 280)
        assert positions['b'] == Position(0, 140)
        assert positions['d'] == Position(220, 140)
        assert positions['a'] == Position(110, 0)

    def test_unreachable_items_appended(self):
        """Test items no root reaches follow on the top row."""
        positions = tree_layout(
            items('a', 'b', 'c', 'd'),
            [Link('a', 'b'), Link('c', 'd'), Link('d', 'c')]
        )
        assert positions['c'] == Position(220, 0)
        assert positions['d'] == Position(440, 0)

    def test_deep_chain(self):
        """Test chains deeper than the recursion limit."""
        positions = tree_layout(*chain(1500))
        assert len(positions) == 1500
        assert all(p.x == 0 for p in positions.values())

    def test_deterministic(self):
        """Test repeated calls agree."""
        args = (items(*range(8)), [Link(0, i) for i in range(1, 8)])
        assert tree_layout(*args) == tree_layout(*args)


class TestSpreadLayout:
    """Test the wide hierarchy."""

    def test_doubles_spacing(self):
        """Test spacing is twice the configured value."""
        positions = spread_layout(items('r', 'a', 'b'), [Link('r', 'a'), Link('r', 'b')])
        assert positions['a'] == Position(-220, 280)
        assert positions['b'] == Position(220, 280)

    def test_config_untouched(self):
        """Test the caller's config keeps its spacing."""
        spread_layout(*chain(3), DEFAULT_CONFIG)
        assert DEFAULT_CONFIG.node_spacing_x == 220
