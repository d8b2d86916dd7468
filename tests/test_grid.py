"""Tests for grid layout."""

import pytest
from pylinkchart.config import LayoutConfig
from pylinkchart.geom import Position
from pylinkchart.graph import Item
from pylinkchart.grid import grid_layout


class TestGridLayout:
    """Test the square grid."""

    def test_empty(self):
        """Test no items."""
        assert grid_layout([], []) == {}

    def test_single_item(self):
        """Test a lone item at the origin."""
        assert grid_layout([Item('a')], []) == {'a': Position(0, 0)}

    def test_two_by_two(self):
        """Test four items form a grid symmetric about x = 0."""
        positions = grid_layout([Item(i) for i in range(4)], [])
        assert positions[0] == Position(-110, 0)
        assert positions[1] == Position(110, 0)
        assert positions[2] == Position(-110, 140)
        assert positions[3] == Position(110, 140)

    def test_column_count(self):
        """Test five items use three columns."""
        positions = grid_layout([Item(i) for i in range(5)], [])
        assert [positions[i].x for i in range(3)] == [-220, 0, 220]
        assert positions[3] == Position(-220, 140)
        assert positions[4] == Position(0, 140)

    def test_custom_spacing(self):
        """Test spacing from the config."""
        config = LayoutConfig(node_spacing_x=300, node_spacing_y=200)
        positions = grid_layout([Item(i) for i in range(4)], [], config)
        assert positions[3] == Position(150, 200)

    def test_dict_items(self):
        """Test items given as dicts."""
        positions = grid_layout([{'id': 'x'}, {'id': 'y'}], [{'from': 'x', 'to': 'y'}])
        assert positions['x'] == Position(-110, 0)
        assert positions['y'] == Position(110, 0)
