"""Tests for fit-to-view calculation."""

import pytest
from pylinkchart.config import LayoutConfig, DEFAULT_CONFIG
from pylinkchart.geom import Position
from pylinkchart.fit import FitParams, bounding_box, calculate_fit_params, clamp_zoom


class TestBoundingBox:
    """Test content bounds."""

    def test_empty(self):
        """Test empty map has no bounds."""
        assert bounding_box({}) is None

    def test_includes_node_size(self):
        """Test bounds cover whole node boxes."""
        bounds = bounding_box({'a': Position(-100, 0), 'b': Position(200, 50)})
        assert bounds.min_x == -100
        assert bounds.min_y == 0
        assert bounds.max_x == 360
        assert bounds.max_y == 130


class TestCalculateFitParams:
    """Test zoom and pan selection."""

    def test_empty(self):
        """Test identity transform for an empty layout."""
        assert calculate_fit_params({}, 800, 600) == FitParams(1.0, 0.0, 0.0)

    def test_single_node_clamps_high(self):
        """Test small content is not zoomed past fit_max_zoom."""
        fit = calculate_fit_params({'a': Position(0, 0)}, 1000, 1000, DEFAULT_CONFIG)
        assert fit.zoom == DEFAULT_CONFIG.fit_max_zoom
        assert fit.pan_x == pytest.approx(500 - 80 * 1.5)
        assert fit.pan_y == pytest.approx(500 - 40 * 1.5)

    def test_large_content_clamps_low(self):
        """Test huge content stops at min_zoom."""
        positions = {'a': Position(0, 0), 'b': Position(10000, 0)}
        fit = calculate_fit_params(positions, 1000, 1000)
        assert fit.zoom == DEFAULT_CONFIG.min_zoom

    def test_zoom_from_tighter_axis(self):
        """Test zoom follows the axis needing the most shrink."""
        positions = {'a': Position(0, 0), 'b': Position(1840, 0)}
        # content 2000 x 80, padded 2200 x 280
        fit = calculate_fit_params(positions, 1100, 1000)
        assert fit.zoom == pytest.approx(0.5)
        assert fit.pan_x == pytest.approx(550 - 1000 * 0.5)
        assert fit.pan_y == pytest.approx(500 - 40 * 0.5)

    def test_centers_content(self):
        """Test the content center lands on the viewport center."""
        positions = {'a': Position(-300, -200), 'b': Position(500, 400)}
        fit = calculate_fit_params(positions, 1200, 900)
        bounds = bounding_box(positions)
        assert bounds.cx() * fit.zoom + fit.pan_x == pytest.approx(600)
        assert bounds.cy() * fit.zoom + fit.pan_y == pytest.approx(450)

    @pytest.mark.parametrize('width,height', [(1, 1), (300, 5000), (5000, 300), (1e6, 1e6)])
    def test_zoom_in_range(self, width, height):
        """Test zoom stays within [min_zoom, fit_max_zoom]."""
        positions = {i: Position(i * 400, i * 90) for i in range(8)}
        fit = calculate_fit_params(positions, width, height)
        assert DEFAULT_CONFIG.min_zoom <= fit.zoom <= DEFAULT_CONFIG.fit_max_zoom

    def test_custom_padding(self):
        """Test fit padding enters the scale."""
        config = LayoutConfig(fit_padding=0, fit_max_zoom=5)
        fit = calculate_fit_params({'a': Position(0, 0)}, 320, 800, config)
        assert fit.zoom == pytest.approx(2.0)


class TestClampZoom:
    """Test interactive zoom limits."""

    def test_clamp(self):
        """Test values are limited to [min_zoom, max_zoom]."""
        assert clamp_zoom(10) == DEFAULT_CONFIG.max_zoom
        assert clamp_zoom(0.01) == DEFAULT_CONFIG.min_zoom
        assert clamp_zoom(2) == 2
