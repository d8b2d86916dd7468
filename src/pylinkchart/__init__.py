"""
PyLinkChart: layout engine for link-analysis charts

Positions the items of a link chart with one of several layout strategies,
removes box overlaps, and computes a fit-to-view transform.
"""

__version__ = "0.1.0"

from .config import LayoutConfig, DEFAULT_CONFIG
from .geom import Position, Bounds, positions_to_dict
from .graph import Item, Link, Graph
from .overlap import resolve_overlaps, relax_overlaps, find_overlaps, MAX_OVERLAP_PASSES
from .fit import FitParams, calculate_fit_params, bounding_box, clamp_zoom
from .hierarchy import hierarchy_layout, tree_layout, spread_layout
from .radial import (
    circular_layout,
    grouped_layout,
    peacock_layout,
    compact_peacock_layout,
    star_layout
)
from .force import force_layout
from .grid import grid_layout
from .timeline import timeline_layout
from .registry import (
    LAYOUT_NAMES,
    get_layout_function,
    apply_layout,
    is_deterministic
)

__all__ = [
    'LayoutConfig', 'DEFAULT_CONFIG',
    'Position', 'Bounds', 'positions_to_dict',
    'Item', 'Link', 'Graph',
    'resolve_overlaps', 'relax_overlaps', 'find_overlaps', 'MAX_OVERLAP_PASSES',
    'FitParams', 'calculate_fit_params', 'bounding_box', 'clamp_zoom',
    'hierarchy_layout', 'tree_layout', 'spread_layout',
    'circular_layout', 'grouped_layout', 'peacock_layout',
    'compact_peacock_layout', 'star_layout',
    'force_layout', 'grid_layout', 'timeline_layout',
    'LAYOUT_NAMES', 'get_layout_function', 'apply_layout', 'is_deterministic',
]
