"""
Layout lookup by name.

Names are matched case-insensitively with underscores and hyphens
ignored, so ``compactPeacock``, ``compact_peacock`` and
``compact-peacock`` select the same strategy. Unknown names fall back to
the hierarchy layout.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping, Optional
import logging

import numpy as np

from .config import LayoutConfig, DEFAULT_CONFIG
from .force import force_layout
from .geom import PositionMap
from .grid import grid_layout
from .hierarchy import hierarchy_layout, tree_layout, spread_layout
from .radial import (
    circular_layout,
    grouped_layout,
    peacock_layout,
    compact_peacock_layout,
    star_layout
)
from .timeline import timeline_layout

logger = logging.getLogger(__name__)


LayoutFunction = Callable[[Iterable[Any], Iterable[Any], LayoutConfig], PositionMap]

DEFAULT_LAYOUT = 'hierarchy'

# Canonical names, in menu order
LAYOUT_NAMES: tuple[str, ...] = (
    'hierarchy',
    'circular',
    'grouped',
    'peacock',
    'compactPeacock',
    'grid',
    'force',
    'timeline',
    'star',
    'tree',
    'spread',
)

# Layouts whose output depends on a random source
RANDOMIZED_LAYOUTS = frozenset({'force'})


def _normalize(name: str) -> str:
    return name.replace('_', '').replace('-', '').lower()


LAYOUTS: Mapping[str, LayoutFunction] = MappingProxyType({
    _normalize(name): func for name, func in zip(LAYOUT_NAMES, (
        hierarchy_layout,
        circular_layout,
        grouped_layout,
        peacock_layout,
        compact_peacock_layout,
        grid_layout,
        force_layout,
        timeline_layout,
        star_layout,
        tree_layout,
        spread_layout,
    ))
})


def canonical_name(name: Optional[str]) -> str:
    """
    Resolve a layout name to its canonical spelling.

    Args:
        name: Any accepted spelling; None and non-strings count as unknown

    Returns:
        Entry of LAYOUT_NAMES; DEFAULT_LAYOUT for unknown names
    """
    if isinstance(name, str) and name:
        key = _normalize(name)
        for canonical in LAYOUT_NAMES:
            if _normalize(canonical) == key:
                return canonical
    logger.debug("Unknown layout %r, using %s", name, DEFAULT_LAYOUT)
    return DEFAULT_LAYOUT


def get_layout_function(name: Optional[str]) -> LayoutFunction:
    """
    Get the strategy registered under name.

    Never fails: unknown, empty or missing names give the hierarchy layout.
    """
    return LAYOUTS[_normalize(canonical_name(name))]


def is_deterministic(name: Optional[str]) -> bool:
    """Check whether a layout always gives the same output for the same input."""
    return canonical_name(name) not in RANDOMIZED_LAYOUTS


def apply_layout(
    name: Optional[str],
    items: Iterable[Any],
    links: Iterable[Any],
    config: LayoutConfig = DEFAULT_CONFIG,
    rng: Optional[np.random.Generator] = None
) -> PositionMap:
    """
    Run the layout registered under name.

    Args:
        name: Layout name, see LAYOUT_NAMES
        items: Items to place
        links: Links between items
        config: Layout configuration
        rng: Random source, used only by randomized layouts

    Returns:
        Map from item id to Position
    """
    canonical = canonical_name(name)
    func = LAYOUTS[_normalize(canonical)]
    if canonical in RANDOMIZED_LAYOUTS:
        return func(items, links, config, rng=rng)
    return func(items, links, config)
