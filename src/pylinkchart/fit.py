"""
Fit-to-view calculation.

Computes the zoom and pan that frame a computed layout inside a viewport
of a given size.
"""

from __future__ import annotations

from typing import NamedTuple, Optional
import numpy as np

from .config import LayoutConfig, DEFAULT_CONFIG
from .geom import Bounds, PositionMap


class FitParams(NamedTuple):
    """Viewport transform: screen = world * zoom + pan."""
    zoom: float
    pan_x: float
    pan_y: float


def bounding_box(
    positions: PositionMap,
    config: LayoutConfig = DEFAULT_CONFIG
) -> Optional[Bounds]:
    """
    Get the rectangle enclosing every node box.

    Args:
        positions: Map from item id to top-left Position
        config: Supplies node size

    Returns:
        The enclosing Bounds, or None for an empty map
    """
    if not positions:
        return None
    coords = np.array([(p.x, p.y) for p in positions.values()], dtype=float)
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)
    return Bounds(
        float(min_x),
        float(min_y),
        float(max_x) + config.node_width,
        float(max_y) + config.node_height
    )


def calculate_fit_params(
    positions: PositionMap,
    container_width: float,
    container_height: float,
    config: LayoutConfig = DEFAULT_CONFIG
) -> FitParams:
    """
    Compute the zoom and pan that center a layout in a viewport.

    The content box is padded by ``config.fit_padding`` on each side. The
    zoom is the tighter of the two axis scales, clamped to
    ``[config.min_zoom, config.fit_max_zoom]`` so small graphs are not
    blown up.

    Args:
        positions: Map from item id to top-left Position
        container_width: Viewport width
        container_height: Viewport height
        config: Supplies node size, padding and zoom limits

    Returns:
        FitParams; (1, 0, 0) when there is nothing to fit
    """
    bounds = bounding_box(positions, config)
    if bounds is None:
        return FitParams(1.0, 0.0, 0.0)

    padded = bounds.inflate(config.fit_padding)
    scale_x = container_width / padded.width
    scale_y = container_height / padded.height
    zoom = max(config.min_zoom, min(scale_x, scale_y, config.fit_max_zoom))

    pan_x = container_width / 2 - bounds.cx() * zoom
    pan_y = container_height / 2 - bounds.cy() * zoom
    return FitParams(zoom, pan_x, pan_y)


def clamp_zoom(zoom: float, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    """Limit a user-requested zoom to ``[config.min_zoom, config.max_zoom]``."""
    return max(config.min_zoom, min(zoom, config.max_zoom))
