"""
Layout configuration.

This module provides the immutable LayoutConfig shared by every layout
strategy, the overlap resolver and the fit calculator.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace, asdict
from typing import Any, Mapping
import logging
import math

logger = logging.getLogger(__name__)


# Ring and tier radii are tuned for this average spacing
SPACING_REFERENCE = 180.0

_CAMEL_KEYS = {
    'nodeWidth': 'node_width',
    'nodeHeight': 'node_height',
    'nodeSpacingX': 'node_spacing_x',
    'nodeSpacingY': 'node_spacing_y',
    'minNodePadding': 'min_node_padding',
    'fitPadding': 'fit_padding',
    'minZoom': 'min_zoom',
    'maxZoom': 'max_zoom',
    'fitMaxZoom': 'fit_max_zoom',
}

_PADDING_FIELDS = ('min_node_padding', 'fit_padding')


@dataclass(frozen=True)
class LayoutConfig:
    """
    Node geometry, spacing and zoom limits for a layout call.

    Attributes:
        node_width: Width of every node's bounding box
        node_height: Height of every node's bounding box
        node_spacing_x: Horizontal distance between neighbouring nodes
        node_spacing_y: Vertical distance between levels
        min_node_padding: Extra gap the overlap resolver keeps between boxes
        fit_padding: Margin around the content when fitting to a viewport
        min_zoom: Lowest zoom the viewport allows
        max_zoom: Highest zoom the user may zoom in to
        fit_max_zoom: Highest zoom fit-to-view will pick
    """
    node_width: float = 160.0
    node_height: float = 80.0
    node_spacing_x: float = 220.0
    node_spacing_y: float = 140.0
    min_node_padding: float = 20.0
    fit_padding: float = 100.0
    min_zoom: float = 0.1
    max_zoom: float = 5.0
    fit_max_zoom: float = 1.5

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{f.name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value!r}")
            if f.name in _PADDING_FIELDS:
                if value < 0:
                    raise ValueError(f"{f.name} must be >= 0, got {value!r}")
            elif value <= 0:
                raise ValueError(f"{f.name} must be > 0, got {value!r}")

        if self.min_zoom > self.fit_max_zoom:
            raise ValueError(
                f"min_zoom ({self.min_zoom}) exceeds fit_max_zoom ({self.fit_max_zoom})"
            )
        if self.min_zoom > self.max_zoom:
            raise ValueError(
                f"min_zoom ({self.min_zoom}) exceeds max_zoom ({self.max_zoom})"
            )

    @property
    def spacing_factor(self) -> float:
        """Ratio of the average node spacing to the reference spacing."""
        return (self.node_spacing_x + self.node_spacing_y) / 2 / SPACING_REFERENCE

    def scaled(self, factor_x: float, factor_y: float) -> LayoutConfig:
        """
        Derive a config with multiplied node spacing.

        Args:
            factor_x: Multiplier for node_spacing_x
            factor_y: Multiplier for node_spacing_y

        Returns:
            A new config; this one is left untouched
        """
        return replace(
            self,
            node_spacing_x=self.node_spacing_x * factor_x,
            node_spacing_y=self.node_spacing_y * factor_y
        )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> LayoutConfig:
        """
        Build a config from a dict of settings.

        Keys may be snake_case field names or their camelCase spelling
        (``nodeWidth``, ``fitMaxZoom``...). Missing keys take the defaults,
        unknown keys are ignored.

        Args:
            mapping: Settings to apply

        Returns:
            The validated config
        """
        names = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in names:
                kwargs[name] = value
            else:
                logger.debug("Ignoring unknown layout setting %r", key)
        return cls(**kwargs)

    def to_dict(self, camel_case: bool = False) -> dict[str, float]:
        """Return the settings as a plain dict."""
        data = asdict(self)
        if not camel_case:
            return data
        snake_to_camel = {v: k for k, v in _CAMEL_KEYS.items()}
        return {snake_to_camel[k]: v for k, v in data.items()}


DEFAULT_CONFIG = LayoutConfig()
