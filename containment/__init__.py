"""
Containment Module.

This module provides point-in-polygon predicates supporting concave rings,
holes and multipolygons, in scalar and vectorized forms.
"""

from containment.ring import (
    point_in_ring,
    points_in_ring,
)

from containment.polygon import (
    inside,
    points_inside,
    point_in_polygon,
    point_in_multipolygon,
)

__all__ = [
    "point_in_ring",
    "points_in_ring",
    "inside",
    "points_inside",
    "point_in_polygon",
    "point_in_multipolygon",
]
