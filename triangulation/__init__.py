"""
Triangulation Module.

This module provides incremental Delaunay triangulation of scattered
points and its GeoJSON TIN surface.
"""

from triangulation.delaunay import (
    TinConfig,
    TriangulationStats,
    triangulate,
    dedup_edges,
)

from triangulation.tin import (
    tin,
    triangle_to_feature,
)

__all__ = [
    "TinConfig",
    "TriangulationStats",
    "triangulate",
    "dedup_edges",
    "tin",
    "triangle_to_feature",
]
