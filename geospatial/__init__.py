"""
Geospatial Module for the Geometry Kernel.

This module provides:
- GeoJSON feature constructors and unwrapping helpers
- Vertex extraction from point collections
- Geodesic distances on the WGS84 ellipsoid
"""

from geospatial.features import (
    point,
    polygon,
    multi_polygon,
    feature_collection,
    get_coord,
    get_geometry,
    get_properties,
    vertices_from_points,
)

from geospatial.distance_calculations import (
    geodesic_distance,
    geodesic_distance_batch,
)

__all__ = [
    # Features
    "point",
    "polygon",
    "multi_polygon",
    "feature_collection",
    "get_coord",
    "get_geometry",
    "get_properties",
    "vertices_from_points",
    # Distance calculations
    "geodesic_distance",
    "geodesic_distance_batch",
]
