"""
Triangulated Irregular Network (TIN) Features.

Turns a Point FeatureCollection into a FeatureCollection of triangle
Polygons. These are often used for developing elevation contour maps or
stepped heat visualizations.

Each output triangle carries the tag of each of its corners under the
properties ``a``, ``b`` and ``c`` (in ring order), taken from the point
property named by ``z``.
"""

from typing import Any, Dict, List, Mapping, Optional

from common.logging_config import get_logger
from common.types import Triangle
from geospatial.features import feature_collection, vertices_from_points
from triangulation.delaunay import TinConfig, TriangulationStats, triangulate

logger = get_logger(__name__)


def triangle_to_feature(triangle: Triangle, config: Optional[TinConfig] = None) -> Dict[str, Any]:
    """Convert a triangle into a closed-ring Polygon feature.

    Parameters
    ----------
    triangle : Triangle
        A finished triangle.
    config : TinConfig, optional
        Supplies the corner property names.

    Returns
    -------
    dict
        GeoJSON Feature whose ring is ``[a, b, c, a]``.
    """
    config = config or TinConfig()
    a, b, c = triangle.vertices
    name_a, name_b, name_c = config.corner_properties
    return {
        "type": "Feature",
        "properties": {name_a: a.tag, name_b: b.tag, name_c: c.tag},
        "geometry": {
            "type": "Polygon",
            "coordinates": [[
                [a.x, a.y],
                [b.x, b.y],
                [c.x, c.y],
                [a.x, a.y],
            ]],
        },
    }


def tin(
    points: Mapping[str, Any],
    z: Optional[str] = None,
    config: Optional[TinConfig] = None
) -> Dict[str, Any]:
    """Create a TIN from a set of points.

    Parameters
    ----------
    points : dict
        FeatureCollection of Point features.
    z : str, optional
        Name of the property from which to pull corner values. If not
        given, every corner value is None.
    config : TinConfig, optional
        Triangulation tolerances and output property names.

    Returns
    -------
    dict
        FeatureCollection of Polygon features, one per triangle.

    Examples
    --------
    >>> from geospatial.features import point, feature_collection
    >>> pts = feature_collection([
    ...     point([0, 0], {"elevation": 1}),
    ...     point([4, 0], {"elevation": 2}),
    ...     point([0, 3], {"elevation": 3}),
    ... ])
    >>> result = tin(pts, "elevation")
    >>> len(result["features"])
    1
    >>> sorted(result["features"][0]["properties"].values())
    [1, 2, 3]
    """
    config = config or TinConfig()
    vertices = vertices_from_points(points, z)

    stats = TriangulationStats()
    triangles: List[Triangle] = triangulate(vertices, config, stats)

    features = [triangle_to_feature(t, config) for t in triangles]

    logger.debug(
        f"TIN built: {len(vertices)} points -> {len(features)} triangles"
    )
    return feature_collection(features)
