"""
Spatial Tag Join.

Copies a property from polygons onto the points they contain. Polygons are
scanned in input order and the first containing polygon wins; overlapping
polygons are resolved by that order, not treated as an error.

Complexity is O(points x polygons x ring size) with no spatial index. Each
polygon is evaluated against all still-untagged points at once through the
vectorized predicate, which gives the same first-match result as testing
every point against every polygon in turn.
"""

from typing import Any, Dict, List

import numpy as np

from common.logging_config import get_logger
from containment.polygon import points_inside
from geospatial.features import get_coord, get_properties

logger = get_logger(__name__)


def tag(
    points: Dict[str, Any],
    polygons: Dict[str, Any],
    field: str,
    out_field: str
) -> Dict[str, Any]:
    """Perform a spatial join of polygon properties onto points.

    Parameters
    ----------
    points : dict
        FeatureCollection of Point features. Modified in place.
    polygons : dict
        FeatureCollection of Polygon or MultiPolygon features.
    field : str
        Property in ``polygons`` to copy.
    out_field : str
        Property in ``points`` in which to store the copied value.

    Returns
    -------
    dict
        The same ``points`` collection. Points that already had
        ``out_field`` are left untouched; points inside no polygon are
        left without it.

    Raises
    ------
    InvalidGeometryTypeError
        If a polygon feature is not a Polygon or MultiPolygon.

    Examples
    --------
    >>> from geospatial.features import point, polygon, feature_collection
    >>> pts = feature_collection([point([-77, 44]), point([-77, 38])])
    >>> polys = feature_collection([
    ...     polygon([[[-81, 41], [-81, 47], [-72, 47], [-72, 41], [-81, 41]]], {"pop": 3000}),
    ...     polygon([[[-81, 35], [-81, 41], [-72, 41], [-72, 35], [-81, 35]]], {"pop": 1000}),
    ... ])
    >>> tagged = tag(pts, polys, "pop", "population")
    >>> [f["properties"]["population"] for f in tagged["features"]]
    [3000, 1000]
    """
    pending: List[Dict[str, Any]] = [
        feature for feature in points.get("features", [])
        if out_field not in (feature.get("properties") or {})
    ]

    num_candidates = len(pending)
    if pending:
        coords = np.array([get_coord(feature) for feature in pending], dtype=np.float64)
        xs, ys = coords[:, 0], coords[:, 1]

        for polygon in polygons.get("features", []):
            if not pending:
                break

            mask = points_inside(xs, ys, polygon)
            if not mask.any():
                continue

            value = (polygon.get("properties") or {}).get(field)
            for index in np.flatnonzero(mask):
                get_properties(pending[index])[out_field] = value

            # Tagged points are done; keep scanning only the rest
            keep = ~mask
            pending = [feature for feature, k in zip(pending, keep) if k]
            xs, ys = xs[keep], ys[keep]

    num_tagged = num_candidates - len(pending)
    logger.info(
        f"Tagged {num_tagged} of {num_candidates} candidate points with "
        f"'{out_field}' from polygon property '{field}'"
    )
    return points
