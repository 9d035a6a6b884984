"""
Polygon and MultiPolygon Containment.

Composes the ring predicate over an outer ring and its holes: a point is
inside a polygon when it is inside the outer ring and inside none of the
holes, and inside a multipolygon when it is inside any constituent polygon.
Polygons may be convex or concave.
"""

from typing import Any, Mapping, Tuple

import numpy as np
from numpy.typing import NDArray

from common.exceptions import InvalidGeometryTypeError
from common.types import MultiPolygonCoordinates, PolygonCoordinates, Position
from containment.ring import point_in_ring, points_in_ring
from geospatial.features import get_coord, get_geometry

POLYGONAL_TYPES = ("Polygon", "MultiPolygon")


def point_in_polygon(point: Position, rings: PolygonCoordinates) -> bool:
    """Test a point against one polygon given as rings.

    Parameters
    ----------
    point : (x, y)
        Test position.
    rings : sequence of rings
        Outer ring first, then holes.

    Returns
    -------
    bool
        True if inside the outer ring and outside every hole.
    """
    if not rings or not point_in_ring(point, rings[0]):
        return False
    return not any(point_in_ring(point, hole) for hole in rings[1:])


def point_in_multipolygon(point: Position, polygons: MultiPolygonCoordinates) -> bool:
    """Test a point against several polygons; the first match wins."""
    return any(point_in_polygon(point, rings) for rings in polygons)


def _polygonal_coordinates(polygon: Mapping[str, Any]) -> Tuple[str, Any]:
    """Return (type, coordinates) of a Polygon/MultiPolygon feature or geometry."""
    geometry = get_geometry(polygon)
    geometry_type = geometry.get("type")
    if geometry_type not in POLYGONAL_TYPES:
        raise InvalidGeometryTypeError(geometry_type)
    return geometry_type, geometry.get("coordinates") or []


def inside(point: Any, polygon: Mapping[str, Any]) -> bool:
    """Determine whether a point resides inside a Polygon or MultiPolygon.

    Parameters
    ----------
    point : Feature, Point geometry, or (x, y)
        The test point.
    polygon : Feature or geometry mapping
        A Polygon or MultiPolygon, as a Feature or a bare geometry.

    Returns
    -------
    bool
        True if the point is inside the polygon (and not in a hole).

    Raises
    ------
    InvalidGeometryTypeError
        If ``polygon`` is neither a Polygon nor a MultiPolygon.
    ValueError
        If no coordinate can be read from ``point``.

    Examples
    --------
    >>> from geospatial.features import point, polygon
    >>> poly = polygon([[[-81, 41], [-81, 47], [-72, 47], [-72, 41], [-81, 41]]])
    >>> inside(point([-77, 44]), poly)
    True
    """
    geometry_type, coordinates = _polygonal_coordinates(polygon)
    pt = get_coord(point)

    if geometry_type == "Polygon":
        return point_in_polygon(pt, coordinates)
    return point_in_multipolygon(pt, coordinates)


def points_inside(
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    polygon: Mapping[str, Any]
) -> NDArray[np.bool_]:
    """Vectorized :func:`inside` for many points against one polygon.

    Parameters
    ----------
    xs, ys : ndarray
        Test coordinates, same shape.
    polygon : Feature or geometry mapping
        A Polygon or MultiPolygon.

    Returns
    -------
    ndarray of bool
        Containment mask.

    Raises
    ------
    InvalidGeometryTypeError
        If ``polygon`` is neither a Polygon nor a MultiPolygon.
    """
    geometry_type, coordinates = _polygonal_coordinates(polygon)
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)

    polygons = [coordinates] if geometry_type == "Polygon" else coordinates

    result = np.zeros(xs.shape, dtype=bool)
    for rings in polygons:
        if not rings:
            continue
        mask = points_in_ring(xs, ys, rings[0])
        for hole in rings[1:]:
            mask &= ~points_in_ring(xs, ys, hole)
        result |= mask

    return result
