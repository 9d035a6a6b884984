"""
GeoJSON Feature Adapters.

The kernel exchanges data as plain GeoJSON-like mappings (the same dicts
``json.load`` produces for a ``.geojson`` file). This module is the thin
boundary between that representation and the kernel's own types:

- constructors for Point / Polygon / MultiPolygon features and
  FeatureCollections
- unwrapping of coordinates and geometries from features
- extraction of triangulation vertices from a point collection

Coordinates follow GeoJSON order: ``[x, y]``, i.e. ``[longitude, latitude]``
for geographic data.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from common.logging_config import get_logger
from common.types import Vertex

logger = get_logger(__name__)

Feature = Dict[str, Any]
FeatureCollection = Dict[str, Any]


def _feature(geometry: Dict[str, Any], properties: Optional[Mapping[str, Any]]) -> Feature:
    return {
        "type": "Feature",
        "properties": dict(properties) if properties else {},
        "geometry": geometry,
    }


def point(coordinates: Sequence[float], properties: Optional[Mapping[str, Any]] = None) -> Feature:
    """Create a Point feature.

    Parameters
    ----------
    coordinates : sequence of float
        ``[x, y]`` position.
    properties : mapping, optional
        Feature properties (copied).

    Returns
    -------
    dict
        GeoJSON Feature with a Point geometry.

    Raises
    ------
    ValueError
        If fewer than two ordinates are given.
    """
    if len(coordinates) < 2:
        raise ValueError(f"A position needs at least two ordinates, got {list(coordinates)}")
    return _feature(
        {"type": "Point", "coordinates": [float(c) for c in coordinates]},
        properties,
    )


def polygon(
    rings: Sequence[Sequence[Sequence[float]]],
    properties: Optional[Mapping[str, Any]] = None
) -> Feature:
    """Create a Polygon feature from an outer ring and optional holes.

    Parameters
    ----------
    rings : sequence of rings
        Outer ring first, then hole rings. Each ring must be closed
        (first position equal to last) and have at least four positions.
    properties : mapping, optional
        Feature properties (copied).

    Returns
    -------
    dict
        GeoJSON Feature with a Polygon geometry.

    Raises
    ------
    ValueError
        If a ring has fewer than four positions or is not closed.
    """
    for ring in rings:
        _check_ring(ring)
    return _feature(
        {"type": "Polygon", "coordinates": [[list(p) for p in ring] for ring in rings]},
        properties,
    )


def multi_polygon(
    polygons: Sequence[Sequence[Sequence[Sequence[float]]]],
    properties: Optional[Mapping[str, Any]] = None
) -> Feature:
    """Create a MultiPolygon feature.

    Parameters
    ----------
    polygons : sequence of polygons
        Each polygon is a sequence of rings as accepted by :func:`polygon`.
    properties : mapping, optional
        Feature properties (copied).

    Returns
    -------
    dict
        GeoJSON Feature with a MultiPolygon geometry.
    """
    for rings in polygons:
        for ring in rings:
            _check_ring(ring)
    return _feature(
        {
            "type": "MultiPolygon",
            "coordinates": [[[list(p) for p in ring] for ring in rings] for rings in polygons],
        },
        properties,
    )


def feature_collection(features: Sequence[Feature]) -> FeatureCollection:
    """Wrap features into a FeatureCollection."""
    return {"type": "FeatureCollection", "features": list(features)}


def _check_ring(ring: Sequence[Sequence[float]]) -> None:
    if len(ring) < 4:
        raise ValueError(
            f"Each ring of a polygon must have four or more positions, got {len(ring)}"
        )
    first, last = ring[0], ring[-1]
    if list(first[:2]) != list(last[:2]):
        raise ValueError("First and last positions of a ring are not equivalent")


def get_coord(obj: Any) -> List[float]:
    """Unwrap a coordinate from a Point feature, a Point geometry, or a pair.

    Parameters
    ----------
    obj : Any
        A GeoJSON Feature with a Point geometry, a Point geometry mapping,
        or a bare ``(x, y)`` sequence.

    Returns
    -------
    list of float
        ``[x, y]``.

    Raises
    ------
    ValueError
        If no coordinate can be extracted.
    """
    if isinstance(obj, Mapping):
        geometry = obj.get("geometry") if obj.get("type") == "Feature" else obj
        if isinstance(geometry, Mapping) and geometry.get("type") == "Point":
            coords = geometry.get("coordinates")
            if coords is not None and len(coords) >= 2:
                return [float(coords[0]), float(coords[1])]
    elif isinstance(obj, Sequence) and not isinstance(obj, str):
        if len(obj) >= 2 and all(isinstance(c, (int, float)) for c in obj[:2]):
            return [float(obj[0]), float(obj[1])]

    raise ValueError("A coordinate, feature, or point geometry is required")


def get_geometry(obj: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the geometry mapping of a Feature, or the mapping itself.

    Raises
    ------
    ValueError
        If a Feature carries no geometry.
    """
    if obj.get("type") == "Feature":
        geometry = obj.get("geometry")
        if geometry is None:
            raise ValueError("Feature has no geometry")
        return geometry
    return obj


def get_properties(feature: Dict[str, Any]) -> Dict[str, Any]:
    """Return a feature's properties dict, creating an empty one if absent."""
    properties = feature.get("properties")
    if properties is None:
        properties = {}
        feature["properties"] = properties
    return properties


def vertices_from_points(points: Mapping[str, Any], z: Optional[str] = None) -> List[Vertex]:
    """Build triangulation vertices from a Point FeatureCollection.

    Parameters
    ----------
    points : dict
        FeatureCollection of Point features.
    z : str, optional
        Property name whose value becomes each vertex's tag. Points
        without the property (or every point, when ``z`` is None) get a
        ``None`` tag.

    Returns
    -------
    list of Vertex
        One input vertex per feature, in collection order.
    """
    vertices = []
    for feature in points.get("features", []):
        x, y = get_coord(feature)
        tag = None
        if z is not None:
            tag = (feature.get("properties") or {}).get(z)
        vertices.append(Vertex(x, y, tag))

    logger.debug(f"Extracted {len(vertices)} vertices (tag property: {z!r})")
    return vertices
