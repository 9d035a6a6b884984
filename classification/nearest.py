"""
Nearest-Point Classification.

Finds the point of a collection closest to a reference point. The
calculation is geodesic (WGS84 ellipsoid), so inputs are GeoJSON
``[longitude, latitude]`` positions in degrees.
"""

from typing import Any, Dict, Mapping, Optional

import numpy as np

from common.logging_config import get_logger
from geospatial.distance_calculations import geodesic_distance_batch
from geospatial.features import get_coord

logger = get_logger(__name__)


def nearest(target: Any, points: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """Return the point feature closest to ``target``.

    Parameters
    ----------
    target : Feature, Point geometry, or (lon, lat)
        The reference point.
    points : dict
        FeatureCollection of Point features to search.

    Returns
    -------
    dict or None
        The closest feature (the same object as in ``points``), the first
        one on ties, or None if the collection is empty.

    Examples
    --------
    >>> from geospatial.features import point, feature_collection
    >>> against = feature_collection([
    ...     point([28.973865, 41.011122]),
    ...     point([28.948459, 41.024204]),
    ...     point([28.938674, 41.013324]),
    ... ])
    >>> nearest(point([28.965797, 41.010086]), against)["geometry"]["coordinates"]
    [28.973865, 41.011122]
    """
    features = points.get("features", [])
    if not features:
        return None

    origin = get_coord(target)
    coords = np.array([get_coord(feature) for feature in features], dtype=np.float64)

    distances = geodesic_distance_batch(origin, coords[:, 0], coords[:, 1])
    # argmin returns the first index on ties
    index = int(np.argmin(distances))

    logger.debug(
        f"Nearest of {len(features)} points to {origin}: index {index} "
        f"at {distances[index]:.1f} m"
    )
    return features[index]
