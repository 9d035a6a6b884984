"""
Geodesic Distance Calculations on the WGS84 Ellipsoid.

This module provides the distance measure used to rank candidate points
(see :mod:`classification.nearest`). Distances are geodesic, i.e. the
shortest path on the reference ellipsoid, and valid for any separation.

Implementation
--------------
This module wraps the `pyproj` library, which uses the GeographicLib
algorithms by Charles Karney. These provide:
- Full double precision accuracy (better than 15 nm)
- Convergence for all point configurations including antipodal
- Numerical stability at all latitudes

Positions are GeoJSON ordered ``[longitude, latitude]`` in degrees.

References
----------
- Karney, C.F.F. (2013). Algorithms for geodesics. Journal of Geodesy, 87(1), 43-55.
- GeographicLib: https://geographiclib.sourceforge.io/
"""

from typing import Sequence
import numpy as np
from numpy.typing import NDArray

from pyproj import Geod

from common.constants import GeometryConstants
from common.units import convert_length


# Create the geodesic calculator for the reference ellipsoid
_geod = Geod(ellps=GeometryConstants.REFERENCE_ELLIPSOID)


def geodesic_distance(
    origin: Sequence[float],
    destination: Sequence[float],
    units: str = "kilometers"
) -> float:
    """Compute the geodesic distance between two positions.

    Parameters
    ----------
    origin, destination : sequence of float
        ``[longitude, latitude]`` in degrees.
    units : str
        Any pint length unit ('meters', 'kilometers', 'miles', ...).

    Returns
    -------
    float
        Distance in the requested units.

    Raises
    ------
    ValueError
        If ``units`` is not a length unit.

    Examples
    --------
    >>> d = geodesic_distance([0.0, 0.0], [1.0, 0.0], units="meters")
    >>> print(f"{d:.1f}")
    111319.5
    """
    _, _, distance_m = _geod.inv(origin[0], origin[1], destination[0], destination[1])
    return convert_length(float(distance_m), units)


def geodesic_distance_batch(
    origin: Sequence[float],
    lons: NDArray[np.float64],
    lats: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Compute geodesic distances from one position to many.

    This is the vectorized version for efficient batch processing.

    Parameters
    ----------
    origin : sequence of float
        ``[longitude, latitude]`` in degrees.
    lons, lats : ndarray
        Target longitudes and latitudes in degrees, same shape.

    Returns
    -------
    ndarray
        Geodesic distances in meters.
    """
    lons = np.asarray(lons, dtype=np.float64)
    lats = np.asarray(lats, dtype=np.float64)

    origin_lons = np.full_like(lons, float(origin[0]))
    origin_lats = np.full_like(lats, float(origin[1]))

    _, _, distances = _geod.inv(origin_lons, origin_lats, lons, lats)

    return np.asarray(distances, dtype=np.float64)
