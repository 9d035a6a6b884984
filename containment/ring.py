"""
Point-in-Ring Predicate (even-odd ray casting).

Casts a horizontal ray from the test point towards +x and counts crossings
with the ring's edges; an odd count means inside. Works for convex and
concave rings and either winding direction.

Boundary Behaviour
------------------
Points exactly on an edge or vertex get whatever the crossing formula
yields; no special case is applied. For an axis-aligned rectangle this
means points on the left and bottom edges test inside while points on the
right and top edges test outside.

Reference:
    W. Randolph Franklin, "PNPOLY - Point Inclusion in Polygon Test"
    https://wrfranklin.org/Research/Short_Notes/pnpoly.html
"""

import numpy as np
from numpy.typing import NDArray

from common.types import Position, Ring


def point_in_ring(point: Position, ring: Ring) -> bool:
    """Run the ray-casting test for a single ring.

    Parameters
    ----------
    point : (x, y)
        Test position.
    ring : sequence of (x, y)
        Closed ring (first position equal to last).

    Returns
    -------
    bool
        True if the ray crosses the ring an odd number of times.
    """
    px, py = point[0], point[1]
    inside = False
    n = len(ring)

    # Iterate over each edge (ring[i], ring[j])
    j = n - 1
    for i in range(n):
        xi, yi = ring[i][0], ring[i][1]
        xj, yj = ring[j][0], ring[j][1]

        if ((yi > py) != (yj > py)) and (px < (xj - xi) * (py - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def points_in_ring(
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    ring: Ring
) -> NDArray[np.bool_]:
    """Vectorized ray-casting test of many points against one ring.

    Evaluates exactly the same crossing expression as
    :func:`point_in_ring`, element-wise, so both functions agree on every
    point including boundary cases.

    Parameters
    ----------
    xs, ys : ndarray
        Test coordinates, same shape.
    ring : sequence of (x, y)
        Closed ring.

    Returns
    -------
    ndarray of bool
        Containment mask with the shape of ``xs``.
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    inside = np.zeros(xs.shape, dtype=bool)

    coords = np.asarray([(p[0], p[1]) for p in ring], dtype=np.float64)
    n = len(coords)
    if n == 0:
        return inside

    j = n - 1
    # Horizontal edges divide by zero; the straddle test masks them out
    with np.errstate(divide='ignore', invalid='ignore'):
        for i in range(n):
            xi, yi = coords[i]
            xj, yj = coords[j]

            straddles = (yi > ys) != (yj > ys)
            crosses = xs < (xj - xi) * (ys - yi) / (yj - yi) + xi
            inside ^= straddles & crosses

            j = i

    return inside
