"""
Shared fixtures for the geometry kernel tests.

Provides point sets with known triangle counts, literal rings from the
containment scenarios, and the feature collections used by the tag join.
"""

import numpy as np
import pytest

from common.types import Vertex
from geospatial.features import feature_collection, multi_polygon, point, polygon


# =============================================================================
# Triangulation point sets
# =============================================================================

HEXAGON_RADII = (10.0, 11.0, 9.5, 10.5, 10.0, 9.0)
HEXAGON_CENTER = (60.0, 40.0)
INTERIOR_RADIUS = 5.0


def _scattered_coords(num_interior=24, seed=7):
    """Irregular convex hexagon plus points scattered well inside it."""
    cx, cy = HEXAGON_CENTER
    angles = np.radians(15.0 + 60.0 * np.arange(6))
    hull = [
        (cx + r * np.cos(a), cy + r * np.sin(a))
        for r, a in zip(HEXAGON_RADII, angles)
    ]

    rng = np.random.default_rng(seed)
    radius = INTERIOR_RADIUS * np.sqrt(rng.uniform(0.0, 1.0, num_interior))
    theta = rng.uniform(0.0, 2 * np.pi, num_interior)
    interior = [
        (cx + r * np.cos(t), cy + r * np.sin(t))
        for r, t in zip(radius, theta)
    ]
    return [(float(x), float(y)) for x, y in hull + interior]


@pytest.fixture
def scattered_coords():
    """30 points in general position, 6 of them on the convex hull."""
    return _scattered_coords()


@pytest.fixture
def scattered_vertices(scattered_coords):
    return [Vertex(x, y, tag=i) for i, (x, y) in enumerate(scattered_coords)]


@pytest.fixture
def scattered_points(scattered_coords):
    """The scattered set as a Point FeatureCollection with elevations."""
    return feature_collection([
        point([x, y], {"elevation": 100 + i})
        for i, (x, y) in enumerate(scattered_coords)
    ])


@pytest.fixture
def convex_vertices():
    """Eight points on y = x**2; strictly convex and never cocircular."""
    xs = (0.2, 0.3, 0.45, 0.55, 0.7, 0.8, 0.9, 1.0)
    return [Vertex(x, x * x) for x in xs]


# =============================================================================
# Containment geometries
# =============================================================================

@pytest.fixture
def square_ring():
    return [(0, 0), (100, 0), (100, 100), (0, 100), (0, 0)]


@pytest.fixture
def concave_ring():
    return [(0, 0), (50, 50), (100, 50), (100, 100), (0, 100), (0, 0)]


OUTER_RING = [
    [-86.74, 36.19], [-86.66, 36.19], [-86.66, 36.23], [-86.74, 36.23], [-86.74, 36.19],
]
HOLE_RING = [
    [-86.70, 36.195], [-86.70, 36.215], [-86.68, 36.215], [-86.68, 36.195], [-86.70, 36.195],
]
SECOND_RING = [
    [-86.77, 36.17], [-86.745, 36.17], [-86.745, 36.19], [-86.77, 36.19], [-86.77, 36.17],
]

PT_IN_HOLE = (-86.69208526611328, 36.20373274711739)
PT_IN_POLY = (-86.72229766845702, 36.20258997094334)
PT_IN_SECOND = (-86.75079345703125, 36.18527313913089)
PT_OUTSIDE = (-86.75302505493164, 36.23015046460186)


@pytest.fixture
def poly_with_hole():
    return polygon([OUTER_RING, HOLE_RING])


@pytest.fixture
def multipoly_with_hole():
    return multi_polygon([[OUTER_RING, HOLE_RING], [SECOND_RING]])


@pytest.fixture
def hole_test_points():
    """Named probe points for the hole and multipolygon scenarios."""
    return {
        "in_hole": PT_IN_HOLE,
        "in_poly": PT_IN_POLY,
        "in_second": PT_IN_SECOND,
        "outside": PT_OUTSIDE,
    }

# =============================================================================
# Tag join collections
# =============================================================================

def _square(x0, y0, size):
    return [[x0, y0], [x0 + size, y0], [x0 + size, y0 + size], [x0, y0 + size], [x0, y0]]


@pytest.fixture
def tag_polygons():
    return feature_collection([
        polygon([_square(0, 0, 10)], {"polyID": 2}),
        polygon([_square(20, 0, 10)], {"polyID": 4}),
        polygon([_square(40, 0, 10), _square(43, 3, 4)], {"polyID": 7}),
    ])


@pytest.fixture
def tag_points():
    coords = [
        # polyID 2
        (1, 1), (5, 5), (9, 2),
        # polyID 4
        (21, 1), (25, 5), (29, 9), (22, 8), (28, 2), (24.5, 6.5),
        # polyID 7, outside its hole
        (41, 1),
        # inside the hole of polyID 7
        (45, 5),
        # outside everything
        (15, 5), (60, 60),
    ]
    return feature_collection([point(c, {"name": f"pt{i}"}) for i, c in enumerate(coords)])
