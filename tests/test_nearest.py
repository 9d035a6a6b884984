import numpy as np
import pytest

from classification.nearest import nearest
from geospatial.distance_calculations import geodesic_distance, geodesic_distance_batch
from geospatial.features import feature_collection, point
from common.units import convert_length

ISTANBUL_TARGET = [28.965797, 41.010086]
ISTANBUL_POINTS = [
    [28.973865, 41.011122],
    [28.948459, 41.024204],
    [28.938674, 41.013324],
]

# One degree of longitude along the WGS84 equator
EQUATOR_DEGREE_M = 111319.49079327357


def test_nearest_point():
    against = feature_collection([point(c, {"rank": i}) for i, c in enumerate(ISTANBUL_POINTS)])

    found = nearest(point(ISTANBUL_TARGET), against)

    assert found["geometry"]["coordinates"] == [28.973865, 41.011122]
    assert found is against["features"][0]


def test_nearest_accepts_bare_target():
    against = feature_collection([point(c) for c in ISTANBUL_POINTS])
    assert nearest(tuple(ISTANBUL_TARGET), against) is against["features"][0]


def test_nearest_empty_collection():
    assert nearest(point([0, 0]), feature_collection([])) is None


def test_nearest_ties_keep_first():
    against = feature_collection([
        point([5, 5], {"id": "far"}),
        point([1, 1], {"id": "first"}),
        point([1, 1], {"id": "second"}),
    ])
    assert nearest([0, 0], against)["properties"]["id"] == "first"


@pytest.mark.parametrize("units, expected", [
    ("meters", EQUATOR_DEGREE_M),
    ("kilometers", EQUATOR_DEGREE_M / 1000.0),
    ("miles", EQUATOR_DEGREE_M / 1609.344),
])
def test_geodesic_distance_units(units, expected):
    assert geodesic_distance([0, 0], [1, 0], units=units) == pytest.approx(expected, rel=1e-6)


@pytest.mark.parametrize("units", ["degrees", "not_a_unit_at_all"])
def test_geodesic_distance_rejects_bad_units(units):
    with pytest.raises(ValueError):
        geodesic_distance([0, 0], [1, 0], units=units)


def test_batch_matches_scalar():
    coords = np.array(ISTANBUL_POINTS)
    batch = geodesic_distance_batch(ISTANBUL_TARGET, coords[:, 0], coords[:, 1])
    expected = [geodesic_distance(ISTANBUL_TARGET, c, units="meters") for c in ISTANBUL_POINTS]
    np.testing.assert_allclose(batch, expected, rtol=1e-12)


def test_convert_length():
    assert convert_length(1000.0, "kilometers") == pytest.approx(1.0)
    assert convert_length(1609.344, "miles") == pytest.approx(1.0)
