from geospatial.features import feature_collection, point
from triangulation.delaunay import TinConfig
from triangulation.tin import tin


def test_tin_outputs_closed_triangle_polygons(scattered_points):
    tinned = tin(scattered_points, "elevation")

    assert tinned["type"] == "FeatureCollection"
    assert len(tinned["features"]) == 52
    for feature in tinned["features"]:
        assert feature["geometry"]["type"] == "Polygon"
        ring = feature["geometry"]["coordinates"][0]
        assert len(ring) == 4
        assert ring[0] == ring[-1]


def test_tin_corner_properties_follow_ring_order(scattered_points):
    elevation_at = {
        tuple(f["geometry"]["coordinates"]): f["properties"]["elevation"]
        for f in scattered_points["features"]
    }

    tinned = tin(scattered_points, "elevation")

    for feature in tinned["features"]:
        ring = feature["geometry"]["coordinates"][0]
        props = feature["properties"]
        assert props["a"] == elevation_at[tuple(ring[0])]
        assert props["b"] == elevation_at[tuple(ring[1])]
        assert props["c"] == elevation_at[tuple(ring[2])]


def test_tin_round_trips_every_input_coordinate(scattered_points):
    tinned = tin(scattered_points)
    used = {
        tuple(position)
        for feature in tinned["features"]
        for position in feature["geometry"]["coordinates"][0]
    }
    for feature in scattered_points["features"]:
        assert tuple(feature["geometry"]["coordinates"]) in used


def test_tin_without_z_has_null_corners(scattered_points):
    tinned = tin(scattered_points)
    for feature in tinned["features"]:
        assert feature["properties"] == {"a": None, "b": None, "c": None}


def test_tin_missing_property_gives_null():
    points = feature_collection([
        point([0, 0], {"elevation": 5}),
        point([4, 0]),
        point([0, 3], {"elevation": 7}),
    ])
    tinned = tin(points, "elevation")
    values = sorted(tinned["features"][0]["properties"].values(), key=lambda v: (v is not None, v))
    assert values == [None, 5, 7]


def test_tin_too_few_points():
    points = feature_collection([point([0, 0]), point([1, 1])])
    assert tin(points) == {"type": "FeatureCollection", "features": []}


def test_tin_custom_corner_names():
    points = feature_collection([point([0, 0]), point([4, 0]), point([0, 3])])
    config = TinConfig(corner_properties=("p", "q", "r"))
    tinned = tin(points, config=config)
    assert set(tinned["features"][0]["properties"]) == {"p", "q", "r"}
