import math

import pytest

from common.types import Edge, Triangle, Vertex, VertexKind


def test_vertex_defaults_to_input_kind():
    v = Vertex(1.0, 2.0)
    assert v.kind is VertexKind.INPUT
    assert v.tag is None
    assert not v.is_supertriangle_vertex


def test_boundary_vertex_is_flagged():
    v = Vertex.boundary(0.0, 0.0)
    assert v.kind is VertexKind.BOUNDARY
    assert v.is_supertriangle_vertex


def test_vertices_compare_by_identity():
    a = Vertex(1.0, 1.0)
    b = Vertex(1.0, 1.0)
    assert a != b
    assert a == a


def test_vertex_is_immutable():
    v = Vertex(1.0, 2.0, tag=5)
    with pytest.raises(AttributeError):
        v.x = 3.0


def test_triangle_circumcircle_right_triangle():
    # Right angle at the origin: circumcenter is the hypotenuse midpoint
    t = Triangle(Vertex(0, 0), Vertex(4, 0), Vertex(0, 3))
    assert t.circumcenter_x == pytest.approx(2.0)
    assert t.circumcenter_y == pytest.approx(1.5)
    assert t.circumradius_squared == pytest.approx(6.25)


def test_triangle_radius_measured_from_first_corner():
    a, b, c = Vertex(1.3, -0.7), Vertex(5.1, 2.2), Vertex(-0.4, 3.9)
    t = Triangle(a, b, c)
    expected = (t.circumcenter_x - a.x) ** 2 + (t.circumcenter_y - a.y) ** 2
    assert t.circumradius_squared == expected
    for v in (b, c):
        d2 = (t.circumcenter_x - v.x) ** 2 + (t.circumcenter_y - v.y) ** 2
        assert math.isclose(d2, t.circumradius_squared, rel_tol=1e-12)


def test_collinear_triangle_rejected():
    with pytest.raises(ValueError):
        Triangle(Vertex(0, 0), Vertex(1, 1), Vertex(2, 2))


def test_triangle_edges_and_boundary_flag():
    a, b, c = Vertex(0, 0), Vertex(1, 0), Vertex.boundary(0, 1)
    t = Triangle(a, b, c)
    assert t.edges == (Edge(a, b), Edge(b, c), Edge(c, a))
    assert t.touches_boundary


def test_circumcircle_contains_is_inclusive():
    t = Triangle(Vertex(0, 0), Vertex(4, 0), Vertex(0, 3))
    assert t.circumcircle_contains(2.0, 1.5)
    assert t.circumcircle_contains(4.0, 3.0)  # on the circle
    assert not t.circumcircle_contains(10.0, 10.0)


def test_edge_equality_ignores_orientation():
    a, b, c = Vertex(0, 0), Vertex(1, 0), Vertex(0, 1)
    assert Edge(a, b) == Edge(b, a)
    assert hash(Edge(a, b)) == hash(Edge(b, a))
    assert Edge(a, b) != Edge(a, c)


def test_edge_equality_uses_vertex_identity():
    a, b = Vertex(0, 0), Vertex(1, 0)
    b_copy = Vertex(1, 0)
    assert Edge(a, b) != Edge(a, b_copy)
