"""
Geometric Value Types for the Triangulation and Containment Kernel.

This module defines the immutable vertex, triangle and edge types shared by
the triangulation engine and the validation layer, plus the coordinate
aliases used by the containment predicates.

Design Rationale
----------------
Using typed dataclasses instead of raw tuples provides:
1. Self-documenting code - field names describe the data
2. Cached derived quantities (circumcircles) computed exactly once
3. An explicit vertex kind instead of a loose sentinel flag, so that
   filtering out super-triangle corners cannot be forgotten
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence, Tuple


class VertexKind(Enum):
    """Origin of a vertex.

    INPUT vertices come from the caller's point set. BOUNDARY vertices are
    the three synthetic corners of the bootstrap super-triangle and never
    appear in a finished triangulation.
    """
    INPUT = "input"
    BOUNDARY = "boundary"


@dataclass(frozen=True, eq=False)
class Vertex:
    """A 2-D point taking part in a triangulation.

    Vertices compare by identity: two vertices at the same coordinates are
    still distinct vertices.

    Attributes
    ----------
    x : float
        Horizontal coordinate (longitude for geographic input).
    y : float
        Vertical coordinate (latitude for geographic input).
    tag : Any, optional
        Opaque caller value (e.g. an elevation) carried through to the
        triangle output. Never compared or computed on.
    kind : VertexKind
        Whether the vertex is caller input or a super-triangle corner.

    Examples
    --------
    >>> v = Vertex(60.5, 42.1, tag=312)
    >>> v.is_supertriangle_vertex
    False
    """
    x: float
    y: float
    tag: Any = None
    kind: VertexKind = VertexKind.INPUT

    @property
    def is_supertriangle_vertex(self) -> bool:
        """True for the synthetic bootstrap corners."""
        return self.kind is VertexKind.BOUNDARY

    @classmethod
    def boundary(cls, x: float, y: float) -> 'Vertex':
        """Create a super-triangle corner."""
        return cls(x=x, y=y, tag=None, kind=VertexKind.BOUNDARY)


@dataclass(frozen=True, eq=False)
class Triangle:
    """A triangle with its circumcircle cached at construction.

    Attributes
    ----------
    a, b, c : Vertex
        The three corners, in construction order.
    circumcenter_x, circumcenter_y : float
        Center of the circumscribed circle.
    circumradius_squared : float
        Squared radius of the circumscribed circle, measured from ``a``.

    Notes
    -----
    The squared radius is kept instead of the radius so that membership
    tests never take a square root. It equals
    ``(circumcenter_x - a.x)**2 + (circumcenter_y - a.y)**2`` exactly.

    Raises
    ------
    ValueError
        If the three corners are exactly collinear (no circumcircle).
    """
    a: Vertex
    b: Vertex
    c: Vertex
    circumcenter_x: float = field(init=False)
    circumcenter_y: float = field(init=False)
    circumradius_squared: float = field(init=False)

    def __post_init__(self):
        """Derive the circumcircle from the three corners."""
        a, b, c = self.a, self.b, self.c

        abx = b.x - a.x
        aby = b.y - a.y
        acx = c.x - a.x
        acy = c.y - a.y
        e = abx * (a.x + b.x) + aby * (a.y + b.y)
        f = acx * (a.x + c.x) + acy * (a.y + c.y)
        g = 2 * (abx * (c.y - b.y) - aby * (c.x - b.x))

        if g == 0:
            raise ValueError(
                f"Collinear corners ({a.x}, {a.y}), ({b.x}, {b.y}), "
                f"({c.x}, {c.y}) have no circumcircle"
            )

        cx = (acy * e - aby * f) / g
        cy = (abx * f - acx * e) / g
        dx = cx - a.x
        dy = cy - a.y

        # Frozen dataclass: bypass __setattr__ for the derived fields
        object.__setattr__(self, 'circumcenter_x', cx)
        object.__setattr__(self, 'circumcenter_y', cy)
        object.__setattr__(self, 'circumradius_squared', dx * dx + dy * dy)

    @property
    def vertices(self) -> Tuple[Vertex, Vertex, Vertex]:
        """Corners in construction order."""
        return self.a, self.b, self.c

    @property
    def edges(self) -> Tuple['Edge', 'Edge', 'Edge']:
        """The edges AB, BC and CA."""
        return Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a)

    @property
    def touches_boundary(self) -> bool:
        """True if any corner is a super-triangle vertex."""
        return any(v.kind is VertexKind.BOUNDARY for v in self.vertices)

    def circumcircle_contains(self, x: float, y: float) -> bool:
        """Check whether (x, y) lies inside or on the circumcircle."""
        dx = x - self.circumcenter_x
        dy = y - self.circumcenter_y
        return dx * dx + dy * dy <= self.circumradius_squared


@dataclass(frozen=True, eq=False)
class Edge:
    """An unordered pair of vertices.

    Two edges are equal when they join the same two vertex objects, in
    either order.
    """
    a: Vertex
    b: Vertex

    @property
    def key(self) -> frozenset:
        """Order-independent identity of the edge."""
        return frozenset((id(self.a), id(self.b)))

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (
            (self.a is other.a and self.b is other.b)
            or (self.a is other.b and self.b is other.a)
        )

    def __hash__(self):
        return hash(self.key)


# Coordinate aliases for the containment predicates
Position = Sequence[float]  # (x, y); extra ordinates are ignored
Ring = Sequence[Position]  # closed: first position == last position
PolygonCoordinates = Sequence[Ring]  # outer ring followed by holes
MultiPolygonCoordinates = Sequence[PolygonCoordinates]
