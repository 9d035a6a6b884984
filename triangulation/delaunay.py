"""
Incremental Delaunay Triangulation.

This module builds a Delaunay triangulation of a scattered 2-D point set by
Bowyer-Watson insertion seeded with a bounding super-triangle.

Algorithm
---------
1. Order the vertices by x and wrap them in a super-triangle far larger
   than their bounding box.
2. Insert vertices one at a time in ascending x. Every triangle whose
   circumcircle contains the new vertex is removed; the boundary of the
   resulting cavity is re-triangulated by fanning from the new vertex.
3. Because insertion sweeps left to right, a triangle whose circumcircle
   lies entirely to the left of the current vertex can never be touched
   again. Such triangles are retired from the working ("open") set to the
   finished ("closed") set, which keeps each pass short.
4. Triangles touching a super-triangle corner are dropped at the end.

Numerical Policy
----------------
- Retirement uses a strict ``dx > 0 and dx**2 > r**2``.
- Cavity membership uses ``dx**2 + dy**2 <= r**2`` (circle boundary counts
  as inside).
- A candidate triangle is created only when ``|G| > epsilon`` where ``G``
  is twice its signed area; collinear candidates are skipped silently.

References
----------
- Bowyer, A. (1981). Computing Dirichlet tessellations.
- Watson, D.F. (1981). Computing the n-dimensional Delaunay tessellation.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from common.constants import GeometryConstants, TIN_CORNER_PROPERTIES
from common.logging_config import get_logger
from common.types import Edge, Triangle, Vertex

logger = get_logger(__name__)


@dataclass
class TinConfig:
    """Configuration for triangulation.

    Attributes
    ----------
    collinearity_epsilon : float
        Candidates with ``|G|`` at or below this value are skipped.
    supertriangle_scale : float
        Super-triangle half-width as a multiple of the bounding box's
        longest side.
    corner_properties : Tuple[str, str, str]
        Property names for the corner tags of TIN output features.
    """
    collinearity_epsilon: float = GeometryConstants.COLLINEARITY_EPSILON.value
    supertriangle_scale: float = GeometryConstants.SUPERTRIANGLE_SCALE.value
    corner_properties: Tuple[str, str, str] = TIN_CORNER_PROPERTIES

    def __post_init__(self):
        if self.collinearity_epsilon < 0:
            raise ValueError("collinearity_epsilon must be non-negative")
        if self.supertriangle_scale <= 1:
            raise ValueError("supertriangle_scale must be greater than 1")
        if len(self.corner_properties) != 3:
            raise ValueError("corner_properties needs exactly three names")


@dataclass
class TriangulationStats:
    """Counters collected during one triangulation run.

    Attributes
    ----------
    num_vertices : int
        Vertices inserted.
    num_duplicates_dropped : int
        Input vertices skipped because an earlier one has the same
        coordinates.
    num_retired : int
        Triangles moved to the closed set before the sweep finished.
    num_collinear_skipped : int
        Candidate triangles rejected as collinear.
    num_boundary_dropped : int
        Finished triangles discarded for touching the super-triangle.
    num_triangles : int
        Triangles returned.
    """
    num_vertices: int = 0
    num_duplicates_dropped: int = 0
    num_retired: int = 0
    num_collinear_skipped: int = 0
    num_boundary_dropped: int = 0
    num_triangles: int = 0


def _orientation(a: Vertex, b: Vertex, c: Vertex) -> float:
    """Twice the signed area of triangle abc."""
    return 2 * ((b.x - a.x) * (c.y - b.y) - (b.y - a.y) * (c.x - b.x))


def _unique_vertices(vertices: Sequence[Vertex]) -> List[Vertex]:
    """Drop vertices whose coordinates repeat an earlier vertex."""
    seen = set()
    unique = []
    for vertex in vertices:
        key = (vertex.x, vertex.y)
        if key in seen:
            continue
        seen.add(key)
        unique.append(vertex)
    return unique


def _super_triangle(
    vertices: Sequence[Vertex],
    scale: float,
    epsilon: float
) -> Optional[Triangle]:
    """Build a triangle enclosing every vertex with a wide margin.

    Returns None when the corners cannot be represented apart from each
    other, i.e. the extent is lost to rounding at the coordinates'
    magnitude.
    """
    xs = [v.x for v in vertices]
    ys = [v.y for v in vertices]
    xmin, xmax = min(xs), max(xs)
    ymin, ymax = min(ys), max(ys)

    dx = xmax - xmin
    dy = ymax - ymin
    dmax = dx if dx > dy else dy
    xmid = (xmax + xmin) * 0.5
    ymid = (ymax + ymin) * 0.5

    # All input vertices coincide: any positive size encloses them
    if dmax == 0:
        dmax = 1.0

    corners = (
        Vertex.boundary(xmid - scale * dmax, ymid - dmax),
        Vertex.boundary(xmid, ymid + scale * dmax),
        Vertex.boundary(xmid + scale * dmax, ymid - dmax),
    )
    if abs(_orientation(*corners)) <= epsilon:
        return None
    return Triangle(*corners)


def dedup_edges(edges: Sequence[Edge]) -> List[Edge]:
    """Cancel edges that occur twice, in either orientation.

    Edges shared by two removed triangles lie inside the cavity; what
    remains is the cavity boundary. Occurrences cancel in pairs, so an edge
    seen three times survives once.

    Parameters
    ----------
    edges : sequence of Edge
        Edges of the triangles removed for one insertion.

    Returns
    -------
    list of Edge
        Boundary edges, in first-occurrence order.
    """
    boundary: Dict[frozenset, Edge] = {}
    for edge in edges:
        key = edge.key
        if key in boundary:
            del boundary[key]
        else:
            boundary[key] = edge
    return list(boundary.values())


def triangulate(
    vertices: Sequence[Vertex],
    config: Optional[TinConfig] = None,
    stats: Optional[TriangulationStats] = None
) -> List[Triangle]:
    """Compute the Delaunay triangulation of a set of vertices.

    Parameters
    ----------
    vertices : sequence of Vertex
        Input vertices. A vertex at the same coordinates as an earlier one
        is ignored, so the first occurrence's tag is the one kept.
        Collinear points are tolerated.
    config : TinConfig, optional
        Tolerances; defaults to :class:`TinConfig()`.
    stats : TriangulationStats, optional
        If given, filled with counters describing the run.

    Returns
    -------
    list of Triangle
        Finished triangles in the order they were finalised. Empty when
        fewer than three vertices are given or all are collinear.

    Notes
    -----
    Never raises for degenerate input; it degrades to an empty or partial
    result instead.

    Examples
    --------
    >>> tris = triangulate([Vertex(0, 0), Vertex(1, 0), Vertex(0, 1)])
    >>> len(tris)
    1
    """
    config = config or TinConfig()
    stats = stats if stats is not None else TriangulationStats()

    unique = _unique_vertices(vertices)
    stats.num_duplicates_dropped = len(vertices) - len(unique)
    if stats.num_duplicates_dropped:
        logger.debug(f"Dropped {stats.num_duplicates_dropped} duplicate vertices")

    # Bail if there aren't enough vertices to form any triangles
    if len(unique) < 3:
        logger.debug(f"Triangulation skipped: {len(unique)} distinct vertices, need 3")
        return []

    # Descending x; insertion walks this list backwards (ascending x)
    ordered = sorted(unique, key=lambda v: v.x, reverse=True)
    epsilon = config.collinearity_epsilon

    super_triangle = _super_triangle(ordered, config.supertriangle_scale, epsilon)
    if super_triangle is None:
        logger.debug("Triangulation skipped: extent too small for the coordinate magnitude")
        return []

    open_triangles: List[Triangle] = [super_triangle]
    closed_triangles: List[Triangle] = []

    for vertex in reversed(ordered):
        edges: List[Edge] = []
        still_open: List[Triangle] = []

        for triangle in open_triangles:
            # Circumcircle entirely left of the sweep line: finished for good
            dx = vertex.x - triangle.circumcenter_x
            if dx > 0 and dx * dx > triangle.circumradius_squared:
                closed_triangles.append(triangle)
                stats.num_retired += 1
                continue

            dy = vertex.y - triangle.circumcenter_y
            if dx * dx + dy * dy > triangle.circumradius_squared:
                still_open.append(triangle)
                continue

            edges.extend(triangle.edges)

        for edge in dedup_edges(edges):
            if abs(_orientation(edge.a, edge.b, vertex)) > epsilon:
                still_open.append(Triangle(edge.a, edge.b, vertex))
            else:
                stats.num_collinear_skipped += 1

        open_triangles = still_open

    closed_triangles.extend(open_triangles)

    result = [t for t in closed_triangles if not t.touches_boundary]

    stats.num_vertices = len(ordered)
    stats.num_boundary_dropped = len(closed_triangles) - len(result)
    stats.num_triangles = len(result)

    logger.debug(
        f"Triangulated {stats.num_vertices} vertices into {stats.num_triangles} triangles "
        f"(retired early: {stats.num_retired}, collinear skipped: "
        f"{stats.num_collinear_skipped}, boundary dropped: {stats.num_boundary_dropped})"
    )

    return result
