"""
Consistency Checks for Triangulations.

This module provides checks that a finished triangulation obeys the
properties a Delaunay TIN must have.

Check Categories
----------------
1. Provenance (every corner is a caller vertex, no super-triangle corner)
2. Delaunay property (no vertex strictly inside a circumcircle)
3. Non-degeneracy (no collinear triangle)
4. Coverage (every non-redundant input vertex is used)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from common.constants import GeometryConstants
from common.logging_config import get_logger
from common.types import Triangle, Vertex, VertexKind

logger = get_logger(__name__)


def _spans_area(
    vertices: Sequence[Vertex],
    epsilon: float = GeometryConstants.COLLINEARITY_EPSILON.value
) -> bool:
    """True if some three of the vertices form a non-collinear triangle."""
    if not vertices:
        return False
    a = vertices[0]
    b = next((v for v in vertices if (v.x, v.y) != (a.x, a.y)), None)
    if b is None:
        return False
    for c in vertices:
        g = 2 * ((b.x - a.x) * (c.y - b.y) - (b.y - a.y) * (c.x - b.x))
        if abs(g) > epsilon:
            return True
    return False


@dataclass
class ValidationResult:
    """Result of a validation check.

    Attributes
    ----------
    test_name : str
        Name of the test.
    passed : bool
        Whether the test passed.
    message : str
        Description of result.
    details : dict
        Additional details.
    """
    test_name: str
    passed: bool
    message: str
    details: Dict[str, Any]


class TriangulationChecker:
    """Checker for structural consistency of a triangulation.

    Validates that output triangles only reference input vertices and
    satisfy the empty-circumcircle property.
    """

    def __init__(
        self,
        strict_mode: bool = False,
        log_violations: bool = True
    ):
        """Initialize triangulation checker.

        Parameters
        ----------
        strict_mode : bool
            If True, raise ValueError on the first failed check.
        log_violations : bool
            Whether to log failed checks.
        """
        self.strict_mode = strict_mode
        self.log_violations = log_violations
        self._logger = get_logger("TriangulationChecker")

    def check_all(
        self,
        triangles: Sequence[Triangle],
        vertices: Sequence[Vertex]
    ) -> List[ValidationResult]:
        """Run all checks on a triangulation.

        Parameters
        ----------
        triangles : sequence of Triangle
            The triangulation output.
        vertices : sequence of Vertex
            The vertices it was built from.

        Returns
        -------
        List[ValidationResult]
            Results of all checks.
        """
        results = []

        # 1. Provenance
        results.append(self._report(self.check_no_boundary_vertices(triangles)))
        results.append(self._report(self.check_vertices_from_input(triangles, vertices)))

        # 2. Delaunay property
        results.append(self._report(self.check_empty_circumcircle(triangles, vertices)))

        # 3. Non-degeneracy
        results.append(self._report(self.check_non_degenerate(triangles)))

        # 4. Coverage
        results.append(self._report(self.check_vertex_coverage(triangles, vertices)))

        return results

    def _report(self, result: ValidationResult) -> ValidationResult:
        if not result.passed:
            if self.log_violations:
                self._logger.warning(f"{result.test_name} failed: {result.message}")
            if self.strict_mode:
                raise ValueError(f"{result.test_name} failed: {result.message}")
        return result

    def check_no_boundary_vertices(
        self,
        triangles: Sequence[Triangle]
    ) -> ValidationResult:
        """Check that no triangle touches a super-triangle corner."""
        offending = sum(1 for t in triangles if t.touches_boundary)

        return ValidationResult(
            test_name="no_boundary_vertices",
            passed=offending == 0,
            message=f"Boundary vertex check: {offending} triangles touch the super-triangle",
            details={'num_offending': offending}
        )

    def check_vertices_from_input(
        self,
        triangles: Sequence[Triangle],
        vertices: Sequence[Vertex]
    ) -> ValidationResult:
        """Check that every corner is one of the input vertex objects."""
        known = {id(v) for v in vertices}
        foreign = sum(
            1 for t in triangles for v in t.vertices
            if id(v) not in known or v.kind is not VertexKind.INPUT
        )

        return ValidationResult(
            test_name="vertices_from_input",
            passed=foreign == 0,
            message=f"Vertex provenance check: {foreign} foreign corners",
            details={'num_foreign': foreign}
        )

    def check_empty_circumcircle(
        self,
        triangles: Sequence[Triangle],
        vertices: Sequence[Vertex],
        rel_tol: float = 1e-9
    ) -> ValidationResult:
        """Check the Delaunay property.

        No input vertex other than a triangle's own corners may lie
        strictly inside its circumcircle. Vertices on the circle (within
        ``rel_tol`` of the squared radius) are allowed.
        """
        violations = 0
        worst = 0.0

        for t in triangles:
            corners = {id(v) for v in t.vertices}
            r2 = t.circumradius_squared
            for v in vertices:
                if id(v) in corners:
                    continue
                dx = v.x - t.circumcenter_x
                dy = v.y - t.circumcenter_y
                intrusion = r2 - (dx * dx + dy * dy)
                if intrusion > rel_tol * r2:
                    violations += 1
                    worst = max(worst, intrusion / r2)

        return ValidationResult(
            test_name="empty_circumcircle",
            passed=violations == 0,
            message=f"Empty circumcircle check: {violations} violations",
            details={
                'num_violations': violations,
                'max_relative_intrusion': worst,
            }
        )

    def check_non_degenerate(
        self,
        triangles: Sequence[Triangle],
        epsilon: float = GeometryConstants.COLLINEARITY_EPSILON.value
    ) -> ValidationResult:
        """Check that no triangle is collinear."""
        degenerate = 0
        for t in triangles:
            a, b, c = t.vertices
            g = 2 * ((b.x - a.x) * (c.y - b.y) - (b.y - a.y) * (c.x - b.x))
            if abs(g) <= epsilon:
                degenerate += 1

        return ValidationResult(
            test_name="non_degenerate",
            passed=degenerate == 0,
            message=f"Degeneracy check: {degenerate} collinear triangles",
            details={'num_degenerate': degenerate}
        )

    def check_vertex_coverage(
        self,
        triangles: Sequence[Triangle],
        vertices: Sequence[Vertex]
    ) -> ValidationResult:
        """Check that every input coordinate appears in some triangle.

        Coordinates are compared by value, so a duplicated input point is
        covered as soon as one of its copies is used. Input that spans no
        area (fewer than three distinct points, or all collinear) has no
        triangle to appear in and is reported as covered.
        """
        used = {(v.x, v.y) for t in triangles for v in t.vertices}
        missing = [(v.x, v.y) for v in vertices if (v.x, v.y) not in used]
        if missing and not triangles and not _spans_area(vertices):
            missing = []

        return ValidationResult(
            test_name="vertex_coverage",
            passed=not missing,
            message=f"Coverage check: {len(missing)} input points unused",
            details={'missing': missing}
        )
