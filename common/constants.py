"""
Numerical Constants for the Geometry Kernel.

This module provides the fixed tolerances and construction parameters used
by the triangulation and containment code. Each value carries its unit and
a short description so that callers can see where a threshold comes from.

References
----------
- Bowyer, A. (1981). Computing Dirichlet tessellations. The Computer
  Journal, 24(2), 162-166.
- Watson, D.F. (1981). Computing the n-dimensional Delaunay tessellation
  with application to Voronoi polytopes. The Computer Journal, 24(2),
  167-172.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A named numerical constant with provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    unit : str
        The unit of the constant ("dimensionless" for pure ratios).
    description : str
        Human-readable description of the constant.
    """
    value: float
    unit: str
    description: str


class GeometryConstants:
    """Registry of constants used throughout the kernel.

    Triangulation
    -------------
    Tolerances and scale factors for incremental Delaunay insertion.

    Geodesy
    -------
    Reference ellipsoid used for geodesic distances.
    """

    # =========================================================================
    # Triangulation
    # =========================================================================

    COLLINEARITY_EPSILON: Final[Constant] = Constant(
        value=1e-12,
        unit="coordinate units squared",
        description=(
            "Threshold on |G|, twice the signed area of a candidate triangle; "
            "candidates at or below it are treated as collinear and skipped"
        )
    )

    SUPERTRIANGLE_SCALE: Final[Constant] = Constant(
        value=20.0,
        unit="dimensionless",
        description=(
            "Half-width of the bootstrap super-triangle as a multiple of the "
            "longest side of the input bounding box"
        )
    )

    # =========================================================================
    # Geodesy
    # =========================================================================

    REFERENCE_ELLIPSOID: Final[str] = "WGS84"


# Property names written on TIN triangle features, one per corner.
TIN_CORNER_PROPERTIES: Final = ("a", "b", "c")
