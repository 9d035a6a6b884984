"""
Exception types raised at the kernel's call boundary.

Numerical edge cases (collinear candidates, circumcircle ties) are absorbed
inside the algorithms and never surface here. Only genuine contract
violations by the caller are raised.
"""


class InvalidGeometryTypeError(ValueError):
    """Raised when a containment test receives a geometry that is neither a
    Polygon nor a MultiPolygon.

    Attributes
    ----------
    geometry_type : str or None
        The offending GeoJSON ``type`` value.
    """

    def __init__(self, geometry_type):
        self.geometry_type = geometry_type
        super().__init__(
            f"Expected a Polygon or MultiPolygon geometry, got {geometry_type!r}"
        )
