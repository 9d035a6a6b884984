"""
Common utilities and infrastructure for the geometry kernel.

This package provides foundational components used across all modules:
- Numerical constants with descriptions
- Geometric value types (vertices, triangles, edges)
- Exception types raised at the call boundary
- Unit registry for distance reporting
- Logging infrastructure
"""

from common.constants import GeometryConstants, Constant, TIN_CORNER_PROPERTIES
from common.types import (
    Vertex,
    VertexKind,
    Triangle,
    Edge,
)
from common.exceptions import InvalidGeometryTypeError
from common.units import ureg, Q_, convert_length
from common.logging_config import get_logger

__all__ = [
    "GeometryConstants",
    "Constant",
    "TIN_CORNER_PROPERTIES",
    "Vertex",
    "VertexKind",
    "Triangle",
    "Edge",
    "InvalidGeometryTypeError",
    "ureg",
    "Q_",
    "convert_length",
    "get_logger",
]
