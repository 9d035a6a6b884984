"""
Validation Module for Triangulation Output.

This module provides structural and Delaunay-property checks.
"""

from validation.delaunay_checks import (
    TriangulationChecker,
    ValidationResult,
)

__all__ = [
    "TriangulationChecker",
    "ValidationResult",
]
