"""
Classification Module.

This module provides proximity-based selection of points.
"""

from classification.nearest import nearest

__all__ = [
    "nearest",
]
