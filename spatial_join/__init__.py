"""
Spatial Join Module.

This module provides the point-in-polygon tag join.
"""

from spatial_join.tagging import tag

__all__ = [
    "tag",
]
