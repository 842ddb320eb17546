"""
Convex polygons and their random generation.
"""

from .convex import ConvexPolygon, PointLocation, MIN_VERTICES, RESOLUTION_EXPONENT
from .sampler import (
    DEFAULT_SAMPLE_VERTICES,
    DEFAULT_SAMPLE_BOUND,
    sample_convex_polygon,
    sample_convex_polygons,
)

__all__ = [
    'ConvexPolygon',
    'PointLocation',
    'MIN_VERTICES',
    'RESOLUTION_EXPONENT',
    'DEFAULT_SAMPLE_VERTICES',
    'DEFAULT_SAMPLE_BOUND',
    'sample_convex_polygon',
    'sample_convex_polygons',
]
