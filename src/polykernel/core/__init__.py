"""
Core polygon kernel.
"""

from .errors import (
    ErrorKind,
    PolygonError,
    InsufficientVertices,
    SelfIntersections,
    ConvexViolation,
    ClockWiseViolation,
)
from .scalar import (
    ScalarRef,
    PolygonScalar,
    ScalarField,
    EXACT,
    APPROX,
    field_of,
    common_field,
    to_approx,
    to_exact,
)
from .point import Orientation, Point, Vector, ccw_compare, sort_around
from .polygon import BoundaryEdges, Edge, Polygon, PolygonBuilder, Vertex
from .geometry import ensure_ccw, to_numpy, from_numpy, to_shapely, from_shapely

__all__ = [
    'ErrorKind',
    'PolygonError',
    'InsufficientVertices',
    'SelfIntersections',
    'ConvexViolation',
    'ClockWiseViolation',
    'ScalarRef',
    'PolygonScalar',
    'ScalarField',
    'EXACT',
    'APPROX',
    'field_of',
    'common_field',
    'to_approx',
    'to_exact',
    'Orientation',
    'Point',
    'Vector',
    'ccw_compare',
    'sort_around',
    'BoundaryEdges',
    'Edge',
    'Polygon',
    'PolygonBuilder',
    'Vertex',
    'ensure_ccw',
    'to_numpy',
    'from_numpy',
    'to_shapely',
    'from_shapely',
]
