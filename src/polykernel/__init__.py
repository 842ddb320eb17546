"""
Polykernel - Simple polygons under exact or approximate arithmetic.

This package provides a small polygon kernel whose predicates are written
once and run over both exact rationals (fractions.Fraction) and floats:
- Polygons validated at construction (vertex count, CCW winding)
- Signed area, centroid and vertex orientation
- Convex polygons with point location
- Random convex polygons that are convex by construction

Main Classes
------------
Polygon : Validated simple polygon
PolygonBuilder : Unchecked result of a structural transform
ConvexPolygon : Polygon with strictly convex vertices

Example
-------
>>> import numpy as np
>>> from polykernel import ConvexPolygon, Polygon

>>> triangle = Polygon([(0, 0), (4, 0), (0, 3)])
>>> triangle.signed_area()
Fraction(6, 1)
>>> convex = ConvexPolygon.random(10, 1000, np.random.default_rng(0))
>>> len(convex)
10
"""

from .core import (
    ErrorKind,
    PolygonError,
    InsufficientVertices,
    SelfIntersections,
    ConvexViolation,
    ClockWiseViolation,
    ScalarRef,
    PolygonScalar,
    ScalarField,
    EXACT,
    APPROX,
    field_of,
    Orientation,
    Point,
    Vector,
    sort_around,
    Polygon,
    PolygonBuilder,
    to_numpy,
    from_numpy,
    to_shapely,
    from_shapely,
)
from .convex import ConvexPolygon, PointLocation, sample_convex_polygon, sample_convex_polygons
from .generation import as_generator, partition, zero_sum_partition, random_vectors

__all__ = [
    # Errors
    'ErrorKind',
    'PolygonError',
    'InsufficientVertices',
    'SelfIntersections',
    'ConvexViolation',
    'ClockWiseViolation',
    # Scalars
    'ScalarRef',
    'PolygonScalar',
    'ScalarField',
    'EXACT',
    'APPROX',
    'field_of',
    # Points
    'Orientation',
    'Point',
    'Vector',
    'sort_around',
    # Polygons
    'Polygon',
    'PolygonBuilder',
    'to_numpy',
    'from_numpy',
    'to_shapely',
    'from_shapely',
    # Convex
    'ConvexPolygon',
    'PointLocation',
    'sample_convex_polygon',
    'sample_convex_polygons',
    # Generation
    'as_generator',
    'partition',
    'zero_sum_partition',
    'random_vectors',
]
