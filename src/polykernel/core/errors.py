"""
Polygon validation errors.
"""

from enum import Enum


class ErrorKind(Enum):
    INSUFFICIENT_VERTICES = "insufficient_vertices"
    SELF_INTERSECTIONS = "self_intersections"
    CONVEX_VIOLATION = "convex_violation"
    CLOCKWISE_VIOLATION = "clockwise_violation"


class PolygonError(ValueError):
    """Base class for polygons that fail validation."""
    kind = None


class InsufficientVertices(PolygonError):
    """The boundary ring has fewer than three vertices."""
    kind = ErrorKind.INSUFFICIENT_VERTICES


class SelfIntersections(PolygonError):
    """The boundary ring crosses itself. Reserved, not detected yet."""
    kind = ErrorKind.SELF_INTERSECTIONS


class ConvexViolation(PolygonError):
    """Two consecutive edges are either collinear or turn clockwise."""
    kind = ErrorKind.CONVEX_VIOLATION


class ClockWiseViolation(PolygonError):
    """The boundary ring does not enclose a positive area counter-clockwise."""
    kind = ErrorKind.CLOCKWISE_VIOLATION
