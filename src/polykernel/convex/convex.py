"""
Convex Polygon Module

A ConvexPolygon wraps a validated Polygon whose every boundary vertex is a
strict counter-clockwise turn.

Features:
- Explicit re-validation of an existing Polygon
- Point location (inside / on boundary / outside) by half-plane tests
- Random convex polygons built from angle-sorted zero-sum edge vectors,
  convex and counter-clockwise by construction
"""

import logging
import warnings
from enum import Enum
from fractions import Fraction
from typing import List

from ..core.errors import ConvexViolation
from ..core.point import Orientation, Point, Vector, ccw_compare, sort_around
from ..core.polygon import Polygon, as_point
from ..core.scalar import EXACT
from ..generation.partition import RandomSource, as_generator, random_vectors

log = logging.getLogger(__name__)


# Smallest vertex count a polygon can have
MIN_VERTICES = 3

# Edge vectors are drawn with magnitude bound at least n ** RESOLUTION_EXPONENT
# so that n distinct edge directions are likely in a single draw
RESOLUTION_EXPONENT = 3


class PointLocation(Enum):
    INSIDE = "inside"
    ON_BOUNDARY = "on_boundary"
    OUTSIDE = "outside"


class ConvexPolygon:
    """
    A polygon with strictly convex, counter-clockwise vertices.

    Parameters
    ----------
    polygon : Polygon
        Polygon to re-validate as convex.

    Raises
    ------
    ConvexViolation
        If any boundary vertex is a collinear or clockwise turn.
    """

    __hash__ = None

    def __init__(self, polygon: Polygon):
        self._polygon = polygon
        self.validate()

    @classmethod
    def _wrap(cls, polygon: Polygon) -> "ConvexPolygon":
        convex = cls.__new__(cls)
        convex._polygon = polygon
        return convex

    @classmethod
    def from_polygon(cls, polygon: Polygon) -> "ConvexPolygon":
        return cls(polygon)

    @property
    def polygon(self) -> Polygon:
        return self._polygon

    def __len__(self) -> int:
        return len(self._polygon)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConvexPolygon):
            return NotImplemented
        return self._polygon == other._polygon

    def __repr__(self) -> str:
        return f"Convex{self._polygon!r}"

    def validate(self) -> None:
        """Check convexity, then the ordinary polygon invariants."""
        for i in range(self._polygon.boundary):
            orientation = self._polygon.vertex_orientation(i)
            if orientation is not Orientation.COUNTER_CLOCKWISE:
                raise ConvexViolation(
                    f"Vertex {i} is a {orientation.value} turn"
                )
        self._polygon.validate()

    def locate(self, point) -> PointLocation:
        """
        Classify a point against the convex region.

        A point strictly to the right of any boundary edge is outside. A
        point on the line of some edge and not outside is on the boundary;
        this includes the vertices. Every other point is inside.

        Parameters
        ----------
        point : Point or (x, y)
            Query point. Its coordinates are converted to the polygon's
            scalar field, so exact polygons are tested exactly.

        Returns
        -------
        PointLocation
        """
        field = self._polygon.field
        pt = as_point(point).cast(field.coerce)

        on_edge = False
        for (p, _), (q, _) in self._polygon.iter_boundary_edges():
            orientation = p.orientation(q, pt)
            if orientation is Orientation.CLOCKWISE:
                return PointLocation.OUTSIDE
            if orientation is Orientation.COLLINEAR:
                on_edge = True
        return PointLocation.ON_BOUNDARY if on_edge else PointLocation.INSIDE

    def to_approx(self) -> "ConvexPolygon":
        """Lossy conversion to float coordinates, not validated again."""
        return ConvexPolygon._wrap(self._polygon.to_approx())

    def to_exact(self) -> "ConvexPolygon":
        return ConvexPolygon._wrap(self._polygon.to_exact())

    @classmethod
    def random(cls, n: int, max_: int, rng: RandomSource = None) -> "ConvexPolygon":
        """
        Generate a random convex polygon with ``n`` vertices.

        Zero-sum edge vectors are sorted by polar angle and chained from the
        origin. The result is recentered on its centroid and scaled by
        ``1 / max(max_, n ** 3)``, the resolution the vectors were drawn at,
        so coordinates stay within [-1, 1] for any ``max_``.

        Parameters
        ----------
        n : int
            Vertex count. Values below 3 are raised to 3 with a RuntimeWarning.
        max_ : int
            Magnitude bound for edge vector components, at least 1.
        rng : Generator, int or None
            Random source, see ``as_generator``.

        Returns
        -------
        ConvexPolygon
            Exact polygon with ``max(n, 3)`` vertices.
        """
        rng = as_generator(rng)
        if n < MIN_VERTICES:
            warnings.warn(
                f"ConvexPolygon.random needs at least {MIN_VERTICES} vertices, "
                f"got {n}; generating {MIN_VERTICES}",
                RuntimeWarning,
                stacklevel=2,
            )
            log.info("Raised vertex count from %d to %d", n, MIN_VERTICES)
            return cls.random(MIN_VERTICES, max_, rng)
        if max_ < 1:
            raise ValueError(f"max_ must be at least 1, got {max_}")

        resolution = max(max_, n ** RESOLUTION_EXPONENT)
        edges = _convex_edge_vectors(n, resolution, rng)

        vertices = []
        current = Point.origin(EXACT)
        for edge in edges:
            current = current + edge
            vertices.append(current)

        polygon = Polygon(vertices)
        centroid = polygon.centroid()
        polygon = polygon.translate(-centroid.as_vector()).scale(Fraction(1, resolution))
        return cls(polygon)


def _has_distinct_directions(ordered: List[Vector]) -> bool:
    if any(v.is_zero() for v in ordered):
        return False
    return all(ccw_compare(a, b) != 0 for a, b in zip(ordered, ordered[1:]))


def _convex_edge_vectors(n: int, resolution: int, rng) -> List[Vector]:
    """
    Draw ``n`` angle-sorted zero-sum vectors with pairwise distinct directions.

    Draws with a zero vector or two vectors pointing the same way would give
    duplicate or collinear vertices, so they are redrawn.
    """
    attempts = 1
    while True:
        ordered = sort_around(random_vectors(n, resolution, rng))
        if _has_distinct_directions(ordered):
            if attempts > 1:
                log.debug("Drew %d distinct edge directions after %d attempts", n, attempts)
            return ordered
        log.debug("Redrawing %d edge vectors: repeated direction", n)
        attempts += 1
