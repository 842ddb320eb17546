"""
Simple polygons with eagerly enforced invariants.

A Polygon is created through validation, which checks:
- At least three vertices on the boundary ring
- Strictly positive signed area (counter-clockwise winding)
- Hole indices inside the point array

Duplicate vertices and self-intersections are not detected.

Structural transforms (map_points, cast) return an unchecked
PolygonBuilder. The builder is not a Polygon; build() revalidates.
The scalar conversions (to_approx, to_exact) keep the structure of an
already valid polygon and skip revalidation.
"""

from typing import Any, Callable, Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple

from .errors import ClockWiseViolation, InsufficientVertices, PolygonError
from .point import Orientation, Point, Vector
from .scalar import APPROX, EXACT, ScalarField, common_field


class Vertex(NamedTuple):
    point: Point
    meta: Any


class Edge(NamedTuple):
    src: Vertex
    dst: Vertex


def as_point(p) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(x, y)


def _coerce_points(
    points: Iterable,
    field: Optional[ScalarField] = None
) -> Tuple[Tuple[Point, ...], ScalarField]:
    """Convert raw points to Point instances sharing one scalar field."""
    pts = [as_point(p) for p in points]
    if field is None:
        field = common_field(c for p in pts for c in (p.x, p.y))
    return tuple(Point(field.coerce(p.x), field.coerce(p.y)) for p in pts), field


def ring_signed_area_2x(ring: Sequence[Point], field: ScalarField):
    """
    Twice the signed area of a closed ring of points (shoelace formula).

    Positive for counter-clockwise rings, negative for clockwise ones.
    """
    return field.sum(
        p.x * q.y - q.x * p.y
        for p, q in zip(ring, tuple(ring[1:]) + tuple(ring[:1]))
    )


class BoundaryEdges:
    """
    Consecutive vertex pairs of the boundary ring.

    Lazy and restartable: every call to ``iter`` walks the ring again,
    ending with the wrap-around edge from the last vertex to the first.
    """

    def __init__(self, points: Sequence[Point], meta: Sequence[Any], boundary: int):
        self._points = points
        self._meta = meta
        self._boundary = boundary

    def __len__(self) -> int:
        return self._boundary

    def __iter__(self) -> Iterator[Edge]:
        n = self._boundary
        for i in range(n):
            j = (i + 1) % n
            yield Edge(
                Vertex(self._points[i], self._meta[i]),
                Vertex(self._points[j], self._meta[j]),
            )


class Polygon:
    """
    A validated simple polygon.

    Parameters
    ----------
    points : sequence of Point or (x, y) pairs
        Boundary ring in counter-clockwise order. Integer and Fraction
        coordinates are exact, float coordinates are approximate.
    meta : sequence, optional
        Per-vertex payload with the same length as ``points``. Defaults to
        ``None`` for every vertex.

    Raises
    ------
    InsufficientVertices
        If fewer than three points are given.
    ClockWiseViolation
        If the signed area is not strictly positive.
    """

    __hash__ = None

    def __init__(self, points: Iterable, meta: Optional[Iterable] = None):
        pts, field = _coerce_points(points)
        meta = (None,) * len(pts) if meta is None else tuple(meta)
        if len(meta) != len(pts):
            raise ValueError(
                f"Expected {len(pts)} meta values, got {len(meta)}"
            )
        self._init(pts, len(pts), (), meta, field)
        self.validate()

    def _init(self, points, boundary, holes, meta, field):
        self._points = points
        self._boundary = boundary
        self._holes = holes
        self._meta = meta
        self._field = field

    @classmethod
    def _from_parts(cls, points, boundary, holes, meta, field) -> "Polygon":
        polygon = cls.__new__(cls)
        polygon._init(points, boundary, holes, meta, field)
        return polygon

    # -- accessors -----------------------------------------------------

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def meta(self) -> Tuple[Any, ...]:
        return self._meta

    @property
    def boundary(self) -> int:
        """Index one past the last vertex of the outer ring."""
        return self._boundary

    @property
    def holes(self) -> Tuple[int, ...]:
        """Start indices of the hole rings."""
        return self._holes

    @property
    def field(self) -> ScalarField:
        return self._field

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Vertex]:
        return self.iter()

    def iter(self) -> Iterator[Vertex]:
        """Every point with its meta value, boundary ring first."""
        for point, meta in zip(self._points, self._meta):
            yield Vertex(point, meta)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return (
            self._points == other._points
            and self._boundary == other._boundary
            and self._holes == other._holes
            and self._meta == other._meta
        )

    def __repr__(self) -> str:
        coords = ", ".join(f"({p.x}, {p.y})" for p in self._points)
        return f"Polygon[{self._field.name}]({coords})"

    # -- validation ----------------------------------------------------

    def validate(self) -> None:
        """
        Check that the polygon is simple.

        Duplicate points and self-intersections are not detected: finding
        duplicates is unreliable for floats, so this currently performs the
        same checks as ``validate_weakly``.
        """
        self.validate_weakly()

    def validate_weakly(self) -> None:
        """Check vertex count, winding and hole indices."""
        n = len(self._points)
        if self._boundary < 3:
            raise InsufficientVertices(
                f"Polygon needs at least 3 vertices, got {self._boundary}"
            )
        if self._boundary > n:
            raise PolygonError(
                f"Boundary index {self._boundary} exceeds point count {n}"
            )
        area_2x = self.signed_area_2x()
        if not area_2x > self._field.zero():
            raise ClockWiseViolation(
                f"Boundary ring must be counter-clockwise with positive area, "
                f"got signed area {area_2x / self._field.from_int(2)}"
            )
        for hole in self._holes:
            if not 0 <= hole < n:
                raise PolygonError(f"Hole index {hole} outside [0, {n})")

    # -- predicates ----------------------------------------------------

    def iter_boundary_edges(self) -> BoundaryEdges:
        return BoundaryEdges(self._points, self._meta, self._boundary)

    def signed_area_2x(self):
        """Twice the signed area of the boundary ring."""
        return ring_signed_area_2x(self._points[:self._boundary], self._field)

    def signed_area(self):
        return self.signed_area_2x() / self._field.from_int(2)

    def centroid(self) -> Point:
        """Area centroid of the boundary ring."""
        acc = Vector.zero(self._field)
        for (p, _), (q, _) in self.iter_boundary_edges():
            u, v = p.as_vector(), q.as_vector()
            acc = acc + (u + v) * (p.x * q.y - q.x * p.y)
        three = self._field.from_int(3)
        return Point.origin(self._field) + acc / (three * self.signed_area_2x())

    def vertex(self, idx: int) -> Point:
        """
        Boundary vertex at ``idx``, wrapping negative and large indices.

        Indices wrap over the boundary ring only, so ``vertex(boundary)`` is
        ``vertex(0)`` even when hole points follow. Hole vertices are reached
        through ``points``.
        """
        return self._points[idx % self._boundary]

    def vertex_orientation(self, idx: int) -> Orientation:
        """Turn direction at vertex ``idx`` of the boundary ring."""
        p1 = self.vertex(idx - 1)
        p2 = self.vertex(idx)
        p3 = self.vertex(idx + 1)
        return p1.orientation(p2, p3)

    # -- transforms ----------------------------------------------------

    def _builder(self) -> "PolygonBuilder":
        return PolygonBuilder(self._points, self._boundary, self._holes, self._meta)

    def map_points(self, f: Callable[[Point], Point]) -> "PolygonBuilder":
        """Replace every point with ``f(point)``. The result is unchecked."""
        return self._builder().map_points(f)

    def cast(self, f: Callable[[Any], Any]) -> "PolygonBuilder":
        """Replace every coordinate with ``f(coordinate)``. The result is unchecked."""
        return self._builder().cast(f)

    def translate(self, offset) -> "Polygon":
        return self._builder().translate(offset).build()

    def scale(self, factor) -> "Polygon":
        """Uniformly scale about the origin by a positive factor."""
        return self._builder().scale(factor).build()

    def _convert(self, field: ScalarField) -> "Polygon":
        points = tuple(p.cast(field.coerce) for p in self._points)
        return Polygon._from_parts(points, self._boundary, self._holes, self._meta, field)

    def to_approx(self) -> "Polygon":
        """
        Lossy conversion to float coordinates.

        Keeps ``boundary``, ``holes`` and ``meta`` and never raises. The
        result is not validated again: rounding can collapse a tiny ring to
        zero area, and coordinates beyond the float range become infinite.
        Call ``validate`` on the result where that matters.
        """
        return self._convert(APPROX)

    def to_exact(self) -> "Polygon":
        """
        Conversion to rational coordinates.

        Every finite float has an exact rational value, so the points are
        kept unchanged. Structure is kept as in ``to_approx`` and the result
        is not validated again.

        Raises
        ------
        OverflowError, ValueError
            If a coordinate is infinite or NaN.
        """
        return self._convert(EXACT)


class PolygonBuilder:
    """
    Polygon parts that have not been validated.

    Produced by structural transforms whose mapping may change winding or
    degeneracy. The only way back to a Polygon is ``build``.
    """

    def __init__(
        self,
        points: Iterable,
        boundary: Optional[int] = None,
        holes: Iterable[int] = (),
        meta: Optional[Iterable] = None
    ):
        self.points = tuple(as_point(p) for p in points)
        self.boundary = len(self.points) if boundary is None else boundary
        self.holes = tuple(holes)
        self.meta = (None,) * len(self.points) if meta is None else tuple(meta)

    def signed_area_2x(self):
        """Twice the signed area of the unchecked boundary ring."""
        points, field = _coerce_points(self.points[:self.boundary])
        return ring_signed_area_2x(points, field)

    def __repr__(self) -> str:
        return f"PolygonBuilder(points={len(self.points)}, boundary={self.boundary})"

    def _replace(self, points) -> "PolygonBuilder":
        return PolygonBuilder(points, self.boundary, self.holes, self.meta)

    def map_points(self, f: Callable[[Point], Point]) -> "PolygonBuilder":
        return self._replace(as_point(f(p)) for p in self.points)

    def cast(self, f: Callable[[Any], Any]) -> "PolygonBuilder":
        return self._replace(p.cast(f) for p in self.points)

    def translate(self, offset) -> "PolygonBuilder":
        if not isinstance(offset, Vector):
            offset = Vector(*offset)
        return self.map_points(lambda p: p + offset)

    def scale(self, factor) -> "PolygonBuilder":
        if not factor > 0:
            raise ValueError(f"Scale factor must be positive, got {factor}")
        return self.map_points(lambda p: Point(p.x * factor, p.y * factor))

    def build(self) -> Polygon:
        """
        Validate the parts and return a Polygon.

        Raises
        ------
        PolygonError
            If the parts violate any polygon invariant.
        """
        points, field = _coerce_points(self.points)
        if len(self.meta) != len(points):
            raise ValueError(
                f"Expected {len(points)} meta values, got {len(self.meta)}"
            )
        polygon = Polygon._from_parts(points, self.boundary, self.holes, self.meta, field)
        polygon.validate()
        return polygon
