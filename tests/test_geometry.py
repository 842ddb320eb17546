"""
Unit tests for numpy / shapely interop.
"""

from fractions import Fraction

import numpy as np
import pytest
from shapely.geometry import MultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon

from polykernel import APPROX, ClockWiseViolation, Polygon, PolygonBuilder
from polykernel.core.geometry import (
    ensure_ccw,
    from_numpy,
    from_shapely,
    to_numpy,
    to_shapely,
)


class TestEnsureCCW:
    """Tests for ensure_ccw() function."""

    def test_ccw_unchanged(self):
        """CCW polygon should remain unchanged."""
        ccw_square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        result = ensure_ccw(ccw_square)
        np.testing.assert_array_almost_equal(result, ccw_square)

    def test_cw_reversed(self):
        """CW polygon should be reversed to CCW."""
        cw_square = np.array([[0, 0], [0, 1], [1, 1], [1, 0]], dtype=float)
        result = ensure_ccw(cw_square)
        np.testing.assert_array_almost_equal(result, cw_square[::-1])

    def test_agrees_with_polygon_winding(self):
        """Reversal follows the sign of the kernel's shoelace sum."""
        l_shape = np.array([[0, 0], [0, 2], [1, 2], [1, 1], [2, 1], [2, 0]], dtype=float)
        result = ensure_ccw(l_shape)
        polygon = from_numpy(result)

        assert polygon.signed_area_2x() == PolygonBuilder(result.tolist()).signed_area_2x()
        assert polygon.signed_area() == pytest.approx(3.0)

    def test_exact_integer_array(self):
        cw_triangle = np.array([[0, 0], [0, 3], [4, 0]])
        result = ensure_ccw(cw_triangle)
        np.testing.assert_array_equal(result, cw_triangle[::-1])


class TestNumpy:
    """Tests for to_numpy() and from_numpy()."""

    def test_exact_to_array(self):
        polygon = Polygon([(0, 0), (Fraction(1, 2), 0), (0, 1)])
        result = to_numpy(polygon)

        assert result.shape == (3, 2)
        assert result.dtype == np.float64
        np.testing.assert_array_almost_equal(result, [[0, 0], [0.5, 0], [0, 1]])

    def test_from_array(self):
        square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        polygon = from_numpy(square)

        assert polygon.field is APPROX
        assert polygon.signed_area() == pytest.approx(1.0)

    def test_from_array_rejects_clockwise(self):
        cw_square = np.array([[0, 0], [0, 1], [1, 1], [1, 0]], dtype=float)
        with pytest.raises(ClockWiseViolation):
            from_numpy(cw_square)

    def test_from_array_orient(self):
        cw_square = np.array([[0, 0], [0, 1], [1, 1], [1, 0]], dtype=float)
        polygon = from_numpy(cw_square, orient=True)
        assert polygon.signed_area() == pytest.approx(1.0)

    def test_bad_shape(self):
        with pytest.raises(ValueError):
            from_numpy(np.zeros((4, 3)))

    def test_array_round_trip(self):
        square = np.array([[0, 0], [2, 0], [2, 2], [0, 2]], dtype=float)
        np.testing.assert_array_equal(to_numpy(from_numpy(square)), square)


class TestShapely:
    """Tests for to_shapely() and from_shapely()."""

    def test_to_shapely_area(self):
        polygon = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        result = to_shapely(polygon)

        assert result.is_valid
        assert result.area == pytest.approx(16.0)

    def test_to_shapely_with_hole(self):
        points = [(0, 0), (4, 0), (4, 4), (0, 4), (1, 1), (1, 2), (2, 1)]
        polygon = PolygonBuilder(points, boundary=4, holes=[4]).build()
        result = to_shapely(polygon)

        assert len(result.interiors) == 1
        assert result.area == pytest.approx(15.5)

    def test_from_shapely_removes_closing_vertex(self):
        """Shapely adds a closing vertex, the polygon should not."""
        shapely_poly = ShapelyPolygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        polygon = from_shapely(shapely_poly)
        assert len(polygon) == 4

    def test_from_shapely_orients(self):
        shapely_poly = ShapelyPolygon([(0, 0), (0, 1), (1, 1), (1, 0)])
        polygon = from_shapely(shapely_poly)
        assert polygon.signed_area() > 0

    def test_from_multipolygon_takes_largest(self):
        small = ShapelyPolygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        large = ShapelyPolygon([(5, 5), (8, 5), (8, 8), (5, 8)])
        polygon = from_shapely(MultiPolygon([small, large]))
        assert polygon.signed_area() == pytest.approx(9.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
