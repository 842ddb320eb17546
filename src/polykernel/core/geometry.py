"""
Interop between polygons and the numpy / shapely ecosystem.

Contains utility functions for:
- Polygon to/from (M, 2) numpy vertex arrays
- Polygon to/from Shapely geometries
- Vertex ordering (CCW) of raw arrays
"""

import numpy as np
from shapely.geometry import MultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon

from .polygon import Polygon, PolygonBuilder


def ensure_ccw(poly: np.ndarray) -> np.ndarray:
    """
    Reverse a clockwise vertex array.

    The winding is decided by the same shoelace sum that Polygon validates
    with, so orienting and validating agree on the sign.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).

    Returns
    -------
    np.ndarray
        Polygon vertices in CCW order.
    """
    if PolygonBuilder(poly.tolist()).signed_area_2x() < 0:
        return poly[::-1].copy()
    return poly


def to_numpy(polygon: Polygon) -> np.ndarray:
    """
    Convert the boundary ring of a polygon to a float array.

    Parameters
    ----------
    polygon : Polygon
        Exact or approximate polygon.

    Returns
    -------
    np.ndarray
        Boundary vertices of shape (M, 2), CCW order, dtype float64.
    """
    ring = polygon.points[:polygon.boundary]
    return np.array([[float(p.x), float(p.y)] for p in ring], dtype=np.float64)


def from_numpy(poly: np.ndarray, orient: bool = False) -> Polygon:
    """
    Build an approximate polygon from a vertex array.

    Parameters
    ----------
    poly : np.ndarray
        Polygon vertices of shape (M, 2).
    orient : bool
        If True, reverse clockwise input instead of rejecting it.

    Returns
    -------
    Polygon
        Validated polygon with float coordinates.
    """
    poly = np.asarray(poly, dtype=np.float64)

    if poly.ndim != 2 or poly.shape[1] != 2:
        raise ValueError(f"Expected vertices of shape (M, 2), got {poly.shape}")

    if orient and len(poly) >= 3:
        poly = ensure_ccw(poly)

    return Polygon([(float(x), float(y)) for x, y in poly])


def to_shapely(polygon: Polygon) -> ShapelyPolygon:
    """
    Convert a polygon to a Shapely polygon.

    Hole rings, if any, become interiors. Coordinates are converted to float.
    """
    coords = [(float(p.x), float(p.y)) for p in polygon.points]
    starts = sorted(polygon.holes)
    ends = starts[1:] + [len(coords)]
    interiors = [coords[s:e] for s, e in zip(starts, ends)]
    return ShapelyPolygon(coords[:polygon.boundary], interiors)


def from_shapely(geom) -> Polygon:
    """
    Build an approximate polygon from the exterior ring of a Shapely geometry.

    Parameters
    ----------
    geom : Polygon or MultiPolygon
        Shapely geometry. For a MultiPolygon the largest member is used.

    Returns
    -------
    Polygon
        Validated polygon in CCW order.
    """
    if isinstance(geom, MultiPolygon):
        geom = max(geom.geoms, key=lambda g: g.area)

    coords = np.array(geom.exterior.coords)
    # Remove the closing duplicate vertex that Shapely adds
    if len(coords) > 1 and np.allclose(coords[0], coords[-1]):
        coords = coords[:-1]
    return from_numpy(coords, orient=True)
