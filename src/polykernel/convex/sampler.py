"""
Statistical sampling of random convex polygons.
"""

from typing import Iterator

from ..generation.partition import RandomSource, as_generator
from .convex import ConvexPolygon


# Defaults for drawing "a random convex polygon" without further input
DEFAULT_SAMPLE_VERTICES = 100
DEFAULT_SAMPLE_BOUND = 2 ** 64 - 1


def sample_convex_polygon(
    rng: RandomSource = None,
    n: int = DEFAULT_SAMPLE_VERTICES,
    max_: int = DEFAULT_SAMPLE_BOUND
) -> ConvexPolygon:
    """Draw one random convex polygon with the default shape parameters."""
    return ConvexPolygon.random(n, max_, rng)


def sample_convex_polygons(
    count: int,
    rng: RandomSource = None,
    n: int = DEFAULT_SAMPLE_VERTICES,
    max_: int = DEFAULT_SAMPLE_BOUND
) -> Iterator[ConvexPolygon]:
    """
    Draw ``count`` independent convex polygons from one random source.

    Parameters
    ----------
    count : int
        Number of polygons to draw.
    rng : Generator, int or None
        Random source shared by all draws, see ``as_generator``.
    n : int
        Vertex count of each polygon.
    max_ : int
        Magnitude bound of each polygon's edge vectors.

    Yields
    ------
    ConvexPolygon
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = as_generator(rng)
    for _ in range(count):
        yield ConvexPolygon.random(n, max_, rng)
