"""
Random integer partitions and zero-sum edge vectors.

The edge vectors of a closed polygon sum to zero. These helpers draw such
vectors from an explicitly supplied random generator so every result is
reproducible from the generator state.
"""

from fractions import Fraction
from typing import List, Protocol, Union

import numpy as np

from ..core.point import Vector


class IntegerSampler(Protocol):
    """Uniform integer sampling over the half-open range [low, high)."""

    def integers(self, low: int, high: int): ...


RandomSource = Union[IntegerSampler, int, None]


def as_generator(rng: RandomSource = None) -> IntegerSampler:
    """
    Resolve a random source.

    Parameters
    ----------
    rng : Generator, int or None
        An object with an ``integers(low, high)`` method is used as is.
        An integer seed or None is passed to ``numpy.random.default_rng``.

    Returns
    -------
    IntegerSampler
        Generator to draw from.
    """
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    if not hasattr(rng, "integers"):
        raise TypeError(
            f"Expected a generator with an integers() method, got {type(rng).__name__}"
        )
    return rng


def _check_counts(n: int, max_: int) -> None:
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if max_ < 0:
        raise ValueError(f"max_ must be non-negative, got {max_}")


# Largest span drawn in one call; numpy bounds are int64
CHUNK_BITS = 62


def uniform_integer(rng: IntegerSampler, low: int, high: int) -> int:
    """
    Draw a uniform integer from [low, high) for bounds of any size.

    Spans that fit a single numpy draw use one ``integers`` call. Larger
    spans are assembled from ``CHUNK_BITS``-bit draws, and values past the
    span are rejected and drawn again, which keeps the result uniform.
    """
    span = high - low
    if span <= 0:
        raise ValueError(f"Empty range [{low}, {high})")
    if span <= 1 << CHUNK_BITS:
        return low + int(rng.integers(0, span))

    bits = (span - 1).bit_length()
    chunks = -(-bits // CHUNK_BITS)
    while True:
        value = 0
        for _ in range(chunks):
            value = (value << CHUNK_BITS) | int(rng.integers(0, 1 << CHUNK_BITS))
        value >>= chunks * CHUNK_BITS - bits
        if value < span:
            return low + value


def partition(n: int, max_: int, rng: RandomSource = None) -> List[int]:
    """
    Split ``max_`` into ``n`` random positive integers.

    Draws ``n - 1`` distinct cut points uniformly from [1, max_) and returns
    the gaps between consecutive cuts, so the parts sum to exactly ``max_``.

    When ``max_ < n + 1`` there is no room for distinct cuts and ``n`` ones
    are returned instead. Their sum is ``n``, not ``max_``.

    Parameters
    ----------
    n : int
        Number of parts.
    max_ : int
        Total to split.
    rng : Generator, int or None
        Random source, see ``as_generator``.

    Returns
    -------
    list of int
        ``n`` positive integers.
    """
    _check_counts(n, max_)
    if n == 0:
        return []
    if max_ < n + 1:
        return [1] * n

    rng = as_generator(rng)
    cuts = set()
    while len(cuts) < n - 1:
        cuts.add(uniform_integer(rng, 1, max_))

    parts = []
    prev = 0
    for cut in sorted(cuts):
        parts.append(cut - prev)
        prev = cut
    parts.append(max_ - prev)
    return parts


def zero_sum_partition(n: int, max_: int, rng: RandomSource = None) -> List[int]:
    """
    Draw ``n`` integers that sum to zero.

    The difference of two independent partitions of ``max_``.
    """
    rng = as_generator(rng)
    first = partition(n, max_, rng)
    second = partition(n, max_, rng)
    return [a - b for a, b in zip(first, second)]


def random_vectors(n: int, max_: int, rng: RandomSource = None) -> List[Vector]:
    """
    Draw ``n`` exact rational vectors that sum to the zero vector.

    The x and y components are independent zero-sum partitions.
    """
    rng = as_generator(rng)
    xs = zero_sum_partition(n, max_, rng)
    ys = zero_sum_partition(n, max_, rng)
    return [Vector(Fraction(x), Fraction(y)) for x, y in zip(xs, ys)]
