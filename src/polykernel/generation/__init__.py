"""
Random zero-sum partitions.
"""

from .partition import (
    IntegerSampler,
    as_generator,
    uniform_integer,
    partition,
    zero_sum_partition,
    random_vectors,
)

__all__ = [
    'IntegerSampler',
    'as_generator',
    'uniform_integer',
    'partition',
    'zero_sum_partition',
    'random_vectors',
]
