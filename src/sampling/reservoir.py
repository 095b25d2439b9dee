"""Exact k-of-n sampling without enumerating the range.

Uses the "Programming Pearls" substitution trick (Floyd's algorithm): each
step draws from a range that grows by one, and a collision is replaced by the
new upper bound, which cannot have been taken yet. Every k-subset of
[lo, hi] is equally likely and only k draws are made.
"""

import logging

from src.errors import InvalidArgument
from src.sampling.numbers import uniform_int

log = logging.getLogger(__name__)


def reservoir_sample(k: int, lo: int, hi: int) -> list[int]:
    """Draw k distinct integers uniformly from [lo, hi].

    Args:
        k: Number of values to draw.
        lo: Smallest allowed value.
        hi: Largest allowed value.

    Returns:
        The sampled values sorted ascending.

    Raises:
        InvalidArgument: If k is negative or exceeds hi - lo + 1.
    """
    if k < 0:
        raise InvalidArgument(f"reservoir_sample expects k >= 0, got {k}")
    if k == 0:
        return []
    if k > hi - lo + 1:
        raise InvalidArgument(
            f"reservoir_sample cannot draw {k} distinct values "
            f"from [{lo}, {hi}]"
        )

    taken: set[int] = set()
    for i in range(k):
        bound = hi - k + 1 + i
        candidate = uniform_int(lo, bound)
        if candidate in taken:
            candidate = bound
        taken.add(candidate)

    return sorted(taken)


def random_partition(n: int, parts: int) -> list[int]:
    """Split n into `parts` strictly positive integers.

    The parts - 1 cut points are a reservoir sample of [2, n]; a cut at c
    starts a new part at position c of 1..n.

    Raises:
        InvalidArgument: If parts < 1 or n < parts.
    """
    if parts < 1:
        raise InvalidArgument(f"random_partition expects parts >= 1, got {parts}")
    if n < parts:
        raise InvalidArgument(
            f"random_partition cannot split {n} into {parts} positive parts"
        )

    cuts = reservoir_sample(parts - 1, 2, n)
    bounds = [1] + cuts + [n + 1]
    return [bounds[i + 1] - bounds[i] for i in range(parts)]
