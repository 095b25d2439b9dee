"""Sequence-level sampling: shuffles, element picks, subsequences, substrings."""

import logging
from collections.abc import MutableSequence, Sequence
from typing import TypeVar

import numpy as np

from src.errors import InvalidArgument
from src.reproducibility.seed import get_generator
from src.sampling.numbers import uniform_int
from src.sampling.reservoir import reservoir_sample

log = logging.getLogger(__name__)

T = TypeVar("T")


def shuffle(seq: MutableSequence) -> None:
    """Fisher-Yates shuffle in place, driven by uniform_int."""
    n = len(seq)
    for i in range(n):
        j = uniform_int(i, n - 1)
        seq[i], seq[j] = seq[j], seq[i]


def shuffled(seq: Sequence[T]) -> list[T]:
    """Return a shuffled copy of seq as a list."""
    result = list(seq)
    shuffle(result)
    return result


def random_element(seq: Sequence[T]) -> T:
    """Pick one element uniformly.

    Raises:
        InvalidArgument: If seq is empty.
    """
    if len(seq) == 0:
        raise InvalidArgument("random_element expects a non-empty sequence")
    return seq[uniform_int(0, len(seq) - 1)]


def weighted_length_sample(weights: Sequence[float]) -> int:
    """Draw an index with probability proportional to its weight.

    Raises:
        InvalidArgument: If weights is empty, has a negative entry, or sums to 0.
    """
    w = np.asarray(weights, dtype=np.float64)
    if w.size == 0:
        raise InvalidArgument("weighted_length_sample expects at least one weight")
    if (w < 0).any():
        raise InvalidArgument("weighted_length_sample expects non-negative weights")
    total = w.sum()
    if total <= 0:
        raise InvalidArgument("weighted_length_sample expects a positive total weight")
    return int(get_generator().choice(w.size, p=w / total))


def _hash_limit(n: int) -> int:
    """Largest subset size for which reservoir sampling beats a full shuffle."""
    log2 = 1
    while (1 << log2) < n:
        log2 += 1
    return n // log2


def random_subsequence(
    seq: Sequence[T], size: int | None = None, allow_null: bool = True
) -> list[T]:
    """Pick an order-preserving subsequence of seq.

    With `size`, every size-subset of positions is equally likely. Small
    sizes (relative to len(seq) / log2(len(seq))) are drawn with
    reservoir_sample; larger ones shuffle all positions and keep a prefix.

    Without `size`, each element is kept on a fair coin flip. If allow_null
    is False the flips are repeated until something is kept.

    Raises:
        InvalidArgument: If size is outside [0, len(seq)], or if seq is empty
            and allow_null is False.
    """
    n = len(seq)
    if size is None:
        if n == 0 and not allow_null:
            raise InvalidArgument(
                "random_subsequence of an empty sequence requires allow_null"
            )
        while True:
            result = [item for item in seq if uniform_int(0, 1) == 1]
            if result or allow_null:
                return result

    if size < 0 or size > n:
        raise InvalidArgument(
            f"random_subsequence expects size in [0, {n}], got {size}"
        )
    if size == 0:
        return []
    if size == 1:
        return [seq[uniform_int(0, n - 1)]]

    if size <= _hash_limit(n):
        log.debug("random_subsequence: reservoir branch (%d of %d)", size, n)
        return [seq[p] for p in reservoir_sample(size, 0, n - 1)]

    log.debug("random_subsequence: shuffle branch (%d of %d)", size, n)
    positions = list(range(n))
    shuffle(positions)
    marked = np.zeros(n, dtype=bool)
    marked[positions[:size]] = True
    return [seq[p] for p in np.flatnonzero(marked)]


def random_substring(
    seq: Sequence[T],
    size: int | None = None,
    least: int | None = None,
    most: int | None = None,
) -> list[T]:
    """Pick a contiguous slice of seq.

    With `size` the start position is uniform. Otherwise the length is drawn
    from [least, most] (defaults 0 and len(seq)) with weight
    len(seq) - length + 1, so every (start, length) slice is equally likely.

    Raises:
        InvalidArgument: If size, least or most fall outside [0, len(seq)],
            or least > most.
    """
    n = len(seq)
    if size is None:
        least = 0 if least is None else least
        most = n if most is None else most
        if least < 0 or least > n:
            raise InvalidArgument(f"random_substring expects least in [0, {n}], got {least}")
        if most < 0 or most > n:
            raise InvalidArgument(f"random_substring expects most in [0, {n}], got {most}")
        if least > most:
            raise InvalidArgument(
                f"random_substring expects least ({least}) <= most ({most})"
            )
        weights = [0.0] * (n + 1)
        for length in range(least, most + 1):
            weights[length] = n - length + 1
        size = weighted_length_sample(weights)

    if size < 0 or size > n:
        raise InvalidArgument(f"random_substring expects size in [0, {n}], got {size}")
    if size == 0:
        return []

    start = uniform_int(0, n - size)
    return list(seq[start : start + size])
