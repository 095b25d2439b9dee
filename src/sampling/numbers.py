"""Uniform scalar draws from the shared generator."""

from src.errors import InvalidArgument
from src.reproducibility.seed import get_generator


def uniform_int(lo: int, hi: int) -> int:
    """Draw an integer uniformly from the inclusive range [lo, hi].

    Raises:
        InvalidArgument: If lo > hi.
    """
    if lo > hi:
        raise InvalidArgument(
            f"uniform_int expects lo ({lo}) to be <= hi ({hi})"
        )
    return int(get_generator().integers(lo, hi, endpoint=True))


def uniform_real(lo: float, hi: float) -> float:
    """Draw a float uniformly from [lo, hi).

    Raises:
        InvalidArgument: If lo >= hi.
    """
    if lo >= hi:
        raise InvalidArgument(
            f"uniform_real expects lo ({lo}) to be strictly < hi ({hi})"
        )
    return float(get_generator().uniform(lo, hi))
