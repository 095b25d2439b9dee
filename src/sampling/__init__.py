"""Sampling kernel: uniform draws, shuffles and exact subset sampling."""

from src.sampling.numbers import uniform_int, uniform_real
from src.sampling.reservoir import random_partition, reservoir_sample
from src.sampling.sequences import (
    random_element,
    random_subsequence,
    random_substring,
    shuffle,
    shuffled,
    weighted_length_sample,
)

__all__ = [
    "random_element",
    "random_partition",
    "random_subsequence",
    "random_substring",
    "reservoir_sample",
    "shuffle",
    "shuffled",
    "uniform_int",
    "uniform_real",
    "weighted_length_sample",
]
