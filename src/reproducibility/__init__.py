"""Reproducibility infrastructure: the shared seeded generator."""

from src.reproducibility.seed import (
    current_seed,
    get_generator,
    reseed,
    set_seed,
    set_seed_logging,
    verify_seed_determinism,
)

__all__ = [
    "current_seed",
    "get_generator",
    "reseed",
    "set_seed",
    "set_seed_logging",
    "verify_seed_determinism",
]
