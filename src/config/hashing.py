"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from src.config.generation import GenerationConfig

# Fields that never change the generated structure.
_COSMETIC_FIELDS = ("seed", "log_seed", "description", "tags")


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Optional list of top-level field names to exclude.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = asdict(config)
    for name in exclude_fields or ():
        d.pop(name, None)
    serialized = json.dumps(
        d,
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


def structure_config_hash(config: GenerationConfig) -> str:
    """Hash of the structural parameters only (excludes seed and labels).

    Two configs differing only in seed share this hash.
    """
    return config_hash(config, exclude_fields=list(_COSMETIC_FIELDS))


def full_config_hash(config: GenerationConfig) -> str:
    """Hash for full generation identity, seed included."""
    return config_hash(config)
