"""Generation configuration system with frozen, hashable, serializable dataclasses."""

from src.config.defaults import DEFAULT_CONFIG
from src.config.generation import (
    KINDS,
    BipartiteConfig,
    ChainConfig,
    GenerationConfig,
    RegularBipartiteConfig,
    TreeConfig,
    UndirectedConfig,
)
from src.config.hashing import config_hash, full_config_hash, structure_config_hash
from src.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "BipartiteConfig",
    "ChainConfig",
    "DEFAULT_CONFIG",
    "GenerationConfig",
    "KINDS",
    "RegularBipartiteConfig",
    "TreeConfig",
    "UndirectedConfig",
    "config_from_dict",
    "config_from_json",
    "config_hash",
    "config_to_dict",
    "config_to_json",
    "full_config_hash",
    "structure_config_hash",
]
