"""Default configuration: single source of truth for default generation parameters."""

from src.config.generation import GenerationConfig

# All-default values: kind="tree", tree.size=10, seed=42, index_start=0.
DEFAULT_CONFIG = GenerationConfig()
