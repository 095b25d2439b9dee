"""Structural generators: chains, trees, bipartite and undirected graphs."""

from src.generators.assemblers import (
    ChainPart,
    HTreePart,
    RandomTreePart,
    StarPart,
    TreePart,
    WideTreePart,
    leaves,
)
from src.generators.bipartite import (
    bipartite,
    bipartite_random_edges,
    bipartite_random_split,
    regular_bipartite,
)
from src.generators.chain import chain, path
from src.generators.pipeline import generate
from src.generators.tree import tree, wide_tree
from src.generators.types import GenerationResult
from src.generators.undirected import undirected_graph

__all__ = [
    "ChainPart",
    "GenerationResult",
    "HTreePart",
    "RandomTreePart",
    "StarPart",
    "TreePart",
    "WideTreePart",
    "bipartite",
    "bipartite_random_edges",
    "bipartite_random_split",
    "chain",
    "generate",
    "leaves",
    "path",
    "regular_bipartite",
    "tree",
    "undirected_graph",
    "wide_tree",
]
