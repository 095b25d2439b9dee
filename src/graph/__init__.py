"""Graph store: nodes with shared identity, mirrored-arc edges, composition."""

from src.graph.composition import (
    expand_arc,
    expand_edge,
    expand_node,
    fuse_graph,
    fuse_random,
)
from src.graph.graph import Graph
from src.graph.node import (
    Arc,
    EdgeRecord,
    Node,
    add_arc,
    add_edge,
    erase_arc,
    erase_edge,
    has_arc,
    has_edge,
)
from src.graph.validation import (
    bipartite_pairs,
    connected_component_count,
    degree_sequence,
    diameter,
    distance_between,
    is_connected,
    is_forest,
    is_tree,
    validate_regular_bipartite,
)

__all__ = [
    "Arc",
    "EdgeRecord",
    "Graph",
    "Node",
    "add_arc",
    "add_edge",
    "bipartite_pairs",
    "connected_component_count",
    "degree_sequence",
    "diameter",
    "distance_between",
    "erase_arc",
    "erase_edge",
    "expand_arc",
    "expand_edge",
    "expand_node",
    "fuse_graph",
    "fuse_random",
    "has_arc",
    "has_edge",
    "is_connected",
    "is_forest",
    "is_tree",
    "validate_regular_bipartite",
]
