"""Chains (undirected) and paths (directed)."""

import logging

from src.errors import InvalidArgument
from src.graph.graph import Graph
from src.graph.node import add_arc, add_edge

log = logging.getLogger(__name__)


def _linear(size: int, directed: bool, randomize: bool, index_start: int) -> Graph:
    kind = "Paths" if directed else "Chains"
    if size <= 0:
        raise InvalidArgument(f"{kind} must have strictly positive sizes, got {size}")

    graph = Graph(size, index_start)
    connect = add_arc if directed else add_edge
    for i in range(index_start + 1, index_start + size):
        connect(graph[i - 1], graph[i])

    if randomize:
        graph.reindex(start=index_start)
    return graph


def chain(size: int = 1, randomize: bool = True, index_start: int = 0) -> Graph:
    """Undirected chain of `size` nodes.

    Args:
        size: Number of nodes; 1 yields an isolated node.
        randomize: Relabel randomly afterwards. Pass False to keep the chain
            in index order (endpoints at the two ends of the window), e.g.
            when composing it further.
        index_start: First index of the window.

    Raises:
        InvalidArgument: If size <= 0.
    """
    return _linear(size, directed=False, randomize=randomize, index_start=index_start)


def path(size: int = 1, randomize: bool = True, index_start: int = 0) -> Graph:
    """Directed path of `size` nodes; arcs run from lower to higher original index."""
    return _linear(size, directed=True, randomize=randomize, index_start=index_start)
