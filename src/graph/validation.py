"""Structural checks for generated graphs.

Used by the test-suite and available to callers who want to assert the
guarantees a generator makes (connectivity, acyclicity, exact degrees)
before feeding a graph to the algorithm under test.
"""

import logging

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import connected_components, shortest_path

from src.errors import StructuralPrecondition
from src.graph.graph import Graph
from src.graph.node import Node

log = logging.getLogger(__name__)


def _undirected_adjacency(graph: Graph) -> scipy.sparse.csr_matrix:
    """Binary symmetric adjacency built from the graph's edges only."""
    n = len(graph)
    rows: list[int] = []
    cols: list[int] = []
    for edge in graph.edges():
        if graph.has_node(edge.target):
            rows.append(edge.source.index - graph.min_index)
            cols.append(edge.target.index - graph.min_index)
    data = np.ones(len(rows), dtype=np.float64)
    adj = scipy.sparse.coo_matrix((data, (rows, cols)), shape=(n, n)).tocsr()
    adj = adj + adj.T
    adj.data[:] = 1.0
    return adj


def connected_component_count(graph: Graph) -> int:
    """Number of connected components of the undirected edge structure."""
    if len(graph) == 0:
        return 0
    n_components, _ = connected_components(
        _undirected_adjacency(graph), directed=False
    )
    return int(n_components)


def is_connected(graph: Graph) -> bool:
    return connected_component_count(graph) == 1


def is_forest(graph: Graph) -> bool:
    """An undirected graph is a forest iff m = n - components (no cycles)."""
    m = len(graph.edges())
    return m == len(graph) - connected_component_count(graph)


def is_tree(graph: Graph) -> bool:
    """Connected and acyclic: exactly n - 1 edges in a single component."""
    return len(graph.edges()) == len(graph) - 1 and is_connected(graph)


def degree_sequence(graph: Graph) -> np.ndarray:
    """Undirected degree of each node, ordered by position in the window."""
    return np.array([node.degree() for node in graph], dtype=np.int64)


def distance_between(graph: Graph, u: Node, v: Node) -> float:
    """Hop count of the shortest u - v path (inf when disconnected).

    Raises:
        StructuralPrecondition: If u or v is not in the graph.
    """
    if not graph.has_node(u) or not graph.has_node(v):
        raise StructuralPrecondition("distance_between expects nodes of the graph")
    dist = shortest_path(
        _undirected_adjacency(graph),
        directed=False,
        unweighted=True,
        indices=u.index - graph.min_index,
    )
    return float(dist[v.index - graph.min_index])


def diameter(graph: Graph) -> float:
    """Longest shortest path over all node pairs (inf when disconnected)."""
    if len(graph) == 0:
        return 0.0
    dist = shortest_path(_undirected_adjacency(graph), directed=False, unweighted=True)
    return float(dist.max())


def bipartite_pairs(left: Graph, right: Graph) -> list[tuple[int, int]]:
    """(left_index, right_index) of every edge from left into right."""
    pairs: list[tuple[int, int]] = []
    for node in left:
        for edge in node.edges():
            if right.has_node(edge.target):
                pairs.append((node.index, edge.target.index))
    return pairs


def validate_regular_bipartite(left: Graph, right: Graph, degree: int) -> list[str]:
    """Validate an exact `degree`-regular simple bipartite pair.

    Checks (cheapest first):
    1. Side sizes match
    2. Every left and right node has degree exactly `degree`
    3. Total edge count is n * degree
    4. No (left, right) pair repeats

    Returns:
        List of error strings (empty = valid).
    """
    errors: list[str] = []

    if len(left) != len(right):
        errors.append(f"Side sizes differ: {len(left)} != {len(right)}")

    for side, graph in (("left", left), ("right", right)):
        degrees = degree_sequence(graph)
        bad = np.flatnonzero(degrees != degree)
        if bad.size:
            errors.append(
                f"{bad.size} {side} nodes have degree != {degree} "
                f"(first at position {int(bad[0])}: {int(degrees[bad[0]])})"
            )

    pairs = bipartite_pairs(left, right)
    expected = len(left) * degree
    if len(pairs) != expected:
        errors.append(f"Edge count {len(pairs)} != {expected}")

    if len(set(pairs)) != len(pairs):
        errors.append(f"{len(pairs) - len(set(pairs))} repeated (left, right) pairs")

    if errors:
        log.debug("Regular bipartite validation failed: %s", "; ".join(errors))
    return errors
