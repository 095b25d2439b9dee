"""Random simple undirected graphs, optionally guaranteed connected."""

import logging

from src.errors import InvalidArgument
from src.generators.tree import tree
from src.graph.graph import Graph
from src.graph.node import add_edge, erase_edge
from src.sampling.numbers import uniform_int
from src.sampling.reservoir import reservoir_sample
from src.sampling.sequences import shuffled

log = logging.getLogger(__name__)


def _max_edges(size: int) -> int:
    return size * (size - 1) // 2


def _sparse_graph(size: int, edges: int, index_start: int) -> Graph:
    """Uniform simple graph with exactly `edges` edges.

    Unordered pairs (u < v) are numbered row by row: row u holds the
    size - u - 1 pairs (u, u+1) .. (u, size-1).
    """
    graph = Graph(size, index_start)
    node = 0
    row_start = 0
    for pair_id in reservoir_sample(edges, 0, _max_edges(size) - 1):
        while pair_id >= row_start + size - node - 1:
            row_start += size - node - 1
            node += 1
        other = pair_id - row_start + node + 1
        add_edge(graph[index_start + node], graph[index_start + other])
    return graph


def undirected_graph(
    size: int,
    edges: int | None = None,
    connected: bool = False,
    index_start: int = 0,
) -> Graph:
    """Random simple undirected graph on `size` nodes.

    With connected=True a random tree is overlaid: its missing edges are
    added and the same number of random non-tree edges removed, so the edge
    count is unchanged and the result is connected.

    Args:
        size: Number of nodes.
        edges: Exact edge count; drawn uniformly from
            [size - 1 if connected else 0, size * (size - 1) / 2] when omitted.
        connected: Guarantee a single connected component.
        index_start: First index of the window.

    Raises:
        InvalidArgument: If size < 1, edges is out of range, or connected is
            requested with fewer than size - 1 edges.
    """
    if size < 1:
        raise InvalidArgument(f"undirected_graph needs size >= 1, got {size}")
    most = _max_edges(size)
    least = size - 1 if connected else 0
    if edges is None:
        edges = uniform_int(least, most)
    if edges < 0 or edges > most:
        raise InvalidArgument(f"edges must be in [0, {most}], got {edges}")
    if edges < least:
        raise InvalidArgument(
            f"A connected graph on {size} nodes needs at least {least} edges, got {edges}"
        )

    graph = _sparse_graph(size, edges, index_start)
    if not connected:
        return graph

    backbone = tree(size, index_start)
    bad_edges = 0
    for edge in backbone.edges():
        x, y = edge.source.index, edge.target.index
        if not graph[x].has_edge(graph[y]):
            add_edge(graph[x], graph[y])
            bad_edges += 1

    for edge in shuffled(graph.edges()):
        if bad_edges == 0:
            break
        x, y = edge.source.index, edge.target.index
        if not backbone[x].has_edge(backbone[y]):
            erase_edge(edge)
            bad_edges -= 1

    log.debug("undirected_graph: %d nodes, %d edges, connected", size, edges)
    return graph
