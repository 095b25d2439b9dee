"""Random recursive trees and diameter-bounded wide trees.

Both use random recursive attachment: each new node hangs off a uniformly
chosen node among those already present. This is the random recursive tree
distribution, not the uniform distribution over labeled trees; tree
assemblers rely on its leaf and attachment shape, so it is kept as is.
"""

import logging

from src.errors import InvalidArgument
from src.generators.chain import chain
from src.graph.graph import Graph
from src.graph.node import Node, add_edge
from src.sampling.sequences import random_element

log = logging.getLogger(__name__)


def _attach(graph: Graph, count: int) -> None:
    """Grow `graph` by `count` nodes, each attached to an existing node."""
    members = graph.nodes
    for _ in range(count):
        node = Node()
        parent = random_element(members)
        add_edge(node, parent)
        graph.add_nodes([node])
        members.append(node)


def tree(size: int = 1, index_start: int = 0) -> Graph:
    """Random recursive tree on `size` nodes with a random final labeling.

    Raises:
        InvalidArgument: If size <= 0.
    """
    if size <= 0:
        raise InvalidArgument(f"Trees must have strictly positive sizes, got {size}")

    graph = Graph(1, index_start)
    _attach(graph, size - 1)
    graph.reindex(start=index_start)

    log.debug("tree: %d nodes, %d edges", len(graph), len(graph.edges()))
    return graph


def wide_tree(
    size: int,
    min_diameter: int,
    random_ends: bool = True,
    index_start: int = 0,
) -> Graph:
    """Tree whose diameter is at least min_diameter - 1 hops.

    A chain of min_diameter nodes forms the backbone; the remaining nodes are
    attached exactly as in tree(). With random_ends=False the two backbone
    endpoints are pinned to index_start and index_start + 1.

    Raises:
        InvalidArgument: If size < 2, min_diameter < 2 or
            min_diameter >= size.
    """
    if size < 2:
        raise InvalidArgument(f"Wide trees must have at least two nodes, got {size}")
    if min_diameter < 2:
        raise InvalidArgument(
            f"Wide trees must have a diameter of at least two, got {min_diameter}"
        )
    if min_diameter >= size:
        raise InvalidArgument(
            f"Diameter ({min_diameter}) must be strictly less than the tree size ({size})"
        )

    graph = chain(min_diameter, randomize=False, index_start=index_start)
    start = graph[graph.min_index]
    end = graph[graph.max_index]

    _attach(graph, size - min_diameter)

    if random_ends:
        graph.reindex(start=index_start)
    else:
        graph.reindex({start: index_start, end: index_start + 1}, start=index_start)

    log.debug(
        "wide_tree: %d nodes, backbone %d, endpoints at %d and %d",
        size,
        min_diameter,
        start.index,
        end.index,
    )
    return graph
