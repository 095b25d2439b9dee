"""Bipartite graphs returned as a (left, right) pair of graphs.

Edges run between nodes of the two graphs, so each side's ``edges()``
reports them from its own endpoint. Both sides use the same index window.
"""

import logging

from src.errors import InvalidArgument
from src.graph.graph import Graph
from src.graph.node import add_edge
from src.sampling.numbers import uniform_int
from src.sampling.reservoir import random_partition, reservoir_sample
from src.sampling.sequences import random_subsequence

log = logging.getLogger(__name__)


def bipartite(
    left_size: int,
    right_size: int,
    edges: int,
    allow_parallel: bool = False,
    index_start: int = 0,
) -> tuple[Graph, Graph]:
    """Random bipartite graph with exactly `edges` edges.

    With allow_parallel, each edge picks its endpoints independently.
    Otherwise the left x right grid is flattened into cell ids
    row * right_size + col and `edges` distinct cells are reservoir-sampled.

    Raises:
        InvalidArgument: If a side is empty, edges is negative, or edges
            exceeds left_size * right_size without allow_parallel.
    """
    if left_size < 1:
        raise InvalidArgument(f"left_size must be strictly positive, got {left_size}")
    if right_size < 1:
        raise InvalidArgument(f"right_size must be strictly positive, got {right_size}")
    if edges < 0:
        raise InvalidArgument(f"edges must be non-negative, got {edges}")
    if not allow_parallel and edges > left_size * right_size:
        raise InvalidArgument(
            f"Without parallel edges at most {left_size * right_size} edges fit "
            f"between {left_size} and {right_size} nodes, got {edges}"
        )

    left = Graph(left_size, index_start)
    right = Graph(right_size, index_start)

    if allow_parallel:
        for _ in range(edges):
            first = uniform_int(0, left_size - 1)
            second = uniform_int(0, right_size - 1)
            add_edge(left[index_start + first], right[index_start + second])
    else:
        for cell in reservoir_sample(edges, 0, left_size * right_size - 1):
            first, second = divmod(cell, right_size)
            add_edge(left[index_start + first], right[index_start + second])

    log.debug(
        "bipartite: %d x %d with %d edges (parallel=%s)",
        left_size,
        right_size,
        edges,
        allow_parallel,
    )
    return left, right


def bipartite_random_edges(
    left_size: int, right_size: int, allow_parallel: bool = False, index_start: int = 0
) -> tuple[Graph, Graph]:
    """Bipartite graph whose edge count is uniform in [0, left_size * right_size]."""
    edges = uniform_int(0, left_size * right_size)
    return bipartite(left_size, right_size, edges, allow_parallel, index_start)


def bipartite_random_split(
    nodes: int, allow_parallel: bool = False, index_start: int = 0
) -> tuple[Graph, Graph]:
    """Split `nodes` into two non-empty sides, then call bipartite_random_edges.

    Raises:
        InvalidArgument: If nodes < 2.
    """
    if nodes < 2:
        raise InvalidArgument(f"A bipartite split needs at least 2 nodes, got {nodes}")
    left_size, right_size = random_partition(nodes, 2)
    return bipartite_random_edges(left_size, right_size, allow_parallel, index_start)


def regular_bipartite(
    n: int, degree: int, index_start: int = 0
) -> tuple[Graph, Graph]:
    """Exact degree-regular simple bipartite graph with n nodes per side.

    Left nodes are processed in order. Right nodes are bucketed by remaining
    capacity (degree minus edges taken). With r left nodes still to process,
    a right node whose capacity equals r must be taken now or it can never
    fill up, so those are forced. The rest are chosen by reservoir-sampling
    a virtual index space split between capacity-1 nodes and the pool of
    nodes with capacity > 1. Capacities never exceed r, which guarantees
    every step has enough distinct right nodes left.

    Raises:
        InvalidArgument: If n < 1 or degree is outside [0, n].
    """
    if n < 1:
        raise InvalidArgument(f"regular_bipartite needs n >= 1, got {n}")
    if degree < 0 or degree > n:
        raise InvalidArgument(f"degree must be in [0, {n}], got {degree}")

    left = Graph(n, index_start)
    right = Graph(n, index_start)
    if degree == 0:
        return left, right

    # capacity -> right nodes (positions 0..n-1) with that remaining capacity
    by_capacity: list[list[int]] = [[] for _ in range(degree + 1)]
    by_capacity[degree] = list(range(n))
    where = [(degree, i) for i in range(n)]  # node -> (capacity, slot in bucket)

    # right nodes with capacity > 1, with swap-remove positions
    wide = list(range(n)) if degree > 1 else []
    wide_slot = list(range(n))

    def take(node: int) -> int:
        """Remove node from its bucket (and from `wide`); return its capacity."""
        capacity, slot = where[node]
        bucket = by_capacity[capacity]
        last = bucket[-1]
        bucket[slot] = last
        where[last] = (capacity, slot)
        bucket.pop()

        if capacity > 1:
            position = wide_slot[node]
            last = wide[-1]
            wide[position] = last
            wide_slot[last] = position
            wide.pop()

        return capacity

    for i in range(n):
        remaining = n - i
        picked: list[tuple[int, int]] = []

        # capacity-1 nodes that may be chosen while leaving enough others
        max_ones = min(len(wide) + len(by_capacity[1]) - degree, len(by_capacity[1]))

        if remaining <= degree:
            for node in list(by_capacity[remaining]):
                picked.append((node, take(node)))
            if picked:
                log.debug(
                    "regular_bipartite: left %d forced %d right nodes", i, len(picked)
                )

        picked_ones = 0
        need = degree - len(picked)
        if need:
            draws = reservoir_sample(need, 1, max_ones + len(wide))
            picked_ones = sum(1 for value in draws if value <= max_ones)

        for node in random_subsequence(by_capacity[1], picked_ones):
            picked.append((node, take(node)))
        for node in random_subsequence(wide, degree - len(picked)):
            picked.append((node, take(node)))

        for node, capacity in picked:
            add_edge(left[index_start + i], right[index_start + node])
            bucket = by_capacity[capacity - 1]
            bucket.append(node)
            where[node] = (capacity - 1, len(bucket) - 1)
            if capacity > 2:
                wide.append(node)
                wide_slot[node] = len(wide) - 1

    log.info("regular_bipartite: n=%d, degree=%d, edges=%d", n, degree, n * degree)
    return left, right
