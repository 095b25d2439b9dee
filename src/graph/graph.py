"""Ordered node container with an explicit index window.

A Graph holds nodes at positions index_start .. index_start + len - 1; each
node's ``index`` equals its position. Nodes may be referenced by several
graphs at once (composition relies on this), so membership is checked by
identity at the node's slot rather than by ownership.
"""

import copy
import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

import numpy as np
import scipy.sparse

from src.errors import InvalidArgument, StructuralPrecondition
from src.graph.node import Arc, Node, add_arc, add_edge
from src.sampling.sequences import shuffle

log = logging.getLogger(__name__)

PinSpec = Mapping[Node, int] | Iterable[tuple[Node, int]]


class Graph:
    """A sequence of nodes laid out over a contiguous index window."""

    def __init__(
        self,
        size: int = 1,
        index_start: int = 0,
        data_factory: Callable[[], Any] | None = None,
    ) -> None:
        """Allocate `size` fresh nodes indexed index_start .. index_start + size - 1.

        Args:
            size: Number of nodes (may be 0).
            index_start: First index of the window.
            data_factory: Optional callable producing each node's payload.

        Raises:
            InvalidArgument: If size is negative.
        """
        if size < 0:
            raise InvalidArgument(f"Graph size must be >= 0, got {size}")
        self._index_start = index_start
        self._nodes: list[Node] = [
            Node(index_start + i, data_factory() if data_factory else None)
            for i in range(size)
        ]

    # -- container protocol ------------------------------------------------

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> Node:
        if index < self.min_index or index > self.max_index:
            raise IndexError(
                f"index {index} outside graph window "
                f"[{self.min_index}, {self.max_index}]"
            )
        return self._nodes[index - self._index_start]

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Node) and self.has_node(node)

    def __repr__(self) -> str:
        return (
            f"Graph(size={len(self)}, window=[{self.min_index}, "
            f"{self.max_index}], edges={len(self.edges())})"
        )

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes)

    @property
    def min_index(self) -> int:
        return self._index_start

    @property
    def max_index(self) -> int:
        return self._index_start + len(self._nodes) - 1

    def has_node(self, node: Node) -> bool:
        """True if `node` itself sits at the slot its index points to."""
        if node.index < self.min_index or node.index > self.max_index:
            return False
        return self._nodes[node.index - self._index_start] is node

    # -- mutation ----------------------------------------------------------

    def clear(self) -> None:
        self._nodes = []

    def add_nodes(self, nodes: Iterable[Node]) -> None:
        """Append nodes, giving them the next sequential indices."""
        for node in nodes:
            node.index = self._index_start + len(self._nodes)
            self._nodes.append(node)

    def merge_graph(self, other: "Graph") -> None:
        """Append every node of `other` (identities are shared, not copied)."""
        self.add_nodes(list(other))

    def _put(self, index: int, node: Node) -> None:
        """Place `node` at an existing slot, taking over its index."""
        node.index = index
        self._nodes[index - self._index_start] = node

    def reindex(self, pinned: PinSpec | None = None, start: int = 0) -> None:
        """Assign a fresh random labeling over [start, start + len - 1].

        Pinned nodes receive their requested index; the others get a
        uniformly random permutation of the remaining values. Nodes are then
        reordered by index.

        Args:
            pinned: Node -> index mapping, or (node, index) pairs.
            start: First index of the new window.

        Raises:
            InvalidArgument: If a pinned value is outside the new window, or a
                node or value is pinned twice.
            StructuralPrecondition: If a pinned node is not in this graph.
        """
        if pinned is None:
            pairs: list[tuple[Node, int]] = []
        elif isinstance(pinned, Mapping):
            pairs = list(pinned.items())
        else:
            pairs = list(pinned)

        end = start + len(self._nodes) - 1
        fixed: set[int] = set()
        used: set[int] = set()
        for node, value in pairs:
            if value < start or value > end:
                raise InvalidArgument(
                    f"Pinned index {value} outside [{start}, {end}]"
                )
            if not self.has_node(node):
                raise StructuralPrecondition(f"{node!r} is not in the graph")
            if node.key in fixed:
                raise InvalidArgument(f"{node!r} is pinned more than once")
            if value in used:
                raise InvalidArgument(f"Index {value} is pinned more than once")
            fixed.add(node.key)
            used.add(value)

        unused = [v for v in range(start, end + 1) if v not in used]
        shuffle(unused)

        for node, value in pairs:
            node.index = value
        for node in self._nodes:
            if node.key not in fixed:
                node.index = unused.pop()

        self._nodes.sort(key=lambda node: node.index)
        self._index_start = start

    # -- views -------------------------------------------------------------

    def arcs(self, force_search: bool = True) -> list[Arc]:
        """All unmirrored arcs leaving nodes of this graph."""
        result: list[Arc] = []
        for node in self._nodes:
            result.extend(node.arcs(force_search))
        return result

    def edges(self, force_search: bool = True) -> list[Arc]:
        """Each undirected edge once, as the arc whose source has the lower index.

        Edges leading outside the graph (e.g. across the two sides of a
        bipartite pair) are always reported from the inside endpoint.
        """
        result: list[Arc] = []
        loops: set[int] = set()
        for node in self._nodes:
            for arc in node.edges(force_search):
                if not self.has_node(arc.target):
                    result.append(arc)
                elif arc.source is arc.target:
                    if arc.key not in loops:
                        loops.add(arc.key)
                        result.append(arc)
                elif arc.source.index <= arc.target.index:
                    result.append(arc)
        return result

    def clone(self) -> "Graph":
        """Deep copy: new node identities, same layout, topology and payloads.

        Arcs and edges that leave this graph have no counterpart in the copy
        and are dropped.
        """
        twin = Graph(len(self), self._index_start)
        for original, node in zip(self._nodes, twin):
            node.data = copy.deepcopy(original.data)

        dropped = 0
        for arc in self.arcs(True):
            if not self.has_node(arc.target):
                dropped += 1
                continue
            add_arc(
                twin[arc.source.index],
                twin[arc.target.index],
                copy.deepcopy(arc.data),
            )
        for edge in self.edges(True):
            if not self.has_node(edge.target):
                dropped += 1
                continue
            add_edge(
                twin[edge.source.index],
                twin[edge.target.index],
                copy.deepcopy(edge.data),
            )
        if dropped:
            log.debug("clone dropped %d connections leaving the graph", dropped)
        return twin

    def shuffled(self) -> "Graph":
        """Clone and randomly relabel from the current window start."""
        twin = self.clone()
        twin.reindex(start=self._index_start)
        return twin

    def edge_list(self) -> np.ndarray:
        """Canonical edges as an (m, 2) int64 array of index pairs."""
        pairs = [(e.source.index, e.target.index) for e in self.edges()]
        return np.array(pairs, dtype=np.int64).reshape(-1, 2)

    def to_adjacency(self) -> scipy.sparse.csr_matrix:
        """Sparse adjacency over window positions.

        Edges contribute both directions and unmirrored arcs one direction;
        parallel connections add up. Connections leaving the graph are
        ignored.
        """
        n = len(self._nodes)
        rows: list[int] = []
        cols: list[int] = []
        for node in self._nodes:
            for arc in node.out_arcs():
                if self.has_node(arc.target):
                    rows.append(arc.source.index - self._index_start)
                    cols.append(arc.target.index - self._index_start)
        data = np.ones(len(rows), dtype=np.float64)
        return scipy.sparse.coo_matrix((data, (rows, cols)), shape=(n, n)).tocsr()
