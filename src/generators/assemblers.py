"""Composable tree parts for building self-similar test trees.

Each part wraps a graph and exposes its leaves as the nodes where other
parts may be spliced in. Parts are combined with expand_node (a leaf is
replaced by a whole part) and, for H-shaped parts, with fuse_graph (the wing
chains of two H parts are identified node by node).
"""

import logging
from dataclasses import dataclass, field

from src.errors import StructuralPrecondition
from src.generators.chain import chain
from src.generators.tree import tree, wide_tree
from src.graph.composition import expand_node, fuse_graph
from src.graph.graph import Graph
from src.graph.node import Node, add_edge
from src.sampling.sequences import random_element

log = logging.getLogger(__name__)


def leaves(graph: Graph) -> list[Node]:
    """Degree-1 nodes; a single-node graph is its own leaf.

    Raises:
        StructuralPrecondition: If the graph has no leaf.
    """
    if len(graph) == 1:
        return [graph[graph.min_index]]
    found = [node for node in graph if node.degree() == 1]
    if not found:
        raise StructuralPrecondition("Tree part has no leaves")
    return found


@dataclass
class TreePart:
    """A graph plus the nodes other parts may be attached at."""

    graph: Graph

    def nodes_of_interest(self) -> list[Node]:
        # Isomorphic parts return isomorphic node lists.
        return leaves(self.graph)

    def random_node_of_interest(self) -> Node:
        return random_element(self.nodes_of_interest())

    def combine(self, other: "TreePart") -> "TreePart":
        """Replace a random leaf of this part by `other`, attached at one of its leaves."""
        target = self.random_node_of_interest()
        anchor = other.random_node_of_interest()
        expand_node(self.graph, target, other.graph, [anchor])
        return self


@dataclass
class ChainPart(TreePart):
    length: int = 1

    @classmethod
    def make(cls, length: int) -> "ChainPart":
        return cls(chain(length, randomize=False), length)


@dataclass
class RandomTreePart(TreePart):
    @classmethod
    def make(cls, size: int) -> "RandomTreePart":
        return cls(tree(size))


@dataclass
class WideTreePart(TreePart):
    @classmethod
    def make(cls, size: int, min_diameter: int) -> "WideTreePart":
        return cls(wide_tree(size, min_diameter))


@dataclass
class StarPart(TreePart):
    center: int = 0

    @classmethod
    def make(cls, size: int) -> "StarPart":
        graph = Graph(size)
        for i in range(1, size):
            add_edge(graph[0], graph[i])
        return cls(graph, 0)


@dataclass
class HTreePart(TreePart):
    """A spine chain whose ends are replaced by perpendicular wing chains.

    The wings are attached at their middle node. `left` and `right` keep the
    wing nodes (shared with `graph`) so two H parts can be fused wing to wing.
    """

    left: Graph = field(default_factory=lambda: Graph(0))
    right: Graph = field(default_factory=lambda: Graph(0))

    @classmethod
    def make(cls, spine_length: int, left_length: int, right_length: int) -> "HTreePart":
        spine = chain(spine_length, randomize=False)

        left = chain(left_length, randomize=False)
        expand_node(spine, spine[0], left, [left[left_length // 2]])

        right = chain(right_length, randomize=False)
        expand_node(spine, spine[spine_length - 1], right, [right[right_length // 2]])

        return cls(spine, left, right)

    def _fuse_wings(self, mine: Graph, theirs: Graph, other: "HTreePart") -> None:
        if len(mine) != len(theirs):
            raise StructuralPrecondition(
                f"Cannot merge wings of different sizes ({len(mine)} != {len(theirs)})"
            )
        mapping = list(zip(mine, theirs))
        fuse_graph(self.graph, other.graph, mapping, collapse_parallel=True)

    def merge_left(self, other: "HTreePart") -> "HTreePart":
        """Fuse this part's left wing with the right wing of `other`."""
        self._fuse_wings(self.left, other.right, other)
        self.left = other.left
        return self

    def merge_right(self, other: "HTreePart") -> "HTreePart":
        """Fuse this part's right wing with the left wing of `other`."""
        self._fuse_wings(self.right, other.left, other)
        self.right = other.right
        return self

    @classmethod
    def make_chained(cls, count: int, spine_length: int, wing_length: int) -> "HTreePart":
        """One H part with `count` more merged onto its left side."""
        result = cls.make(spine_length, wing_length, wing_length)
        for _ in range(count):
            result.merge_left(cls.make(spine_length, wing_length, wing_length))
        log.debug(
            "HTreePart.make_chained: %d parts, %d nodes", count + 1, len(result.graph)
        )
        return result
