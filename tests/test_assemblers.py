"""Tests for composable tree parts."""

import pytest

from src.errors import StructuralPrecondition
from src.generators import (
    ChainPart,
    HTreePart,
    RandomTreePart,
    StarPart,
    WideTreePart,
    leaves,
)
from src.graph import Graph, add_edge, is_tree
from src.reproducibility import reseed


@pytest.fixture(autouse=True)
def _seeded() -> None:
    reseed(42)


def _window_ok(graph: Graph) -> bool:
    return [node.index for node in graph] == list(
        range(graph.min_index, graph.min_index + len(graph))
    )


class TestLeaves:
    def test_single_node_is_leaf(self) -> None:
        graph = Graph(1)
        assert leaves(graph) == [graph[0]]

    def test_chain_leaves(self) -> None:
        part = ChainPart.make(5)
        ends = leaves(part.graph)
        assert {node.index for node in ends} == {0, 4}

    def test_no_leaves(self) -> None:
        graph = Graph(3)
        add_edge(graph[0], graph[1])
        add_edge(graph[1], graph[2])
        add_edge(graph[2], graph[0])
        with pytest.raises(StructuralPrecondition, match="no leaves"):
            leaves(graph)


class TestSimpleParts:
    """Chains, random trees, wide trees and stars."""

    def test_star(self) -> None:
        part = StarPart.make(6)
        assert part.graph[part.center].degree() == 5
        assert len(part.nodes_of_interest()) == 5

    def test_wide_tree_part(self) -> None:
        part = WideTreePart.make(12, 5)
        assert len(part.graph) == 12
        assert is_tree(part.graph)

    def test_random_node_of_interest_is_leaf(self) -> None:
        part = RandomTreePart.make(10)
        for _ in range(20):
            assert part.random_node_of_interest().degree() == 1

    @pytest.mark.parametrize("seed", range(10))
    def test_combine_sizes(self, seed: int) -> None:
        reseed(seed)
        part = ChainPart.make(4).combine(StarPart.make(4))
        part.combine(RandomTreePart.make(6))
        assert len(part.graph) == 4 - 1 + 4 - 1 + 6
        assert is_tree(part.graph)
        assert _window_ok(part.graph)


class TestHTreePart:
    """Spine with perpendicular wings, fused wing to wing."""

    def test_make(self) -> None:
        part = HTreePart.make(3, 3, 3)
        assert len(part.graph) == 7
        assert len(part.graph.edges()) == 6
        assert is_tree(part.graph)
        assert len(part.left) == 3
        assert len(part.right) == 3

    def test_wing_middles_attached(self) -> None:
        part = HTreePart.make(4, 5, 3)
        assert len(part.graph) == 4 - 2 + 5 + 3
        left_middle = list(part.left)[2]
        right_middle = list(part.right)[1]
        assert left_middle.degree() == 3
        assert right_middle.degree() == 3

    def test_merge_left(self) -> None:
        part = HTreePart.make(3, 3, 3)
        part.merge_left(HTreePart.make(3, 3, 3))
        assert len(part.graph) == 11
        assert is_tree(part.graph)
        assert _window_ok(part.graph)

    def test_merge_right(self) -> None:
        part = HTreePart.make(3, 3, 4)
        other = HTreePart.make(5, 4, 2)
        new_right = other.right
        part.merge_right(other)
        assert len(part.graph) == 8 + 9 - 4
        assert part.right is new_right
        assert is_tree(part.graph)

    def test_make_chained(self) -> None:
        part = HTreePart.make_chained(2, 3, 3)
        assert len(part.graph) == 15
        assert is_tree(part.graph)

    def test_mismatched_wings(self) -> None:
        part = HTreePart.make(3, 3, 3)
        with pytest.raises(StructuralPrecondition, match="different sizes"):
            part.merge_left(HTreePart.make(3, 3, 5))
