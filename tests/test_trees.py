"""Tests for chain, path, tree and wide_tree generators."""

import pytest

from src.errors import InvalidArgument
from src.generators import chain, path, tree, wide_tree
from src.graph import Graph, diameter, distance_between, has_arc, has_edge, is_tree
from src.reproducibility import reseed


@pytest.fixture(autouse=True)
def _seeded() -> None:
    reseed(42)


def _union_find_tree(graph: Graph) -> bool:
    """Independent acyclic-and-connected check over edge_list()."""
    parent = {node.index: node.index for node in graph}

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, v in graph.edge_list().tolist():
        ru, rv = find(u), find(v)
        if ru == rv:
            return False
        parent[ru] = rv
    return len({find(x) for x in parent}) == 1


class TestChain:
    """Undirected chains."""

    def test_ordered_chain_degrees(self) -> None:
        graph = chain(6, randomize=False)
        degrees = [node.degree() for node in graph]
        assert degrees == [1, 2, 2, 2, 2, 1]
        for i in range(5):
            assert has_edge(graph[i], graph[i + 1])

    def test_randomized_chain_is_path_graph(self) -> None:
        graph = chain(20)
        assert is_tree(graph)
        assert sorted(node.degree() for node in graph) == [1, 1] + [2] * 18
        assert diameter(graph) == 19

    def test_single_node(self) -> None:
        graph = chain(1)
        assert len(graph) == 1
        assert graph.edges() == []

    def test_index_start(self) -> None:
        graph = chain(4, index_start=10)
        assert sorted(node.index for node in graph) == [10, 11, 12, 13]

    @pytest.mark.parametrize("size", [0, -3])
    def test_non_positive_size(self, size: int) -> None:
        with pytest.raises(InvalidArgument, match="strictly positive"):
            chain(size)


class TestPath:
    """Directed paths."""

    def test_ordered_path_arcs(self) -> None:
        graph = path(4, randomize=False)
        assert len(graph.arcs()) == 3
        assert graph.edges() == []
        for i in range(3):
            assert has_arc(graph[i], graph[i + 1])
            assert not has_arc(graph[i + 1], graph[i])

    def test_zero_size(self) -> None:
        with pytest.raises(InvalidArgument, match="Paths"):
            path(0)


class TestTree:
    """Random recursive trees."""

    @pytest.mark.parametrize("size", [1, 2, 5, 30, 200])
    def test_is_tree(self, size: int) -> None:
        graph = tree(size)
        assert len(graph) == size
        assert len(graph.edges()) == size - 1
        assert _union_find_tree(graph)
        assert is_tree(graph)

    def test_labels_are_window(self) -> None:
        graph = tree(15, index_start=4)
        assert [node.index for node in graph] == list(range(4, 19))

    def test_seed_reproducible(self) -> None:
        reseed(7)
        first = tree(25).edge_list().tolist()
        reseed(7)
        second = tree(25).edge_list().tolist()
        assert first == second

    def test_zero_size(self) -> None:
        with pytest.raises(InvalidArgument):
            tree(0)


class TestWideTree:
    """Trees with a guaranteed backbone."""

    @pytest.mark.parametrize("size,min_diameter", [(3, 2), (10, 4), (40, 12), (9, 8)])
    def test_pinned_ends_are_far_apart(self, size: int, min_diameter: int) -> None:
        graph = wide_tree(size, min_diameter, random_ends=False)
        assert is_tree(graph)
        assert distance_between(graph, graph[0], graph[1]) == min_diameter - 1

    @pytest.mark.parametrize("seed", range(10))
    def test_diameter_lower_bound(self, seed: int) -> None:
        reseed(seed)
        graph = wide_tree(30, 10)
        assert len(graph) == 30
        assert is_tree(graph)
        assert diameter(graph) >= 9

    def test_index_start_with_pinned_ends(self) -> None:
        graph = wide_tree(8, 5, random_ends=False, index_start=3)
        assert graph.min_index == 3
        assert distance_between(graph, graph[3], graph[4]) == 4

    def test_too_small(self) -> None:
        with pytest.raises(InvalidArgument, match="at least two nodes"):
            wide_tree(1, 2)

    def test_diameter_too_small(self) -> None:
        with pytest.raises(InvalidArgument, match="diameter of at least two"):
            wide_tree(5, 1)

    def test_diameter_not_below_size(self) -> None:
        with pytest.raises(InvalidArgument, match="strictly less"):
            wide_tree(5, 5)
