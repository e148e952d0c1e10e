"""Tests for the edge registry and the target swap primitive."""

import networkx as nx
import pytest

from nullgraph.graph import EdgeRegistry, OrientedEdge


def _directed(edges: list[tuple[int, int]]) -> nx.MultiDiGraph:
    g = nx.MultiDiGraph()
    g.add_nodes_from(range(6))
    g.add_edges_from(edges)
    return g


def _undirected(edges: list[tuple[int, int]]) -> nx.MultiGraph:
    g = nx.MultiGraph()
    g.add_nodes_from(range(6))
    g.add_edges_from(edges)
    return g


def _slot_pairs(registry: EdgeRegistry) -> list[tuple[int, int]]:
    return [(registry.edge_source(i), registry.edge_target(i)) for i in range(len(registry))]


def _slot_of(registry: EdgeRegistry, u: int, v: int) -> int:
    return _slot_pairs(registry).index((u, v))


class TestRegistryConstruction:
    """Slots are enumerated once from the graph's edges."""

    def test_slot_count_matches_edges(self):
        registry = EdgeRegistry(_directed([(0, 1), (1, 2), (2, 0)]))
        assert len(registry) == 3
        assert registry.directed is True
        assert registry.is_multigraph is True

    def test_empty_graph(self):
        registry = EdgeRegistry(_directed([]))
        assert len(registry) == 0

    def test_simple_graph_handles_have_no_key(self):
        g = nx.DiGraph([(0, 1), (1, 2)])
        registry = EdgeRegistry(g)
        assert registry.is_multigraph is False
        assert all(registry[i].key is None for i in range(len(registry)))

    def test_orientation_flag(self):
        registry = EdgeRegistry(_undirected([(0, 1)]))
        assert registry.source(OrientedEdge(0)) == 0
        assert registry.target(OrientedEdge(0)) == 1
        assert registry.source(OrientedEdge(0, True)) == 1
        assert registry.target(OrientedEdge(0, True)) == 0


class TestSwapTargets:
    """swap_targets exchanges targets and keeps registry and graph in sync."""

    def test_directed_swap(self):
        g = _directed([(0, 1), (2, 3)])
        registry = EdgeRegistry(g)
        registry.swap_targets(0, OrientedEdge(1))
        assert _slot_pairs(registry) == [(0, 3), (2, 1)]
        assert sorted(g.edges()) == [(0, 3), (2, 1)]

    def test_swap_preserves_degrees(self):
        g = _directed([(0, 1), (2, 3), (4, 5), (1, 4)])
        before = {v: (g.in_degree(v), g.out_degree(v)) for v in g}
        registry = EdgeRegistry(g)
        registry.swap_targets(0, OrientedEdge(2))
        registry.swap_targets(3, OrientedEdge(1))
        after = {v: (g.in_degree(v), g.out_degree(v)) for v in g}
        assert before == after
        assert g.number_of_edges() == 4

    def test_same_slot_is_noop(self):
        g = _directed([(0, 1), (2, 3)])
        registry = EdgeRegistry(g)
        registry.swap_targets(1, OrientedEdge(1))
        assert _slot_pairs(registry) == [(0, 1), (2, 3)]

    def test_directed_swap_is_involution(self):
        g = _directed([(0, 1), (2, 3)])
        registry = EdgeRegistry(g)
        registry.swap_targets(0, OrientedEdge(1))
        registry.swap_targets(0, OrientedEdge(1))
        assert _slot_pairs(registry) == [(0, 1), (2, 3)]
        assert sorted(g.edges()) == [(0, 1), (2, 3)]

    def test_inverted_swap_keeps_orientation(self):
        g = _undirected([(0, 1), (2, 3)])
        registry = EdgeRegistry(g)
        # partner read as 3 -> 2, so slot 0 gets target 2
        registry.swap_targets(0, OrientedEdge(1, True))
        assert _slot_pairs(registry) == [(0, 2), (1, 3)]
        assert registry.target(OrientedEdge(1, True)) == 1
        assert sorted(tuple(sorted(e)) for e in g.edges()) == [(0, 2), (1, 3)]

    def test_inverted_swap_is_involution(self):
        g = _undirected([(0, 1), (2, 3)])
        registry = EdgeRegistry(g)
        registry.swap_targets(0, OrientedEdge(1, True))
        registry.swap_targets(0, OrientedEdge(1, True))
        assert sorted(tuple(sorted(e)) for e in g.edges()) == [(0, 1), (2, 3)]

    def test_simple_graph_swap(self):
        g = nx.DiGraph([(0, 1), (2, 3)])
        registry = EdgeRegistry(g)
        registry.swap_targets(0, OrientedEdge(1))
        assert sorted(g.edges()) == [(0, 3), (2, 1)]


class TestWouldClash:
    """would_clash detects parallel edges a swap would create."""

    def test_no_clash(self):
        registry = EdgeRegistry(_directed([(0, 1), (2, 3)]))
        assert registry.would_clash(0, OrientedEdge(1)) is False

    def test_clash_with_existing_edge(self):
        registry = EdgeRegistry(_directed([(0, 1), (2, 3), (0, 3)]))
        partner = OrientedEdge(_slot_of(registry, 2, 3))
        assert registry.would_clash(_slot_of(registry, 0, 1), partner) is True

    def test_clash_on_partner_side(self):
        registry = EdgeRegistry(_directed([(0, 1), (2, 3), (2, 1)]))
        assert registry.would_clash(0, OrientedEdge(1)) is True

    def test_undirected_clash_is_symmetric(self):
        # new edge (0, 3) already exists as (3, 0)
        registry = EdgeRegistry(_undirected([(0, 1), (2, 3), (3, 0)]))
        partner = OrientedEdge(_slot_of(registry, 2, 3))
        assert registry.would_clash(_slot_of(registry, 0, 1), partner) is True

    def test_replacement_edges_coincide(self):
        # (0, 0) and (1, 1) swapped give (0, 1) twice in an undirected graph
        registry = EdgeRegistry(_undirected([(0, 0), (1, 1)]))
        assert registry.would_clash(0, OrientedEdge(1)) is True


class TestReplace:
    """replace swaps out a slot's edge for a new one."""

    def test_replace(self):
        g = _directed([(0, 1), (2, 3)])
        registry = EdgeRegistry(g)
        registry.replace(0, 4, 5)
        assert _slot_pairs(registry) == [(4, 5), (2, 3)]
        assert sorted(g.edges()) == [(2, 3), (4, 5)]

    @pytest.mark.parametrize("directed", [True, False])
    def test_replace_with_parallel_edge_in_multigraph(self, directed):
        g = _directed([(0, 1), (2, 3)]) if directed else _undirected([(0, 1), (2, 3)])
        registry = EdgeRegistry(g)
        registry.replace(1, 0, 1)
        assert g.number_of_edges(0, 1) == 2
        registry.replace(0, 4, 5)
        assert g.number_of_edges(0, 1) == 1
