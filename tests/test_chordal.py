"""Tests for recognition/chordal.py"""

import networkx as nx
import pytest

from builders import SUN3, complete, cycle, make, path
from intgraph.errors import GraphPreconditionError
from intgraph.events import NOT_CHORDAL, EventRecorder
from intgraph.graph import Graph
from intgraph.graphs.families import erdos_renyi
from intgraph.recognition.adjacency import build_adjacency
from intgraph.recognition.chordal import is_perfect_elimination_order, right_neighbors
from intgraph.recognition.lexbfs import elimination_order


def peo(graph, observer=None):
    adj = build_adjacency(graph.vertices, graph.edges)
    return is_perfect_elimination_order(elimination_order(graph.vertices, adj), adj, observer)


class TestRightNeighbors:
    def test_sorted_by_position(self):
        g = make([1, 2, 3, 4], [(1, 2), (2, 3), (1, 3), (3, 4)])
        adj = build_adjacency(g.vertices, g.edges)
        rn = right_neighbors([4, 3, 2, 1], adj)
        assert rn == {4: [3], 3: [2, 1], 2: [1], 1: []}

    def test_repeated_vertex_rejected(self):
        adj = build_adjacency([1, 2], [(1, 2)])
        with pytest.raises(GraphPreconditionError):
            right_neighbors([1, 2, 1], adj)


class TestPerfectEliminationOrder:
    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_complete(self, n):
        assert peo(complete(n))

    @pytest.mark.parametrize("n", [4, 5, 6, 7])
    def test_chordless_cycles(self, n):
        assert not peo(cycle(n))

    def test_sun_is_chordal(self):
        assert peo(SUN3)

    def test_judges_the_order_not_the_graph(self):
        """P3 is chordal, but eliminating its middle vertex first is not a PEO."""
        g = path(3)
        adj = build_adjacency(g.vertices, g.edges)
        assert is_perfect_elimination_order([1, 2, 3], adj)
        assert not is_perfect_elimination_order([2, 1, 3], adj)

    def test_reports_witness_pair(self, square):
        rec = EventRecorder()
        assert not peo(square, rec)
        (event,) = rec.of_kind(NOT_CHORDAL)
        # elimination order is [3, 4, 2, 1]; 3's later neighbors 4 and 2 are not adjacent
        assert event.data == {"vertex": 3, "pair": (4, 2)}

    @pytest.mark.parametrize("seed", range(15))
    def test_agrees_with_networkx(self, seed):
        g = erdos_renyi(9, p=0.35, seed=seed)
        assert peo(Graph.from_networkx(g)) == nx.is_chordal(g)
