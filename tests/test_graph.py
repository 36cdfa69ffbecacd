"""Tests for graph.py and io/fixtures.py"""

import json
import os

import networkx as nx
import numpy as np
import pytest

from intgraph.errors import FixtureFormatError, GraphPreconditionError
from intgraph.graph import Graph, neighbors_of
from intgraph.io.fixtures import dump_graph, graph_from_dict, load_fixture_dir, load_graph
from intgraph.recognition.recognizer import is_interval_graph

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


class TestGraphPreconditions:
    def test_none_vertices(self):
        with pytest.raises(GraphPreconditionError):
            Graph(None)

    def test_none_edges(self):
        with pytest.raises(GraphPreconditionError):
            Graph((1, 2), None)

    def test_duplicate_ids(self):
        with pytest.raises(GraphPreconditionError, match="unique"):
            Graph((1, 2, 1))

    @pytest.mark.parametrize("bad", ["a", 1.5, True])
    def test_non_integer_id(self, bad):
        with pytest.raises(GraphPreconditionError):
            Graph((1, bad))

    def test_malformed_edge(self):
        with pytest.raises(GraphPreconditionError):
            Graph((1, 2), ((1,),))

    def test_lists_are_frozen_to_tuples(self):
        g = Graph.from_edges([1, 2], [[1, 2]])
        assert g.vertices == (1, 2)
        assert g.edges == ((1, 2),)
        assert (g.n, g.m) == (2, 1)


class TestConversions:
    def test_from_networkx_relabels_strings(self):
        g = Graph.from_networkx(nx.Graph([("a", "b"), ("b", "c")]))
        assert sorted(g.vertices) == [0, 1, 2]
        assert g.m == 2

    def test_from_adjacency_matrix(self):
        adj = np.array([[0, 1, 0], [1, 0, 1], [0, 1, 0]])
        g = Graph.from_adjacency_matrix(adj)
        assert g.vertices == (0, 1, 2)
        assert g.edges == ((0, 1), (1, 2))

    def test_one_sided_matrix_entry(self):
        g = Graph.from_adjacency_matrix(np.array([[0, 0], [1, 0]]))
        assert g.edges == ((0, 1),)

    def test_non_square_matrix(self):
        with pytest.raises(GraphPreconditionError):
            Graph.from_adjacency_matrix(np.zeros((2, 3)))

    def test_to_networkx_drops_self_loops(self):
        g = Graph.from_edges([1, 2], [(1, 1), (1, 2)])
        assert list(g.to_networkx().edges) == [(1, 2)]


class TestNeighborsOf:
    def test_undirected(self):
        g = Graph.from_edges([1, 2, 3], [(1, 2), (3, 2)])
        assert neighbors_of(g, 2) == {1, 3}

    def test_directed_only_outgoing(self):
        g = Graph.from_edges([1, 2, 3], [(1, 2), (2, 3)], directed=True)
        assert neighbors_of(g, 2) == {3}


class TestFixtures:
    def test_host_layout(self):
        g = load_graph(os.path.join(FIXTURES, "triangle.json"))
        assert g.vertices == (1, 2, 3)
        assert is_interval_graph(g)

    def test_compact_layout(self):
        g = load_graph(os.path.join(FIXTURES, "path.json"))
        assert g.directed
        assert is_interval_graph(g)

    def test_fixture_dir_sorted(self):
        names = [name for name, _ in load_fixture_dir(FIXTURES)]
        assert names == ["path", "square", "triangle"]

    def test_verdicts(self):
        verdicts = {name: is_interval_graph(g) for name, g in load_fixture_dir(FIXTURES)}
        assert verdicts == {"path": True, "square": False, "triangle": True}

    def test_dump_and_load(self, tmp_path):
        g = Graph.from_edges([3, 1, 2], [(1, 2), (2, 3)])
        out = tmp_path / "sub" / "g.json"
        dump_graph(g, str(out))
        assert load_graph(str(out)) == g

    def test_missing_keys(self):
        with pytest.raises(FixtureFormatError, match="vertexList"):
            graph_from_dict({"nodes": []})

    def test_bad_edge_entry(self):
        with pytest.raises(FixtureFormatError, match="source"):
            graph_from_dict({"vertexList": [{"id": 1}], "edgeList": [{"from": 1}]})

    def test_precondition_wrapped(self):
        with pytest.raises(FixtureFormatError, match="unique"):
            graph_from_dict({"vertices": [1, 1], "edges": []})

    def test_invalid_json(self, tmp_path):
        p = tmp_path / "broken.json"
        p.write_text("{not json", encoding="utf-8")
        with pytest.raises(FixtureFormatError, match="invalid JSON"):
            load_graph(str(p))

    def test_top_level_not_object(self, tmp_path):
        p = tmp_path / "list.json"
        p.write_text(json.dumps([1, 2]), encoding="utf-8")
        with pytest.raises(FixtureFormatError):
            load_graph(str(p))
