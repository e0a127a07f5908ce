# tests/test_io.py
from __future__ import annotations

import networkx as nx
import pytest

from simplicial_persistence.io.graphs import load_complex, load_graph
from simplicial_persistence.summaries.complex_summary import ComplexSummary
from simplicial_persistence.topology.graphs import complex_from_graph, complex_to_graph
from simplicial_persistence.topology.simplicial_complex import SimplicialComplex


class TestLoadGraph:
    def test_edge_list(self, tmp_path):
        path = tmp_path / "graph.txt"
        path.write_text("# u v weight\n0 1 0.5\n1 2 2.0\n")
        G = load_graph(path)
        assert sorted(G.edges(data="weight")) == [(0, 1, 0.5), (1, 2, 2.0)]

    def test_gml(self, tmp_path):
        G = nx.Graph()
        G.add_nodes_from(range(3))
        G.add_edge(0, 1, weight=1.5)
        G.add_edge(1, 2, weight=0.5)
        path = tmp_path / "graph.gml"
        nx.write_gml(G, path)

        K = load_complex(path)
        assert [s.vertices for s in K] == [(0,), (1,), (2,), (0, 1), (1, 2)]
        assert K.find([0, 1]).data == 1.5
        assert K.find([1]).data == 0.5

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "nope.txt")

    @pytest.mark.parametrize("text", ["a b 1\n", "0 1 heavy\n"])
    def test_malformed_edge_list(self, tmp_path, text):
        path = tmp_path / "graph.txt"
        path.write_text(text)
        with pytest.raises(ValueError, match="graph.txt"):
            load_graph(path)


class TestGraphBridge:
    def test_vertex_weights(self):
        G = nx.Graph()
        G.add_node(0, weight=0.25)
        G.add_node(3)
        G.add_edge(0, 1, weight=2.0)
        G.add_edge(1, 2, weight=1.0)
        G.add_edge(2, 2, weight=9.0)
        K = complex_from_graph(G)
        assert K.items() == [
            ((0,), 0.25),
            ((1,), 1.0),
            ((2,), 1.0),
            ((3,), 0.0),
            ((0, 1), 2.0),
            ((1, 2), 1.0),
        ]

    def test_round_trip(self, six_vertices):
        G = complex_to_graph(six_vertices)
        assert G.number_of_nodes() == 6
        assert G.number_of_edges() == 7
        assert sorted(complex_from_graph(G).items()) == sorted(six_vertices.items())


class TestComplexSummary:
    def test_counts(self, triangle):
        summary = ComplexSummary.from_complex(triangle)
        assert summary.counts == (3, 3, 1)
        assert summary.dimension == 2
        assert (summary.min_weight, summary.max_weight) == (0.0, 4.0)
        text = summary.to_text()
        assert "#( 2-simplices ) = 1" in text
        assert "WARNING" not in text

    def test_not_closed(self):
        text = ComplexSummary.from_complex(SimplicialComplex([[0, 1]])).to_text()
        assert "not closed" in text

    def test_empty(self):
        summary = ComplexSummary.from_complex(SimplicialComplex())
        assert summary.counts == ()
        assert "(empty complex)" in summary.to_text()
