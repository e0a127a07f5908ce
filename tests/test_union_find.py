# tests/test_union_find.py
from __future__ import annotations

import random

import pytest

from simplicial_persistence.errors import UnknownElementError
from simplicial_persistence.geometry.rips_expander import expand_flag_complex
from simplicial_persistence.topology.clique_graph import get_clique_graph
from simplicial_persistence.topology.union_find import UnionFind, calculate_connected_components

from conftest import graph_complex


class TestUnionFind:
    def test_union_keeps_first_root(self):
        uf = UnionFind(range(4))
        assert uf.union(2, 3) == 2
        assert uf.union(1, 3) == 1
        assert uf.find(3) == 1
        assert uf.connected(2, 1)
        assert not uf.connected(0, 1)
        assert uf.roots() == [0, 1]
        assert uf.get(1) == [1, 2, 3]

    def test_unknown_element(self):
        uf = UnionFind([0, 1])
        with pytest.raises(UnknownElementError):
            uf.find(7)
        with pytest.raises(KeyError):
            uf.union(0, 7)

    def test_roots_partition_elements(self):
        rng = random.Random(11)
        elements = list(range(50))
        uf = UnionFind(elements)
        for _ in range(35):
            uf.union(rng.choice(elements), rng.choice(elements))

            members = [x for r in uf.roots() for x in uf.get(r)]
            assert sorted(members) == elements
            assert all(uf.find(r) == r for r in uf.roots())

    def test_components(self):
        uf = UnionFind("abcd")
        uf.union("a", "c")
        assert uf.components() == {"a": ["a", "c"], "b": ["b"], "d": ["d"]}

    def test_add(self):
        uf = UnionFind()
        uf.add(3)
        uf.add(3)
        assert len(uf) == 1
        assert 3 in uf


class TestConnectedComponents:
    def test_components_of_complex(self):
        K = graph_complex(6, [(0, 1), (1, 2), (3, 4)])
        uf = calculate_connected_components(K)
        assert uf.roots() == [0, 3, 5]
        assert uf.get(0) == [0, 1, 2]
        assert uf.get(4) == [3, 4]

    def test_labels_starting_at_one(self):
        K = graph_complex(7, [(1, 2), (2, 3), (4, 5)]).filter(lambda s: s.vertices != (0,))
        uf = calculate_connected_components(K)
        assert uf.roots() == [1, 4, 6]


class TestCliqueGraph:
    def test_triangles_sharing_an_edge(self, two_triangles):
        K = expand_flag_complex(two_triangles, 2).sort_by_data()
        C = get_clique_graph(K, 2)
        nodes = [s.vertices[0] for s in C if s.dimension == 0]
        assert [K[v].vertices for v in nodes] == [(0, 1, 2), (0, 1, 3)]
        assert len(C.of_dimension(1)) == 1

    def test_weights(self, complete_graph_4):
        K = expand_flag_complex(complete_graph_4, 1).sort_by_data()
        C = get_clique_graph(K, 1)
        assert len(C.of_dimension(0)) == 6
        for s in C:
            if s.dimension == 0:
                assert s.data == K[s.vertices[0]].data
            else:
                a, b = s.vertices
                assert s.data == max(K[a].data, K[b].data)
                assert set(K[a].vertices) & set(K[b].vertices)

    def test_components_are_communities(self, six_vertices):
        K = expand_flag_complex(six_vertices, 2).sort_by_data()
        uf = calculate_connected_components(get_clique_graph(K, 2))
        communities = [[K[v].vertices for v in uf.get(r)] for r in uf.roots()]
        assert sorted(communities) == [[(0, 1, 2)], [(3, 4, 5)]]

    def test_invalid_k(self, two_triangles):
        with pytest.raises(ValueError):
            get_clique_graph(two_triangles, 0)
