# tests/test_maximal_cliques.py
from __future__ import annotations

import networkx as nx
import pytest

from simplicial_persistence.topology.graphs import adjacency_from_complex, complex_from_graph
from simplicial_persistence.topology.maximal_cliques import (
    degeneracy_ordering,
    maximal_cliques_bron_kerbosch,
    maximal_cliques_koch,
)
from simplicial_persistence.topology.simplex import Simplex
from simplicial_persistence.topology.simplicial_complex import SimplicialComplex

from conftest import shifted

ALGORITHMS = [maximal_cliques_bron_kerbosch, maximal_cliques_koch]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
class TestMaximalCliques:
    def test_two_triangles(self, algorithm, two_triangles):
        assert algorithm(two_triangles) == [frozenset({0, 1, 2}), frozenset({0, 1, 3})]

    def test_six_vertices(self, algorithm, six_vertices):
        assert algorithm(six_vertices) == [frozenset({0, 3}), frozenset({0, 1, 2}), frozenset({3, 4, 5})]

    def test_labels_starting_at_one(self, algorithm, two_triangles, six_vertices):
        for K in (two_triangles, six_vertices):
            expected = [frozenset(v + 1 for v in c) for c in algorithm(K)]
            assert algorithm(shifted(K, 1)) == expected

    def test_isolated_vertex(self, algorithm):
        K = SimplicialComplex([Simplex([0]), Simplex([1]), Simplex([2]), Simplex([0, 1])])
        assert algorithm(K) == [frozenset({2}), frozenset({0, 1})]

    def test_higher_simplices_are_ignored(self, algorithm, two_triangles):
        K = SimplicialComplex(list(two_triangles) + [Simplex([0, 1, 2])])
        assert algorithm(K) == algorithm(two_triangles)

    def test_empty(self, algorithm):
        assert algorithm(SimplicialComplex()) == []


class TestAgreement:
    @pytest.mark.parametrize("seed", range(6))
    def test_against_networkx(self, seed):
        G = nx.gnp_random_graph(25, 0.35, seed=seed)
        K = complex_from_graph(G)
        expected = {frozenset(c) for c in nx.find_cliques(G)}
        bk = maximal_cliques_bron_kerbosch(K)
        koch = maximal_cliques_koch(K)
        assert set(bk) == expected
        assert bk == koch
        assert len(koch) == len(expected)


class TestDegeneracyOrdering:
    @pytest.mark.parametrize("seed", range(4))
    def test_later_neighbours_bounded_by_degeneracy(self, seed):
        G = nx.gnp_random_graph(30, 0.3, seed=seed)
        adj = adjacency_from_complex(complex_from_graph(G))
        order = degeneracy_ordering(adj)
        assert sorted(order) == sorted(adj)

        degeneracy = max(nx.core_number(G).values())
        position = {v: i for i, v in enumerate(order)}
        for v in order:
            assert sum(position[w] > position[v] for w in adj[v]) <= degeneracy
