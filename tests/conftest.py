# tests/conftest.py
from __future__ import annotations

import networkx as nx
import pytest

from simplicial_persistence.geometry.rips_expander import expand_flag_complex
from simplicial_persistence.topology.graphs import complex_from_graph
from simplicial_persistence.topology.simplex import Simplex
from simplicial_persistence.topology.simplicial_complex import SimplicialComplex


def shifted(K: SimplicialComplex, offset: int) -> SimplicialComplex:
    """Same complex with every vertex id increased by ``offset``."""
    return SimplicialComplex(Simplex([v + offset for v in s.vertices], s.data) for s in K)


def graph_complex(n_vertices, edges, weight: float = 0.0) -> SimplicialComplex:
    simplices = [Simplex([v], weight) for v in range(n_vertices)]
    simplices += [Simplex(e, weight) for e in edges]
    return SimplicialComplex(simplices)


@pytest.fixture
def two_triangles() -> SimplicialComplex:
    """Connected: 4 vertices, triangles {0,1,2} and {0,1,3} sharing the edge {0,1}."""
    return graph_complex(4, [(0, 1), (0, 2), (1, 2), (0, 3), (1, 3)])


@pytest.fixture
def six_vertices() -> SimplicialComplex:
    """6 vertices whose maximal cliques are {0,3}, {0,1,2} and {3,4,5}."""
    return graph_complex(6, [(0, 1), (0, 2), (1, 2), (0, 3), (3, 4), (3, 5), (4, 5)])


@pytest.fixture
def triangle() -> SimplicialComplex:
    """Filled triangle in filtration order; the last edge closes a cycle that the 2-simplex kills."""
    return SimplicialComplex([
        Simplex([0], 0.0),
        Simplex([1], 0.0),
        Simplex([2], 0.0),
        Simplex([0, 1], 1.0),
        Simplex([0, 2], 2.0),
        Simplex([1, 2], 3.0),
        Simplex([0, 1, 2], 4.0),
    ])


@pytest.fixture
def square() -> SimplicialComplex:
    """Hollow square in filtration order; {0,3} closes the only cycle."""
    return SimplicialComplex([
        Simplex([0], 0.0),
        Simplex([1], 0.0),
        Simplex([2], 0.0),
        Simplex([3], 0.0),
        Simplex([0, 1], 1.0),
        Simplex([1, 2], 1.0),
        Simplex([2, 3], 1.0),
        Simplex([0, 3], 2.0),
    ])


@pytest.fixture
def complete_graph_4() -> SimplicialComplex:
    """K4 with distinct edge weights; its flag complex up to dimension 3 is the full tetrahedron."""
    edges = {(0, 1): 1.0, (0, 2): 2.0, (0, 3): 3.0, (1, 2): 4.0, (1, 3): 5.0, (2, 3): 6.0}
    simplices = [Simplex([v], 0.0) for v in range(4)]
    simplices += [Simplex(e, w) for e, w in edges.items()]
    return SimplicialComplex(simplices)


def random_flag_complex(seed: int, n: int = 12, p: float = 0.4, max_dim: int = 3) -> SimplicialComplex:
    """Flag complex of a random weighted graph, in filtration order."""
    G = nx.gnp_random_graph(n, p, seed=seed)
    for k, (u, v) in enumerate(G.edges()):
        G.edges[u, v]["weight"] = float((7 * k + seed) % 11)
    return expand_flag_complex(complex_from_graph(G), max_dim).sort_by_data()
