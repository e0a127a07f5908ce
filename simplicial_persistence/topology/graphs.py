# simplicial_persistence/topology/graphs.py
from __future__ import annotations

from typing import Dict, List, Set

import networkx as nx

from ..combinatorics import Edge, canon_edge
from .simplex import Simplex
from .simplicial_complex import SimplicialComplex

__all__ = ["complex_from_graph", "complex_to_graph", "adjacency_from_complex"]


def complex_from_graph(G: nx.Graph, *, weight: str = "weight") -> SimplicialComplex:
    """
    Weighted 1-skeleton of a NetworkX graph.

    Edges take their ``weight`` attribute (0 if absent). A vertex takes its own
    ``weight`` attribute if present, else the minimum weight of its incident
    edges, else 0, so an edge is never lighter than its endpoints. Self-loops
    are ignored. Vertices come first, then edges, both sorted.
    """
    edge_w: Dict[Edge, float] = {}
    for u, v, data in G.edges(data=True):
        if u == v:
            continue
        edge_w[canon_edge(u, v)] = float(data.get(weight, 0.0))

    incident: Dict[int, List[float]] = {}
    for (a, b), w in edge_w.items():
        incident.setdefault(a, []).append(w)
        incident.setdefault(b, []).append(w)

    simplices: List[Simplex] = []
    for node, data in sorted(G.nodes(data=True), key=lambda t: int(t[0])):
        node = int(node)
        if weight in data:
            w = float(data[weight])
        elif node in incident:
            w = min(incident[node])
        else:
            w = 0.0
        simplices.append(Simplex([node], w))

    for e in sorted(edge_w):
        simplices.append(Simplex(e, edge_w[e]))

    return SimplicialComplex(simplices)


def complex_to_graph(K: SimplicialComplex, *, weight: str = "weight") -> nx.Graph:
    """1-skeleton of ``K`` as a NetworkX graph with vertex and edge weights."""
    G = nx.Graph()
    for s in K:
        if s.dimension == 0:
            G.add_node(s.vertices[0], **{weight: s.data})
    for s in K:
        if s.dimension == 1:
            u, v = s.vertices
            G.add_edge(u, v, **{weight: s.data})
    return G


def adjacency_from_complex(K: SimplicialComplex) -> Dict[int, Set[int]]:
    """Neighbour sets of every vertex of ``K`` (isolated vertices map to an empty set)."""
    G = complex_to_graph(K)
    return {v: set(G.adj[v]) for v in G.nodes}
