# simplicial_persistence/topology/maximal_cliques.py
from __future__ import annotations

import logging
from typing import Dict, FrozenSet, List, Set

from .graphs import adjacency_from_complex
from .simplicial_complex import SimplicialComplex

logger = logging.getLogger(__name__)

Clique = FrozenSet[int]
Adjacency = Dict[int, Set[int]]

__all__ = [
    "Clique",
    "maximal_cliques_bron_kerbosch",
    "maximal_cliques_koch",
    "degeneracy_ordering",
]


def _sorted_cliques(cliques: List[Clique]) -> List[Clique]:
    return sorted(cliques, key=lambda c: (len(c), sorted(c)))


# ============================================================
# Bron–Kerbosch with pivoting
# ============================================================

def _bron_kerbosch_pivot(adj: Adjacency, R: Set[int], P: Set[int], X: Set[int], out: List[Clique]) -> None:
    if not P and not X:
        out.append(frozenset(R))
        return

    # pivot: vertex of P ∪ X with the most neighbours in P
    u = max(P | X, key=lambda w: (len(adj[w] & P), -w))
    for v in sorted(P - adj[u]):
        _bron_kerbosch_pivot(adj, R | {v}, P & adj[v], X & adj[v], out)
        P = P - {v}
        X = X | {v}


def maximal_cliques_bron_kerbosch(K: SimplicialComplex) -> List[Clique]:
    """
    Maximal cliques of the 1-skeleton of ``K`` via Bron–Kerbosch backtracking
    with Tomita pivoting. Isolated vertices are singleton cliques.
    """
    adj = adjacency_from_complex(K)
    out: List[Clique] = []
    if not adj:
        return out
    _bron_kerbosch_pivot(adj, set(), set(adj), set(), out)
    logger.debug("Bron-Kerbosch: %d maximal cliques", len(out))
    return _sorted_cliques(out)


# ============================================================
# Koch: degeneracy ordering + per-vertex enumeration
# ============================================================

def degeneracy_ordering(adj: Adjacency) -> List[int]:
    """
    Vertices in the order they are removed when repeatedly deleting a vertex
    of minimum remaining degree (ties by vertex id). Every vertex has at most
    ``degeneracy`` neighbours later in this order.
    """
    degree = {v: len(nbrs) for v, nbrs in adj.items()}
    max_deg = max(degree.values(), default=0)
    buckets: List[Set[int]] = [set() for _ in range(max_deg + 1)]
    for v, d in degree.items():
        buckets[d].add(v)

    order: List[int] = []
    removed: Set[int] = set()
    d = 0
    while len(order) < len(adj):
        while not buckets[d]:
            d += 1
        v = min(buckets[d])
        buckets[d].remove(v)
        order.append(v)
        removed.add(v)
        for w in adj[v]:
            if w in removed:
                continue
            buckets[degree[w]].remove(w)
            degree[w] -= 1
            buckets[degree[w]].add(w)
        # a neighbour may have dropped one bucket below d
        d = max(d - 1, 0)
    return order


def _extend(adj: Adjacency, R: Set[int], P: Set[int], X: Set[int], out: List[Clique]) -> None:
    """Iterative Bron–Kerbosch without pivoting."""
    stack = [(R, P, X)]
    while stack:
        R, P, X = stack.pop()
        if not P:
            if not X:
                out.append(frozenset(R))
            continue
        v = min(P)
        stack.append((R, P - {v}, X | {v}))
        stack.append((R | {v}, P & adj[v], X & adj[v]))


def maximal_cliques_koch(K: SimplicialComplex) -> List[Clique]:
    """
    Maximal cliques of the 1-skeleton of ``K`` following Koch's scheme:
    vertices are visited in degeneracy order, and each vertex ``v`` only seeds
    cliques whose other members come later in that order, while earlier
    neighbours act as the exclusion set. Each maximal clique is therefore
    reported exactly once, from its earliest vertex.
    """
    adj = adjacency_from_complex(K)
    order = degeneracy_ordering(adj)
    position = {v: i for i, v in enumerate(order)}

    out: List[Clique] = []
    for v in order:
        later = {w for w in adj[v] if position[w] > position[v]}
        earlier = {w for w in adj[v] if position[w] < position[v]}
        _extend(adj, {v}, later, earlier, out)

    logger.debug("Koch: %d maximal cliques", len(out))
    return _sorted_cliques(out)
