# simplicial_persistence/persistence/connected_components.py
from __future__ import annotations

from typing import Dict

import numpy as np

from ..topology.simplicial_complex import SimplicialComplex
from ..topology.union_find import UnionFind
from .diagrams import PersistenceDiagram
from .pairing import PersistencePairing

__all__ = ["zero_dimensional_pairing", "calculate_zero_dimensional_persistence"]


def zero_dimensional_pairing(K: SimplicialComplex) -> PersistencePairing:
    """
    Dimension-0 pairing of a filtered complex without matrix reduction.

    Vertices and edges are processed in stored order. An edge joining two
    components kills the younger one (the one whose oldest vertex has the larger
    index); edges closing a cycle are skipped. Surviving components are
    essential. Indices refer to positions in ``K``, exactly as in the pairing
    obtained from the boundary matrix.
    """
    uf = UnionFind()
    created: Dict[int, int] = {}  # root vertex -> index of its creating simplex
    pairing = PersistencePairing()

    for j, s in enumerate(K):
        if s.dimension == 0:
            v = s.vertices[0]
            uf.add(v)
            created[v] = j
        elif s.dimension == 1:
            u, v = s.vertices
            ru, rv = uf.find(u), uf.find(v)
            if ru == rv:
                continue
            older, younger = (ru, rv) if created[ru] < created[rv] else (rv, ru)
            pairing.add(created[younger], j)
            uf.union(older, younger)

    for r in uf.roots():
        pairing.add(created[r])
    return pairing.sort()


def calculate_zero_dimensional_persistence(K: SimplicialComplex) -> PersistenceDiagram:
    """Dimension-0 persistence diagram of ``K`` (zero-persistence points included)."""
    pairing = zero_dimensional_pairing(K)
    points = [
        [K[c].data, float("inf") if d is None else K[d].data]
        for c, d in pairing
    ]
    return PersistenceDiagram(0, np.asarray(points, dtype=float))
