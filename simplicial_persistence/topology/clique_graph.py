# simplicial_persistence/topology/clique_graph.py
from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, List

from ..combinatorics import Simp, boundary_faces
from .simplex import Simplex
from .simplicial_complex import SimplicialComplex

logger = logging.getLogger(__name__)

__all__ = ["get_clique_graph"]


def get_clique_graph(K: SimplicialComplex, k: int) -> SimplicialComplex:
    """
    The ``k``-clique graph of ``K`` as a 1-dimensional complex.

    Its vertices are the indices (within ``K``) of the ``k``-simplices, each
    carrying that simplex's weight. Two vertices are joined when their
    simplices share a ``(k-1)``-face; the edge weight is the larger of the two
    simplex weights. Vertex ids therefore map straight back via ``K[v]``.
    """
    k = int(k)
    if k < 1:
        raise ValueError(f"k must be >= 1. Got {k}.")

    nodes = [j for j, s in enumerate(K) if s.dimension == k]

    cofaces: Dict[Simp, List[int]] = {}
    for j in nodes:
        for face in boundary_faces(K[j].vertices):
            cofaces.setdefault(face, []).append(j)

    simplices: List[Simplex] = [Simplex([j], K[j].data) for j in nodes]
    for js in cofaces.values():
        for a, b in combinations(js, 2):
            simplices.append(Simplex([a, b], max(K[a].data, K[b].data)))

    C = SimplicialComplex(simplices)
    logger.debug("%d-clique graph: %d vertices, %d simplices", k, len(nodes), len(C))
    return C
