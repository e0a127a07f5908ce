# simplicial_persistence/geometry/rips_expander.py
from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, List, Optional, Set

from ..combinatorics import Simp
from ..errors import MissingFaceError
from ..topology.graphs import adjacency_from_complex
from ..topology.maximal_cliques import maximal_cliques_koch
from ..topology.simplex import Simplex
from ..topology.simplicial_complex import SimplicialComplex

logger = logging.getLogger(__name__)

__all__ = [
    "RipsExpander",
    "RipsExpanderTopDown",
    "EXPANDERS",
    "assign_maximum_weight",
    "expand_flag_complex",
]


def _low_dimensional_data(K: SimplicialComplex) -> Dict[Simp, float]:
    return {s.vertices: s.data for s in K if s.dimension <= 1}


def assign_maximum_weight(
    K: SimplicialComplex,
    source: Optional[SimplicialComplex] = None,
) -> SimplicialComplex:
    """
    Reweight a flag complex so that every simplex of dimension >= 2 carries the
    maximum weight of its edges.

    Vertices and edges keep their weight; with ``source`` given, their weights
    (and hence the edge maxima) are taken from ``source`` instead of ``K``.
    The stored order of ``K`` is kept. Raises MissingFaceError when an edge is
    missing from the weight lookup.
    """
    weights = _low_dimensional_data(K)
    if source is not None:
        weights.update(_low_dimensional_data(source))

    out: List[Simplex] = []
    for s in K:
        if s.dimension <= 1:
            out.append(s.with_data(weights.get(s.vertices, s.data)))
            continue
        w = None
        for e in s.edges():
            if e not in weights:
                raise MissingFaceError(e, s.vertices)
            w = weights[e] if w is None else max(w, weights[e])
        out.append(s.with_data(w))
    return SimplicialComplex(out)


class _Expander:
    """Shared interface: ``expander(K, max_dim)`` returns the flag complex of ``K``."""

    def __call__(self, K: SimplicialComplex, max_dim: int) -> SimplicialComplex:
        max_dim = int(max_dim)
        if max_dim < 0:
            raise ValueError(f"max_dim must be >= 0. Got {max_dim}.")
        L = self.expand(K, max_dim)
        logger.debug("%s: %d simplices up to dimension %d", type(self).__name__, len(L), max_dim)
        return L

    def expand(self, K: SimplicialComplex, max_dim: int) -> SimplicialComplex:
        raise NotImplementedError

    @staticmethod
    def assign_maximum_weight(
        K: SimplicialComplex,
        source: Optional[SimplicialComplex] = None,
    ) -> SimplicialComplex:
        return assign_maximum_weight(K, source)


class RipsExpander(_Expander):
    """
    Bottom-up expansion: every simplex grows from its largest vertex by adding
    lower neighbours that are adjacent to all vertices chosen so far, so each
    simplex is generated exactly once.

    Simplices of dimension >= 2 get weight 0 until
    :meth:`assign_maximum_weight` is applied.
    """

    def expand(self, K: SimplicialComplex, max_dim: int) -> SimplicialComplex:
        adj = adjacency_from_complex(K)
        data = _low_dimensional_data(K)
        lower: Dict[int, Set[int]] = {u: {v for v in nbrs if v < u} for u, nbrs in adj.items()}

        out: List[Simplex] = []

        def add_cofaces(tau: Simp, candidates: Set[int]) -> None:
            out.append(Simplex(tau, data.get(tau, 0.0)))
            if len(tau) - 1 >= max_dim:
                return
            for v in sorted(candidates):
                sigma = tuple(sorted(tau + (v,)))
                add_cofaces(sigma, candidates & lower[v])

        for u in sorted(adj):
            add_cofaces((u,), lower[u])

        return SimplicialComplex(out)


class RipsExpanderTopDown(_Expander):
    """
    Top-down expansion: enumerate the maximal cliques of the 1-skeleton and
    emit every sub-clique with at most ``max_dim + 1`` vertices. Output is in
    lexicographic order.
    """

    def expand(self, K: SimplicialComplex, max_dim: int) -> SimplicialComplex:
        data = _low_dimensional_data(K)
        seen: Set[Simp] = set()
        for clique in maximal_cliques_koch(K):
            verts = tuple(sorted(clique))
            for size in range(1, min(len(verts), max_dim + 1) + 1):
                seen.update(combinations(verts, size))

        out = [Simplex(s, data.get(s, 0.0)) for s in sorted(seen)]
        return SimplicialComplex(out)


EXPANDERS = {
    "bottom_up": RipsExpander,
    "top_down": RipsExpanderTopDown,
}


def expand_flag_complex(
    K: SimplicialComplex,
    max_dim: int,
    *,
    strategy: str = "bottom_up",
    assign_weights: bool = True,
) -> SimplicialComplex:
    """Flag complex of ``K`` up to ``max_dim``, optionally reweighted by edge maxima."""
    if strategy not in EXPANDERS:
        raise ValueError(f"Unknown expansion strategy {strategy!r}; expected one of {sorted(EXPANDERS)}.")
    expander = EXPANDERS[strategy]()
    L = expander(K, max_dim)
    if assign_weights:
        L = expander.assign_maximum_weight(L, K)
    return L
