# simplicial_persistence/geometry/vietoris_rips.py
from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..topology.simplex import Simplex
from ..topology.simplicial_complex import SimplicialComplex
from .nearest_neighbours import BruteForce, NearestNeighbours
from .rips_expander import expand_flag_complex

__all__ = ["build_vietoris_rips_skeleton", "build_vietoris_rips_complex"]


def build_vietoris_rips_skeleton(nn: NearestNeighbours, epsilon: float) -> SimplicialComplex:
    """
    Weighted 1-skeleton of the Vietoris–Rips complex at scale ``epsilon``:
    one vertex per point (weight 0) and an edge for every pair within
    ``epsilon``, weighted by the distance.
    """
    if epsilon < 0:
        raise ValueError(f"epsilon must be >= 0. Got {epsilon}.")
    indices, distances = nn.radius_search(epsilon)

    simplices: List[Simplex] = [Simplex([i], 0.0) for i in range(nn.size())]
    for i, (nbrs, dists) in enumerate(zip(indices, distances)):
        for j, d in zip(nbrs, dists):
            if i < j:
                simplices.append(Simplex([i, j], d))
    return SimplicialComplex(simplices)


def build_vietoris_rips_complex(
    points,
    epsilon: float,
    max_dim: int = 2,
    *,
    nn: Optional[NearestNeighbours] = None,
    strategy: str = "bottom_up",
) -> SimplicialComplex:
    """
    Vietoris–Rips complex of a point cloud up to ``max_dim``, with every
    simplex weighted by its longest edge and sorted into filtration order.
    """
    if nn is None:
        nn = BruteForce(np.asarray(points, dtype=float))
    K = build_vietoris_rips_skeleton(nn, epsilon)
    L = expand_flag_complex(K, max_dim, strategy=strategy)
    return L.sort_by_data()
