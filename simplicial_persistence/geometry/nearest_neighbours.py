# simplicial_persistence/geometry/nearest_neighbours.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol, Tuple, runtime_checkable

import numpy as np
from scipy.spatial import cKDTree
from scipy.spatial.distance import cdist

__all__ = ["NearestNeighbours", "BruteForce", "KDTreeNeighbours"]

Neighbourhoods = Tuple[List[List[int]], List[List[float]]]


@runtime_checkable
class NearestNeighbours(Protocol):
    """
    Neighbour queries over a fixed point cloud.

    Both searches return, for every point ``i``, the indices of its neighbours
    (excluding ``i`` itself) and the matching distances, nearest first.
    """

    def radius_search(self, radius: float) -> Neighbourhoods:
        ...

    def neighbour_search(self, k: int) -> Neighbourhoods:
        ...

    def size(self) -> int:
        ...


def _as_points(X) -> np.ndarray:
    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if X.ndim != 2:
        raise ValueError(f"points must be 1D or 2D (n_points, d). Got shape {X.shape}.")
    return X


@dataclass
class BruteForce:
    """All-pairs distances via ``scipy.spatial.distance.cdist``; O(n^2) memory."""
    points: np.ndarray
    metric: str = "euclidean"
    _D: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        self.points = _as_points(self.points)
        self._D = cdist(self.points, self.points, metric=self.metric)

    def size(self) -> int:
        return int(self.points.shape[0])

    def radius_search(self, radius: float) -> Neighbourhoods:
        indices: List[List[int]] = []
        distances: List[List[float]] = []
        for i in range(self.size()):
            row = self._D[i]
            nbrs = [int(j) for j in np.flatnonzero(row <= radius) if j != i]
            nbrs.sort(key=lambda j: (row[j], j))
            indices.append(nbrs)
            distances.append([float(row[j]) for j in nbrs])
        return indices, distances

    def neighbour_search(self, k: int) -> Neighbourhoods:
        k = int(k)
        if k < 0:
            raise ValueError(f"k must be >= 0. Got {k}.")
        indices: List[List[int]] = []
        distances: List[List[float]] = []
        for i in range(self.size()):
            row = self._D[i]
            order = [int(j) for j in np.lexsort((np.arange(len(row)), row)) if j != i][:k]
            indices.append(order)
            distances.append([float(row[j]) for j in order])
        return indices, distances


@dataclass
class KDTreeNeighbours:
    """Euclidean neighbour queries backed by ``scipy.spatial.cKDTree``."""
    points: np.ndarray
    _tree: cKDTree = field(init=False, repr=False)

    def __post_init__(self):
        self.points = _as_points(self.points)
        self._tree = cKDTree(self.points)

    def size(self) -> int:
        return int(self.points.shape[0])

    def radius_search(self, radius: float) -> Neighbourhoods:
        indices: List[List[int]] = []
        distances: List[List[float]] = []
        for i, nbrs in enumerate(self._tree.query_ball_point(self.points, r=radius)):
            nbrs = [int(j) for j in nbrs if j != i]
            d = np.linalg.norm(self.points[nbrs] - self.points[i], axis=1) if nbrs else np.zeros(0)
            order = sorted(range(len(nbrs)), key=lambda t: (d[t], nbrs[t]))
            indices.append([nbrs[t] for t in order])
            distances.append([float(d[t]) for t in order])
        return indices, distances

    def neighbour_search(self, k: int) -> Neighbourhoods:
        k = int(k)
        if k < 0:
            raise ValueError(f"k must be >= 0. Got {k}.")
        n = self.size()
        if k == 0 or n <= 1:
            return [[] for _ in range(n)], [[] for _ in range(n)]
        # the query point itself is returned as its own nearest neighbour
        kk = min(k + 1, n)
        d, idx = self._tree.query(self.points, k=kk)
        d = np.asarray(d).reshape(n, kk)
        idx = np.asarray(idx).reshape(n, kk)
        indices: List[List[int]] = []
        distances: List[List[float]] = []
        for i in range(n):
            pairs = [(float(dd), int(j)) for dd, j in zip(d[i], idx[i]) if j != i][:k]
            indices.append([j for _, j in pairs])
            distances.append([dd for dd, _ in pairs])
        return indices, distances
