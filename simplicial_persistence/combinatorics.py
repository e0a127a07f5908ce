# simplicial_persistence/combinatorics.py
from __future__ import annotations

from itertools import combinations
from typing import Iterable, List, Tuple

Simp = Tuple[int, ...]  # generic simplex as sorted tuple
Edge = Tuple[int, int]

__all__ = [
    "Simp",
    "Edge",
    "canon_simplex",
    "canon_edge",
    "simplex_dim",
    "boundary_faces",
    "edges_of",
    "faces_of_dim",
]


def canon_simplex(sig: Iterable[int]) -> Simp:
    return tuple(sorted({int(x) for x in sig}))


def canon_edge(a: int, b: int) -> Edge:
    a, b = int(a), int(b)
    return (a, b) if a < b else (b, a)


def simplex_dim(sig: Simp) -> int:
    return len(sig) - 1


def boundary_faces(sig: Simp) -> List[Simp]:
    """
    Codimension-1 faces of a canonical simplex, in order of the omitted vertex.

    A vertex has no faces.
    """
    n = len(sig)
    if n <= 1:
        return []
    return [sig[:i] + sig[i + 1:] for i in range(n)]


def edges_of(sig: Simp) -> List[Edge]:
    """All 1-faces of a canonical simplex (empty for vertices)."""
    return [(a, b) for a, b in combinations(sig, 2)]


def faces_of_dim(sig: Simp, dim: int) -> List[Simp]:
    if dim < 0:
        raise ValueError(f"dim must be >= 0. Got {dim}.")
    return [tuple(c) for c in combinations(sig, dim + 1)]
