# simplicial_persistence/persistence/reduction.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from ..topology.boundary_matrix import BoundaryMatrix

logger = logging.getLogger(__name__)

__all__ = [
    "ReductionAlgorithm",
    "StandardReduction",
    "TwistReduction",
    "REDUCTIONS",
    "is_reduced",
    "resolve_reduction",
]


class ReductionAlgorithm(ABC):
    """
    In-place column reduction of a Z2 boundary matrix.

    After :meth:`reduce`, the low (largest row index) of every non-empty
    column is unique. Callers only rely on this post-condition, never on the
    order in which a strategy performs its column additions.
    """

    def __init__(self):
        self.column_operations = 0

    def __call__(self, M: BoundaryMatrix) -> BoundaryMatrix:
        return self.reduce(M)

    def reduce(self, M: BoundaryMatrix) -> BoundaryMatrix:
        self.column_operations = 0
        self._reduce(M)
        logger.debug(
            "%s reduced %d columns with %d column operations",
            type(self).__name__, M.num_columns, self.column_operations,
        )
        return M

    @abstractmethod
    def _reduce(self, M: BoundaryMatrix) -> None:
        ...

    def _reduce_column(self, M: BoundaryMatrix, j: int, lookup: Dict[int, int]) -> Optional[int]:
        """Eliminate pivot collisions in column ``j``; return its final low (or None)."""
        low = M.get_maximum_index(j)
        while low is not None and low in lookup:
            M.add_columns(lookup[low], j)
            self.column_operations += 1
            low = M.get_maximum_index(j)
        if low is not None:
            lookup[low] = j
        return low


class StandardReduction(ReductionAlgorithm):
    """Left-to-right reduction: add earlier columns sharing the low until it is unique."""

    def _reduce(self, M: BoundaryMatrix) -> None:
        lookup: Dict[int, int] = {}
        for j in range(M.num_columns):
            self._reduce_column(M, j, lookup)


class TwistReduction(ReductionAlgorithm):
    """
    Reduction with clearing: columns are processed from the top dimension
    down, and once column ``j`` settles on low ``i``, column ``i`` is zeroed
    because a paired creator always reduces to zero.
    """

    def _reduce(self, M: BoundaryMatrix) -> None:
        lookup: Dict[int, int] = {}
        top = M.get_dimension()
        by_dim: List[List[int]] = [[] for _ in range(top + 1)]
        for j in range(M.num_columns):
            by_dim[M.get_dimension(j)].append(j)

        for d in range(top, -1, -1):
            for j in by_dim[d]:
                low = self._reduce_column(M, j, lookup)
                if low is not None:
                    M.clear_column(low)


REDUCTIONS = {
    "standard": StandardReduction,
    "twist": TwistReduction,
}


def resolve_reduction(reduction) -> ReductionAlgorithm:
    """Accept a name, a ReductionAlgorithm subclass or an instance."""
    if reduction is None:
        return StandardReduction()
    if isinstance(reduction, str):
        if reduction not in REDUCTIONS:
            raise ValueError(f"Unknown reduction {reduction!r}; expected one of {sorted(REDUCTIONS)}.")
        return REDUCTIONS[reduction]()
    if isinstance(reduction, type):
        return reduction()
    return reduction


def is_reduced(M: BoundaryMatrix) -> bool:
    """True iff no two non-empty columns share their low."""
    seen = set()
    for j in range(M.num_columns):
        low = M.get_maximum_index(j)
        if low is None:
            continue
        if low in seen:
            return False
        seen.add(low)
    return True
