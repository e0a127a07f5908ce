# simplicial_persistence/topology/boundary_matrix.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Type, Union

from .representations import ColumnRepresentation, REPRESENTATIONS, SortedListColumns
from .simplicial_complex import SimplicialComplex

logger = logging.getLogger(__name__)

__all__ = ["BoundaryMatrix", "make_boundary_matrix", "resolve_representation"]

RepresentationLike = Union[str, ColumnRepresentation, Type[ColumnRepresentation], None]


def resolve_representation(rep: RepresentationLike, n: int) -> ColumnRepresentation:
    """Turn a name, class or instance into an empty representation with ``n`` columns."""
    if rep is None:
        rep = SortedListColumns
    if isinstance(rep, str):
        if rep not in REPRESENTATIONS:
            raise ValueError(f"Unknown representation {rep!r}; expected one of {sorted(REPRESENTATIONS)}.")
        rep = REPRESENTATIONS[rep]
    if isinstance(rep, type):
        out = rep()
    else:
        out = rep
    out.set_num_columns(n)
    return out


class BoundaryMatrix:
    """
    Sparse Z2 boundary matrix, column ``j`` holding the boundary-face indices of
    simplex ``j``.

    Each column carries the dimension of its simplex. Row indices of a column
    are always smaller than the column index. The ``dualized`` flag marks the
    anti-transpose produced by :meth:`dualize`; pairings read from such a
    matrix are mapped back with ``n - 1 - i``.

    The column count is fixed at construction.
    """

    def __init__(
        self,
        num_columns: int,
        *,
        representation: RepresentationLike = None,
        dimensions: Optional[Sequence[int]] = None,
        dualized: bool = False,
    ):
        n = int(num_columns)
        if n < 0:
            raise ValueError(f"num_columns must be >= 0. Got {n}.")
        self._rep = resolve_representation(representation, n)
        if dimensions is None:
            self._dimensions = [0] * n
        else:
            if len(dimensions) != n:
                raise ValueError(f"dimensions must have length {n}, got {len(dimensions)}.")
            self._dimensions = [int(d) for d in dimensions]
        self._dualized = bool(dualized)

    @classmethod
    def from_columns(
        cls,
        columns: Sequence[Iterable[int]],
        *,
        dimensions: Optional[Sequence[int]] = None,
        representation: RepresentationLike = None,
        dualized: bool = False,
    ) -> "BoundaryMatrix":
        """
        Build a matrix from explicit columns. Without ``dimensions``, the
        dimension of a column is its number of entries minus one (0 if empty),
        which is right for simplicial boundaries.
        """
        cols = [sorted({int(r) for r in c}) for c in columns]
        if dimensions is None:
            dimensions = [max(len(c) - 1, 0) for c in cols]
        M = cls(len(cols), representation=representation, dimensions=dimensions, dualized=dualized)
        for j, c in enumerate(cols):
            M.set_column(j, c)
        return M

    # ---- basic access ----

    @property
    def num_columns(self) -> int:
        return self._rep.num_columns

    def __len__(self) -> int:
        return self.num_columns

    @property
    def representation(self) -> ColumnRepresentation:
        return self._rep

    def is_dualized(self) -> bool:
        return self._dualized

    def get_column(self, j: int) -> List[int]:
        return self._rep.get_column(j)

    def set_column(self, j: int, rows: Iterable[int]) -> None:
        rows = sorted({int(r) for r in rows})
        if rows and (rows[0] < 0 or rows[-1] >= j):
            raise ValueError(f"Column {j} has row indices {rows}; rows must lie in [0, {j}).")
        self._rep.set_column(j, rows)

    def add_columns(self, source: int, target: int) -> None:
        self._rep.add_columns(source, target)

    def clear_column(self, j: int) -> None:
        self._rep.clear_column(j)

    def get_maximum_index(self, j: int) -> Optional[int]:
        return self._rep.get_maximum_index(j)

    def get_dimension(self, j: Optional[int] = None) -> int:
        """Dimension of column ``j``, or the top dimension of the matrix if ``j`` is None."""
        if j is None:
            return max(self._dimensions, default=0)
        return self._dimensions[j]

    @property
    def dimension(self) -> int:
        return self.get_dimension()

    @property
    def dimensions(self) -> List[int]:
        return list(self._dimensions)

    def columns(self) -> List[List[int]]:
        return [self._rep.get_column(j) for j in range(self.num_columns)]

    def copy(self) -> "BoundaryMatrix":
        M = BoundaryMatrix.__new__(BoundaryMatrix)
        M._rep = self._rep.copy()
        M._dimensions = list(self._dimensions)
        M._dualized = self._dualized
        return M

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundaryMatrix):
            return NotImplemented
        return (
            self._dualized == other._dualized
            and self._dimensions == other._dimensions
            and self.columns() == other.columns()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundaryMatrix(n={self.num_columns}, dim={self.dimension}, dualized={self._dualized})"

    # ---- dualization ----

    def dualize(self) -> "BoundaryMatrix":
        """
        Anti-transpose: entry ``(i, j)`` moves to ``(n-1-j, n-1-i)``.

        Column ``n-1-j`` of the result describes simplex ``j``; its dimension is
        the codimension ``D - d`` with respect to the top dimension ``D``, so that
        top-dimensional simplices become the dimension-0 columns of the dual.
        Dualizing twice gives back the original matrix.
        """
        n = self.num_columns
        top = self.get_dimension()
        dual_cols: List[List[int]] = [[] for _ in range(n)]
        for j in range(n):
            for i in self._rep.get_column(j):
                dual_cols[n - 1 - i].append(n - 1 - j)

        dims = [top - self._dimensions[n - 1 - j] for j in range(n)]
        M = BoundaryMatrix(n, representation=type(self._rep), dimensions=dims, dualized=not self._dualized)
        for j, c in enumerate(dual_cols):
            M._rep.set_column(j, c)
        return M


def make_boundary_matrix(
    K: SimplicialComplex,
    max_index: Optional[int] = None,
    *,
    representation: RepresentationLike = None,
) -> BoundaryMatrix:
    """
    Convert a simplicial complex into its boundary matrix.

    Column ``j`` holds the sorted indices (within ``K``) of the boundary faces
    of the ``j``-th simplex. With ``max_index``, conversion stops after
    ``min(len(K), max_index)`` columns, which is what intersection homology
    needs; otherwise the matrix is suitable for ordinary persistent homology.

    Raises MissingFaceError when a face is absent from ``K`` and ValueError
    when a face comes after its coface (``K`` is not in a filtration order)
    or ``max_index`` is negative.
    """
    n = len(K)
    if max_index is not None and max_index < 0:
        raise ValueError(f"max_index must be >= 0. Got {max_index}.")
    if max_index:
        n = min(n, int(max_index))

    dims = [K[j].dimension for j in range(n)]
    M = BoundaryMatrix(n, representation=representation, dimensions=dims)
    for j in range(n):
        M.set_column(j, K.boundary_indices(j))

    logger.debug("Boundary matrix with %d columns (top dimension %d)", n, M.dimension)
    return M
