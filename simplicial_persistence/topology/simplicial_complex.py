# simplicial_persistence/topology/simplicial_complex.py
from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..combinatorics import Simp, canon_simplex
from ..errors import MissingFaceError
from .simplex import Simplex, data_order_key, lexicographic_order_key

__all__ = ["SimplicialComplex", "SimplexLike"]

SimplexLike = Union[Simplex, Sequence[int]]


def _as_simplex(s: SimplexLike) -> Simplex:
    return s if isinstance(s, Simplex) else Simplex(s)


class SimplicialComplex:
    """
    Ordered collection of simplices with O(1) index lookup by vertex set.

    The position of a simplex in the stored order is its index; this index is
    the row/column coordinate of the boundary matrix. A vertex set that occurs
    more than once is kept at its first occurrence only.

    The index map is built once here and rebuilt only by :meth:`sort`, so
    conversions never mutate it.
    """

    def __init__(self, simplices: Iterable[SimplexLike] = ()):
        self._simplices: List[Simplex] = []
        self._index: Dict[Simp, int] = {}
        for s in simplices:
            s = _as_simplex(s)
            if s.vertices in self._index:
                continue
            self._index[s.vertices] = len(self._simplices)
            self._simplices.append(s)

    # ---- container protocol ----

    def __len__(self) -> int:
        return len(self._simplices)

    def __iter__(self) -> Iterator[Simplex]:
        return iter(self._simplices)

    def __getitem__(self, i: int) -> Simplex:
        return self._simplices[i]

    def __contains__(self, s: object) -> bool:
        if isinstance(s, Simplex):
            return s.vertices in self._index
        try:
            return canon_simplex(s) in self._index  # type: ignore[arg-type]
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimplicialComplex):
            return NotImplemented
        return self.items() == other.items()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SimplicialComplex(n={len(self)}, dim={self.dimension})"

    def empty(self) -> bool:
        return len(self._simplices) == 0

    def items(self) -> List[Tuple[Simp, float]]:
        """The ordered ``(vertices, data)`` sequence; the basis of structural equality."""
        return [(s.vertices, s.data) for s in self._simplices]

    @property
    def simplices(self) -> List[Simplex]:
        return list(self._simplices)

    # ---- lookup ----

    def index(self, s: SimplexLike) -> int:
        key = s.vertices if isinstance(s, Simplex) else canon_simplex(s)
        return self._index[key]

    def find(self, s: SimplexLike) -> Optional[Simplex]:
        key = s.vertices if isinstance(s, Simplex) else canon_simplex(s)
        i = self._index.get(key)
        return None if i is None else self._simplices[i]

    def boundary_indices(self, j: int) -> List[int]:
        """
        Sorted indices of the boundary faces of simplex ``j``.

        Raises MissingFaceError if a face is not part of the complex.
        """
        s = self._simplices[j]
        rows: List[int] = []
        for face in s.boundary():
            i = self._index.get(face.vertices)
            if i is None:
                raise MissingFaceError(face.vertices, s.vertices)
            rows.append(i)
        rows.sort()
        return rows

    # ---- structure ----

    @property
    def dimension(self) -> int:
        """Top dimension (0 for the empty complex)."""
        return max((s.dimension for s in self._simplices), default=0)

    def vertices(self) -> List[int]:
        return sorted({v for s in self._simplices for v in s.vertices})

    def skeleton(self, k: int) -> "SimplicialComplex":
        return SimplicialComplex(s for s in self._simplices if s.dimension <= k)

    def of_dimension(self, k: int) -> List[Simplex]:
        return [s for s in self._simplices if s.dimension == k]

    def is_closed(self) -> bool:
        return all(f.vertices in self._index for s in self._simplices for f in s.boundary())

    # ---- ordering ----

    def sort(self, key: Optional[Callable[[Simplex], object]] = None) -> "SimplicialComplex":
        """
        Sort in place (lexicographic by default, e.g. ``key=data_order_key`` for
        filtration order) and rebuild the index map. Returns ``self``.
        """
        self._simplices.sort(key=key or lexicographic_order_key)
        self._index = {s.vertices: i for i, s in enumerate(self._simplices)}
        return self

    def sort_by_data(self) -> "SimplicialComplex":
        return self.sort(data_order_key)

    def filter(self, predicate: Callable[[Simplex], bool]) -> "SimplicialComplex":
        return SimplicialComplex(s for s in self._simplices if predicate(s))

    def copy(self) -> "SimplicialComplex":
        return SimplicialComplex(self._simplices)
