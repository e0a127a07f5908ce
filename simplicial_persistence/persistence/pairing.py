# simplicial_persistence/persistence/pairing.py
from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Set, Tuple

from ..topology.boundary_matrix import BoundaryMatrix
from .reduction import ReductionAlgorithm, resolve_reduction

logger = logging.getLogger(__name__)

__all__ = [
    "Pair",
    "PersistencePairing",
    "remap_dualized",
    "calculate_persistence_pairing",
]

Pair = Tuple[int, Optional[int]]  # (creator, destroyer); destroyer None => essential


def remap_dualized(num_columns: int, i: int, j: int) -> Tuple[int, int]:
    """
    Map a pivot ``(i, j)`` of the anti-transposed matrix back to a
    ``(creator, destroyer)`` pair of the original filtration.

    The creator comes from the column and the destroyer from the row:
    ``(num_columns - 1 - j, num_columns - 1 - i)``.
    """
    return num_columns - 1 - j, num_columns - 1 - i


class PersistencePairing:
    """
    Sorted collection of ``(creator, destroyer)`` index pairs plus essential
    creators, stored as ``(creator, None)``.

    Finite pairs always satisfy ``creator < destroyer``; essential creators are
    kept once. Iteration yields entries ordered by creator, with an essential
    entry after any finite pair sharing its creator.
    """

    def __init__(self, pairs: Optional[List[Pair]] = None):
        self._pairs: List[Pair] = []
        self._essential: Set[int] = set()
        for c, d in pairs or []:
            self.add(c, d)
        self.sort()

    def add(self, creator: int, destroyer: Optional[int] = None) -> None:
        creator = int(creator)
        if destroyer is None:
            if creator in self._essential:
                return
            self._essential.add(creator)
            self._pairs.append((creator, None))
            return
        destroyer = int(destroyer)
        if not creator < destroyer:
            raise ValueError(f"Invalid pair ({creator}, {destroyer}): creator must precede destroyer.")
        self._pairs.append((creator, destroyer))

    def sort(self) -> "PersistencePairing":
        self._pairs.sort(key=lambda p: (p[0], float("inf") if p[1] is None else p[1]))
        return self

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __getitem__(self, i: int) -> Pair:
        return self._pairs[i]

    def __contains__(self, pair: object) -> bool:
        return pair in self._pairs

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistencePairing):
            return NotImplemented
        return self._pairs == other._pairs

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PersistencePairing({self._pairs!r})"

    def empty(self) -> bool:
        return not self._pairs

    @property
    def pairs(self) -> List[Tuple[int, int]]:
        return [(c, d) for c, d in self._pairs if d is not None]

    @property
    def essential(self) -> List[int]:
        return sorted(self._essential)

    def indices(self) -> List[int]:
        """Every index mentioned by the pairing, creators and destroyers alike."""
        out: List[int] = []
        for c, d in self._pairs:
            out.append(c)
            if d is not None:
                out.append(d)
        return out


def calculate_persistence_pairing(
    M: BoundaryMatrix,
    include_all_unpaired_creators: bool = False,
    max_index: Optional[int] = None,
    *,
    reduction: Optional[ReductionAlgorithm] = None,
) -> PersistencePairing:
    """
    Reduce a copy of ``M`` and read off its persistence pairing.

    Parameters
    ----------
    M : BoundaryMatrix
        Left untouched; the reduction runs on a copy.
    include_all_unpaired_creators : bool
        Empty columns of the top dimension can never be reduced, so they are
        normally not reported as essential creators. Set this to report every
        unpaired creator, e.g. for Betti numbers of ordinary homology.
    max_index : optional int
        Ignore columns from this index on and drop pairs whose row index is
        not below it (intersection homology). Values beyond the column count
        are clamped; negative values raise ValueError.
    reduction : ReductionAlgorithm, optional
        Strategy instance, class or name; standard reduction by default.

    Returns
    -------
    PersistencePairing
        Indices refer to the original (non-dualized) filtration.
    """
    B = M.copy()
    resolve_reduction(reduction).reduce(B)

    num_columns = B.num_columns
    if max_index is not None and max_index < 0:
        raise ValueError(f"max_index must be >= 0. Got {max_index}.")
    if max_index:
        num_columns = min(int(max_index), num_columns)

    dualized = B.is_dualized()
    top = B.get_dimension()

    pairing = PersistencePairing()
    creators: Set[int] = set()

    for j in range(num_columns):
        i = B.get_maximum_index(j)
        if i is not None:
            # column j destroys the class created by its low, so i is no creator
            creators.discard(i)

            u, v = (i, j)
            if dualized:
                u, v = remap_dualized(num_columns, i, j)

            if not max_index or i < max_index:
                pairing.add(u, v)
        else:
            dim = B.get_dimension(j)
            if (
                (not dualized and dim != top)
                or (dualized and dim != 0)
                or include_all_unpaired_creators
            ):
                creators.add(j)

    for c in creators:
        pairing.add(num_columns - 1 - c if dualized else c)

    logger.debug(
        "Pairing: %d finite pairs, %d essential creators",
        len(pairing.pairs), len(pairing.essential),
    )
    return pairing.sort()
