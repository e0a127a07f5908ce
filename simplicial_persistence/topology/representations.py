# simplicial_persistence/topology/representations.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

import numpy as np

__all__ = [
    "ColumnRepresentation",
    "SortedListColumns",
    "DenseZ2Columns",
    "REPRESENTATIONS",
]


class ColumnRepresentation(ABC):
    """
    Storage strategy for the columns of a Z2 boundary matrix.

    Columns are sets of row indices; adding one column to another is the
    symmetric difference of the two sets.
    """

    @abstractmethod
    def set_num_columns(self, n: int) -> None:
        ...

    @property
    @abstractmethod
    def num_columns(self) -> int:
        ...

    @abstractmethod
    def get_column(self, j: int) -> List[int]:
        """Sorted row indices of column ``j``."""

    @abstractmethod
    def set_column(self, j: int, rows: Iterable[int]) -> None:
        ...

    @abstractmethod
    def add_columns(self, source: int, target: int) -> None:
        """target <- target + source (mod 2)."""

    @abstractmethod
    def get_maximum_index(self, j: int) -> Optional[int]:
        """Largest row index of column ``j``, or None if the column is empty."""

    @abstractmethod
    def clear_column(self, j: int) -> None:
        ...

    @abstractmethod
    def num_entries(self, j: int) -> int:
        ...

    @abstractmethod
    def copy(self) -> "ColumnRepresentation":
        ...


class SortedListColumns(ColumnRepresentation):
    """Columns as ascending Python lists; the low is always the last entry."""

    def __init__(self, n: int = 0):
        self._data: List[List[int]] = [[] for _ in range(int(n))]

    def set_num_columns(self, n: int) -> None:
        self._data = [[] for _ in range(int(n))]

    @property
    def num_columns(self) -> int:
        return len(self._data)

    def get_column(self, j: int) -> List[int]:
        return list(self._data[j])

    def set_column(self, j: int, rows: Iterable[int]) -> None:
        self._data[j] = sorted({int(r) for r in rows})

    def add_columns(self, source: int, target: int) -> None:
        a = self._data[source]
        b = self._data[target]
        out: List[int] = []
        i = k = 0
        # merge of two sorted lists, dropping entries present in both
        while i < len(a) and k < len(b):
            if a[i] < b[k]:
                out.append(a[i])
                i += 1
            elif a[i] > b[k]:
                out.append(b[k])
                k += 1
            else:
                i += 1
                k += 1
        out.extend(a[i:])
        out.extend(b[k:])
        self._data[target] = out

    def get_maximum_index(self, j: int) -> Optional[int]:
        col = self._data[j]
        return col[-1] if col else None

    def clear_column(self, j: int) -> None:
        self._data[j] = []

    def num_entries(self, j: int) -> int:
        return len(self._data[j])

    def copy(self) -> "SortedListColumns":
        out = SortedListColumns()
        out._data = [list(c) for c in self._data]
        return out


class DenseZ2Columns(ColumnRepresentation):
    """
    Columns as a dense ``(n, n)`` uint8 matrix over Z2; addition is a XOR.

    Memory grows quadratically with the number of simplices, so this is meant
    for small complexes and for cross-checking the sparse representation.
    """

    def __init__(self, n: int = 0):
        self._A = np.zeros((int(n), int(n)), dtype=np.uint8)

    def set_num_columns(self, n: int) -> None:
        self._A = np.zeros((int(n), int(n)), dtype=np.uint8)

    @property
    def num_columns(self) -> int:
        return int(self._A.shape[1])

    def get_column(self, j: int) -> List[int]:
        return [int(i) for i in np.flatnonzero(self._A[:, j])]

    def set_column(self, j: int, rows: Iterable[int]) -> None:
        self._A[:, j] = 0
        for r in rows:
            self._A[int(r), j] = 1

    def add_columns(self, source: int, target: int) -> None:
        self._A[:, target] ^= self._A[:, source]

    def get_maximum_index(self, j: int) -> Optional[int]:
        nz = np.flatnonzero(self._A[:, j])
        return int(nz[-1]) if nz.size else None

    def clear_column(self, j: int) -> None:
        self._A[:, j] = 0

    def num_entries(self, j: int) -> int:
        return int(self._A[:, j].sum())

    def copy(self) -> "DenseZ2Columns":
        out = DenseZ2Columns()
        out._A = self._A.copy()
        return out


REPRESENTATIONS = {
    "sorted_list": SortedListColumns,
    "dense_z2": DenseZ2Columns,
}
