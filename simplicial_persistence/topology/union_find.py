# simplicial_persistence/topology/union_find.py
from __future__ import annotations

from typing import Dict, Hashable, Iterable, List

from ..errors import UnknownElementError
from .simplicial_complex import SimplicialComplex

__all__ = ["UnionFind", "calculate_connected_components"]


class UnionFind:
    """
    Disjoint-set forest over a fixed set of hashable elements.

    ``find`` compresses paths (halving). ``union(a, b)`` hangs the root of
    ``b`` below the root of ``a``, so the first argument's root survives; the
    elder-rule bookkeeping in zero-dimensional persistence relies on that.
    """

    def __init__(self, elements: Iterable[Hashable] = ()):
        self._parent: Dict[Hashable, Hashable] = {}
        for e in elements:
            self._parent.setdefault(e, e)

    def add(self, element: Hashable) -> None:
        self._parent.setdefault(element, element)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, element: object) -> bool:
        return element in self._parent

    def find(self, x: Hashable) -> Hashable:
        parent = self._parent
        if x not in parent:
            raise UnknownElementError(x)
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, a: Hashable, b: Hashable) -> Hashable:
        """Merge the components of ``a`` and ``b``; return the surviving root."""
        ra = self.find(a)
        rb = self.find(b)
        if ra != rb:
            self._parent[rb] = ra
        return ra

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def roots(self) -> List[Hashable]:
        return sorted({self.find(x) for x in self._parent})

    def get(self, root: Hashable) -> List[Hashable]:
        """All members of the component of ``root`` (sorted)."""
        r = self.find(root)
        return sorted(x for x in self._parent if self.find(x) == r)

    def components(self) -> Dict[Hashable, List[Hashable]]:
        out: Dict[Hashable, List[Hashable]] = {}
        for x in self._parent:
            out.setdefault(self.find(x), []).append(x)
        return {r: sorted(m) for r, m in sorted(out.items())}


def calculate_connected_components(K: SimplicialComplex) -> UnionFind:
    """
    Union-Find over the vertices of ``K``, merged along every edge in stored order.
    """
    uf = UnionFind(K.vertices())
    for s in K:
        if s.dimension == 1:
            u, v = s.vertices
            uf.union(u, v)
    return uf
