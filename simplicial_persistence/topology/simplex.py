# simplicial_persistence/topology/simplex.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ..combinatorics import Simp, boundary_faces, canon_simplex, edges_of, simplex_dim

__all__ = ["Simplex", "data_order_key", "lexicographic_order_key"]


@dataclass(frozen=True, eq=False)
class Simplex:
    """
    An immutable simplex: a sorted, deduplicated vertex tuple plus one data value.

    Two simplices are equal iff their vertex sets are equal; the data value
    (filtration weight) does not take part in equality or hashing.

    Ordering (``<``) is lexicographic on the vertex tuple. Use
    :func:`data_order_key` to sort by filtration value instead.
    """
    vertices: Simp
    data: float = 0.0
    dimension: int = field(init=False)

    def __init__(self, vertices: Iterable[int], data: float = 0.0):
        verts = canon_simplex(vertices)
        if len(verts) == 0:
            raise ValueError("A simplex needs at least one vertex.")
        object.__setattr__(self, "vertices", verts)
        object.__setattr__(self, "data", float(data))
        object.__setattr__(self, "dimension", simplex_dim(verts))

    # ---- containers ----

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def __contains__(self, v: object) -> bool:
        return v in self.vertices

    # ---- comparison ----

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Simplex):
            return NotImplemented
        return self.vertices == other.vertices

    def __hash__(self) -> int:
        return hash(self.vertices)

    def __lt__(self, other: "Simplex") -> bool:
        return self.vertices < other.vertices

    def __repr__(self) -> str:
        return f"Simplex({list(self.vertices)}, data={self.data:g})"

    # ---- structure ----

    def boundary(self) -> List["Simplex"]:
        """Codimension-1 faces, carrying this simplex's data value."""
        return [Simplex(f, self.data) for f in boundary_faces(self.vertices)]

    def edges(self) -> List[Tuple[int, int]]:
        return edges_of(self.vertices)

    def with_data(self, data: float) -> "Simplex":
        return Simplex(self.vertices, data)

    def format(self) -> str:
        """Brace-enclosed, comma-separated vertex list, e.g. ``{0,1,2}``."""
        return "{" + ",".join(str(v) for v in self.vertices) + "}"


def data_order_key(s: Simplex) -> Tuple[float, int, Simp]:
    """
    Filtration order: by data value, ties broken by dimension and then by
    vertices, so a face never comes after a coface of equal weight.
    """
    return (s.data, s.dimension, s.vertices)


def lexicographic_order_key(s: Simplex) -> Simp:
    return s.vertices
